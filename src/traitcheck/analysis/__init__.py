"""Heuristic trait analysis pipeline.

Chunks story text, extracts behavioral cues, aggregates them into four
fixed trait levels, and checks backstory claims against those levels.
"""

from traitcheck.analysis.chunker import split_into_chunks
from traitcheck.analysis.comparator import compare_claims
from traitcheck.analysis.decision import make_final_decision
from traitcheck.analysis.explainer import generate_explanation
from traitcheck.analysis.extractor import extract_actions, extract_all_actions
from traitcheck.analysis.pipeline import analyze
from traitcheck.analysis.traits import build_traits

__all__ = [
    "analyze",
    "build_traits",
    "compare_claims",
    "extract_actions",
    "extract_all_actions",
    "generate_explanation",
    "make_final_decision",
    "split_into_chunks",
]
