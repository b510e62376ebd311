"""End-to-end orchestration of the six analysis stages.

Flow: chunk -> extract actions -> build traits -> compare claims ->
decide -> explain. Each stage is a pure function over the previous
stage's output; the orchestrator holds no state between calls.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping, Sequence

from traitcheck.analysis.chunker import split_into_chunks
from traitcheck.analysis.comparator import compare_claims
from traitcheck.analysis.decision import count_contradictions, make_final_decision
from traitcheck.analysis.explainer import generate_explanation
from traitcheck.analysis.extractor import extract_all_actions
from traitcheck.analysis.schemas import AnalysisResult, Chunk, Claim
from traitcheck.analysis.traits import build_traits
from traitcheck.config import AnalysisConfig

logger = logging.getLogger(__name__)


def coerce_claims(claims: Iterable[Claim | Mapping[str, object]]) -> list[Claim]:
    """Validate claim dicts into Claim models; Claim instances pass through.

    Raises:
        pydantic.ValidationError: If a claim dict is malformed (for
            example an expected level outside low/medium/high).
    """
    return [c if isinstance(c, Claim) else Claim.model_validate(c) for c in claims]


def analyze(
    novel_text: str,
    character_name: str,
    claims: Iterable[Claim | Mapping[str, object]],
    *,
    config: AnalysisConfig | None = None,
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Run the complete analysis pipeline for one character.

    Args:
        novel_text: Story text. May be empty.
        character_name: Character the claims describe.
        claims: Backstory claims, as Claim models or dicts.
        config: Chunker bounds and seed. Defaults to AnalysisConfig().
        rng: Explicit randomness source for chunking. Overrides the
            config seed when given.

    Returns:
        A freshly built AnalysisResult.
    """
    config = config or AnalysisConfig()
    claim_models = coerce_claims(claims)

    chunks = split_into_chunks(
        novel_text,
        min_words=config.min_words,
        max_words=config.max_words,
        rng=rng or config.make_rng(),
    )
    return analyze_chunks(chunks, character_name, claim_models)


def analyze_chunks(
    chunks: Sequence[Chunk],
    character_name: str,
    claims: Iterable[Claim | Mapping[str, object]],
) -> AnalysisResult:
    """Run every stage after chunking on already-split story text.

    Lets callers that chunked the text themselves (such as the wizard,
    which previews chunks before analysis) reuse the same boundaries.
    """
    claim_models = coerce_claims(claims)

    actions = extract_all_actions(chunks)
    traits = build_traits(actions)
    comparisons = compare_claims(claim_models, traits)
    final_decision = make_final_decision(comparisons)
    explanation = generate_explanation(comparisons, traits, character_name)

    result = AnalysisResult(
        character_name=character_name,
        claims=tuple(claim_models),
        chunks=tuple(chunks),
        actions=tuple(actions),
        traits=tuple(traits),
        comparisons=tuple(comparisons),
        contradiction_count=count_contradictions(comparisons),
        final_decision=final_decision,
        explanation=explanation,
    )

    logger.info(
        "Analyzed %s: %d chunks, %d actions, %d/%d claims contradicted -> %s",
        character_name,
        len(chunks),
        len(actions),
        result.contradiction_count,
        len(comparisons),
        "consistent" if result.is_consistent else "contradictory",
    )
    return result
