"""Character trait consistency checker for narrative text."""

__version__ = "0.1.0"

from traitcheck.analysis.pipeline import analyze
from traitcheck.analysis.schemas import (
    ActionRecord,
    AnalysisResult,
    Chunk,
    Claim,
    ComparisonResult,
    Trait,
    TraitLevel,
    TraitType,
)

__all__ = [
    "ActionRecord",
    "AnalysisResult",
    "Chunk",
    "Claim",
    "ComparisonResult",
    "Trait",
    "TraitLevel",
    "TraitType",
    "analyze",
    "__version__",
]
