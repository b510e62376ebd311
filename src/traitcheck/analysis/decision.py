"""Binary consistency verdict from comparison results."""

from __future__ import annotations

from collections.abc import Sequence

from traitcheck.analysis.schemas import ComparisonResult
from traitcheck.constants import CONTRADICTION_THRESHOLD

CONSISTENT = 1
CONTRADICTORY = 0


def count_contradictions(comparisons: Sequence[ComparisonResult]) -> int:
    """Number of unsupported comparisons."""
    return sum(1 for c in comparisons if not c.supported)


def make_final_decision(comparisons: Sequence[ComparisonResult]) -> int:
    """Return 0 (contradictory) with 2+ unsupported claims, else 1 (consistent)."""
    if count_contradictions(comparisons) >= CONTRADICTION_THRESHOLD:
        return CONTRADICTORY
    return CONSISTENT
