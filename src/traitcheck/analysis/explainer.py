"""Human-readable explanation of a consistency verdict.

A consistent profile gets a single sentence. Otherwise a header with the
contradiction count is followed by bullet entries for the first three
unsupported claims; any further contradictions are left out of the text
(they remain available in the comparison results).
"""

from __future__ import annotations

from collections.abc import Sequence

from traitcheck.analysis.schemas import ComparisonResult, Trait
from traitcheck.constants import MAX_EXPLAINED_CONTRADICTIONS

BULLET = "•"


def generate_explanation(
    comparisons: Sequence[ComparisonResult],
    traits: Sequence[Trait],
    character_name: str,
) -> str:
    """Render the verdict explanation for a character.

    Args:
        comparisons: Comparison results in claim order.
        traits: Aggregated traits. Not used for branching.
        character_name: Name shown in the explanation.

    Returns:
        A single sentence when every claim is supported, otherwise a
        multi-line summary with up to three bullet entries.
    """
    contradictions = [c for c in comparisons if not c.supported]

    if not contradictions:
        return f"{character_name}'s claims align well with their observed behavior."

    lines = [
        f"{character_name} has {len(contradictions)} contradiction(s) "
        f"in their character profile:",
        "",
    ]
    for contradiction in contradictions[:MAX_EXPLAINED_CONTRADICTIONS]:
        lines.append(f"{BULLET} Claim: {contradiction.claim_text}")
        if contradiction.contradiction_notes:
            lines.append(f"  Evidence: {contradiction.contradiction_notes[0]}")

    return "\n".join(lines)
