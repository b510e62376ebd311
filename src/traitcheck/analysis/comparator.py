"""Comparison of backstory claims against aggregated trait levels."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from traitcheck.analysis.schemas import Claim, ComparisonResult, Trait

logger = logging.getLogger(__name__)

NO_EVIDENCE_NOTE = "No evidence found for trait"

# Largest ordinal gap between expected and observed level that still counts
# as support (low vs medium, medium vs high).
MAX_SUPPORTED_GAP = 1


def compare_claim(claim: Claim, traits: Sequence[Trait]) -> ComparisonResult:
    """Compare one claim against the aggregated traits.

    Args:
        claim: Backstory claim to check.
        traits: Aggregated traits (one per TraitType).

    Returns:
        ComparisonResult. Claims naming an unknown trait category are
        unsupported with a "no evidence" note.
    """
    trait_type = claim.trait_type()
    found = next((t for t in traits if t.type == trait_type), None) if trait_type else None

    if found is None:
        logger.debug("No trait matches claim category %r", claim.trait)
        return ComparisonResult(
            claim_text=claim.text,
            supported=False,
            contradiction_notes=(NO_EVIDENCE_NOTE,),
        )

    gap = abs(claim.expected_level.ordinal - found.level.ordinal)
    if gap <= MAX_SUPPORTED_GAP:
        return ComparisonResult(claim_text=claim.text, supported=True)

    return ComparisonResult(
        claim_text=claim.text,
        supported=False,
        contradiction_notes=(
            f"Expected {claim.expected_level.value} but found {found.level.value}",
        ),
    )


def compare_claims(
    claims: Sequence[Claim], traits: Sequence[Trait]
) -> list[ComparisonResult]:
    """Compare every claim, preserving input order."""
    return [compare_claim(claim, traits) for claim in claims]
