"""Keyword-based aggregation of action records into trait levels.

Each of the four TraitType categories owns a fixed keyword set. A record
counts toward a trait when its action or decision text contains any of the
keywords as a substring (so "aggress" covers "aggressive"). The count of
matching records maps to a level: 0-1 low, 2-3 medium, 4+ high.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from traitcheck.analysis.schemas import ActionRecord, Trait, TraitLevel, TraitType
from traitcheck.constants import MAX_EVIDENCE

logger = logging.getLogger(__name__)

TRAIT_KEYWORDS: dict[TraitType, tuple[str, ...]] = {
    TraitType.VIOLENCE: ("fight", "attack", "aggress", "hurt", "harm", "violent"),
    TraitType.HONESTY: ("truth", "honest", "lie", "deceive", "sincere", "transparent"),
    TraitType.RISK: ("danger", "risky", "bold", "afraid", "cautious", "adventurous"),
    TraitType.AUTHORITY: ("lead", "command", "obey", "rebel", "power", "control"),
}


def level_for_count(count: int) -> TraitLevel:
    """Map a matching-record count to a TraitLevel (0-1 low, 2-3 medium, 4+ high)."""
    if count >= 4:
        return TraitLevel.HIGH
    if count >= 2:
        return TraitLevel.MEDIUM
    return TraitLevel.LOW


def matches_trait(action: ActionRecord, trait_type: TraitType) -> bool:
    """Return True if the record's text mentions any keyword of the trait."""
    text = f"{action.action} {action.decision}".lower()
    return any(keyword in text for keyword in TRAIT_KEYWORDS[trait_type])


def build_traits(actions: Sequence[ActionRecord]) -> list[Trait]:
    """Aggregate action records into exactly one Trait per category.

    Args:
        actions: All action records of a run, in chunk order.

    Returns:
        Four Trait records in TraitType order. Categories without matches
        are ``low`` with empty evidence.
    """
    traits: list[Trait] = []
    for trait_type in TraitType:
        relevant = [a for a in actions if matches_trait(a, trait_type)]
        trait = Trait(
            type=trait_type,
            level=level_for_count(len(relevant)),
            evidence=tuple(a.action for a in relevant[:MAX_EVIDENCE]),
        )
        logger.debug(
            "Trait %s: %d matching records -> %s",
            trait_type.value, len(relevant), trait.level.value,
        )
        traits.append(trait)
    return traits
