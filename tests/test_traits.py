"""Tests for keyword aggregation of action records into trait levels."""

from __future__ import annotations

import pytest

from traitcheck.analysis.schemas import ActionRecord, TraitLevel, TraitType
from traitcheck.analysis.traits import TRAIT_KEYWORDS, build_traits, level_for_count, matches_trait


def _record(action: str, decision: str = "Pending decision") -> ActionRecord:
    return ActionRecord(chunk_id="chunk-1-1", action=action, decision=decision, emotion="implied")


def _by_type(traits):
    return {t.type: t for t in traits}


class TestLevelThresholds:
    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, TraitLevel.LOW),
            (1, TraitLevel.LOW),
            (2, TraitLevel.MEDIUM),
            (3, TraitLevel.MEDIUM),
            (4, TraitLevel.HIGH),
            (9, TraitLevel.HIGH),
        ],
    )
    def test_level_for_count(self, count, expected):
        assert level_for_count(count) == expected

    @pytest.mark.parametrize("count,expected", [(1, "low"), (2, "medium"), (3, "medium"), (4, "high")])
    def test_levels_from_records(self, count, expected):
        traits = build_traits([_record(f"a fight #{i}") for i in range(count)])
        assert _by_type(traits)[TraitType.VIOLENCE].level.value == expected


class TestBuildTraits:
    def test_empty_actions_yield_four_low_traits(self):
        traits = build_traits([])
        assert [t.type for t in traits] == [
            TraitType.VIOLENCE, TraitType.HONESTY, TraitType.RISK, TraitType.AUTHORITY,
        ]
        assert all(t.level == TraitLevel.LOW for t in traits)
        assert all(t.evidence == () for t in traits)

    def test_always_one_trait_per_category(self):
        actions = [_record("He attacked"), _record("They obey the king")] * 10
        traits = build_traits(actions)
        assert len(traits) == 4
        assert {t.type for t in traits} == set(TraitType)

    def test_evidence_is_first_three_actions_in_order(self):
        actions = [_record(f"attack number {i}") for i in range(5)]
        violence = _by_type(build_traits(actions))[TraitType.VIOLENCE]
        assert violence.evidence == ("attack number 0", "attack number 1", "attack number 2")

    def test_keyword_in_decision_counts(self):
        actions = [_record("He waited", decision="He was afraid of the dark")] * 2
        assert _by_type(build_traits(actions))[TraitType.RISK].level == TraitLevel.MEDIUM

    def test_record_can_feed_several_traits(self):
        traits = _by_type(build_traits([_record("He lied during the fight")] * 2))
        assert traits[TraitType.VIOLENCE].level == TraitLevel.MEDIUM
        assert traits[TraitType.HONESTY].level == TraitLevel.MEDIUM
        assert traits[TraitType.RISK].level == TraitLevel.LOW


class TestMatchesTrait:
    def test_substring_keywords(self):
        assert matches_trait(_record("An aggressive stance"), TraitType.VIOLENCE)
        assert matches_trait(_record("She was the leader"), TraitType.AUTHORITY)

    def test_case_insensitive(self):
        assert matches_trait(_record("ATTACK AT DAWN"), TraitType.VIOLENCE)

    def test_no_match(self):
        assert not matches_trait(_record("He ate bread"), TraitType.VIOLENCE)

    def test_keyword_sets_are_fixed(self):
        assert set(TRAIT_KEYWORDS) == set(TraitType)
        assert all(len(words) == 6 for words in TRAIT_KEYWORDS.values())
