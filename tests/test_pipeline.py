"""End-to-end tests for the analysis pipeline and its async service facade."""

from __future__ import annotations

import asyncio

import pytest
from pydantic import ValidationError

from traitcheck.analysis.pipeline import analyze, analyze_chunks
from traitcheck.analysis.schemas import TraitLevel, TraitType
from traitcheck.config import AnalysisConfig
from traitcheck.samples import SAMPLE_CHARACTER, SAMPLE_CLAIMS, SAMPLE_NOVEL
from traitcheck.services import AnalysisService

# One sentence per chunk
PER_SENTENCE = AnalysisConfig(min_words=1, max_words=1000)


def _levels(result) -> dict[TraitType, TraitLevel]:
    return {t.type: t.level for t in result.traits}


class TestContradictoryStory:
    """A peaceful, honest, obedient backstory against a violent, lying story."""

    def test_violence_high_and_decision_contradictory(self, violent_story, backstory_claims, always_flush):
        result = analyze(violent_story, "Marcus", backstory_claims, config=PER_SENTENCE, rng=always_flush)

        assert len(result.chunks) == 7
        assert [c.id for c in result.chunks][-2:] == ["chunk-2-1", "chunk-2-2"]
        assert len(result.actions) == 7
        assert all(a.emotion == "implied" for a in result.actions)

        levels = _levels(result)
        assert levels[TraitType.VIOLENCE] == TraitLevel.HIGH
        assert levels[TraitType.HONESTY] == TraitLevel.MEDIUM
        assert levels[TraitType.RISK] == TraitLevel.LOW
        assert levels[TraitType.AUTHORITY] == TraitLevel.LOW

        violence_cmp = result.comparisons[0]
        assert violence_cmp.supported is False
        assert violence_cmp.contradiction_notes == ("Expected low but found high",)
        assert [c.supported for c in result.comparisons] == [False, True, True, False]

        assert result.contradiction_count == 2
        assert result.final_decision == 0
        assert not result.is_consistent
        assert "Marcus has 2 contradiction(s)" in result.explanation

    def test_violence_evidence(self, violent_story, backstory_claims, always_flush):
        result = analyze(violent_story, "Marcus", backstory_claims, config=PER_SENTENCE, rng=always_flush)
        violence = next(t for t in result.traits if t.type == TraitType.VIOLENCE)
        assert violence.evidence == (
            "Marcus attacked the guards at the gate",
            "Marcus hurt the blacksmith badly",
            "A fight broke out and Marcus won it",
        )


class TestEmptyStory:
    @pytest.mark.parametrize("trait", [t.value for t in TraitType])
    def test_low_claim_supported(self, trait):
        result = analyze("", "Nobody", [{"text": "Calm", "trait": trait, "expected_level": "low"}])
        assert result.chunks == ()
        assert result.actions == ()
        assert all(t.level == TraitLevel.LOW and t.evidence == () for t in result.traits)
        assert result.comparisons[0].supported is True
        assert result.final_decision == 1

    def test_medium_supported_high_unsupported(self):
        result = analyze("", "Nobody", [
            {"text": "Somewhat bold", "trait": "Risk", "expected_level": "medium"},
            {"text": "Very bold", "trait": "Risk", "expected_level": "high"},
        ])
        assert [c.supported for c in result.comparisons] == [True, False]
        assert result.contradiction_count == 1
        assert result.final_decision == 1

    def test_no_claims(self):
        result = analyze("", "Nobody", [])
        assert result.comparisons == ()
        assert result.contradiction_count == 0
        assert result.final_decision == 1
        assert result.explanation == "Nobody's claims align well with their observed behavior."


class TestSampleScenario:
    @pytest.mark.parametrize("seed", range(5))
    def test_sample_is_contradictory_for_any_chunking(self, seed):
        result = analyze(SAMPLE_NOVEL, SAMPLE_CHARACTER, SAMPLE_CLAIMS, config=AnalysisConfig(seed=seed))
        assert 1 <= len(result.chunks) <= 2
        assert [c.supported for c in result.comparisons] == [True, False, True, False]
        assert result.contradiction_count == 2
        assert result.final_decision == 0


class TestClaimsInput:
    def test_camel_case_dicts_accepted(self):
        result = analyze("", "X", [{"claim": "Truthful", "trait": "Honesty", "expectedLevel": "low"}])
        assert result.claims[0].text == "Truthful"
        assert result.claims[0].expected_level == TraitLevel.LOW

    def test_unknown_trait_counts_as_contradiction(self):
        result = analyze("", "X", [
            {"text": "Charming", "trait": "Charisma", "expected_level": "low"},
            {"text": "Wise", "trait": "Wisdom", "expected_level": "low"},
        ])
        assert result.contradiction_count == 2
        assert result.final_decision == 0
        assert all(c.contradiction_notes == ("No evidence found for trait",) for c in result.comparisons)

    def test_invalid_level_raises(self):
        with pytest.raises(ValidationError):
            analyze("Some story.", "X", [{"text": "Bad", "trait": "Risk", "expected_level": "extreme"}])

    def test_contradiction_count_matches_comparisons(self, violent_story, backstory_claims):
        result = analyze(violent_story, "Marcus", backstory_claims)
        assert result.contradiction_count == sum(1 for c in result.comparisons if not c.supported)


class TestAnalyzeChunks:
    def test_reuses_given_chunks(self, violent_story, backstory_claims, always_flush):
        full = analyze(violent_story, "Marcus", backstory_claims, config=PER_SENTENCE, rng=always_flush)
        again = analyze_chunks(full.chunks, "Marcus", backstory_claims)
        assert again == full


class TestAnalysisService:
    async def test_matches_sync_pipeline(self, violent_story, backstory_claims):
        config = AnalysisConfig(min_words=3, max_words=12, seed=11)
        svc = AnalysisService(config)
        result = await svc.analyze(violent_story, "Marcus", backstory_claims)
        assert result == analyze(violent_story, "Marcus", backstory_claims, config=config)

    async def test_concurrent_runs_are_independent(self, violent_story, backstory_claims):
        svc = AnalysisService(AnalysisConfig(min_words=1, max_words=1000, seed=3))
        results = await asyncio.gather(
            svc.analyze(violent_story, "Marcus", backstory_claims),
            svc.analyze("", "Elena", backstory_claims),
            svc.analyze(violent_story, "Marcus", backstory_claims),
        )
        assert results[0] == results[2]
        assert results[1].character_name == "Elena"
        assert results[1].chunks == ()

    async def test_faults_propagate(self):
        svc = AnalysisService()
        with pytest.raises(ValidationError):
            await svc.analyze("text", "X", [{"text": "t", "trait": "Risk"}])

    async def test_export_report(self, tmp_path, backstory_claims):
        svc = AnalysisService()
        result = await svc.analyze("", "Marcus", backstory_claims)
        path = await svc.export_report(result, tmp_path / "out.txt")
        assert path.read_text(encoding="utf-8").startswith("CHARACTER ANALYSIS REPORT")

    def test_from_config_file(self, tmp_path):
        cfg = tmp_path / "analysis_config.json"
        cfg.write_text('{"min_words": 10, "max_words": 20, "seed": 5}')
        svc = AnalysisService.from_config_file(cfg)
        assert svc.config == AnalysisConfig(min_words=10, max_words=20, seed=5)
