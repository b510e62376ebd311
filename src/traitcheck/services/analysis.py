"""Analysis service facade wrapping the trait analysis pipeline.

The pipeline is CPU-only and synchronous. AnalysisService exposes it
through async methods, running each call in asyncio.to_thread() so hosts
with an event loop are not blocked. No state is shared between calls.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from traitcheck.analysis.pipeline import analyze
from traitcheck.analysis.schemas import AnalysisResult, Claim
from traitcheck.config import AnalysisConfig, load_analysis_config

logger = logging.getLogger(__name__)


class AnalysisService:
    """Async facade for running character trait analyses.

    Usage::

        svc = AnalysisService()
        result = await svc.analyze(novel_text, "Marcus", claims)
        report = await svc.export_report(result, "marcus.txt")
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self._config = config or AnalysisConfig()

    @classmethod
    def from_config_file(cls, config_path: Path | None = None) -> AnalysisService:
        """Build a service from ``config/analysis_config.json`` (or *config_path*)."""
        return cls(load_analysis_config(config_path))

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    async def analyze(
        self,
        novel_text: str,
        character_name: str,
        claims: Iterable[Claim | Mapping[str, object]],
    ) -> AnalysisResult:
        """Run the full pipeline for one character.

        Args:
            novel_text: Story text. May be empty.
            character_name: Character the claims describe.
            claims: Backstory claims, as Claim models or dicts.

        Returns:
            A complete AnalysisResult. Faults propagate to the caller
            unchanged; nothing is retained between attempts.
        """
        claim_list = list(claims)
        return await asyncio.to_thread(
            analyze,
            novel_text,
            character_name,
            claim_list,
            config=self._config,
        )

    async def export_report(
        self, result: AnalysisResult, output_path: Path | str | None = None
    ) -> Path:
        """Write the plain-text report for *result* and return its path."""
        from traitcheck.report import write_text_report

        path = await asyncio.to_thread(write_text_report, result, output_path)
        logger.info("Exported analysis report for %s", result.character_name)
        return path
