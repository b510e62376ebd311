"""Presentation state for the analysis wizard.

WizardSession keeps everything a step-by-step front end needs to show
(story text, chunks, actions, traits, claims, final result) and runs the
matching pipeline stage each time the user moves forward. Moving back
keeps computed data; ``reset()`` discards it.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping

from traitcheck.analysis.chunker import split_into_chunks
from traitcheck.analysis.comparator import compare_claims
from traitcheck.analysis.extractor import extract_all_actions
from traitcheck.analysis.pipeline import analyze_chunks, coerce_claims
from traitcheck.analysis.schemas import (
    ActionRecord,
    AnalysisResult,
    Chunk,
    Claim,
    ComparisonResult,
    Trait,
)
from traitcheck.analysis.traits import build_traits
from traitcheck.config import AnalysisConfig
from traitcheck.wizard.fsm import WIZARD_STEPS, AnalysisWizardSM, step_number

logger = logging.getLogger(__name__)


class WizardInputError(Exception):
    """Required user input for the current wizard step is missing."""


class WizardSession:
    """Drives AnalysisWizardSM and holds the data shown at each step.

    Usage::

        session = WizardSession()
        session.novel_text = text
        session.advance()                 # chunks the story
        session.character_name = "Marcus"
        session.advance()                 # -> extract_actions
        ...
        session.result                    # set after final_decision
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or AnalysisConfig()
        self._rng = rng
        self._sm = AnalysisWizardSM()
        self._clear()

    def _clear(self) -> None:
        self.novel_text: str | None = None
        self.character_name: str = ""
        self.claims: list[Claim | Mapping[str, object]] = []
        self.chunks: list[Chunk] = []
        self.actions: list[ActionRecord] = []
        self.traits: list[Trait] = []
        self.comparisons: list[ComparisonResult] = []
        self.result: AnalysisResult | None = None

    @property
    def state(self) -> str:
        """Current state value (e.g. ``"store_story"``)."""
        return self._sm.current_state_value

    @property
    def step(self) -> int:
        """Current 1-based step number."""
        return step_number(self.state)

    @property
    def step_label(self) -> str:
        return WIZARD_STEPS[self.step - 1][1]

    @property
    def is_complete(self) -> bool:
        return self.state == "explain"

    def set_claims(self, claims: Iterable[Claim | Mapping[str, object]]) -> None:
        self.claims = list(claims)

    def advance(self) -> None:
        """Run the current step's stage, then move one step forward.

        Raises:
            WizardInputError: If the current step lacks required input.
            pydantic.ValidationError: If a claim is malformed.
            statemachine.exceptions.TransitionNotAllowed: On the last step.
        """
        handler = getattr(self, f"_leave_{self.state}", None)
        if handler is not None:
            handler()
        self._sm.next()
        logger.debug("Wizard advanced to step %d (%s)", self.step, self.state)

    def back(self) -> None:
        """Move one step backward, keeping computed data."""
        self._sm.back()
        logger.debug("Wizard moved back to step %d (%s)", self.step, self.state)

    def reset(self) -> None:
        """Discard all input and results and return to the first step."""
        self._sm.restart()
        self._clear()

    def _leave_store_story(self) -> None:
        if self.novel_text is None:
            raise WizardInputError("Story text is required before continuing")
        self.chunks = split_into_chunks(
            self.novel_text,
            min_words=self._config.min_words,
            max_words=self._config.max_words,
            rng=self._rng or self._config.make_rng(),
        )

    def _leave_find_character(self) -> None:
        if not self.character_name.strip():
            raise WizardInputError("A character name is required before continuing")
        self.character_name = self.character_name.strip()

    def _leave_extract_actions(self) -> None:
        self.actions = extract_all_actions(self.chunks)

    def _leave_build_traits(self) -> None:
        self.traits = build_traits(self.actions)

    def _leave_get_claims(self) -> None:
        self.claims = list(coerce_claims(self.claims))

    def _leave_compare(self) -> None:
        self.comparisons = compare_claims(coerce_claims(self.claims), self.traits)

    def _leave_final_decision(self) -> None:
        self.result = analyze_chunks(self.chunks, self.character_name, self.claims)
