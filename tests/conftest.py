"""Shared pytest fixtures for traitcheck tests.

Provides pinned randomness sources for the chunker, story texts with known
trait signals, and ready-made claim lists.
"""

from __future__ import annotations

import random

import pytest

from traitcheck.analysis.schemas import Claim, TraitLevel, TraitType


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value.

    ``FixedRandom(0.99)`` makes every eligible chunk flush early;
    ``FixedRandom(0.0)`` never flushes early.
    """

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


# One sentence per line. With min_words=1 and an always-flush RNG each
# sentence becomes its own chunk, and none matches an action pattern, so
# each chunk yields a fallback record whose action is the sentence itself.
VIOLENT_STORY = " ".join([
    "Marcus attacked the guards at the gate.",
    "Marcus hurt the blacksmith badly.",
    "A fight broke out and Marcus won it.",
    "Marcus was violent toward the prisoners.",
    "Marcus left the merchant's son harmed.",
    "Marcus told a lie to the council.",
    "Marcus wanted to deceive his mother.",
])


def make_story(n_sentences: int, words_per_sentence: int) -> str:
    """Build filler text of identical sentences with a known word count."""
    sentence = " ".join(["word"] * (words_per_sentence - 1) + ["end."])
    return " ".join([sentence] * n_sentences)


@pytest.fixture
def always_flush() -> FixedRandom:
    return FixedRandom(0.99)


@pytest.fixture
def never_flush() -> FixedRandom:
    return FixedRandom(0.0)


@pytest.fixture
def violent_story() -> str:
    return VIOLENT_STORY


@pytest.fixture
def backstory_claims() -> list[Claim]:
    """Claims of a peaceful, honest, careful, obedient character."""
    return [
        Claim(text="Avoids violence", trait=TraitType.VIOLENCE, expected_level=TraitLevel.LOW),
        Claim(text="Always tells the truth", trait=TraitType.HONESTY, expected_level=TraitLevel.HIGH),
        Claim(text="Cautious and careful", trait=TraitType.RISK, expected_level=TraitLevel.LOW),
        Claim(text="Respects authority", trait=TraitType.AUTHORITY, expected_level=TraitLevel.HIGH),
    ]


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom instances: ``fixed_rng(0.5)``."""
    return FixedRandom


@pytest.fixture
def story_builder():
    """The make_story helper, as a fixture."""
    return make_story
