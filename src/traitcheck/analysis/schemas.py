"""Pydantic models and closed vocabularies for the trait analysis pipeline.

Every record produced by a pipeline stage is a frozen model: stages build
new records and never mutate the output of an earlier stage.

Trait categories form a closed enum (TraitType). Claims carry the trait as
a plain string so that a claim naming an unknown category still validates
and is later compared as "no evidence" instead of being rejected.
"""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TraitType(str, Enum):
    """The four fixed behavioral trait categories."""

    VIOLENCE = "Violence"
    HONESTY = "Honesty"
    RISK = "Risk"
    AUTHORITY = "Authority"


class TraitLevel(str, Enum):
    """Qualitative trait level with an ordinal for comparisons."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def ordinal(self) -> int:
        """1 for low, 2 for medium, 3 for high."""
        return _LEVEL_ORDINALS[self]


_LEVEL_ORDINALS: dict[TraitLevel, int] = {
    TraitLevel.LOW: 1,
    TraitLevel.MEDIUM: 2,
    TraitLevel.HIGH: 3,
}


class Chunk(BaseModel):
    """A bounded span of story text with its chapter/order position."""

    id: str
    chapter: int = Field(ge=1)
    order: int = Field(ge=1)
    text: str
    word_count: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class ActionRecord(BaseModel):
    """A behavioral observation extracted from one chunk."""

    chunk_id: str
    action: str
    decision: str
    emotion: str

    model_config = ConfigDict(frozen=True)


class Trait(BaseModel):
    """Aggregated level for one trait category, with up to 3 evidence strings."""

    type: TraitType
    level: TraitLevel
    evidence: tuple[str, ...] = Field(default=(), max_length=3)

    model_config = ConfigDict(frozen=True)


class Claim(BaseModel):
    """A backstory assertion: the character's expected level for a trait.

    Accepts the camelCase spellings used by hand-written claim files
    (``claim``, ``expectedLevel``) as well as the snake_case field names.
    """

    text: str = Field(validation_alias=AliasChoices("text", "claim"))
    trait: str
    expected_level: TraitLevel = Field(
        validation_alias=AliasChoices("expected_level", "expectedLevel"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("trait", mode="before")
    @classmethod
    def unwrap_trait_enum(cls, v: object) -> object:
        """Store TraitType members by their plain string value."""
        if isinstance(v, TraitType):
            return v.value
        return v

    def trait_type(self) -> TraitType | None:
        """Return the matching TraitType, or None for an unknown category."""
        try:
            return TraitType(self.trait)
        except ValueError:
            return None


class ComparisonResult(BaseModel):
    """Verdict for a single claim against the aggregated traits."""

    claim_text: str
    supported: bool
    contradiction_notes: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class AnalysisResult(BaseModel):
    """Terminal output of one pipeline run.

    ``chunks`` and ``actions`` keep the intermediate stage outputs so that
    presentation layers can show them without re-running the pipeline.
    """

    character_name: str
    claims: tuple[Claim, ...]
    chunks: tuple[Chunk, ...] = ()
    actions: tuple[ActionRecord, ...] = ()
    traits: tuple[Trait, ...]
    comparisons: tuple[ComparisonResult, ...]
    contradiction_count: int = Field(ge=0)
    final_decision: int = Field(ge=0, le=1)
    explanation: str

    model_config = ConfigDict(frozen=True)

    @property
    def is_consistent(self) -> bool:
        """True when the final decision is 1."""
        return self.final_decision == 1
