"""Configuration loading and validation for the analysis pipeline."""

from __future__ import annotations

import json
import logging
import os
import random
from dataclasses import dataclass, fields
from pathlib import Path

from traitcheck.constants import DEFAULT_MAX_WORDS, DEFAULT_MIN_WORDS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/analysis_config.json")
SEED_ENV_VAR = "TRAITCHECK_SEED"


@dataclass
class AnalysisConfig:
    """Chunker settings for one analysis run.

    ``seed`` pins the random early-flush decisions of the chunker. Leave it
    as ``None`` for the default, non-reproducible behavior.
    """

    min_words: int = DEFAULT_MIN_WORDS
    max_words: int = DEFAULT_MAX_WORDS
    seed: int | None = None

    def __post_init__(self) -> None:
        """Reject word bounds the chunker cannot honor."""
        if self.min_words < 1 or self.max_words < 1:
            raise ValueError("min_words and max_words must be positive")
        if self.min_words > self.max_words:
            raise ValueError(
                f"min_words ({self.min_words}) must not exceed "
                f"max_words ({self.max_words})"
            )

    def make_rng(self) -> random.Random:
        """Return a chunker RNG, seeded when ``seed`` is set."""
        return random.Random(self.seed)


def load_analysis_config(config_path: Path | None = None) -> AnalysisConfig:
    """Load analysis configuration from JSON, falling back to defaults.

    Reads ``config/analysis_config.json`` when *config_path* is ``None``.
    If the file does not exist, defaults are used. Unknown keys are
    ignored. When no seed is configured, ``TRAITCHECK_SEED`` from the
    environment is applied if set.

    Args:
        config_path: Optional explicit path to analysis_config.json.

    Returns:
        AnalysisConfig populated from file + environment overrides.

    Raises:
        ValueError: If the seed environment variable is not an integer or
            the configured bounds are invalid.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    data: dict = {}
    if config_path.exists():
        with open(config_path) as f:
            data = json.load(f)
        logger.debug("Loaded analysis config from %s", config_path)

    # Only recognised fields
    field_names = {f.name for f in fields(AnalysisConfig)}
    kwargs = {k: v for k, v in data.items() if k in field_names}

    if kwargs.get("seed") is None:
        env_seed = os.environ.get(SEED_ENV_VAR)
        if env_seed:
            try:
                kwargs["seed"] = int(env_seed)
            except ValueError:
                raise ValueError(
                    f"{SEED_ENV_VAR} must be an integer, got {env_seed!r}"
                ) from None

    return AnalysisConfig(**kwargs)
