"""Loading backstory claims from JSON files.

A claims file holds a JSON list of objects, each with a claim text
(``text`` or ``claim``), a ``trait`` and an expected level
(``expected_level`` or ``expectedLevel``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from traitcheck.analysis.schemas import Claim

logger = logging.getLogger(__name__)


class ClaimsFileError(Exception):
    """A claims file could not be read or does not hold valid claims."""


def parse_claims(data: object) -> list[Claim]:
    """Validate decoded JSON into Claim models.

    Raises:
        ClaimsFileError: If *data* is not a list of valid claim objects.
    """
    if not isinstance(data, list):
        raise ClaimsFileError(
            f"Claims must be a JSON list of objects, got {type(data).__name__}"
        )

    claims: list[Claim] = []
    for idx, item in enumerate(data, 1):
        try:
            claims.append(Claim.model_validate(item))
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ClaimsFileError(f"Claim #{idx} is invalid: {errors}") from e
    return claims


def load_claims(path: Path | str) -> list[Claim]:
    """Read and validate a claims JSON file.

    Args:
        path: Path to the claims file.

    Returns:
        Claims in file order.

    Raises:
        ClaimsFileError: If the file is missing, not JSON, or malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ClaimsFileError(f"Cannot read claims file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ClaimsFileError(f"Claims file {path} is not valid JSON: {e}") from e

    claims = parse_claims(data)
    logger.debug("Loaded %d claims from %s", len(claims), path)
    return claims
