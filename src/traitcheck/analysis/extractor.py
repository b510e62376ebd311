"""Heuristic extraction of behavioral cues from chunk text.

Three pattern categories are tried in a fixed order, each contributing at
most one record per chunk. Chunks with no match get a single fallback
record built from their first two sentence fragments, so every non-empty
chunk yields at least one ActionRecord.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from traitcheck.analysis.schemas import ActionRecord, Chunk
from traitcheck.constants import MAX_ACTIONS_PER_CHUNK

logger = logging.getLogger(__name__)

EMOTION_DETECTED = "detected"
EMOTION_IMPLIED = "implied"

FALLBACK_ACTION = "Action in progress"
FALLBACK_DECISION = "Pending decision"

# Order matters: decision verbs, then felt emotions, then explicit markers
ACTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:he|she|they|the character)\s+"
        r"(?:decided|chose|decided to|began|started|went|did|made|took)",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:he|she|they)\s+felt?\s+"
        r"(?:happy|sad|angry|afraid|determined|confused|hopeful)",
        re.IGNORECASE,
    ),
    re.compile(r"(?:action:|decision:|emotion:)", re.IGNORECASE),
)


def _describe_decision(matched: str) -> str:
    return f"Decision related to: {matched[:30]}..."


def extract_actions(text: str, chunk_id: str) -> list[ActionRecord]:
    """Extract up to three action records from one chunk's text.

    Args:
        text: Chunk text.
        chunk_id: Identifier of the source chunk.

    Returns:
        Matched records tagged ``"detected"``, or a single fallback record
        tagged ``"implied"`` when no pattern matched.
    """
    actions: list[ActionRecord] = []

    for pattern in ACTION_PATTERNS:
        if len(actions) >= MAX_ACTIONS_PER_CHUNK:
            break
        match = pattern.search(text)
        if match:
            actions.append(ActionRecord(
                chunk_id=chunk_id,
                action=match.group(0),
                decision=_describe_decision(match.group(0)),
                emotion=EMOTION_DETECTED,
            ))

    if not actions:
        fragments = [f.strip() for f in text.split(".")[:2]]
        action = fragments[0] if fragments and fragments[0] else FALLBACK_ACTION
        decision = fragments[1] if len(fragments) > 1 and fragments[1] else FALLBACK_DECISION
        actions.append(ActionRecord(
            chunk_id=chunk_id,
            action=action,
            decision=decision,
            emotion=EMOTION_IMPLIED,
        ))

    return actions


def extract_all_actions(chunks: Iterable[Chunk]) -> list[ActionRecord]:
    """Run extract_actions over every chunk, preserving chunk order."""
    actions: list[ActionRecord] = []
    for chunk in chunks:
        actions.extend(extract_actions(chunk.text, chunk.id))
    logger.debug("Extracted %d action records", len(actions))
    return actions
