"""Sentence-boundary chunking of story text into bounded-size segments.

Sentences are accumulated until either the hard ``max_words`` cutoff is
reached or, once ``min_words`` is met, a random draw triggers an early
flush. Every fifth chunk closes a chapter.

The early flush makes chunk boundaries vary between runs for the same text.
Pass a seeded ``random.Random`` as ``rng`` to pin them.
"""

from __future__ import annotations

import logging
import random
import re

from traitcheck.analysis.schemas import Chunk
from traitcheck.constants import (
    CHUNKS_PER_CHAPTER,
    DEFAULT_MAX_WORDS,
    DEFAULT_MIN_WORDS,
    EARLY_FLUSH_THRESHOLD,
)

logger = logging.getLogger(__name__)

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    """Split text after terminal punctuation followed by whitespace.

    Args:
        text: Raw story text.

    Returns:
        Non-empty, stripped sentence strings in original order.
    """
    return [s.strip() for s in _SENTENCE_BOUNDARY.split(text) if s.strip()]


def chunk_id(chapter: int, order: int) -> str:
    """Format a chunk identifier: ``chunk-<chapter>-<order>``."""
    return f"chunk-{chapter}-{order}"


def split_into_chunks(
    text: str,
    min_words: int = DEFAULT_MIN_WORDS,
    max_words: int = DEFAULT_MAX_WORDS,
    rng: random.Random | None = None,
) -> list[Chunk]:
    """Split story text into chunks tagged with chapter/order metadata.

    A chunk is flushed when its word count reaches ``max_words``, or when
    it is at least ``min_words`` and ``rng.random()`` exceeds 0.7. When a
    sentence does not fit, the buffer is filled up to exactly ``max_words``
    and the rest of the sentence carries over into the next chunk. Any
    trailing text becomes a final chunk regardless of size.

    Args:
        text: Raw story text. Empty or whitespace-only text yields no chunks.
        min_words: Minimum words before an early flush may happen.
        max_words: Hard cutoff; no chunk exceeds this many words.
        rng: Randomness source for early flushes. A fresh unseeded
            ``random.Random`` is used when omitted.

    Returns:
        Chunks in reading order.

    Raises:
        ValueError: If the bounds are non-positive or min_words > max_words.
    """
    if min_words < 1 or max_words < 1:
        raise ValueError("min_words and max_words must be positive")
    if min_words > max_words:
        raise ValueError(
            f"min_words ({min_words}) must not exceed max_words ({max_words})"
        )
    if rng is None:
        rng = random.Random()

    chunks: list[Chunk] = []
    buffer: list[str] = []
    word_count = 0
    chapter = 1
    order = 1

    def flush() -> None:
        nonlocal buffer, word_count, chapter, order
        body = " ".join(buffer).strip()
        if body:
            chunks.append(Chunk(
                id=chunk_id(chapter, order),
                chapter=chapter,
                order=order,
                text=body,
                word_count=word_count,
            ))
            order += 1
            if order > CHUNKS_PER_CHAPTER:
                chapter += 1
                order = 1
        buffer = []
        word_count = 0

    for sentence in split_sentences(text):
        words = sentence.split()
        while words:
            room = max_words - word_count
            piece, words = words[:room], words[room:]
            buffer.append(" ".join(piece))
            word_count += len(piece)

            if word_count >= max_words:
                flush()
            elif word_count >= min_words and rng.random() > EARLY_FLUSH_THRESHOLD:
                flush()

    # Trailing buffer is kept whatever its size
    flush()

    logger.debug(
        "Chunked %d words into %d chunks across %d chapters",
        sum(c.word_count for c in chunks),
        len(chunks),
        chunks[-1].chapter if chunks else 0,
    )
    return chunks
