"""Topic matching over the quote corpus.

Responsibilities:
- Normalise a free-text topic query (trim + lower-case)
- Select quotes whose topic contains the query as a substring
- Sample up to ``limit`` of them in uniformly random order
- Build the sorted topic index used for autocomplete suggestions

A blank query (after trimming) matches nothing.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Optional

from core.models import Quote

logger = logging.getLogger(__name__)

#: Number of quotes revealed per query.
DEFAULT_LIMIT = 3


def normalize_query(query: Optional[str]) -> str:
    """Return *query* trimmed and lower-cased.

    Examples:
        >>> normalize_query("  Love ")
        'love'
        >>> normalize_query(None)
        ''
    """
    return (query or "").strip().lower()


def match(
    corpus: Sequence[Quote],
    query: Optional[str],
    limit: int = DEFAULT_LIMIT,
    rng: Optional[random.Random] = None,
) -> list[Quote]:
    """Pick up to *limit* random quotes whose topic contains *query*.

    Args:
        corpus: The loaded quotes. Never mutated.
        query: Raw topic text as typed by the user.
        limit: Maximum number of quotes to return.
        rng: Random source; defaults to the module-level ``random`` state.
            Pass a seeded ``random.Random`` for repeatable picks.

    Returns:
        A fresh list of 0..limit quotes. An unmatched or blank query gives
        an empty list.

    Raises:
        ValueError: If *limit* is negative.

    Examples:
        >>> corpus = [Quote(topic="love", text="A"), Quote(topic="life", text="C")]
        >>> match(corpus, "LO")
        [Quote(topic='love', text='A')]
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    needle = normalize_query(query)
    if not needle:
        return []

    candidates = [q for q in corpus if needle in q.topic.lower()]
    (rng or random).shuffle(candidates)
    picked = candidates[:limit]

    logger.info(
        "Matched topic=%r: %d candidates, returning %d",
        needle, len(candidates), len(picked),
    )
    return picked


def build_topics(corpus: Sequence[Quote]) -> list[str]:
    """Return the distinct topics in *corpus*, sorted ascending.

    Examples:
        >>> build_topics([Quote(topic="loss", text="B"), Quote(topic="life", text="C"),
        ...               Quote(topic="loss", text="D")])
        ['life', 'loss']
    """
    return sorted({q.topic for q in corpus})
