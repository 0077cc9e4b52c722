"""
Bundled quote corpus for Classic Quotes.

Format
──────
core/data/quotes.json holds a JSON array of objects, each with exactly two
string fields:

  [{"topic": "love", "text": "..."}, ...]

The file is read and validated once at startup. Anything unusable raises
``CorpusError`` so the app refuses to start instead of serving bad data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from core.models import Quote

logger = logging.getLogger(__name__)

DEFAULT_QUOTES_PATH = Path(__file__).parent / "data" / "quotes.json"

_QUOTE_LIST = TypeAdapter(list[Quote])


class CorpusError(RuntimeError):
    """Raised when the quote corpus cannot be loaded or fails validation."""


def load_corpus(path: Path | str | None = None) -> tuple[Quote, ...]:
    """Read and validate the quote corpus.

    Args:
        path: JSON file to read. Defaults to the bundled
            ``core/data/quotes.json``.

    Returns:
        The quotes in file order, as an immutable tuple.

    Raises:
        CorpusError: If the file is missing, is not valid JSON, is not a JSON
            array, or contains a record that is not ``{topic, text}``.
    """
    path = Path(path) if path is not None else DEFAULT_QUOTES_PATH

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CorpusError(f"Quote corpus not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CorpusError(f"Quote corpus {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise CorpusError(
            f"Quote corpus {path} must be a JSON array, got {type(raw).__name__}"
        )

    try:
        quotes = _QUOTE_LIST.validate_python(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        index = first["loc"][0] if first["loc"] else "?"
        raise CorpusError(
            f"Invalid quote at index {index} in {path}: {first['msg']}"
        ) from exc

    corpus = tuple(quotes)
    logger.info(
        "Loaded %d quotes (%d topics) from %s",
        len(corpus), len({q.topic for q in corpus}), path,
    )
    return corpus
