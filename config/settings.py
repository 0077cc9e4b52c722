"""Application settings — all configuration loaded from environment variables.

Usage:
    from config.settings import Settings
    settings = Settings()
    settings.validate()   # raises ValueError if QUOTES_PATH points nowhere
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _optional_path(name: str) -> Optional[Path]:
    """Return the env var *name* as a Path, or ``None`` when unset or blank."""
    value = os.environ.get(name, "")
    return Path(value) if value else None


@dataclass
class Settings:
    """Centralised application configuration.

    All values are read from environment variables at instantiation time
    so that tests can override them by patching ``os.environ``.
    """

    # ── Corpus ──────────────────────────────────────────────────────────────
    #: Alternative quotes file; ``None`` means the corpus bundled with ``core``.
    quotes_path: Optional[Path] = field(
        default_factory=lambda: _optional_path("QUOTES_PATH")
    )

    # ── Flask ───────────────────────────────────────────────────────────────
    debug: bool = field(
        default_factory=lambda: os.environ.get("FLASK_DEBUG", "0") == "1"
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PORT", "5000"))
    )

    # ── Matching ────────────────────────────────────────────────────────────
    #: Quotes revealed per query.
    max_results: int = field(
        default_factory=lambda: int(os.environ.get("MAX_RESULTS", "3"))
    )

    def validate(self) -> None:
        """Raise ``ValueError`` if any setting is unusable."""
        if self.quotes_path is not None and not self.quotes_path.is_file():
            raise ValueError(
                f"QUOTES_PATH {self.quotes_path} does not exist. "
                "Unset it to use the bundled quotes."
            )
        if self.max_results < 0:
            raise ValueError(
                f"MAX_RESULTS must be zero or positive, got {self.max_results}."
            )
