"""
Pydantic models shared across the Classic Quotes core.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class Quote(BaseModel):
    """A single bundled quote, filed under one topic."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    topic: StrictStr
    text: StrictStr
