"""Layout settings loaded from the environment.

``PI_LAYOUT_INDEX_BITS`` sets the width of the unsigned index domain that
sections live in (16 bits unless overridden).
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

INDEX_BITS_ENV = "PI_LAYOUT_INDEX_BITS"
DEFAULT_INDEX_BITS = 16


class LayoutSettings(BaseModel):
    """Settings shared by section collections."""

    model_config = ConfigDict(frozen=True)

    index_bits: int = Field(default=DEFAULT_INDEX_BITS, ge=1, le=64)

    @property
    def max_index(self) -> int:
        """Largest index representable in the domain."""
        return (1 << self.index_bits) - 1


def load_settings(environ: dict[str, str] | None = None) -> LayoutSettings:
    env = os.environ if environ is None else environ
    raw = env.get(INDEX_BITS_ENV)
    if raw is None or raw.strip() == "":
        return LayoutSettings()
    try:
        return LayoutSettings(index_bits=int(raw))
    except (ValueError, ValidationError) as e:
        logger.warning("Ignoring %s=%r: %s", INDEX_BITS_ENV, raw, e)
        return LayoutSettings()
