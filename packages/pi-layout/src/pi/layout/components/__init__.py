"""Renderable components."""

from pi.layout.components.spacer import Spacer
from pi.layout.components.text import Text

__all__ = [
    "Spacer",
    "Text",
]
