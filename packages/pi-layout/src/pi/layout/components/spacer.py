"""Spacer component that renders empty lines."""

from __future__ import annotations

from pi.layout.pane import Pane
from pi.layout.render import Render
from pi.layout.window import Id


class Spacer(Render):
    """Spacer component that renders empty lines."""

    def __init__(self, lines: int = 1, name: str = "") -> None:
        self.id = Id(name=name)
        self._lines = lines

    def set_lines(self, lines: int) -> None:
        self._lines = lines

    def render(self, pane: Pane) -> None:
        for _ in range(self._lines):
            pane.write_line("")
