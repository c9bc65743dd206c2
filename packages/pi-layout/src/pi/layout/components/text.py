"""Text component - displays multi-line text."""

from __future__ import annotations

from pi.layout.pane import Pane
from pi.layout.render import Render, iter_lines
from pi.layout.window import Id


class Text(Render):
    """Text component - displays multi-line text.

    Lines are written as given; nothing is wrapped or truncated to the
    pane's shape.
    """

    def __init__(self, text: str = "", padding_y: int = 0, name: str = "") -> None:
        self.id = Id(name=name)
        self._text = text
        self._padding_y = padding_y

        # Cache
        self._cached_text: str | None = None
        self._cached_lines: list[str] | None = None

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self.invalidate()

    def invalidate(self) -> None:
        self._cached_text = None
        self._cached_lines = None

    def lines(self) -> list[str]:
        if self._cached_lines is not None and self._cached_text == self._text:
            return self._cached_lines

        # Replace tabs with 3 spaces
        content = list(iter_lines(self._text.replace("\t", "   ")))
        padding = [""] * self._padding_y if content else []
        result = [*padding, *content, *padding]

        self._cached_text = self._text
        self._cached_lines = result
        return result

    def render(self, pane: Pane) -> None:
        for line in self.lines():
            pane.write_line(line)
