"""Pane: a bounded output view over a write sink.

A pane holds a reference to a :class:`~pi.layout.window.Shape` it does not
own. Whoever owns the shape must keep it alive (and unchanged) for as long
as the pane is in use.
"""

from __future__ import annotations

import io
from typing import Generic, Protocol, TypeVar

from pi.layout.window import Shape


class Writer(Protocol):
    """Any text sink: ``io.StringIO``, a terminal, a file opened in text mode."""

    def write(self, data: str) -> object:
        ...


W = TypeVar("W", bound=Writer)


class Pane(Generic[W]):
    """Output view bound to a shape and a write sink.

    Writes are forwarded verbatim; whatever the sink raises propagates to
    the caller.
    """

    __slots__ = ("_shape", "_writer")

    def __init__(self, shape: Shape, writer: W) -> None:
        self._shape = shape
        self._writer = writer

    @classmethod
    def scratch(cls, shape: Shape) -> tuple[Pane[io.StringIO], io.StringIO]:
        """Create a pane over a fresh in-memory buffer sharing *shape*."""
        buffer = io.StringIO()
        return cls(shape, buffer), buffer

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def writer(self) -> W:
        return self._writer

    def write(self, data: str) -> None:
        self._writer.write(data)

    def write_line(self, line: str) -> None:
        """Write *line* followed by a newline."""
        self._writer.write(f"{line}\n")
