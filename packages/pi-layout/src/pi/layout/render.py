"""Render capability and bounded range extraction.

Entities implement :meth:`Render.render`, which paints their complete
current state into a :class:`~pi.layout.pane.Pane`. Extracting a single
line or a range of lines is layered on top of that primitive: the entity
is rendered in full into a scratch buffer, the buffer is split into lines
and only the requested lines reach the real pane.

Line ranges are described with independent start and end bounds
(:class:`Included`, :class:`Excluded`, :data:`UNBOUNDED`); ``slice`` and
``range`` objects are accepted as shorthands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Protocol, TypeVar, Union, runtime_checkable

from pi.layout.pane import Pane
from pi.layout.window import Id

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "Bound",
    "Excluded",
    "Included",
    "LineRange",
    "Render",
    "UNBOUNDED",
    "Unbounded",
    "get_range",
    "iter_lines",
    "render_line",
    "render_range",
    "to_line_range",
]


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------


def _check_position(value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"line positions must be ints, got {value!r}")
    if value < 0:
        raise ValueError(f"line positions must be non-negative, got {value}")


@dataclass(frozen=True)
class Included:
    value: int

    def __post_init__(self) -> None:
        _check_position(self.value)


@dataclass(frozen=True)
class Excluded:
    value: int

    def __post_init__(self) -> None:
        _check_position(self.value)


@dataclass(frozen=True)
class Unbounded:
    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Unbounded()

Bound = Union[Included, Excluded, Unbounded]


@dataclass(frozen=True)
class LineRange:
    """A range of 0-based line positions."""

    start: Bound = UNBOUNDED
    end: Bound = UNBOUNDED

    def __post_init__(self) -> None:
        for name, bound in (("start", self.start), ("end", self.end)):
            if not isinstance(bound, (Included, Excluded, Unbounded)):
                raise TypeError(
                    f"line range {name} must be Included, Excluded or UNBOUNDED, got {bound!r}"
                )

    def skip_count(self) -> int:
        """Number of leading items to drop."""
        if isinstance(self.start, Included):
            return self.start.value
        if isinstance(self.start, Excluded):
            return self.start.value + 1
        return 0

    def take_limit(self) -> int | None:
        """Number of items to keep counting from position 0, or ``None``."""
        if isinstance(self.end, Included):
            return self.end.value + 1
        if isinstance(self.end, Excluded):
            return self.end.value
        return None


RangeSpec = Union[LineRange, slice, range, tuple[Bound, Bound]]


def to_line_range(spec: RangeSpec) -> LineRange:
    """Coerce a range specification into a :class:`LineRange`.

    * ``LineRange`` -- returned as-is
    * ``slice(a, b)`` -- start included, stop excluded, ``None`` unbounded
    * ``range(a, b)`` -- start included, stop excluded
    * ``(start_bound, end_bound)`` -- explicit bounds
    """
    if isinstance(spec, LineRange):
        return spec
    if isinstance(spec, slice):
        if spec.step not in (None, 1):
            raise ValueError(f"line ranges do not support a step, got {spec.step}")
        start: Bound = UNBOUNDED if spec.start is None else Included(spec.start)
        end: Bound = UNBOUNDED if spec.stop is None else Excluded(spec.stop)
        return LineRange(start, end)
    if isinstance(spec, range):
        if spec.step != 1:
            raise ValueError(f"line ranges do not support a step, got {spec.step}")
        return LineRange(Included(spec.start), Excluded(spec.stop))
    if isinstance(spec, tuple) and len(spec) == 2:
        return LineRange(*spec)
    raise TypeError(f"unsupported line range specification: {spec!r}")


# ---------------------------------------------------------------------------
# Range extraction
# ---------------------------------------------------------------------------


def _bounded(iterator: Iterator[T], count: int | None) -> Iterator[T]:
    if count is None:
        yield from iterator
        return
    for item in iterator:
        # Check before decrementing so the counter never goes below zero.
        if count == 0:
            return
        count -= 1
        yield item


def get_range(items: Iterable[T], spec: RangeSpec) -> Iterator[T]:
    """Lazily yield the items of *items* whose positions fall in *spec*.

    The source is consumed in a single forward pass and may be infinite as
    long as the range has an end bound. Positions past the end of the
    source simply yield nothing.
    """
    line_range = to_line_range(spec)
    bounded = _bounded(iter(items), line_range.take_limit())
    return islice(bounded, line_range.skip_count(), None)


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of *text*.

    Lines end with ``"\\n"`` or ``"\\r\\n"``; the final line ending is
    optional and an empty string has no lines.
    """
    start = 0
    length = len(text)
    while start < length:
        newline = text.find("\n", start)
        if newline == -1:
            yield text[start:]
            return
        line = text[start:newline]
        if line.endswith("\r"):
            line = line[:-1]
        yield line
        start = newline + 1


# ---------------------------------------------------------------------------
# Render capability
# ---------------------------------------------------------------------------


class _Renders(Protocol):
    def render(self, pane: Pane) -> None:
        ...


def _render_to_buffer(entity: _Renders, pane: Pane) -> str:
    scratch, buffer = Pane.scratch(pane.shape)
    entity.render(scratch)
    return buffer.getvalue()


def render_line(entity: _Renders, pane: Pane, line: int) -> None:
    """Write line *line* of *entity*'s full render to *pane*.

    Leaves *pane* untouched if the render has fewer lines.
    """
    _check_position(line)
    text = _render_to_buffer(entity, pane)
    selected = next(islice(iter_lines(text), line, None), None)
    if selected is None:
        logger.debug("Line %d not rendered by %r", line, entity)
        return
    pane.write_line(selected)


def render_range(entity: _Renders, pane: Pane, spec: RangeSpec) -> None:
    """Write the lines of *entity*'s full render selected by *spec* to *pane*."""
    line_range = to_line_range(spec)
    text = _render_to_buffer(entity, pane)
    written = 0
    for selected in get_range(iter_lines(text), line_range):
        pane.write_line(selected)
        written += 1
    logger.debug("Wrote %d line(s) of %r for %r", written, entity, line_range)


@runtime_checkable
class Render(Protocol):
    """An entity that can paint itself into a pane.

    Implementers supply :meth:`render`; :meth:`render_line` and
    :meth:`render_range` work through a full render and can be overridden
    by entities able to produce partial output directly.
    """

    id: Id

    def render(self, pane: Pane) -> None:
        """Render (or re-render) the whole entity into *pane*."""
        ...

    def render_line(self, pane: Pane, line: int) -> None:
        """Render only line *line* of the entity."""
        render_line(self, pane, line)

    def render_range(self, pane: Pane, spec: RangeSpec) -> None:
        """Render a range of lines of the entity."""
        render_range(self, pane, spec)
