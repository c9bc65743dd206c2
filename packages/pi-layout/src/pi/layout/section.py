"""Closed integer ranges over a bounded unsigned index domain.

A ``Section`` stores its first index (``offset``) and ``width``, the
distance from the first to the last covered index, so a section always
covers at least one index. Sections order by ``(offset, width)``.

Sections are mutated in place by :meth:`Section.add_section` and
:meth:`Section.remove_section`; whoever owns a collection of sections acts
on the returned outcome (see :class:`RemoveResult`).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Union

from pi.layout.errors import SectionError, SectionOverflowError

MAX_INDEX = 0xFFFF


# ---------------------------------------------------------------------------
# Removal outcomes
# ---------------------------------------------------------------------------


class RemoveResult:
    """Outcome of subtracting one section from another."""

    __slots__ = ()


@dataclass(frozen=True)
class _Consumed(RemoveResult):
    """The whole target was removed; drop it from its collection."""

    def __repr__(self) -> str:
        return "Consumed"


@dataclass(frozen=True)
class _RemovedPart(RemoveResult):
    """The target still holds the remaining indices (possibly unchanged)."""

    def __repr__(self) -> str:
        return "RemovedPart"


@dataclass(frozen=True)
class SplitOff(RemoveResult):
    """A hole was cut into the target.

    The target now holds the left remainder and ``section`` is the new
    right remainder, which the caller must insert into its collection.
    """

    section: Section


Consumed = _Consumed()
RemovedPart = _RemovedPart()

RemoveOutcome = Union[_Consumed, _RemovedPart, SplitOff]


# ---------------------------------------------------------------------------
# Section
# ---------------------------------------------------------------------------


@total_ordering
class Section:
    """A closed, non-empty, contiguous range of indices.

    ``length`` must be at least 1 and the last covered index
    (``offset + length - 1``) must not exceed ``max_index``.
    """

    __slots__ = ("_offset", "_width", "_max_index")

    def __init__(self, offset: int, length: int, *, max_index: int = MAX_INDEX) -> None:
        for name, value in (("offset", offset), ("length", length), ("max_index", max_index)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise SectionError(f"section {name} must be an int, got {value!r}")
        if length < 1:
            raise SectionError(f"section length must be at least 1, got {length}")
        self._init(offset, length - 1, max_index)

    def _init(self, offset: int, width: int, max_index: int) -> None:
        if offset < 0:
            raise SectionOverflowError(f"section offset {offset} is negative")
        if offset + width > max_index:
            raise SectionOverflowError(
                f"section [{offset}, {offset + width}] exceeds max index {max_index}"
            )
        self._offset = offset
        self._width = width
        self._max_index = max_index

    @classmethod
    def _from_bounds(cls, first: int, last: int, max_index: int) -> Section:
        section = cls.__new__(cls)
        section._init(first, last - first, max_index)
        return section

    # -- accessors ---------------------------------------------------------

    @property
    def offset(self) -> int:
        """First covered index."""
        return self._offset

    @property
    def width(self) -> int:
        """Distance from the first to the last covered index."""
        return self._width

    @property
    def length(self) -> int:
        return self._width + 1

    @property
    def end(self) -> int:
        """Last covered index (inclusive)."""
        return self._offset + self._width

    @property
    def max_index(self) -> int:
        return self._max_index

    def __len__(self) -> int:
        return self.length

    def indices(self) -> range:
        """The covered indices as a ``range``."""
        return range(self._offset, self.end + 1)

    def copy(self) -> Section:
        return Section._from_bounds(self._offset, self.end, self._max_index)

    # -- ordering ----------------------------------------------------------

    def _key(self) -> tuple[int, int]:
        return (self._offset, self._width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._key() < other._key()

    def __repr__(self) -> str:
        return f"Section(offset={self._offset}, len={self.length})"

    # -- algebra -----------------------------------------------------------

    def _check_domain(self, other: Section) -> None:
        if self._max_index != other._max_index:
            raise SectionError(
                f"cannot combine sections from domains with max index "
                f"{self._max_index} and {other._max_index}"
            )

    def contains(self, other: Section) -> bool:
        """Return ``True`` if *other* lies inside this section.

        Only sections starting at or after this one are considered. When
        both start at the same index this section must be strictly longer,
        so two identical sections do not contain each other.
        """
        self._check_domain(other)
        if self._offset < other._offset:
            return self.end >= other.end
        if self._offset == other._offset:
            return self._width > other._width
        return False

    def add_section(self, other: Section) -> bool:
        """Merge *other* into this section if they overlap or touch.

        Returns ``True`` on success, after which this section covers the
        union and *other* can be discarded. Returns ``False`` and leaves
        this section unchanged when at least one index separates them.
        """
        self._check_domain(other)

        if self._offset < other._offset:
            if self.end + 1 < other._offset:
                return False
            self._width = max(self.end, other.end) - self._offset
            return True

        if self._offset == other._offset:
            self._width = max(self._width, other._width)
            return True

        if other.end + 1 < self._offset:
            return False
        last = max(self.end, other.end)
        self._offset = other._offset
        self._width = last - self._offset
        return True

    def remove_section(self, other: Section) -> RemoveOutcome:
        """Subtract *other* from this section in place.

        Returns :data:`Consumed` when nothing is left, :data:`RemovedPart`
        when this section holds what remains (disjoint operands leave it
        untouched), or :class:`SplitOff` when *other* cut a hole in the
        middle. In that case this section keeps the left remainder.
        """
        self._check_domain(other)
        end = self.end

        if self._offset < other._offset:
            if end < other._offset:
                return RemovedPart
            if end <= other.end:
                self._width = other._offset - 1 - self._offset
                return RemovedPart
            right = Section._from_bounds(other.end + 1, end, self._max_index)
            self._width = other._offset - 1 - self._offset
            return SplitOff(right)

        if self._offset == other._offset:
            if self._width <= other._width:
                return Consumed
            self._offset = other.end + 1
            self._width = end - self._offset
            return RemovedPart

        if end <= other.end:
            return Consumed
        if other.end < self._offset:
            return RemovedPart
        self._offset = other.end + 1
        self._width = end - self._offset
        return RemovedPart
