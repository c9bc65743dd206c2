"""Sorted collection of disjoint sections.

Keeps track of which indices of a domain are claimed. Members are kept
sorted, pairwise disjoint and never adjacent: claiming a range merges it
with every member it overlaps or touches, releasing a range trims, drops or
splits the members it overlaps.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Iterator

from pi.layout.config import LayoutSettings, load_settings
from pi.layout.errors import SectionError
from pi.layout.section import Consumed, Section, SplitOff

logger = logging.getLogger(__name__)


class SectionSet:
    """Claimed ranges of a bounded index domain."""

    def __init__(
        self,
        sections: Iterable[Section] = (),
        *,
        max_index: int | None = None,
        settings: LayoutSettings | None = None,
    ) -> None:
        if max_index is None:
            max_index = (settings or load_settings()).max_index
        self._max_index = max_index
        self._sections: list[Section] = []
        for section in sections:
            self.add(section)

    @property
    def max_index(self) -> int:
        return self._max_index

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"SectionSet({self._sections!r})"

    def clear(self) -> None:
        self._sections.clear()

    def _check_domain(self, section: Section) -> None:
        if section.max_index != self._max_index:
            raise SectionError(
                f"section max index {section.max_index} does not match set max index {self._max_index}"
            )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def claim(self, offset: int, length: int) -> Section:
        """Claim *length* indices starting at *offset*.

        Returns the member that now covers the claimed range.
        """
        return self.add(Section(offset, length, max_index=self._max_index))

    def add(self, section: Section) -> Section:
        """Merge a copy of *section* into the set and return its member."""
        self._check_domain(section)
        merged = section.copy()
        idx = bisect.bisect_left(self._sections, merged)

        # The preceding member may overlap or touch the new range.
        if idx > 0 and self._sections[idx - 1].add_section(merged):
            idx -= 1
            merged = self._sections[idx]
        else:
            self._sections.insert(idx, merged)

        # Absorb following members until one is separated by a gap.
        while idx + 1 < len(self._sections):
            if not merged.add_section(self._sections[idx + 1]):
                break
            del self._sections[idx + 1]

        logger.debug("Claimed %r, now %d section(s)", merged, len(self._sections))
        return merged

    def release(self, offset: int, length: int) -> None:
        """Release *length* indices starting at *offset*."""
        self.remove(Section(offset, length, max_index=self._max_index))

    def remove(self, section: Section) -> None:
        """Subtract *section* from every member it overlaps."""
        self._check_domain(section)
        kept: list[Section] = []
        for member in self._sections:
            if member.end < section.offset or member.offset > section.end:
                kept.append(member)
                continue
            result = member.remove_section(section)
            if result is Consumed:
                continue
            kept.append(member)
            if isinstance(result, SplitOff):
                kept.append(result.section)
        self._sections = kept
        logger.debug("Released %r, now %d section(s)", section, len(self._sections))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_claimed(self, index: int) -> bool:
        """Return ``True`` if *index* lies inside a member."""
        idx = bisect.bisect_right(self._sections, index, key=lambda s: s.offset)
        return idx > 0 and self._sections[idx - 1].end >= index

    def covers(self, section: Section) -> bool:
        """Return ``True`` if every index of *section* is claimed."""
        for member in self._sections:
            if member.offset <= section.offset and member.end >= section.end:
                return True
        return False

    def free_sections(self) -> list[Section]:
        """Unclaimed gaps of the domain, in order."""
        gaps: list[Section] = []
        cursor = 0
        for member in self._sections:
            if member.offset > cursor:
                gaps.append(Section(cursor, member.offset - cursor, max_index=self._max_index))
            cursor = member.end + 1
        if cursor <= self._max_index:
            gaps.append(Section(cursor, self._max_index - cursor + 1, max_index=self._max_index))
        return gaps
