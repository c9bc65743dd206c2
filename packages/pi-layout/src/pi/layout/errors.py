"""Exception types raised by the layout core."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for layout errors."""


class SectionError(LayoutError, ValueError):
    """A section was built or combined in violation of its preconditions.

    Raised for zero-length sections and for operands that live in
    different index domains. These are programming errors; the library
    never catches them.
    """


class SectionOverflowError(LayoutError, OverflowError):
    """A section would cover an index outside its domain."""
