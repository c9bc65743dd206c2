"""Tests for pi.layout.pane.Pane and the window collaborators."""

from __future__ import annotations

import io

import pydantic
import pytest

from pi.layout.pane import Pane
from pi.layout.window import Id, Shape

from .recording_sink import RecordingSink, SinkError


class TestPaneWrites:
    """Writes are forwarded verbatim to the sink."""

    def test_write_forwards_fragment(self) -> None:
        sink = RecordingSink()
        pane = Pane(Shape(width=10, height=2), sink)
        pane.write("abc")
        pane.write("")
        assert sink.fragments == ["abc", ""]

    def test_write_line_appends_newline(self) -> None:
        sink = RecordingSink()
        pane = Pane(Shape(width=10, height=2), sink)
        pane.write_line("abc")
        assert sink.get_output() == "abc\n"

    def test_string_io_sink(self) -> None:
        buffer = io.StringIO()
        pane = Pane(Shape(width=4, height=1), buffer)
        pane.write_line("héllo")
        assert buffer.getvalue() == "héllo\n"

    def test_sink_error_propagates(self) -> None:
        pane = Pane(Shape(width=4, height=1), RecordingSink(fail_after=0))
        with pytest.raises(SinkError):
            pane.write("x")


class TestPaneShape:
    """The pane references its shape without copying it."""

    def test_shape_is_borrowed(self) -> None:
        shape = Shape(width=80, height=24)
        pane = Pane(shape, RecordingSink())
        assert pane.shape is shape

    def test_writer_accessor(self) -> None:
        sink = RecordingSink()
        assert Pane(Shape(width=1, height=1), sink).writer is sink

    def test_scratch_pane(self) -> None:
        shape = Shape(width=3, height=3)
        pane, buffer = Pane.scratch(shape)
        pane.write_line("a")
        assert pane.shape is shape
        assert buffer.getvalue() == "a\n"


class TestShape:
    """Shape validation."""

    def test_negative_dimensions_are_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Shape(width=-1, height=2)

    def test_shape_is_frozen(self) -> None:
        shape = Shape(width=1, height=2)
        with pytest.raises(pydantic.ValidationError):
            shape.width = 5  # type: ignore[misc]

    def test_zero_sized_shape(self) -> None:
        assert Shape(width=0, height=0).width == 0


class TestId:
    """Identifiers are plain mutable values."""

    def test_default_name(self) -> None:
        assert Id().name == ""

    def test_assignment_is_validated(self) -> None:
        ident = Id(name="a")
        ident.name = "b"
        assert ident.name == "b"
        with pytest.raises(pydantic.ValidationError):
            ident.name = 3  # type: ignore[assignment]
