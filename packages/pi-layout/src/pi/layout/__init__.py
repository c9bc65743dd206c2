"""pi-layout: interval algebra and render/extract core for terminal panes."""

# Components
from pi.layout.components import Spacer, Text

# Settings
from pi.layout.config import LayoutSettings, load_settings

# Errors
from pi.layout.errors import LayoutError, SectionError, SectionOverflowError

# Panes
from pi.layout.pane import Pane, Writer

# Render capability and range extraction
from pi.layout.render import (
    UNBOUNDED,
    Bound,
    Excluded,
    Included,
    LineRange,
    Render,
    Unbounded,
    get_range,
    iter_lines,
    render_line,
    render_range,
    to_line_range,
)

# Interval algebra
from pi.layout.section import (
    MAX_INDEX,
    Consumed,
    RemovedPart,
    RemoveOutcome,
    RemoveResult,
    Section,
    SplitOff,
)
from pi.layout.section_set import SectionSet

# Geometry and identity
from pi.layout.window import Id, Shape

__all__ = [
    # Components
    "Spacer",
    "Text",
    # Settings
    "LayoutSettings",
    "load_settings",
    # Errors
    "LayoutError",
    "SectionError",
    "SectionOverflowError",
    # Panes
    "Pane",
    "Writer",
    # Render
    "UNBOUNDED",
    "Bound",
    "Excluded",
    "Included",
    "LineRange",
    "Render",
    "Unbounded",
    "get_range",
    "iter_lines",
    "render_line",
    "render_range",
    "to_line_range",
    # Sections
    "MAX_INDEX",
    "Consumed",
    "RemovedPart",
    "RemoveOutcome",
    "RemoveResult",
    "Section",
    "SectionSet",
    "SplitOff",
    # Geometry
    "Id",
    "Shape",
]
