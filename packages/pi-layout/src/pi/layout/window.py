"""Geometry and identity of a pane."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Shape(BaseModel):
    """Size of a pane in terminal cells."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0)
    height: int = Field(ge=0)


class Id(BaseModel):
    """Identity of a renderable entity.

    Not interpreted by the layout core; renderables expose it so that the
    owning tree can find them again.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
