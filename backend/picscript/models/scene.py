"""Scene read interface: what a renderer needs from a resolved document."""

from __future__ import annotations

from pydantic import BaseModel, Field

RGB = tuple[int, int, int]


class SceneString(BaseModel):
    text: str
    justify: str = "centre"
    rotate: int = 0  # millidegrees
    xadjust: int = 0
    yadjust: int = 0
    font: int = 0
    colour: RGB = (0, 0, 0)


class SceneItem(BaseModel):
    """One resolved primitive. ``geometry`` keys depend on ``kind``."""

    kind: str
    subkind: str | None = None
    visible: bool = True
    level: int = 0
    thickness: int = 0
    dash: tuple[int, int] | None = None
    colour: RGB = (0, 0, 0)
    fill: RGB | None = None
    arrow_fill: RGB | None = None
    geometry: dict[str, int | float | bool | None] = Field(default_factory=dict)
    strings: list[SceneString] = Field(default_factory=list)
    string_anchor: tuple[int, int] | None = None


class SceneBounds(BaseModel):
    x0: int
    y0: int
    x1: int
    y1: int
    # Same extrema as fixed-point text, e.g. "72" or "-1.5"
    text: tuple[str, str, str, str] = ("0", "0", "0", "0")


class SceneFrame(BaseModel):
    offset: int = 0
    thickness: int = 400
    dash: tuple[int, int] | None = None
    colour: RGB = (0, 0, 0)
    fill: RGB | None = None


class SceneFont(BaseModel):
    number: int
    name: str
    size: int


class SceneDocument(BaseModel):
    """A complete resolved document."""

    items: list[SceneItem] = Field(default_factory=list)
    bounds: SceneBounds | None = None
    frame: SceneFrame | None = None
    min_level: int = 0
    max_level: int = 0
    fonts: list[SceneFont] = Field(default_factory=list)
    variables: dict[str, str] = Field(default_factory=dict)
    resolution: int = 1
