"""Convert a finished read into the SceneDocument read interface."""

from __future__ import annotations

import logging
from typing import Any

from picscript.engine.items import (
    ArcItem,
    ArrowMixin,
    BoxItem,
    Colour,
    CurveItem,
    Item,
    ItemKind,
    LineItem,
    UNFILLED,
)
from picscript.engine.reader import ReadResult
from picscript.models.scene import (
    SceneBounds,
    SceneDocument,
    SceneFont,
    SceneFrame,
    SceneItem,
    SceneString,
)
from picscript.scene.bounds import find_bounds
from picscript.scene.strings import string_anchor
from picscript.utils.fixed import fixed, rnd

logger = logging.getLogger(__name__)


def _fill(colour: Colour) -> tuple[int, int, int] | None:
    return None if colour == UNFILLED else tuple(colour)


def _geometry(item: Item, r) -> dict[str, Any]:
    if item.kind is ItemKind.ARC:
        arc: ArcItem = item
        return {
            "x": r(arc.x), "y": r(arc.y), "radius": r(arc.radius),
            "angle1": arc.angle1, "angle2": arc.angle2, "cw": arc.cw,
            "x0": r(arc.x0), "y0": r(arc.y0), "x1": r(arc.x1), "y1": r(arc.y1),
        }
    if item.kind is ItemKind.CURVE:
        curve: CurveItem = item
        return {
            "x": r(curve.x), "y": r(curve.y), "cw": curve.cw, "wavy": curve.wavy,
            "x0": r(curve.x0), "y0": r(curve.y0), "x1": r(curve.x1), "y1": r(curve.y1),
            "cx1": r(curve.cx1), "cy1": r(curve.cy1), "cx2": r(curve.cx2), "cy2": r(curve.cy2),
            "cxs": r(curve.cxs), "cys": r(curve.cys),
        }
    if item.kind is ItemKind.BOX:
        box: BoxItem = item
        return {"x": r(box.x), "y": r(box.y), "width": r(box.width), "depth": r(box.depth)}
    if item.kind is ItemKind.LINE:
        line: LineItem = item
        return {"x": r(line.x), "y": r(line.y), "width": r(line.width), "depth": r(line.depth)}
    return {"x": r(item.x), "y": r(item.y)}


def _scene_item(item: Item, fonts, minimum_thickness: int, r) -> SceneItem:
    scene_item = SceneItem(
        kind=item.kind.value,
        subkind=item.boxtype.value if isinstance(item, BoxItem) else None,
        visible=not item.invisible,
        level=item.level,
        thickness=max(item.thickness, minimum_thickness),
        dash=item.dash if item.dashed else None,
        colour=tuple(item.colour),
        fill=_fill(item.shapefilled),
        geometry=_geometry(item, r),
        strings=[
            SceneString(
                text=s.text,
                justify=s.justify.value,
                rotate=s.rotate,
                xadjust=r(s.xadjust),
                yadjust=r(s.yadjust),
                font=s.font,
                colour=tuple(s.colour),
            )
            for s in item.strings
        ],
    )
    if isinstance(item, ArrowMixin):
        scene_item.geometry.update(
            arrow_start=item.arrow_start,
            arrow_end=item.arrow_end,
            arrow_x=item.arrow_x,
            arrow_y=item.arrow_y,
        )
        scene_item.arrow_fill = _fill(item.arrow_filled)
    if item.strings:
        x, y = string_anchor(item, fonts)
        scene_item.string_anchor = (r(x), r(y))
    return scene_item


def build_scene(result: ReadResult) -> SceneDocument:
    """Serialize a clean read. Raises ValueError if any error was recorded."""
    if not result.ok:
        raise ValueError(
            f"Document has {len(result.errors)} error(s); no scene is produced"
        )

    ctx = result.ctx
    resolution = ctx.resolution

    def r(value: int | None) -> int | None:
        return None if value is None else rnd(value, resolution)

    minimum = ctx.config.minimum_thickness
    items = [_scene_item(item, ctx.fonts, minimum, r) for item in ctx.scene]

    bounds = None
    bbox = find_bounds(ctx.scene, ctx.fonts, ctx.frame_offset if ctx.frame is not None else None)
    if not bbox.empty:
        extrema = [r(v) for v in (bbox.x0, bbox.y0, bbox.x1, bbox.y1)]
        bounds = SceneBounds(
            x0=extrema[0],
            y0=extrema[1],
            x1=extrema[2],
            y1=extrema[3],
            text=tuple(fixed(v) for v in extrema),
        )

    frame = None
    if ctx.frame is not None:
        frame = SceneFrame(
            offset=ctx.frame_offset,
            thickness=max(ctx.frame.thickness, minimum),
            dash=ctx.frame.dash if ctx.frame.dashed else None,
            colour=tuple(ctx.frame.colour),
            fill=_fill(ctx.frame.shapefilled),
        )

    document = SceneDocument(
        items=items,
        bounds=bounds,
        frame=frame,
        min_level=ctx.scene.min_level,
        max_level=ctx.scene.max_level,
        fonts=[SceneFont(number=f.number, name=f.name, size=f.size) for f in sorted(ctx.fonts.values(), key=lambda f: f.number)],
        variables=dict(ctx.variables.items()),
        resolution=resolution,
    )
    logger.debug("Serialized %d items", len(items))
    return document
