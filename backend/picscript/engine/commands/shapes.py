"""box, circle, ellipse and their invisible forms."""

from __future__ import annotations

from picscript.engine.context import InterpreterContext
from picscript.engine.environment import EnvironmentRecord
from picscript.engine.items import BoxItem, BoxType, Direction, Justify, Style
from picscript.engine.options import OptionKind as K
from picscript.engine.options import OptionSpec, OptionTable, read_options
from picscript.engine.registry import CommandSpec, command
from picscript.engine.resolver.box import place_box
from picscript.engine.strings import read_string_chain

_PLACEMENT = OptionTable(
    OptionSpec("at", K.AT, "x", "y"),
    OptionSpec("join", K.JOIN, "joinpoint", "pointjoined"),
    OptionSpec("up", K.PLACE, "direction", value=Direction.NORTH),
    OptionSpec("down", K.PLACE, "direction", value=Direction.SOUTH),
    OptionSpec("left", K.PLACE, "direction", value=Direction.WEST),
    OptionSpec("right", K.PLACE, "direction", value=Direction.EAST),
)

_STYLE = OptionTable(
    OptionSpec("dashed", K.FLAG, "dashed"),
    OptionSpec("filled", K.COLGREY, "shapefilled"),
    OptionSpec("thickness", K.DIM, "thickness"),
    OptionSpec("colour", K.COLOUR, "colour"),
    OptionSpec("grey", K.GREY, "colour"),
)

# Ellipses share the box options
BOX_OPTIONS = _PLACEMENT + OptionTable(
    OptionSpec("width", K.DIM, "width"),
    OptionSpec("depth", K.DIM, "depth"),
) + _STYLE + OptionTable(OptionSpec("level", K.INT, "level"))

CIRCLE_OPTIONS = _PLACEMENT + OptionTable(
    OptionSpec("radius", K.DIM, "width"),
) + _STYLE + OptionTable(OptionSpec("level", K.INT, "level"))

# The drawn frame takes style options only
FRAME_OPTIONS = _STYLE


def _shape_defaults(env: EnvironmentRecord, boxtype: BoxType) -> dict:
    if boxtype is BoxType.CIRCLE:
        # Width holds the radius until options are read
        return dict(
            width=env.cirradius,
            depth=env.cirradius,
            thickness=env.cirthickness,
            colour=env.circolour,
            shapefilled=env.cirfilled,
        )
    if boxtype is BoxType.ELLIPSE:
        return dict(
            width=env.ellwidth,
            depth=env.elldepth,
            thickness=env.ellthickness,
            colour=env.ellcolour,
            shapefilled=env.ellfilled,
        )
    return dict(
        width=env.boxwidth,
        depth=env.boxdepth,
        thickness=env.boxthickness,
        colour=env.boxcolour,
        shapefilled=env.boxfilled,
    )


def shape_dash(env: EnvironmentRecord, boxtype: BoxType) -> tuple[int, int]:
    if boxtype is BoxType.CIRCLE:
        return env.cirdash1, env.cirdash2
    if boxtype is BoxType.ELLIPSE:
        return env.elldash1, env.elldash2
    return env.boxdash1, env.boxdash2


@command("box", arg1=Style.VISIBLE, arg2=BoxType.BOX)
@command("ibox", arg1=Style.INVISIBLE, arg2=BoxType.BOX)
@command("circle", arg1=Style.VISIBLE, arg2=BoxType.CIRCLE)
@command("icircle", arg1=Style.INVISIBLE, arg2=BoxType.CIRCLE)
@command("ellipse", arg1=Style.VISIBLE, arg2=BoxType.ELLIPSE)
@command("iellipse", arg1=Style.INVISIBLE, arg2=BoxType.ELLIPSE)
def c_shape(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    boxtype: BoxType = spec.arg2
    box = BoxItem(
        style=spec.arg1,
        boxtype=boxtype,
        level=env.level,
        linedepth=env.linedepth,
        fontdepth=env.fontdepth,
        **_shape_defaults(env, boxtype),
    )

    read_options(ctx, box, CIRCLE_OPTIONS if boxtype is BoxType.CIRCLE else BOX_OPTIONS)
    ctx.scene.track_level(box.level)

    if boxtype is BoxType.CIRCLE:
        box.width = box.depth = 2 * box.width
    if box.dashed:
        box.dash = shape_dash(env, boxtype)

    place_box(ctx, box)
    read_string_chain(ctx, box, Justify.CENTRE)
    ctx.place(box)
