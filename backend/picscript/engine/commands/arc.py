"""arc, arcarrow, iarc."""

from __future__ import annotations

from picscript.engine.context import InterpreterContext
from picscript.engine.items import ArcItem, Direction, Justify, Style
from picscript.engine.options import OptionKind as K
from picscript.engine.options import OptionSpec, OptionTable, read_options
from picscript.engine.registry import CommandSpec, command
from picscript.engine.resolver.arc import resolve_arc
from picscript.engine.strings import read_string_chain

ARC_OPTIONS = OptionTable(
    OptionSpec("from", K.AT, "x0", "y0"),
    OptionSpec("to", K.AT, "x1", "y1"),
    OptionSpec("clockwise", K.FLAG, "cw"),
    OptionSpec("radius", K.DIM, "radius"),
    OptionSpec("angle", K.ANGLE, "angle"),
    OptionSpec("depth", K.DIM, "depth"),
    OptionSpec("via", K.AT, "via_x", "via_y"),
    OptionSpec("dashed", K.FLAG, "dashed"),
    OptionSpec("up", K.DIR, "direction", value=Direction.NORTH),
    OptionSpec("down", K.DIR, "direction", value=Direction.SOUTH),
    OptionSpec("left", K.DIR, "direction", value=Direction.WEST),
    OptionSpec("right", K.DIR, "direction", value=Direction.EAST),
    OptionSpec("thickness", K.DIM, "thickness"),
    OptionSpec("colour", K.COLOUR, "colour"),
    OptionSpec("grey", K.GREY, "colour"),
    OptionSpec("shapefilled", K.COLGREY, "shapefilled"),
    OptionSpec("level", K.INT, "level"),
)

ARROWHEAD_OPTIONS = OptionTable(
    OptionSpec("back", K.FLAG, "arrow_start", "arrow_end"),
    OptionSpec("both", K.FLAG, "arrow_start"),
    OptionSpec("filled", K.COLGREY, "arrow_filled"),
)

ARCARROW_OPTIONS = ARROWHEAD_OPTIONS + ARC_OPTIONS


@command("arc", arg1=Style.VISIBLE, arg2=False)
@command("arcarrow", arg1=Style.VISIBLE, arg2=True)
@command("iarc", arg1=Style.INVISIBLE, arg2=False)
def c_arc(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    arrow = bool(spec.arg2)
    arc = ArcItem(
        style=spec.arg1,
        level=env.level,
        linedepth=env.linedepth,
        fontdepth=env.fontdepth,
        thickness=env.linethickness,
        colour=env.linecolour,
        shapefilled=env.shapefilled,
        arrow_filled=env.arrowfilled,
        arrow_end=arrow,
        arrow_x=env.arrow_x,
        arrow_y=env.arrow_y,
    )

    read_options(ctx, arc, ARCARROW_OPTIONS if arrow else ARC_OPTIONS)
    if arc.dashed:
        arc.dash = (env.linedash1, env.linedash2)
    ctx.scene.track_level(arc.level)

    resolve_arc(ctx, arc)
    read_string_chain(ctx, arc, Justify.LEFT)
    ctx.place(arc)
