"""line, arrow, iline."""

from __future__ import annotations

from picscript.engine.commands.arc import ARROWHEAD_OPTIONS
from picscript.engine.context import InterpreterContext
from picscript.engine.items import Justify, LineItem, Style
from picscript.engine.options import OptionKind as K
from picscript.engine.options import OptionSpec, OptionTable, read_options
from picscript.engine.registry import CommandSpec, command
from picscript.engine.resolver.line import resolve_line
from picscript.engine.strings import read_string_chain

LINE_OPTIONS = OptionTable(
    OptionSpec("up", K.YLINE, "depth", "width"),
    OptionSpec("down", K.YNLINE, "depth", "width"),
    OptionSpec("left", K.XNLINE, "width", "depth"),
    OptionSpec("right", K.XLINE, "width", "depth"),
    OptionSpec("from", K.AT, "x", "y"),
    OptionSpec("to", K.AT, "endx", "endy"),
    OptionSpec("align", K.AT, "alignx", "aligny"),
    OptionSpec("dashed", K.FLAG, "dashed"),
    OptionSpec("thickness", K.DIM, "thickness"),
    OptionSpec("colour", K.COLOUR, "colour"),
    OptionSpec("grey", K.GREY, "colour"),
    OptionSpec("shapefilled", K.COLGREY, "shapefilled"),
    OptionSpec("level", K.INT, "level"),
)

ARROW_OPTIONS = ARROWHEAD_OPTIONS + LINE_OPTIONS


@command("line", arg1=Style.VISIBLE, arg2=False)
@command("arrow", arg1=Style.VISIBLE, arg2=True)
@command("iline", arg1=Style.INVISIBLE, arg2=False)
def c_line(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    arrow = bool(spec.arg2)
    line = LineItem(
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

    read_options(ctx, line, ARROW_OPTIONS if arrow else LINE_OPTIONS)
    if line.dashed:
        line.dash = (env.linedash1, env.linedash2)
    ctx.scene.track_level(line.level)

    resolve_line(ctx, line)
    # Labels on horizontal lines sit centred above them
    read_string_chain(ctx, line, Justify.CENTRE if line.depth == 0 else Justify.LEFT)
    ctx.place(line)
