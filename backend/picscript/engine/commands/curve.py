"""curve, icurve."""

from __future__ import annotations

from picscript.engine.context import InterpreterContext
from picscript.engine.items import CurveItem, Justify, Style
from picscript.engine.options import OptionKind as K
from picscript.engine.options import OptionSpec, OptionTable, read_options
from picscript.engine.registry import CommandSpec, command
from picscript.engine.resolver.curve import resolve_curve
from picscript.engine.strings import read_string_chain

CURVE_OPTIONS = OptionTable(
    OptionSpec("from", K.AT, "x0", "y0"),
    OptionSpec("to", K.AT, "x1", "y1"),
    OptionSpec("clockwise", K.FLAG, "cw"),
    OptionSpec("wavy", K.FLAG, "wavy"),
    OptionSpec("c1", K.AT, "cx1", "cy1"),
    OptionSpec("c2", K.AT, "cx2", "cy2"),
    OptionSpec("cs", K.AT, "cxs", "cys"),
    OptionSpec("dashed", K.FLAG, "dashed"),
    OptionSpec("thickness", K.DIM, "thickness"),
    OptionSpec("colour", K.COLOUR, "colour"),
    OptionSpec("grey", K.GREY, "colour"),
    OptionSpec("shapefilled", K.COLGREY, "shapefilled"),
    OptionSpec("level", K.INT, "level"),
)


@command("curve", arg1=Style.VISIBLE)
@command("icurve", arg1=Style.INVISIBLE)
def c_curve(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    curve = CurveItem(
        style=spec.arg1,
        level=env.level,
        linedepth=env.linedepth,
        fontdepth=env.fontdepth,
        thickness=env.linethickness,
        colour=env.linecolour,
        shapefilled=env.shapefilled,
    )

    read_options(ctx, curve, CURVE_OPTIONS)
    if curve.dashed:
        curve.dash = (env.linedash1, env.linedash2)
    ctx.scene.track_level(curve.level)

    # An unusable curve is dropped; the error has already skipped the statement
    if not resolve_curve(ctx, curve):
        return
    read_string_chain(ctx, curve, Justify.LEFT)
    ctx.place(curve)
