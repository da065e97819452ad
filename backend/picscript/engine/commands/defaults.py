"""Environment commands: defaults for items created later."""

from __future__ import annotations

import logging

from picscript.engine.context import InterpreterContext
from picscript.engine.items import Colour, Direction
from picscript.engine.registry import CommandSpec, command

logger = logging.getLogger(__name__)


def _skip_comma(ctx: InterpreterContext) -> None:
    if ctx.source.ch == ",":
        ctx.source.pos += 1
    ctx.source.skip_space()


@command("arcradius", arg1="arcradius", arg2=True)
@command("arrowlength", arg1="arrow_x", arg2=True)
@command("arrowwidth", arg1="arrow_y", arg2=True)
@command("boxdepth", arg1="boxdepth", arg2=True)
@command("boxthickness", arg1="boxthickness", arg2=True)
@command("boxwidth", arg1="boxwidth", arg2=True)
@command("circleradius", arg1="cirradius", arg2=True)
@command("circlethickness", arg1="cirthickness", arg2=True)
@command("ellipsedepth", arg1="elldepth", arg2=True)
@command("ellipsethickness", arg1="ellthickness", arg2=True)
@command("ellipsewidth", arg1="ellwidth", arg2=True)
@command("fontdepth", arg1="fontdepth", arg2=True)
@command("hlinelength", arg1="line_hw", arg2=True)
@command("linethickness", arg1="linethickness", arg2=True)
@command("textdepth", arg1="linedepth", arg2=True)
@command("vlinelength", arg1="line_vd", arg2=True)
def c_dimension(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    value = ctx.scanner.read_number()
    if spec.arg2:
        value = env.mag(value)
    setattr(env, spec.arg1, value)
    ctx.source.skip_space()


@command("boxdash", arg1="boxdash1", arg2="boxdash2")
@command("circledash", arg1="cirdash1", arg2="cirdash2")
@command("ellipsedash", arg1="elldash1", arg2="elldash2")
@command("linedash", arg1="linedash1", arg2="linedash2")
def c_dash(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    setattr(env, spec.arg1, ctx.scanner.read_number())
    _skip_comma(ctx)
    setattr(env, spec.arg2, ctx.scanner.read_number())
    ctx.source.skip_space()


@command("level", arg1="level")
@command("setfont", arg1="setfont")
def c_integer(ctx: InterpreterContext, spec: CommandSpec) -> None:
    setattr(ctx.env.top, spec.arg1, ctx.scanner.read_int())


@command("boxgrey", arg1="boxcolour")
@command("circlegrey", arg1="circolour")
@command("ellipsegrey", arg1="ellcolour")
@command("linegrey", arg1="linecolour")
def c_grey(ctx: InterpreterContext, spec: CommandSpec) -> None:
    setattr(ctx.env.top, spec.arg1, Colour.grey(ctx.scanner.read_number()))
    ctx.source.skip_space()


@command("boxcolour", arg1="boxcolour")
@command("circlecolour", arg1="circolour")
@command("ellipsecolour", arg1="ellcolour")
@command("linecolour", arg1="linecolour")
@command("textcolour", arg1="textcolour")
def c_colour(ctx: InterpreterContext, spec: CommandSpec) -> None:
    scan = ctx.scanner
    red = scan.read_number()
    _skip_comma(ctx)
    green = scan.read_number()
    _skip_comma(ctx)
    blue = scan.read_number()
    setattr(ctx.env.top, spec.arg1, Colour(red, green, blue))
    ctx.source.skip_space()


@command("arrowfill", arg1="arrowfilled")
@command("boxfill", arg1="boxfilled")
@command("circlefill", arg1="cirfilled")
@command("ellipsefill", arg1="ellfilled")
@command("shapefill", arg1="shapefilled")
def c_fill(ctx: InterpreterContext, spec: CommandSpec) -> None:
    """Grey level, or RGB. A negative grey level means unfilled."""
    src = ctx.source
    scan = ctx.scanner
    red = green = blue = scan.read_number()
    _skip_comma(ctx)
    if src.ch and src.ch in "0123456789.-+":
        green = scan.read_number()
        _skip_comma(ctx)
        blue = scan.read_number()
    setattr(ctx.env.top, spec.arg1, Colour(red, green, blue))
    src.skip_space()


@command("up", arg1=Direction.NORTH)
@command("down", arg1=Direction.SOUTH)
@command("left", arg1=Direction.WEST)
@command("right", arg1=Direction.EAST)
def c_direction(ctx: InterpreterContext, spec: CommandSpec) -> None:
    ctx.env.top.direction = spec.arg1


@command("magnify")
def c_magnify(ctx: InterpreterContext, spec: CommandSpec) -> None:
    factor = ctx.scanner.read_number()
    ctx.env.top.magnify(factor)
    logger.debug("Magnified defaults by %d/1000", factor)
    ctx.source.skip_space()


@command("resolution")
def c_resolution(ctx: InterpreterContext, spec: CommandSpec) -> None:
    ctx.resolution = ctx.scanner.read_number()
    ctx.source.skip_space()
