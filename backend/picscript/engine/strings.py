"""Quoted strings attached to items, with their /options and (dx,dy) adjustment."""

from __future__ import annotations

import math

from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode
from picscript.engine.items import Colour, Item, Justify, StringFragment
from picscript.engine.source import WHITESPACE
from picscript.text.decoder import next_char

_JUSTIFY = {"l": Justify.LEFT, "r": Justify.RIGHT, "c": Justify.CENTRE}
_OPTION_HELP = "/l, /r, /c, /<font>, /{+-}<rotate>, or /<r>,<g>,<b>"


def _ends_option(c: str) -> bool:
    return c == "" or c in "/;" or c in WHITESPACE


def _read_text(ctx: InterpreterContext) -> str:
    src = ctx.source
    chars: list[str] = []
    while True:
        c, escaped = next_char(src, ctx.config.translate_chars)
        if c == "" or (c == "\n" and not escaped):
            ctx.errors.report(ErrorCode.MISSING_QUOTE)
            break
        if c == '"' and not escaped:
            if src.peek() != '"':
                src.pos += 1
                break
            src.pos += 1
        chars.append(c)
    return "".join(chars)


def _read_font_or_colour(ctx: InterpreterContext, fragment: StringFragment) -> None:
    """``/N`` selects a font; ``/g.g`` or ``/r,g,b`` sets the colour."""
    src = ctx.source
    scan = ctx.scanner
    k = src.pos
    while k < len(src.line) and src.line[k].isdigit():
        k += 1
    fractional = k < len(src.line) and src.line[k] == "."

    value = scan.read_number()
    if not fractional and src.ch != ",":
        fragment.font = value // 1000
        return

    red = green = blue = value
    if src.ch == ",":
        src.pos += 1
        green = scan.read_number()
        if src.ch == ",":
            src.pos += 1
            blue = scan.read_number()
    fragment.colour = Colour(red, green, blue)
    if max(red, green, blue) > 1000:
        ctx.errors.report(ErrorCode.COLOUR_RANGE)


def read_string(ctx: InterpreterContext, justify: Justify) -> tuple[StringFragment, int | None]:
    """Read one string; the cursor is on its opening quote.

    Returns the fragment and its explicit rotation, or None when it has none.
    """
    src = ctx.source
    env = ctx.env.top
    fragment = StringFragment(
        text=_read_text(ctx), justify=justify, font=env.setfont, colour=env.textcolour
    )
    rotate: int | None = None

    if src.ch == "(":
        fragment.xadjust, fragment.yadjust = ctx.scanner.read_vector()

    while src.ch == "/":
        src.pos += 1
        opt = src.ch
        if opt != "" and opt in "lrc" and _ends_option(src.peek()):
            fragment.justify = _JUSTIFY[opt]
            src.pos += 1
        elif opt != "" and opt in "+-":
            rotate = ctx.scanner.read_number()
        elif opt.isdigit():
            _read_font_or_colour(ctx, fragment)
        else:
            ctx.errors.report(ErrorCode.EXPECTED, _OPTION_HELP)
            break

    if ctx.fonts and fragment.font not in ctx.fonts:
        ctx.errors.report(ErrorCode.FONT_NOT_BOUND, fragment.font)
        fragment.font = 0

    src.skip_space()
    return fragment, rotate


def read_string_chain(ctx: InterpreterContext, item: Item, justify: Justify) -> None:
    """Attach every following string to ``item``.

    A string without an explicit rotation takes the rotation of the one before.
    """
    rotate = 0
    while ctx.source.ch == '"':
        fragment, explicit = read_string(ctx, justify)
        if explicit is not None:
            rotate = explicit
        fragment.rotate = rotate
        fragment.rrotate = math.radians(rotate / 1000)
        item.strings.append(fragment)
