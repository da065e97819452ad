"""Document commands: environment stack, re-basing, variables, includes, macros, fonts, frame."""

from __future__ import annotations

import logging

from picscript.engine.commands.shapes import FRAME_OPTIONS
from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode
from picscript.engine.items import BoxItem, BoxType, FontBinding, Style
from picscript.engine.macros import Macro
from picscript.engine.options import read_options
from picscript.engine.registry import CommandSpec, command, get_registry
from picscript.engine.scanner import standardize
from picscript.engine.source import WHITESPACE, LineReader

logger = logging.getLogger(__name__)


def _read_quoted(ctx: InterpreterContext, on_unterminated) -> str:
    """Read a ``"..."`` value where ``""`` stands for a quote. The cursor is on the opening quote."""
    src = ctx.source
    chars: list[str] = []
    while True:
        src.pos += 1
        c = src.ch
        if c == "" or c == "\n":
            on_unterminated()
            break
        if c == '"':
            src.pos += 1
            if src.ch != '"':
                break
        chars.append(c)
    return "".join(chars)


@command("push")
def c_push(ctx: InterpreterContext, spec: CommandSpec) -> None:
    ctx.env.push()


@command("pop")
def c_pop(ctx: InterpreterContext, spec: CommandSpec) -> None:
    if not ctx.env.pop():
        ctx.errors.report(ErrorCode.NOTHING_TO_POP)


@command("goto")
def c_goto(ctx: InterpreterContext, spec: CommandSpec) -> None:
    """``goto <label>`` re-bases on a labelled item; ``goto *`` clears the base item."""
    src = ctx.source
    if src.ch == "*":
        ctx.base_item = None
        src.pos += 1
        src.skip_space()
        return
    word = ctx.scanner.read_word()
    item = ctx.find_label(word)
    if item is None:
        ctx.errors.report(ErrorCode.LABEL_NOT_FOUND, word)
    ctx.base_item = item


@command("set")
def c_set(ctx: InterpreterContext, spec: CommandSpec) -> None:
    src = ctx.source
    name = ctx.scanner.read_word()
    if not name:
        ctx.errors.report(ErrorCode.EMPTY_VARIABLE_NAME)
        return
    if src.ch != '"':
        ctx.errors.report(ErrorCode.EXPECTED, "quoted string")
        return
    value = _read_quoted(ctx, lambda: ctx.errors.report(ErrorCode.MISSING_QUOTE))
    ctx.variables.set(name, value)
    logger.debug("Set variable %s", name)
    src.skip_space()


@command("include")
def c_include(ctx: InterpreterContext, spec: CommandSpec) -> None:
    src = ctx.source
    # Checked first: reading the name may run off the end of the macro
    in_macro = src.in_macro

    src.skip_space()
    start = src.pos
    while src.ch != "" and src.ch != ";" and src.ch not in WHITESPACE:
        src.pos += 1
    name = src.line[start:src.pos]
    src.skip_space()

    if in_macro:
        ctx.errors.report(ErrorCode.INCLUDE_IN_MACRO)
        return
    if not name:
        ctx.errors.report(ErrorCode.FILE_NAME_EXPECTED)
        return
    # The statement must be complete before input switches to the new file
    if src.ch != ";":
        ctx.errors.report(ErrorCode.SEMICOLON_EXPECTED)
    if not ctx.config.allow_include:
        ctx.errors.report(ErrorCode.FILE_OPEN, name, "input", "includes are disabled")
        return
    try:
        reader = LineReader.open(name)
    except OSError as exc:
        ctx.errors.report(ErrorCode.FILE_OPEN, name, "input", exc.strerror or str(exc))
        return
    src.push_include(reader)


def _macro_line_end(ctx: InterpreterContext, term: str) -> int:
    """Index of ``term`` in the current line, ignoring quoted text, or the line length."""
    src = ctx.source
    line = src.line
    p = src.pos
    while p < len(line) and line[p] != term:
        if line[p] == '"':
            p += 1
            while p < len(line) and line[p] != '"':
                p += 1
            if p >= len(line):
                saved = src.pos
                src.pos = len(line) - 1
                ctx.errors.report(ErrorCode.MISSING_QUOTE, skip=False)
                src.pos = saved
                break
        p += 1
    return min(p, len(line))


@command("macro")
def c_macro(ctx: InterpreterContext, spec: CommandSpec) -> None:
    """``macro name body;`` or ``macro name { lines };``. Bodies are stored unsubstituted for ``&N``."""
    src = ctx.source
    name = ctx.scanner.read_word()
    macro = Macro(name)

    term = ";"
    if src.ch == "{":
        term = "}"
        src.pos += 1

    while True:
        end = _macro_line_end(ctx, term)
        text = src.line[src.pos:end]
        src.pos = end
        if src.ch == term:
            # The terminator becomes a space so the last line still ends a word
            macro.add_line(text + " ")
            if term == "}":
                src.advance()
                src.skip_space()
            break
        macro.add_line(text)
        src.pos = len(src.line)
        src.advance()
        if src.endfile:
            ctx.errors.report(ErrorCode.MACRO_UNTERMINATED, name)

    ctx.macros.define(macro)
    if standardize(name) in get_registry():
        ctx.errors.report(ErrorCode.MACRO_NAME_CLASH, name)


@command("bindfont")
def c_bindfont(ctx: InterpreterContext, spec: CommandSpec) -> None:
    src = ctx.source
    scan = ctx.scanner
    number = scan.read_int()
    if number <= 0:
        ctx.errors.report(ErrorCode.BAD_FONT_NUMBER)
        return
    if src.ch != '"':
        ctx.errors.report(ErrorCode.EXPECTED, "font name in quotes")
        return
    name = _read_quoted(ctx, lambda: ctx.errors.report(ErrorCode.EXPECTED, "closing quote"))

    src.skip_space()
    size = scan.read_number()
    if size <= 0:
        ctx.errors.report(ErrorCode.EXPECTED, "non-negative font size")
        return
    ctx.fonts[number] = FontBinding(number=number, name=name, size=size)
    logger.debug("Bound font %d to %s at %d", number, name, size)
    src.skip_space()


@command("boundingbox")
def c_boundingbox(ctx: InterpreterContext, spec: CommandSpec) -> None:
    """Request a frame around the whole picture, ``offset`` outside the bounding box."""
    env = ctx.env.top
    offset = ctx.scanner.read_number()
    frame = BoxItem(style=Style.VISIBLE, boxtype=BoxType.BOX, thickness=400)
    ctx.source.skip_space()
    read_options(ctx, frame, FRAME_OPTIONS)
    if frame.dashed:
        frame.dash = (env.boxdash1, env.boxdash2)
    ctx.frame = frame
    ctx.frame_offset = offset
