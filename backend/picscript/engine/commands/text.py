"""text: free-standing strings."""

from __future__ import annotations

from picscript.engine.context import InterpreterContext
from picscript.engine.items import Justify, Style, TextItem
from picscript.engine.options import OptionKind as K
from picscript.engine.options import OptionSpec, OptionTable, read_options
from picscript.engine.registry import CommandSpec, command
from picscript.engine.resolver.line import place_text
from picscript.engine.strings import read_string_chain

TEXT_OPTIONS = OptionTable(
    OptionSpec("at", K.AT, "x", "y"),
    OptionSpec("level", K.INT, "level"),
)


@command("text", arg1=Style.VISIBLE)
def c_text(ctx: InterpreterContext, spec: CommandSpec) -> None:
    env = ctx.env.top
    text = TextItem(
        style=spec.arg1,
        level=env.level,
        linedepth=env.linedepth,
        fontdepth=env.fontdepth,
        colour=env.textcolour,
    )

    read_options(ctx, text, TEXT_OPTIONS)
    ctx.scene.track_level(text.level)

    place_text(ctx, text)
    read_string_chain(ctx, text, Justify.CENTRE)
    # Text never becomes the base item and cannot be labelled
    ctx.add_text(text)
