"""Tests for the command registry."""

import pytest

from picscript.engine.commands import load_commands
from picscript.engine.context import InterpreterContext
from picscript.engine.registry import CommandRegistry, CommandSpec, get_registry


def _noop(ctx: InterpreterContext, spec: CommandSpec) -> None:
    pass


def test_register_and_get():
    reg = CommandRegistry()
    spec = CommandSpec(name="box", fn=_noop)
    reg.register(spec)
    assert reg.get("box") is spec
    assert "box" in reg
    assert reg.count == 1


def test_duplicate_name_raises():
    reg = CommandRegistry()
    reg.register(CommandSpec(name="box", fn=_noop))
    with pytest.raises(ValueError):
        reg.register(CommandSpec(name="box", fn=_noop))


def test_missing_command():
    assert CommandRegistry().get("nothing") is None


def test_builtin_commands_registered():
    load_commands()
    reg = get_registry()
    for name in ("arc", "arcarrow", "iarc", "box", "ibox", "circle", "ellipse", "curve",
                 "line", "arrow", "iline", "text", "macro", "include", "set", "goto",
                 "push", "pop", "bindfont", "boundingbox", "magnify", "resolution",
                 "linegrey", "boxcolour", "shapefill", "textdepth"):
        assert name in reg, name


def test_stacked_decorators_share_function():
    load_commands()
    reg = get_registry()
    assert reg.get("box").fn is reg.get("ellipse").fn
    assert reg.get("box").arg2 != reg.get("ellipse").arg2


def test_loading_twice_is_harmless():
    load_commands()
    count = get_registry().count
    load_commands()
    assert get_registry().count == count
