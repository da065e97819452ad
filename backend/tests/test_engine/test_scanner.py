"""Tests for words, numbers and vectors."""

import pytest

from picscript.engine.config import InterpreterConfig
from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode, FatalError
from picscript.engine.scanner import standardize
from picscript.engine.source import LineReader


def _ctx(text: str, **overrides) -> InterpreterContext:
    ctx = InterpreterContext.create(LineReader.from_text(text), InterpreterConfig(**overrides))
    ctx.source.skip_space()
    return ctx


def test_standardize_spellings():
    assert standardize("gray") == "grey"
    assert standardize("linegray") == "linegrey"
    assert standardize("greyness") == "grey"
    assert standardize("grayness") == "grey"
    assert standardize("color") == "colour"
    assert standardize("boxcolor") == "boxcolour"
    assert standardize("box") == "box"


def test_read_word_skips_space():
    ctx = _ctx("box   width 3;\n")
    assert ctx.scanner.read_word() == "box"
    assert ctx.source.ch == "w"


def test_read_word_stops_at_punctuation():
    ctx = _ctx("A: box;\n")
    assert ctx.scanner.read_word() == "A"
    assert ctx.source.ch == ":"


def test_push_back():
    ctx = _ctx("right of B;\n")
    scan = ctx.scanner
    assert scan.read_word() == "right"
    scan.push_back()
    assert scan.read_word() == "right"
    assert scan.read_word() == "of"


def test_read_number_fixed_point():
    assert _ctx("12.345;\n").scanner.read_number() == 12345
    assert _ctx("-0.5;\n").scanner.read_number() == -500
    assert _ctx("7.1239;\n").scanner.read_number() == 7123
    assert _ctx("+3;\n").scanner.read_number() == 3000


def test_read_int():
    ctx = _ctx("42 ;\n")
    assert ctx.scanner.read_int() == 42
    assert ctx.source.ch == ";"


def test_read_vector():
    ctx = _ctx("( 10 , -2.5 ) x\n")
    assert ctx.scanner.read_vector() == (10000, -2500)
    assert ctx.source.ch == "x"


def test_read_vector_is_magnified():
    ctx = _ctx("(10,4)\n")
    ctx.env.top.magnification = 2000
    assert ctx.scanner.read_vector() == (20000, 8000)


def test_read_vector_missing_comma():
    ctx = _ctx("(10 20);\n")
    ctx.scanner.read_vector()
    record = ctx.errors.records[0]
    assert record.code is ErrorCode.EXPECTED
    assert record.message == "Comma expected"


def test_word_too_long_is_fatal():
    ctx = _ctx("abcdefghijkl;\n", word_size=8)
    with pytest.raises(FatalError):
        ctx.scanner.read_word()
    assert ctx.errors.records[-1].code is ErrorCode.WORD_TOO_LONG
