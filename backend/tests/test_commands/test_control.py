"""Tests for push/pop, goto, set, bindfont and boundingbox."""

from picscript.engine.errors import ErrorCode
from picscript.engine.items import FontBinding
from tests.conftest import codes, read


def test_push_and_pop_restore_defaults():
    result = read("push;\nboxwidth 10;\nbox;\npop;\nbox;\n")
    assert result.ok
    assert [item.width for item in result.ctx.scene] == [10000, 72000]
    assert result.ctx.env.depth == 1


def test_pop_without_push():
    result = read("pop;\n")
    assert codes(result) == [ErrorCode.NOTHING_TO_POP]


def test_goto_rebases():
    result = read("A: box at (0,0);\nbox at (100,100);\ngoto A;\nline;\n")
    assert result.ok
    line = result.ctx.scene.last
    assert (line.x, line.y) == (36000, 0)


def test_goto_star_clears_base():
    result = read("box at (50,50);\ngoto *;\nbox;\n")
    assert result.ok
    box = result.ctx.scene.last
    assert (box.x, box.y) == (0, 0)


def test_goto_unknown_label():
    result = read("goto Nowhere;\n")
    assert codes(result) == [ErrorCode.LABEL_NOT_FOUND]


def test_set_and_substitute():
    result = read('set who "world";\ntext "hello $who";\n')
    assert result.ok
    assert result.ctx.scene[0].strings[0].text == "hello world"
    assert result.ctx.variables.get("who") == "world"


def test_set_with_doubled_quote():
    result = read('set q "a""b";\n')
    assert result.ok
    assert result.ctx.variables.get("q") == 'a"b'


def test_set_errors():
    assert codes(read('set "x";\n')) == [ErrorCode.EMPTY_VARIABLE_NAME]
    assert codes(read("set x 3;\n")) == [ErrorCode.EXPECTED]
    assert ErrorCode.MISSING_QUOTE in codes(read('set x "abc\n'))


def test_unknown_variable_stays_literal():
    result = read('text "$nothing";\n')
    assert codes(result) == [ErrorCode.UNKNOWN_VARIABLE]
    assert result.ctx.scene[0].strings[0].text == "$nothing"


def test_no_variables_disables_substitution():
    result = read('text "$nothing";\n', no_variables=True)
    assert result.ok
    assert result.ctx.scene[0].strings[0].text == "$nothing"


def test_bindfont():
    result = read('bindfont 1 "Helvetica" 12;\n')
    assert result.ok
    assert result.ctx.fonts[1] == FontBinding(number=1, name="Helvetica", size=12000)


def test_bindfont_errors():
    assert codes(read('bindfont 0 "x" 12;\n')) == [ErrorCode.BAD_FONT_NUMBER]
    assert codes(read("bindfont 1 x 12;\n")) == [ErrorCode.EXPECTED]
    assert codes(read('bindfont 1 "x" 0;\n')) == [ErrorCode.EXPECTED]


def test_boundingbox_frame():
    result = read("boundingbox 5 dashed;\nbox;\n")
    assert result.ok
    ctx = result.ctx
    assert ctx.frame_offset == 5000
    assert ctx.frame.dash == (7000, 5000)
    # The frame is not a scene item
    assert len(ctx.scene) == 1
