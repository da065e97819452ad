"""Tests for string anchoring."""

from picscript.scene.strings import font_depth, line_depth, string_anchor
from tests.conftest import LABELLED_LINE, read


def _anchor(source: str) -> tuple[int, int]:
    result = read(source)
    assert result.ok, [r.render() for r in result.errors]
    ctx = result.ctx
    return string_anchor(ctx.scene.last, ctx.fonts)


def test_single_string_on_box():
    assert _anchor('box "a";\n') == (0, -3000)


def test_two_strings_straddle_the_centre():
    assert _anchor('box "a" "b";\n') == (0, 3000)


def test_three_strings():
    assert _anchor('box "a" "b" "c";\n') == (0, 9000)


def test_bound_font_sets_depths():
    assert _anchor('bindfont 1 "Times" 20;\nbox "a"/1 "b"/1;\n') == (0, 5000)


def test_label_above_horizontal_line():
    assert _anchor(LABELLED_LINE) == (36000, 2000)


def test_label_beside_vertical_line():
    assert _anchor('line up 20 "a";\n') == (3000, 7000)


def test_label_outside_arc():
    assert _anchor('arc "a";\n') == (31455, 22455)


def test_curve_strings_sit_on_midpoint():
    assert _anchor('curve from (0,0) to (100,20) "a";\n') == (50000, 10000)


def test_item_without_strings():
    result = read("box at (3,4);\n")
    assert string_anchor(result.ctx.scene[0], {}) == (3000, 4000)


def test_depth_helpers_prefer_larger():
    result = read('textdepth 30;\nfontdepth 2;\nbindfont 1 "Times" 20;\nbox "a"/1;\n')
    box = result.ctx.scene[0]
    fragment = box.strings[0]
    assert line_depth(box, fragment, result.ctx.fonts) == 30000
    assert font_depth(box, fragment, result.ctx.fonts) == 10000
