"""Tests for lines and arrows."""

from picscript.engine.errors import ErrorCode
from picscript.engine.items import Justify
from tests.conftest import LABELLED_LINE, codes, read


def _scene(source: str):
    result = read(source)
    assert result.ok, [r.render() for r in result.errors]
    return result.ctx.scene


def test_direction_options_set_width_and_depth():
    scene = _scene("line up;\nline left 10;\nline down 5;\n")
    assert (scene[0].width, scene[0].depth) == (0, 36000)
    assert (scene[1].width, scene[1].depth) == (-10000, 0)
    assert (scene[2].width, scene[2].depth) == (0, -5000)


def test_default_line_follows_environment_direction():
    line = _scene("down;\nline;\n")[0]
    assert (line.width, line.depth) == (0, -36000)


def test_line_lengths_follow_defaults():
    line = _scene("hlinelength 20;\nline;\n")[0]
    assert line.width == 20000


def test_from_and_to():
    line = _scene("line from (10,10) to (40,50);\n")[0]
    assert (line.x, line.y) == (10000, 10000)
    assert (line.width, line.depth) == (30000, 40000)


def test_lines_chain_end_to_start():
    scene = _scene("line right 10;\nline up 10;\n")
    assert (scene[1].x, scene[1].y) == (10000, 0)


def test_line_leaves_box_on_heading_side():
    line = _scene("box at (0,0);\nline up 10;\n")[1]
    assert (line.x, line.y) == (0, 18000)
    line = _scene("box at (0,0);\nline;\n")[1]
    assert (line.x, line.y) == (36000, 0)


def test_line_after_arc_starts_at_arc_end():
    line = _scene("arc;\nline;\n")[1]
    assert (line.x, line.y) == (0, 36000)


def test_overconstrained_line():
    result = read("line right 10 to (5,5);\n")
    assert codes(result) == [ErrorCode.LINE_OVERCONSTRAINED]


def test_align_extends_to_point():
    line = _scene("line from (0,0) up align (7,50);\n")[0]
    assert (line.width, line.depth) == (0, 50000)
    line = _scene("line from (0,10) right align (30,0);\n")[0]
    assert (line.width, line.depth) == (30000, 0)


def test_align_on_sloping_line():
    result = read("line to (10,10) align (5,5);\n")
    assert codes(result) == [ErrorCode.ALIGN_SLOPING]


def test_arrowheads():
    scene = _scene("arrow;\narrow back;\narrow both;\nline;\n")
    assert (scene[0].arrow_start, scene[0].arrow_end) == (False, True)
    assert (scene[1].arrow_start, scene[1].arrow_end) == (True, False)
    assert (scene[2].arrow_start, scene[2].arrow_end) == (True, True)
    assert (scene[3].arrow_start, scene[3].arrow_end) == (False, False)


def test_arrowhead_size_defaults():
    arrow = _scene("arrowlength 4;\narrowwidth 3;\narrow filled 0;\n")[0]
    assert (arrow.arrow_x, arrow.arrow_y) == (4000, 3000)
    assert arrow.arrow_filled.red == 0


def test_back_is_not_a_line_option():
    result = read("line back;\n")
    assert codes(result) == [ErrorCode.UNKNOWN_OPTION]


def test_horizontal_line_strings_are_centred():
    line = _scene(LABELLED_LINE)[0]
    assert line.strings[0].justify is Justify.CENTRE
    line = _scene('line up "side";\n')[0]
    assert line.strings[0].justify is Justify.LEFT


def test_invisible_line():
    line = _scene("iline;\n")[0]
    assert line.invisible
