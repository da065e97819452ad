"""Tests for join points and position expressions."""

import math

from picscript.engine.errors import ErrorCode
from tests.conftest import codes, read


def _last(source: str):
    result = read(source)
    assert result.ok, [r.render() for r in result.errors]
    return result.ctx.scene.last


def test_absolute_position():
    box = _last("box at (10,20);\n")
    assert (box.x, box.y) == (10000, 20000)


def test_box_sides_and_corners():
    doc = "A: box width 40 depth 20 at (0,0);\n"
    assert _last(doc + "text at top of A;\n").y == 10000
    assert _last(doc + "text at left of A;\n").x == -20000
    corner = _last(doc + "text at bottom right of A;\n")
    assert (corner.x, corner.y) == (20000, -10000)
    hyphenated = _last(doc + "text at top-left of A;\n")
    assert (hyphenated.x, hyphenated.y) == (-20000, 10000)


def test_fraction_along_box_side():
    text = _last("A: box width 40 depth 20;\ntext at 1/4 top of A;\n")
    assert (text.x, text.y) == (-10000, 10000)


def test_ellipse_corner_uses_diagonal():
    text = _last("A: ellipse width 40 depth 20;\ntext at top right of A;\n")
    assert text.x == int(20000 * math.cos(math.pi / 4))
    assert text.y == int(10000 * math.sin(math.pi / 4))


def test_line_start_end_middle():
    doc = "L: line from (0,0) to (100,40);\n"
    start = _last(doc + "text at start of L;\n")
    assert (start.x, start.y) == (0, 0)
    end = _last(doc + "text at end of L;\n")
    assert (end.x, end.y) == (100000, 40000)
    middle = _last(doc + "text at middle of L;\n")
    assert (middle.x, middle.y) == (50000, 20000)
    quarter = _last(doc + "text at 0.25 start of L;\n")
    assert (quarter.x, quarter.y) == (25000, 10000)


def test_plus_offset():
    text = _last("A: box at (0,0);\ntext at centre of A plus (5,-5);\n")
    assert (text.x, text.y) == (5000, -5000)


def test_last_refers_to_base_item():
    text = _last("box at (7,7);\ntext at centre of last;\n")
    assert (text.x, text.y) == (7000, 7000)


def test_bad_position_for_kind():
    result = read("L: line;\ntext at top of L;\n")
    assert ErrorCode.BAD_POSITION in codes(result)


def test_missing_label():
    result = read("text at top of Nowhere;\n")
    assert codes(result) == [ErrorCode.LABEL_NOT_FOUND]


def test_no_previous_item():
    result = read("text at top;\n")
    assert codes(result) == [ErrorCode.NO_PREVIOUS_ITEM]


def test_fraction_with_zero_divisor():
    result = read("A: box;\ntext at 1/0 top of A;\n")
    assert ErrorCode.BAD_FRACTION in codes(result)


def test_fraction_on_corner_is_rejected():
    result = read("A: box;\ntext at 1/2 top left of A;\n")
    assert ErrorCode.BAD_FRACTION in codes(result)


def test_bare_label_rebases():
    result = read("A: box at (0,0);\nbox at (100,0);\nbox at A right;\n")
    assert ErrorCode.UNKNOWN_OPTION not in codes(result)
    # "at A" re-bases without setting a point, so the box joins A
    box = result.ctx.scene.last
    assert box.x == 72000
