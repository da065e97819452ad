"""Tests for option tables and option parsing."""

from picscript.engine.commands.line import ARROW_OPTIONS, LINE_OPTIONS
from picscript.engine.errors import ErrorCode
from picscript.engine.items import Colour
from picscript.engine.options import OptionKind, OptionSpec, OptionTable
from tests.conftest import codes, read


def test_table_concatenation():
    a = OptionTable(OptionSpec("up", OptionKind.FLAG, "x"))
    b = OptionTable(OptionSpec("down", OptionKind.FLAG, "y"))
    both = a + b
    assert "up" in both and "down" in both
    assert len(both) == 2
    assert both.get("down").field == "y"
    assert both.get("left") is None


def test_arrow_options_extend_line_options():
    assert "back" in ARROW_OPTIONS
    assert "back" not in LINE_OPTIONS
    assert len(ARROW_OPTIONS) == len(LINE_OPTIONS) + 3


def test_unknown_option():
    result = read("box wibble;\n")
    assert codes(result) == [ErrorCode.UNKNOWN_OPTION]
    assert result.errors[0].message == 'Unknown option word "wibble"'


def test_dimension_expected():
    result = read("box width;\n")
    assert codes(result) == [ErrorCode.DIMENSION_EXPECTED]


def test_dimensions_and_thickness():
    result = read("box width 10 depth 5.5 thickness 2;\n")
    assert result.ok
    box = result.ctx.scene[0]
    assert (box.width, box.depth, box.thickness) == (10000, 5500, 2000)


def test_magnified_dimensions():
    result = read("magnify 2;\nbox width 10;\n")
    assert result.ok
    box = result.ctx.scene[0]
    assert box.width == 20000
    # The default depth was scaled by magnify
    assert box.depth == 72000


def test_grey_and_colour():
    result = read("box grey 0.25;\nbox colour 0.1, 0.2, 0.3;\n")
    assert result.ok
    assert result.ctx.scene[0].colour == Colour(250, 250, 250)
    assert result.ctx.scene[1].colour == Colour(100, 200, 300)


def test_gray_spelling_is_accepted():
    result = read("box gray 0.5 color 0 0 0;\n")
    assert result.ok


def test_colour_out_of_range():
    result = read("box colour 2 0 0;\n")
    assert codes(result) == [ErrorCode.COLOUR_RANGE]


def test_colour_needs_three_values():
    result = read("box colour 1 0;\n")
    assert codes(result) == [ErrorCode.EXPECTED]
    assert result.errors[0].message == "blue value expected"


def test_filled_grey_or_colour():
    result = read("box filled 0.5;\nbox filled 1,0;\nbox;\n")
    assert result.ok
    scene = result.ctx.scene
    assert scene[0].shapefilled == Colour(500, 500, 500)
    assert scene[1].shapefilled == Colour(1000, 0, 1000)
    assert not scene[2].filled


def test_dashed_takes_environment_dash():
    result = read("linedash 3, 2;\nline dashed;\nline;\n")
    assert result.ok
    assert result.ctx.scene[0].dash == (3000, 2000)
    assert result.ctx.scene[1].dash is None


def test_levels_are_tracked():
    result = read("box level 3;\nbox level -2;\n")
    assert result.ok
    assert result.ctx.scene.min_level == -2
    assert result.ctx.scene.max_level == 3
