"""Tests for the SceneDocument read interface."""

import pytest

from picscript.models.scene import SceneDocument
from picscript.scene.serializer import build_scene
from tests.conftest import TWO_BOXES, read


def test_two_boxes_document(two_boxes):
    document = build_scene(read(two_boxes))
    assert [item.kind for item in document.items] == ["box", "box"]
    assert document.items[0].subkind == "box"
    assert document.items[1].geometry["x"] == 100000
    assert document.items[1].geometry["width"] == 100000
    assert (document.bounds.x0, document.bounds.x1) == (-50250, 150250)
    assert document.bounds.text == ("-50.25", "-25.25", "150.25", "25.25")


def test_errors_give_no_scene():
    with pytest.raises(ValueError):
        build_scene(read("wibble;\n"))


def test_empty_document_has_no_bounds():
    document = build_scene(read("# nothing here\n"))
    assert document.items == []
    assert document.bounds is None


def test_coordinates_rounded_to_resolution():
    document = build_scene(read("resolution 1;\nbox at (0.4,1.6);\n"))
    geometry = document.items[0].geometry
    assert (geometry["x"], geometry["y"]) == (0, 2000)
    assert document.resolution == 1000


def test_minimum_thickness():
    document = build_scene(read("box;\nline thickness 0.1;\n", minimum_thickness=300))
    assert [item.thickness for item in document.items] == [500, 300]


def test_arrow_and_fill_fields():
    document = build_scene(read("arrow back filled 0.5;\nbox filled 1,0,0;\nbox;\n"))
    arrow, filled, plain = document.items
    assert arrow.geometry["arrow_start"] is True
    assert arrow.geometry["arrow_end"] is False
    assert arrow.arrow_fill == (500, 500, 500)
    assert filled.fill == (1000, 0, 0)
    assert plain.fill is None


def test_strings_and_anchor():
    document = build_scene(read('box "top" "bottom"/l;\n'))
    item = document.items[0]
    assert [s.text for s in item.strings] == ["top", "bottom"]
    assert item.strings[1].justify == "left"
    assert item.string_anchor == (0, 3000)


def test_invisible_and_dashed():
    document = build_scene(read("ibox;\nline dashed;\n"))
    assert document.items[0].visible is False
    assert document.items[1].dash == (7000, 5000)
    assert document.items[0].dash is None


def test_frame_fonts_and_variables():
    source = 'boundingbox 5;\nbindfont 2 "Courier" 9;\nbindfont 1 "Times" 12;\nbox;\n'
    document = build_scene(read(source, creator="tests", title="Frame"))
    assert document.frame.offset == 5000
    assert document.bounds.x0 == -41250
    assert [font.number for font in document.fonts] == [1, 2]
    assert document.variables["creator"] == "tests"
    assert document.variables["title"] == "Frame"


def test_levels_in_document():
    document = build_scene(read("box level -1;\nbox level 2;\n"))
    assert (document.min_level, document.max_level) == (-1, 2)


def test_document_round_trips_as_json():
    document = build_scene(read(TWO_BOXES))
    restored = SceneDocument.model_validate_json(document.model_dump_json())
    assert restored == document


def test_string_adjustment_rounded_to_resolution():
    document = build_scene(read('resolution 1;\nbox "a"(0.4,-1.6);\n'))
    string = document.items[0].strings[0]
    assert (string.xadjust, string.yadjust) == (0, -2000)
