"""Tests for the statement loop: dispatch, labels, macros and error recovery."""

import pytest

from picscript.engine.errors import ErrorCode
from picscript.engine.reader import read_file
from tests.conftest import FLOWCHART, TWO_BOXES, codes, read


def test_two_boxes_touch(two_boxes):
    result = read(two_boxes)
    assert result.ok
    first, second = result.ctx.scene
    assert second.x - first.x == 100000
    assert first.x + first.width // 2 == second.x - second.width // 2


def test_line_right():
    result = read("line right 72;\n")
    assert result.ok
    line = result.ctx.scene[0]
    assert (line.width, line.depth) == (72000, 0)


def test_flowchart(flowchart):
    result = read(flowchart)
    assert result.ok, [r.render() for r in result.errors]
    kinds = [item.kind.value for item in result.ctx.scene]
    assert kinds == ["box", "line", "box", "line", "box", "line"]
    assert result.statements == 8
    assert result.ctx.scene[2].strings[1].text == "in progress"


def test_item_count_matches_drawing_commands():
    result = read("box; circle; ellipse; line; arrow; arc; curve to (10,10); text \"t\";\n")
    assert result.ok
    assert len(result.ctx.scene) == 8


def test_multiple_statements_and_blank_semicolons():
    result = read(";; box;;; box;\n\n;\n")
    assert result.ok
    assert len(result.ctx.scene) == 2


def test_unknown_command_gives_no_output():
    result = read("box;\nfrobnicate 3;\nbox;\n")
    assert codes(result) == [ErrorCode.UNKNOWN_COMMAND]
    assert not result.ok
    # Reading continued after the error
    assert len(result.ctx.scene) == 2


def test_trailing_text_after_command():
    result = read("push 3;\n")
    assert codes(result) == [ErrorCode.SEMICOLON_EXPECTED]


def test_comment_after_statement():
    result = read("box; # a box\nbox;\n")
    assert result.ok
    assert len(result.ctx.scene) == 2


def test_stray_punctuation_is_fatal():
    result = read("box;\n) box;\nbox;\n")
    assert result.abandoned
    assert codes(result) == [ErrorCode.COMMAND_EXPECTED]
    assert len(result.ctx.scene) == 1


def test_labels():
    result = read("A: B: box;\ngoto A;\nline;\n")
    assert result.ok
    labels = {label.name: label.item for label in result.ctx.labels}
    assert labels["A"] is labels["B"] is result.ctx.scene[0]


def test_duplicate_label():
    result = read("A: box;\nA: box;\n")
    assert codes(result) == [ErrorCode.DUPLICATE_LABEL]


def test_label_on_non_drawing_command():
    result = read("A: push;\nbox;\n")
    assert codes(result) == [ErrorCode.MISPLACED_LABEL]
    assert result.ctx.labels.find("A") is None


def test_macro_with_arguments(macro_doc):
    result = read(macro_doc)
    assert result.ok, [r.render() for r in result.errors]
    texts = [item.strings[0].text for item in result.ctx.scene]
    assert texts == ["one", "two"]


def test_macro_quoted_arguments():
    doc = "macro lbl box &1;\nmacro lbl2 box \"&1\";\nlbl \"hello world\";\nlbl2 'a b';\n"
    result = read(doc)
    assert result.ok, [r.render() for r in result.errors]
    assert [item.strings[0].text for item in result.ctx.scene] == ["hello world", "a b"]


def test_macro_argument_separator():
    result = read("macro m box &1;\nm | \"x\";\n")
    assert result.ok
    # "|" ends the arguments; the string belongs to the box
    assert result.ctx.scene[0].strings[0].text == "x"


def test_labelled_macro_call_labels_first_item():
    result = read("macro two { box; box; };\nP: two;\n")
    assert result.ok
    assert result.ctx.labels.find("P") is result.ctx.scene[0]


def test_macro_instance_counter():
    result = read('macro m text "n&$";\nm; m;\n')
    assert result.ok
    assert [item.strings[0].text for item in result.ctx.scene] == ["n0", "n1"]


def test_recursive_macro_is_fatal():
    result = read("macro loop { box; loop; };\nloop;\nbox;\n")
    assert result.abandoned
    assert codes(result)[-1] == ErrorCode.MACRO_RECURSION
    assert not result.ok


def test_macro_name_clash():
    result = read("macro box circle;\n")
    assert codes(result) == [ErrorCode.MACRO_NAME_CLASH]


def test_unterminated_macro_is_fatal():
    result = read("macro m { box;\nbox;\n")
    assert result.abandoned
    assert codes(result) == [ErrorCode.MACRO_UNTERMINATED]


def test_too_many_errors():
    result = read("wibble;\n" * 10, max_errors=3)
    assert result.abandoned
    assert codes(result)[-1] == ErrorCode.TOO_MANY_ERRORS


def test_input_line_too_long():
    result = read("box " + " " * 300 + ";\n")
    assert result.abandoned
    assert codes(result) == [ErrorCode.LINE_TOO_LONG]


def test_read_file(tmp_path):
    path = tmp_path / "doc.pic"
    path.write_text(TWO_BOXES)
    result = read_file(path)
    assert result.ok
    assert len(result.ctx.scene) == 2


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path / "missing.pic")


def test_elapsed_time_recorded():
    result = read(FLOWCHART)
    assert result.elapsed_ms >= 0.0
