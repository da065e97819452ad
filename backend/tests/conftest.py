"""Shared test fixtures."""

from __future__ import annotations

import pytest

from picscript.engine.config import InterpreterConfig
from picscript.engine.reader import ReadResult, read_document


# Sample documents

TWO_BOXES = """\
box width 100 depth 50;
box width 100 depth 50 right of last;
"""

FLOWCHART = """\
# A small flow chart
boxwidth 60;
boxdepth 24;
A: box "Start";
arrow down 20;
B: box "Work" "in progress";
arrow down 20;
ellipse "Done"/c;
line from left of A to left of B plus (-20,0);
"""

LABELLED_LINE = """\
line right 72 "above";
"""

MACRO_DOC = """\
macro pair { box "&1";
  box "&2" right of last; };
pair one two;
"""

ARC_DOC = """\
arc from (0,0) to (100,0) radius 100;
"""

CURVE_DOC = """\
curve from (0,0) to (100,0);
"""


def read(source: str, **overrides) -> ReadResult:
    """Read a document with InterpreterConfig overrides."""
    return read_document(source, InterpreterConfig(**overrides))


def codes(result: ReadResult) -> list[int]:
    return [int(record.code) for record in result.errors]


@pytest.fixture
def two_boxes() -> str:
    return TWO_BOXES


@pytest.fixture
def flowchart() -> str:
    return FLOWCHART


@pytest.fixture
def macro_doc() -> str:
    return MACRO_DOC


@pytest.fixture
def arc_doc() -> str:
    return ARC_DOC
