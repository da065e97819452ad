"""Document error catalogue and the error channel.

Errors found while reading a document are recorded, not raised: the channel
reflects the offending line with a caret and, outside variable substitution,
skips the rest of the statement so that one mistake does not cascade. A few
conditions are fatal and abort the read by raising FatalError.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from picscript.engine.source import InputStack

logger = logging.getLogger(__name__)


class ErrorCode(enum.IntEnum):
    FILE_OPEN = 1
    UNKNOWN_COMMAND = 2
    SEMICOLON_EXPECTED = 3
    FONT_NOT_BOUND = 4
    BAD_FONT_NUMBER = 5
    UNKNOWN_VARIABLE = 6
    UNKNOWN_OPTION = 7
    DIMENSION_EXPECTED = 8
    MISPLACED_LABEL = 9
    LABEL_NOT_FOUND = 10
    EXPECTED = 11
    NO_PREVIOUS_ITEM = 12
    BAD_POSITION = 13
    BAD_FRACTION = 14
    COMMAND_EXPECTED = 16
    EMPTY_VARIABLE_NAME = 17
    NOTHING_TO_POP = 18
    ARC_OVERCONSTRAINED = 19
    COLOUR_RANGE = 20
    MISSING_QUOTE = 21
    NOTHING_TO_JOIN = 22
    ARC_NEEDS_END = 23
    BAD_VIA_POINT = 24
    SUBSTITUTION_OVERFLOW_NAMED = 25
    SUBSTITUTION_OVERFLOW = 26
    MISSING_BRACE = 27
    FILE_NAME_EXPECTED = 29
    INCLUDE_IN_MACRO = 30
    CURVE_NEEDS_END = 33
    CURVE_TOO_SHORT = 34
    LINE_TOO_LONG = 35
    WORD_TOO_LONG = 36
    DUPLICATE_LABEL = 37
    LINE_OVERCONSTRAINED = 38
    MACRO_NAME_CLASH = 39
    MACRO_UNTERMINATED = 40
    MACRO_RECURSION = 41
    ALIGN_SLOPING = 42
    VARIABLE_NAME_TOO_LONG = 43
    NESTING_TOO_DEEP = 44
    TOO_MANY_ERRORS = 45


MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_OPEN: "Failed to open {} for {}: {}",
    ErrorCode.UNKNOWN_COMMAND: 'Unknown command "{}"',
    ErrorCode.SEMICOLON_EXPECTED: "Semicolon expected (unexpected text follows command)",
    ErrorCode.FONT_NOT_BOUND: "Font {} has not been bound",
    ErrorCode.BAD_FONT_NUMBER: "Font number must be greater than 0",
    ErrorCode.UNKNOWN_VARIABLE: 'Unknown variable "{}"',
    ErrorCode.UNKNOWN_OPTION: 'Unknown option word "{}"',
    ErrorCode.DIMENSION_EXPECTED: "Dimension expected",
    ErrorCode.MISPLACED_LABEL: 'Label "{}" incorrectly placed (may only precede drawing command)',
    ErrorCode.LABEL_NOT_FOUND: 'Can\'t find item labelled "{}"',
    ErrorCode.EXPECTED: "{} expected",
    ErrorCode.NO_PREVIOUS_ITEM: "No previous item",
    ErrorCode.BAD_POSITION: "Inappropriate position descriptor applied to a {}",
    ErrorCode.BAD_FRACTION: "Inappropriate fraction encountered",
    ErrorCode.COMMAND_EXPECTED: "Command word expected - processing abandoned",
    ErrorCode.EMPTY_VARIABLE_NAME: "Empty variable name",
    ErrorCode.NOTHING_TO_POP: "No stacked environment to restore",
    ErrorCode.ARC_OVERCONSTRAINED: "Too many constraints for arc",
    ErrorCode.COLOUR_RANGE: "Grey level or RGB value must not be greater than 1.0",
    ErrorCode.MISSING_QUOTE: "Closing quote missing; string terminated at end of line",
    ErrorCode.NOTHING_TO_JOIN: "No previous item to join to",
    ErrorCode.ARC_NEEDS_END: '"depth" or "via" for arc given without end point',
    ErrorCode.BAD_VIA_POINT: "An arc cannot be constructed using the given via point",
    ErrorCode.SUBSTITUTION_OVERFLOW_NAMED: 'Line too long while substituting "{}" - processing abandoned',
    ErrorCode.SUBSTITUTION_OVERFLOW: "Line too long while substituting - processing abandoned",
    ErrorCode.MISSING_BRACE: 'Missing }} after "${{{}"',
    ErrorCode.FILE_NAME_EXPECTED: "File name expected",
    ErrorCode.INCLUDE_IN_MACRO: '"include" is not allowed in a macro',
    ErrorCode.CURVE_NEEDS_END: 'Missing "to" parameter for curve',
    ErrorCode.CURVE_TOO_SHORT: "Curve length {:g} is too short",
    ErrorCode.LINE_TOO_LONG: "Input line is too long (max {}) - processing abandoned",
    ErrorCode.WORD_TOO_LONG: "Word is too long - processing abandoned",
    ErrorCode.DUPLICATE_LABEL: 'Duplicate label "{}"',
    ErrorCode.LINE_OVERCONSTRAINED: "Width/depth and an endpoint are mutually exclusive",
    ErrorCode.MACRO_NAME_CLASH: 'Macro name "{}" is not allowed - matches a command name',
    ErrorCode.MACRO_UNTERMINATED: 'End of file while reading macro "{}" - processing abandoned',
    ErrorCode.MACRO_RECURSION: "Recursive macro call not allowed - processing abandoned",
    ErrorCode.ALIGN_SLOPING: 'The "align" option is not valid for a sloping line',
    ErrorCode.VARIABLE_NAME_TOO_LONG: "Variable name is too long in substitution",
    ErrorCode.NESTING_TOO_DEEP: "Too many nested {} (max {}) - processing abandoned",
    ErrorCode.TOO_MANY_ERRORS: "Too many errors - processing abandoned",
}

FATAL_CODES = frozenset({
    ErrorCode.COMMAND_EXPECTED,
    ErrorCode.SUBSTITUTION_OVERFLOW_NAMED,
    ErrorCode.SUBSTITUTION_OVERFLOW,
    ErrorCode.LINE_TOO_LONG,
    ErrorCode.WORD_TOO_LONG,
    ErrorCode.MACRO_UNTERMINATED,
    ErrorCode.MACRO_RECURSION,
    ErrorCode.NESTING_TOO_DEEP,
    ErrorCode.TOO_MANY_ERRORS,
})


@dataclass
class ErrorRecord:
    """One reported problem, with the line it was found on."""

    code: ErrorCode
    message: str
    fatal: bool = False
    line: str | None = None
    column: int | None = None

    def render(self) -> str:
        text = f"Error {int(self.code)}: {self.message}"
        if self.line is None:
            return text
        caret = " " * (self.column or 0) + "^"
        return f"{text}\n{self.line}\n{caret}"


class FatalError(Exception):
    """Raised when reading must stop immediately."""

    def __init__(self, record: ErrorRecord) -> None:
        super().__init__(record.message)
        self.record = record


class ErrorChannel:
    """Collects error records for one document read."""

    def __init__(self, max_errors: int = 100) -> None:
        self.max_errors = max_errors
        self.records: list[ErrorRecord] = []
        self.source: InputStack | None = None

    @property
    def count(self) -> int:
        return len(self.records)

    def report(self, code: ErrorCode, *args: object, skip: bool = True, reflect: bool = True) -> None:
        """Record an error. Fatal codes raise FatalError after recording."""
        fatal = code in FATAL_CODES
        record = ErrorRecord(code=code, message=MESSAGES[code].format(*args), fatal=fatal)

        source = self.source
        if source is not None and reflect:
            line, column = source.reflection()
            record.line = line.rstrip("\n")
            record.column = min(column, len(record.line))
            if skip and not fatal and not source.substituting:
                source.skip_statement()

        self.records.append(record)
        logger.warning("Document error %d: %s", int(code), record.message)

        if fatal:
            raise FatalError(record)

        if len(self.records) > self.max_errors:
            overflow = ErrorRecord(
                code=ErrorCode.TOO_MANY_ERRORS,
                message=MESSAGES[ErrorCode.TOO_MANY_ERRORS],
                fatal=True,
            )
            self.records.append(overflow)
            raise FatalError(overflow)
