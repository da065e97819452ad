"""InputStack: one logical character stream over files, includes and macro calls.

Everything above this module sees a single current line and a cursor into it.
When the line runs out, ``advance`` fetches the next one from the innermost
active macro, or from the current file (substituting variables), popping
finished macros and included files in LIFO order.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import IO

from picscript.engine.config import InterpreterConfig
from picscript.engine.errors import ErrorChannel, ErrorCode
from picscript.engine.macros import MacroInvocation
from picscript.text.decoder import decode_line
from picscript.text.variables import VariableStore, substitute_variables

logger = logging.getLogger(__name__)

# Characters skipped between tokens
WHITESPACE = " \t\r\n"


@dataclass
class LineReader:
    """A named byte stream read one line at a time."""

    name: str
    stream: IO[bytes]

    @classmethod
    def from_text(cls, text: str, name: str = "<string>") -> LineReader:
        return cls(name=name, stream=io.BytesIO(text.encode("utf-8")))

    @classmethod
    def open(cls, path: str) -> LineReader:
        return cls(name=path, stream=open(path, "rb"))

    def readline(self) -> bytes:
        return self.stream.readline()

    def close(self) -> None:
        self.stream.close()


@dataclass
class _IncludeFrame:
    reader: LineReader
    line: str
    pos: int


@dataclass
class _MacroFrame:
    invocation: MacroInvocation
    line: str
    pos: int
    macro_id: int


class InputStack:
    """Current line, cursor, and the saved states of enclosing includes and macros."""

    def __init__(
        self,
        reader: LineReader,
        errors: ErrorChannel,
        variables: VariableStore,
        config: InterpreterConfig | None = None,
    ) -> None:
        self.config = config or InterpreterConfig()
        self.errors = errors
        self.variables = variables
        self.reader = reader

        # Start on an empty line so the first advance reads real input
        self.line = "\n"
        self.pos = 0
        self.prev_line = "\n"
        self.raw_line = ""
        self.endfile = False

        # Substitution state, used when reflecting errors
        self.substituting = False
        self.subs_column = 0

        self._includes: list[_IncludeFrame] = []
        self._macros: list[_MacroFrame] = []
        self.macro_id = 0
        self.macro_count = 0

    # ── Cursor access ──

    @property
    def ch(self) -> str:
        """Character under the cursor, or an empty string past the end of the line."""
        if 0 <= self.pos < len(self.line):
            return self.line[self.pos]
        return ""

    def peek(self, offset: int = 1) -> str:
        i = self.pos + offset
        if 0 <= i < len(self.line):
            return self.line[i]
        return ""

    def reflection(self) -> tuple[str, int]:
        """Line and column to show with an error message."""
        if self.substituting:
            return self.raw_line, self.subs_column
        if self.pos > 0:
            return self.line, self.pos
        return self.prev_line, len(self.prev_line.rstrip("\n"))

    # ── Nesting ──

    @property
    def in_macro(self) -> bool:
        return bool(self._macros)

    @property
    def active_macros(self) -> list[str]:
        return [frame.invocation.macro.name for frame in self._macros]

    @property
    def include_depth(self) -> int:
        return len(self._includes)

    def push_include(self, reader: LineReader) -> None:
        """Read from ``reader`` until it ends, then resume the current line."""
        if len(self._includes) >= self.config.include_depth:
            reader.close()
            self.errors.report(ErrorCode.NESTING_TOO_DEEP, "included files", self.config.include_depth)
        self._includes.append(_IncludeFrame(self.reader, self.line, self.pos))
        self.reader = reader
        self.line = ";\n"
        self.pos = 0
        logger.debug("Including %s (depth %d)", reader.name, len(self._includes))

    def enter_macro(self, invocation: MacroInvocation) -> None:
        """Switch input to the first body line of a macro call."""
        if len(self._macros) >= self.config.macro_depth:
            self.errors.report(ErrorCode.NESTING_TOO_DEEP, "macro calls", self.config.macro_depth)
        self._macros.append(_MacroFrame(invocation, self.line, self.pos, self.macro_id))
        self.line = ""
        self.pos = -1
        self.macro_id = self.macro_count
        self.macro_count += 1
        logger.debug(
            "Calling macro %s with %d args (id %d)",
            invocation.macro.name,
            len(invocation.args),
            self.macro_id,
        )
        self.advance()

    # ── Advancing ──

    def advance(self) -> None:
        """Move to the next character, fetching a new line when this one is used up."""
        self.pos += 1
        if self.pos < len(self.line):
            return

        if self.line and self.line != "\n":
            self.prev_line = self.line

        if self._macros:
            self._next_macro_line()
            return

        while not self.endfile:
            raw = self.reader.readline()
            if not raw:
                if not self._includes:
                    self.endfile = True
                    self.line = ""
                    self.pos = 0
                    return
                self._pop_include()
                self.advance()
                return

            if len(raw.rstrip(b"\r\n")) >= self.config.input_line_size - 1:
                self.errors.report(
                    ErrorCode.LINE_TOO_LONG, self.config.input_line_size - 1, reflect=False
                )

            text = decode_line(raw)
            if text.startswith("#"):
                continue
            self.line = text if self.config.no_variables else self._substitute(text)
            self.pos = 0
            return

    def skip_space(self) -> None:
        """Advance to the next significant character, crossing lines."""
        # An exhausted line counts as whitespace
        while (self.ch == "" or self.ch in WHITESPACE) and not self.endfile:
            self.advance()

    def skip_line(self) -> None:
        """Ignore the rest of the current line."""
        self.pos = len(self.line)

    def skip_statement(self) -> None:
        """Move to the next ``;`` or end of line, stepping over quoted strings."""
        in_string = False
        self.pos = max(self.pos, 0)
        while self.pos < len(self.line):
            c = self.line[self.pos]
            if c == "\n" or (c == ";" and not in_string):
                break
            if c == '"':
                if not in_string:
                    in_string = True
                elif self.peek() != '"':
                    in_string = False
                else:
                    self.pos += 1
            self.pos += 1

    def skip_to_semicolon(self) -> None:
        """Move to the next ``;``, crossing lines if necessary."""
        while self.ch != ";" and not self.endfile:
            self.advance()

    def close(self) -> None:
        """Release any open readers."""
        self.reader.close()
        while self._includes:
            self._includes.pop().reader.close()

    # ── Internals ──

    def _next_macro_line(self) -> None:
        frame = self._macros[-1]
        invocation = frame.invocation
        if invocation.exhausted:
            self._macros.pop()
            self.line = frame.line
            self.pos = frame.pos
            self.macro_id = frame.macro_id
            logger.debug("Leaving macro %s", invocation.macro.name)
            return
        self.line = invocation.pop_line(self.macro_id)
        self.pos = 0

    def _pop_include(self) -> None:
        frame = self._includes.pop()
        logger.debug("End of included file %s", self.reader.name)
        self.reader.close()
        self.reader = frame.reader
        self.line = frame.line
        self.pos = frame.pos

    def _substitute(self, text: str) -> str:
        self.raw_line = text
        self.substituting = True
        try:
            return substitute_variables(
                text,
                self.variables,
                self._substitution_error,
                max_length=self.config.input_line_size,
                name_limit=self.config.variable_name_size,
            )
        finally:
            self.substituting = False

    def _substitution_error(self, column: int, code: ErrorCode, *args: object) -> None:
        self.subs_column = column
        self.errors.report(code, *args)
