"""Tokenizer: words, numbers and vectors read from the input stack."""

from __future__ import annotations

from picscript.engine.environment import EnvironmentStack
from picscript.engine.errors import ErrorChannel, ErrorCode
from picscript.engine.source import InputStack

# Words longer than this are never standardized; no command or option is
_STANDARDIZE_LIMIT = 20


def standardize(word: str) -> str:
    """Fold spelling variants: gray -> grey, greyness -> grey, color -> colour."""
    if len(word) > _STANDARDIZE_LIMIT:
        return word
    std = word.replace("gray", "grey", 1)
    if std.endswith("greyness"):
        std = std[:-4]
    return std.replace("color", "colour", 1)


def is_word_char(c: str) -> bool:
    return c != "" and c.isascii() and c.isalnum()


class Scanner:
    """Reads tokens at the input cursor. Holds the last word and a one-word pushback."""

    def __init__(self, source: InputStack, errors: ErrorChannel, env: EnvironmentStack, word_size: int = 256) -> None:
        self.source = source
        self.errors = errors
        self.env = env
        self.word_size = word_size
        self.word = ""
        self.word_std = ""
        self.pending = False

    def read_word(self) -> str:
        """Read an alphanumeric word and skip following space. Returns the pushed-back word if any."""
        if self.pending:
            self.pending = False
            return self.word
        src = self.source
        start = src.pos
        while is_word_char(src.ch):
            src.pos += 1
            if src.pos - start > self.word_size - 2:
                self.errors.report(ErrorCode.WORD_TOO_LONG)
        self.word = src.line[start:src.pos] if src.pos > start else ""
        self.word_std = standardize(self.word)
        src.skip_space()
        return self.word

    def push_back(self) -> None:
        """Make the next read_word return the current word again (if it is not empty)."""
        if self.word:
            self.pending = True

    def read_int(self) -> int:
        src = self.source
        sign = 1
        if src.ch == "-":
            sign = -1
            src.advance()
        n = 0
        while src.ch.isdigit():
            n = n * 10 + int(src.ch)
            src.pos += 1
        src.skip_space()
        return n * sign

    def read_number(self) -> int:
        """Read a signed number with up to three decimals as fixed-point. No trailing skip."""
        src = self.source
        sign = 1
        if src.ch == "-":
            sign = -1
            src.advance()
        elif src.ch == "+":
            src.advance()
        n = 0
        while src.ch.isdigit():
            n = n * 10 + int(src.ch)
            src.pos += 1
        n *= 1000
        if src.ch == ".":
            m = 100
            src.pos += 1
            while src.ch.isdigit():
                n += int(src.ch) * m
                m //= 10
                src.pos += 1
        return n * sign

    def at_number(self, signed: bool = True) -> bool:
        c = self.source.ch
        return c.isdigit() or (signed and c == "-")

    def read_vector(self) -> tuple[int, int]:
        """Read a magnified ``(x,y)``; the cursor is on the opening parenthesis."""
        src = self.source
        env = self.env.top
        x = y = 0
        src.advance()
        src.skip_space()
        if not self.at_number():
            self.errors.report(ErrorCode.EXPECTED, "Number")
            return x, y
        x = env.mag(self.read_number())
        src.skip_space()
        if src.ch != ",":
            self.errors.report(ErrorCode.EXPECTED, "Comma")
            return x, y
        src.advance()
        src.skip_space()
        if not self.at_number():
            self.errors.report(ErrorCode.EXPECTED, "Number")
            return x, y
        y = env.mag(self.read_number())
        src.skip_space()
        if src.ch != ")":
            self.errors.report(ErrorCode.EXPECTED, "Closing parenthesis")
            return x, y
        src.advance()
        src.skip_space()
        return x, y
