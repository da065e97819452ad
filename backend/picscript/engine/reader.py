"""Document reader: the statement loop that dispatches command words.

Each statement is a command word (or a macro name) followed by its arguments
and a semicolon. Words ending in a colon are labels for the next drawing
command. Everything a command produces lands in the context's scene graph.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from picscript.engine.commands import load_commands
from picscript.engine.config import InterpreterConfig
from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode, ErrorRecord, FatalError
from picscript.engine.macros import Macro, MacroInvocation
from picscript.engine.registry import CommandRegistry, get_registry
from picscript.engine.source import LineReader
from picscript.text.variables import VariableStore

logger = logging.getLogger(__name__)


@dataclass
class ReadResult:
    """Outcome of reading one document."""

    ctx: InterpreterContext
    abandoned: bool = False
    elapsed_ms: float = 0.0
    statements: int = 0

    @property
    def errors(self) -> list[ErrorRecord]:
        return self.ctx.errors.records

    @property
    def ok(self) -> bool:
        """True when the document read cleanly and output should be produced."""
        return not self.abandoned and not self.errors


class Reader:
    """Reads documents into scene graphs."""

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        config: InterpreterConfig | None = None,
    ) -> None:
        load_commands()
        self.registry = registry or get_registry()
        self.config = config or InterpreterConfig()

    def read(self, reader: LineReader, variables: VariableStore | None = None) -> ReadResult:
        """Read every statement from ``reader``. Errors are collected in the result."""
        start = time.perf_counter()
        ctx = InterpreterContext.create(reader, self.config, variables)
        result = ReadResult(ctx=ctx)

        try:
            result.statements = self._run(ctx)
        except FatalError as e:
            result.abandoned = True
            logger.warning("Reading %s abandoned: %s", reader.name, e)
        finally:
            ctx.source.close()

        result.elapsed_ms = round((time.perf_counter() - start) * 1000, 1)
        logger.info(
            "Read %s: %d items, %d errors in %.0fms",
            reader.name,
            len(ctx.scene),
            ctx.errors.count,
            result.elapsed_ms,
        )
        return result

    # ── Statement loop ──

    def _run(self, ctx: InterpreterContext) -> int:
        src = ctx.source
        scan = ctx.scanner
        statements = 0

        while True:
            src.skip_space()
            while src.ch == ";" and not src.endfile:
                src.advance()
                src.skip_space()
            if src.endfile:
                break

            word = scan.read_word()

            if not word:
                if src.ch == "#":
                    src.skip_line()
                    continue
                ctx.errors.report(ErrorCode.COMMAND_EXPECTED)

            if src.ch == ":":
                src.advance()
                if ctx.labels.is_bound(word):
                    ctx.errors.report(ErrorCode.DUPLICATE_LABEL, word)
                else:
                    ctx.labels.add_pending(word)
                continue

            statements += 1
            spec = self.registry.get(scan.word_std)
            if spec is None:
                macro = ctx.macros.get(word)
                if macro is None:
                    ctx.errors.report(ErrorCode.UNKNOWN_COMMAND, word)
                    continue
                if macro.name in src.active_macros:
                    ctx.errors.report(ErrorCode.MACRO_RECURSION)
                self._obey_macro(ctx, macro)
                # Labels before a macro call go to its first drawing command
                continue

            spec.fn(ctx, spec)

            if src.ch != ";":
                ctx.errors.report(ErrorCode.SEMICOLON_EXPECTED)
                continue
            src.pos += 1

            for name in ctx.labels.drain_pending():
                ctx.errors.report(ErrorCode.MISPLACED_LABEL, name, skip=False)

        return statements

    def _obey_macro(self, ctx: InterpreterContext, macro: Macro) -> None:
        """Collect up to ``macro.argcount`` arguments, then switch input to the body."""
        src = ctx.source
        args: list[str] = []

        while (
            not src.endfile
            and src.ch not in ("", ";", "|")
            and len(args) < macro.argcount
        ):
            line = src.line
            quote = src.ch if src.ch in ('"', "'") else ""
            if quote == "'":
                src.pos += 1
            stop = {quote, "\n"} if quote else {" ", "\t", ";", "\n"}

            p = src.pos if quote == "'" else src.pos + 1
            while p < len(line) and line[p] not in stop:
                p += 1
            # Double quotes stay part of the argument
            if quote == '"' and p < len(line) and line[p] == '"':
                p += 1

            args.append(line[src.pos:p])
            src.pos = p
            if quote == "'" and src.ch == "'":
                src.pos += 1
            src.skip_space()

        if src.ch == "|":
            src.advance()
            src.skip_space()

        src.enter_macro(MacroInvocation(macro, args))


def create_reader(config: InterpreterConfig | None = None) -> Reader:
    return Reader(config=config)


def read_document(
    text: str,
    config: InterpreterConfig | None = None,
    *,
    name: str = "<string>",
    variables: VariableStore | None = None,
) -> ReadResult:
    """Read a document held in memory."""
    return create_reader(config).read(LineReader.from_text(text, name), variables)


def read_file(path: str | Path, config: InterpreterConfig | None = None) -> ReadResult:
    """Read a document from disk. Raises OSError if it cannot be opened."""
    return create_reader(config).read(LineReader.open(str(path)))
