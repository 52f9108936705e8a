"""Prompted console input checked against a chain of constraints."""

from __future__ import annotations

import sys
from typing import TextIO

from .constraints import Constraint, ErrorBag

_WHITESPACE = " \t\n\v\f\r"


class _Reader:
    """Reads tokens and lines from a text stream with one character of lookahead."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _next_char(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def read_token(self) -> str:
        char = self._next_char()
        while char and char in _WHITESPACE:
            char = self._next_char()
        if not char:
            raise EOFError("no input left")
        chars = []
        while char and char not in _WHITESPACE:
            chars.append(char)
            char = self._next_char()
        if char:
            self._pending = char
        return "".join(chars)

    def ignore(self) -> None:
        self._next_char()

    def read_line(self) -> str:
        char = self._next_char()
        if not char:
            raise EOFError("no input left")
        chars = []
        while char and char != "\n":
            chars.append(char)
            char = self._next_char()
        return "".join(chars)


_readers: dict[int, tuple[TextIO, _Reader]] = {}


def _reader_for(stream: TextIO) -> _Reader:
    entry = _readers.get(id(stream))
    if entry is None or entry[0] is not stream:
        entry = (stream, _Reader(stream))
        _readers[id(stream)] = entry
    return entry[1]


class Input:
    """One prompted value read from the console and validated."""

    def __init__(
        self, stream: TextIO | None = None, output: TextIO | None = None
    ) -> None:
        self.constraint: Constraint | None = None
        self.error_bag: ErrorBag | None = None
        self.raw_input = ""
        self.prefix = ""
        self._stream = stream
        self._output = output

    def execute(self, is_line: bool = False) -> None:
        """Prompt, read a word (or the rest of a line) and check it.

        Raises EOFError when the input is exhausted.
        """
        output = self._output or sys.stdout
        if self.prefix:
            output.write(self.prefix)
            output.flush()

        reader = _reader_for(self._stream or sys.stdin)
        if is_line:
            reader.ignore()
            self.raw_input = reader.read_line()
        else:
            self.raw_input = reader.read_token()

        if self.constraint is None:
            return

        error_bag = ErrorBag()
        self.constraint.check(self.raw_input, error_bag)
        self.error_bag = error_bag

    def is_valid(self) -> bool:
        return self.error_bag is None or not self.error_bag.is_any()


class InputBuilder:
    """Builds an Input step by step, chaining its constraints in order."""

    def __init__(
        self, stream: TextIO | None = None, output: TextIO | None = None
    ) -> None:
        self._stream = stream
        self._output = output
        self._result: Input | None = None
        self._last_constraint: Constraint | None = None

    def _instance(self) -> Input:
        if self._result is None:
            self._result = Input(self._stream, self._output)
        return self._result

    def set_prefix(self, prefix: str) -> InputBuilder:
        self._instance().prefix = prefix
        return self

    def set_constraint(self, constraint: Constraint) -> InputBuilder:
        if self._last_constraint is None:
            self._instance().constraint = constraint
        else:
            self._last_constraint.set_next(constraint)
        self._last_constraint = constraint
        return self

    def fresh(self) -> None:
        """Start a new Input on the next call."""
        self._result = None
        self._last_constraint = None

    def build(self) -> Input | None:
        return self._result