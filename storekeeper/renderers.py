"""Renderers that draw menus and read menu choices."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

from .constraints import MustInRangeConstraint, MustIntegerConstraint
from .inputs import Input, InputBuilder
from .page import PageItem


class MenuRenderer(ABC):
    """Draws the entries of a menu."""

    @abstractmethod
    def render(self, page_items: Sequence[PageItem]) -> None:
        """Draw the menu entries."""


class BasicMenuRenderer(MenuRenderer):
    """Draws a plain numbered list."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output

    def render(self, page_items: Sequence[PageItem]) -> None:
        output = self._output or sys.stdout
        for number, item in enumerate(page_items, start=1):
            output.write(f"{number}. {item.label}\n")


def _width(text: str) -> int:
    return len(text.encode("utf-8"))


def _fill(size: int, fill: str, left: str = "", right: str = "") -> str:
    if left:
        size -= 2
    return f"{left}{fill * max(size, 0)}{right}"


def _center(size: int, text: str, border: str = "") -> str:
    if border:
        size -= 2
    left_space = size // 2 - _width(text) // 2
    right_space = size - max(left_space, 0) - _width(text)
    return f"{border}{' ' * max(left_space, 0)}{text}{' ' * max(right_space, 0)}{border}"


def _two_columns(size: int, left_size: int, left: str, right: str, border: str) -> str:
    left_pad = max(left_size - _width(left) - 1, 0)
    right_size = size - 2 - left_size
    right_pad = max(right_size - 2 - _width(right), 0)
    return f"{border} {left}{' ' * left_pad}{border} {right}{' ' * right_pad}{border}"


class ModernMenuRenderer(MenuRenderer):
    """Draws a boxed menu with a centred header and numbered rows."""

    size = 50
    number_width = 5

    def __init__(self, header: str, output: TextIO | None = None) -> None:
        self.header = header
        self._output = output

    def render(self, page_items: Sequence[PageItem]) -> None:
        size, number_width = self.size, self.number_width
        lines = [
            _fill(size, "═", "╔", "╗"),
            _center(size, self.header, "║"),
            _fill(size, "═", "╠", "╣"),
            _two_columns(size, number_width, "No", "Pilihan Menu", "║"),
            _fill(size, "═", "╠", "╣"),
        ]
        lines.extend(
            _two_columns(size, number_width, str(number), item.label, "║")
            for number, item in enumerate(page_items, start=1)
        )
        lines.append(_fill(size, "═", "╚", "╝"))
        output = self._output or sys.stdout
        output.write("".join(f"{line}\n" for line in lines))


class InputMenuRenderer(ABC):
    """Reads the choice of a menu entry."""

    @abstractmethod
    def render(self, total_page: int) -> Input:
        """Read a valid menu choice."""


class BasicInputMenuRenderer(InputMenuRenderer):
    """Asks for an entry number until one in range is given."""

    def __init__(
        self, stream: TextIO | None = None, output: TextIO | None = None
    ) -> None:
        self.label = "Masukkan input > "
        self._stream = stream
        self._output = output

    def change_label(self, label: str) -> None:
        self.label = label

    def render(self, total_page: int) -> Input:
        choice = (
            InputBuilder(self._stream, self._output)
            .set_prefix("Masukkan input anda > ")
            .set_constraint(MustIntegerConstraint())
            .set_constraint(MustInRangeConstraint(1, total_page))
            .build()
        )
        choice.execute()
        while not choice.is_valid():
            output = self._output or sys.stdout
            output.write(f"{choice.error_bag.errors[0]}\n")
            choice.execute()
        return choice