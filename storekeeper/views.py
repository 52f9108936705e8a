"""Reusable pages: a pause prompt and a product table."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .inputs import Input
from .page import Page
from .product import Product

BORDER = "+----------------+-------------------------------+---------+\n"
EMPTY_ROW = "|                      PRODUCT IS EMPTY                    |\n"
HEADER_ROW = "| Code           | Name                          | Price   |\n"


def _pad(text: str, width: int) -> str:
    return text + " " * max(width - len(text.encode("utf-8")), 0)


class PausePage(Page):
    """Waits until the user types any word."""

    def __init__(
        self, stream: TextIO | None = None, output: TextIO | None = None
    ) -> None:
        self._stream = stream
        self._output = output

    def execute(self) -> None:
        pause = Input(self._stream, self._output)
        pause.prefix = "Input any key to continue..."
        pause.execute()


class ShowProductPage(Page):
    """Prints products as a table, or a notice when there are none."""

    def __init__(
        self, products: Iterable[Product], output: TextIO | None = None
    ) -> None:
        self.products = list(products)
        self._output = output

    def execute(self) -> None:
        output = self._output or sys.stdout
        if not self.products:
            output.write(BORDER + EMPTY_ROW + BORDER)
            return
        rows = "".join(
            f"| {_pad(product.code, 15)}| {_pad(product.name, 30)}"
            f"| {_pad(f'{product.price:.2f}', 8)}|\n"
            for product in self.products
        )
        output.write(BORDER + HEADER_ROW + BORDER + rows + BORDER)