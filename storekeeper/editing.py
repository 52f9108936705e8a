"""Pages that add and remove products."""

from __future__ import annotations

import sys
from typing import TextIO

from .constraints import MustNumericConstraint
from .inputs import InputBuilder
from .page import Page
from .product import Product, _parse_price
from .repository import (
    MustUniqueCodeProductConstraint,
    ProductRepository,
    get_repository,
)
from .views import BORDER, PausePage, ShowProductPage

INSERT_BANNER = (
    "╔════════════════════════════════════╗\n"
    "║                                    ║\n"
    "║            INPUT PRODUK            ║\n"
    "║                                    ║\n"
    "╚════════════════════════════════════╝\n"
)
REMOVE_TITLE = "|                         HALAMAN HAPUS                    |\n"


class _EditPage(Page):
    def __init__(
        self,
        repository: ProductRepository | None = None,
        stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._repository = repository
        self._stream = stream
        self._output = output

    @property
    def _out(self) -> TextIO:
        return self._output or sys.stdout

    def _repo(self) -> ProductRepository:
        return self._repository or get_repository()


class InsertPage(_EditPage):
    """Asks for a new product's code, name and price and stores it."""

    def execute(self) -> None:
        self.clear_screen()
        repository = self._repo()
        self._out.write(INSERT_BANNER)

        builder = InputBuilder(self._stream, self._output)
        code_input = (
            builder.set_prefix("\nInput Code Produk\t: ")
            .set_constraint(MustUniqueCodeProductConstraint(self._repository))
            .build()
        )
        builder.fresh()
        name_input = builder.set_prefix("Input Nama Produk\t: ").build()
        builder.fresh()
        price_input = (
            builder.set_prefix("Input Harga Produk\t: ")
            .set_constraint(MustNumericConstraint())
            .build()
        )

        code_input.execute()
        while not code_input.is_valid():
            self._out.write(f"{code_input.error_bag.errors[0]}\n")
            code_input.execute()

        name_input.execute(True)

        price_input.execute()
        while not price_input.is_valid():
            self._out.write(f"[Error] {price_input.error_bag.errors[0]}")
            price_input.execute()

        price = _parse_price(price_input.raw_input)
        repository.insert(Product(code_input.raw_input, name_input.raw_input, price))

        self._out.write("\n[SUKSES] Produk berhasil ditambahkan\n")
        self.render_page_directly(PausePage(self._stream, self._output))


class RemovePage(_EditPage):
    """Lists the products and removes the one whose code is typed."""

    def execute(self) -> None:
        self.clear_screen()
        self._out.write(BORDER + REMOVE_TITLE + BORDER)

        repository = self._repo()
        self.render_page_directly(ShowProductPage(repository.get_all(), self._output))

        code_input = (
            InputBuilder(self._stream, self._output)
            .set_prefix("Masukkan kode yang akan dihapus > ")
            .build()
        )
        code_input.execute()
        code = code_input.raw_input

        if repository.remove(code):
            self._out.write(f"[SUKSES] Produk dengan kode {code} berhasil dihapus\n")
        else:
            self._out.write(f"[ERROR] Produk dengan kode {code} tidak ditemukan\n")

        self.render_page_directly(PausePage(self._stream, self._output))