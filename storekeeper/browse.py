"""Pages that list products with filtering and sorting options."""

from __future__ import annotations

import sys
from typing import TextIO

from .inputs import InputBuilder
from .menu import MenuPage
from .page import Page
from .product import Product
from .renderers import ModernMenuRenderer
from .repository import ProductRepository, get_repository
from .views import BORDER, ShowProductPage

FILTER_CODE_TITLE = "|                       FILTER CODE PAGE                   |\n"
FILTER_NAME_TITLE = "|                       FILTER NAME PAGE                   |\n"
ASCENDING_TITLE = "LIST PRODUK TERURUT SECARA ASCENDING\n"
DESCENDING_TITLE = "LIST PRODUK TERURUT SECARA DESCENDING\n"


class _ProductView(Page):
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

    def _context(self) -> tuple:
        return self._repository, self._stream, self._output

    def _show_then_offer_options(self, products: list[Product]) -> None:
        self.render_page_directly(ShowProductPage(products, self._output))
        self.render_page_directly(AdvanceOptionShowPage(*self._context()))


class _ProductMenu(MenuPage):
    def __init__(
        self,
        repository: ProductRepository | None = None,
        stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        super().__init__(stream, output)
        self._repository = repository

    def _context(self) -> tuple:
        return self._repository, self._stream, self._output


class ShowPage(_ProductView):
    """Lists every product, then offers filtering and sorting."""

    def execute(self) -> None:
        self.clear_screen()
        self._show_then_offer_options(self._repo().get_all())


class AdvanceOptionShowPage(_ProductMenu):
    """Menu offering filter and sort views of the products."""

    def configure_menu(self) -> None:
        self.change_renderer(ModernMenuRenderer("OPSI LANJUTAN", self._output))
        self.add_menu("Filter", FilterMainPage(*self._context()))
        self.add_menu("Sort", SortOptionPage(*self._context()))
        self.add_exit("Kembali")


class FilterMainPage(_ProductMenu):
    """Menu choosing whether to filter by code or by name."""

    def configure_menu(self) -> None:
        self.change_renderer(ModernMenuRenderer("OPSI FILTER", self._output))
        self.add_menu("BERDASARKAN KODE", FilterCodePage(*self._context()))
        self.add_menu("BERDASARKAN NAMA", FilterNamePage(*self._context()))


class FilterCodePage(_ProductView):
    """Shows the product whose code is typed."""

    def execute(self) -> None:
        code_input = (
            InputBuilder(self._stream, self._output)
            .set_prefix("Masukkan kode yang ingin dicari > ")
            .build()
        )
        code_input.execute()

        self.clear_screen()
        self._out.write(BORDER + FILTER_CODE_TITLE + BORDER)

        product = self._repo().get_by_code(code_input.raw_input)
        self._show_then_offer_options([product] if product is not None else [])


class FilterNamePage(_ProductView):
    """Shows the products whose name starts with the typed text."""

    def execute(self) -> None:
        name_input = (
            InputBuilder(self._stream, self._output)
            .set_prefix("Masukkan rentang nama > ")
            .build()
        )
        name_input.execute(True)

        self.clear_screen()
        self._out.write(BORDER + FILTER_NAME_TITLE + BORDER)

        self._show_then_offer_options(self._repo().get_by_name(name_input.raw_input))


class SortOptionPage(_ProductMenu):
    """Menu choosing the sort direction."""

    def configure_menu(self) -> None:
        self.change_renderer(ModernMenuRenderer("OPSI PENGURUTAN", self._output))
        self.add_menu("ASCENDING", AscendingSortPage(*self._context()))
        self.add_menu("DESCENDING", DescendingSortPage(*self._context()))


class AscendingSortPage(_ProductView):
    """Lists products by name, A to Z."""

    def execute(self) -> None:
        self.clear_screen()
        self._out.write(ASCENDING_TITLE)
        self._show_then_offer_options(self._repo().get_all_sort_name())


class DescendingSortPage(_ProductView):
    """Lists products by name, Z to A."""

    def execute(self) -> None:
        self.clear_screen()
        self._out.write(DESCENDING_TITLE)
        self._show_then_offer_options(self._repo().get_all_sort_name(False))