"""Pages showing the products that have been removed."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .menu import MenuPage
from .page import Page
from .product import Product
from .renderers import ModernMenuRenderer
from .repository import ProductRepository, get_repository
from .views import BORDER, PausePage, ShowProductPage

IN_ORDER_TITLE = "|                       IN ORDER HISTORY                   |\n"
POST_ORDER_TITLE = "|                       POST ORDER HISTORY                 |\n"
PRE_ORDER_TITLE = "|                       PRE ORDER HISTORY                   |\n"


class _HistoryView(Page):
    def __init__(
        self,
        repository: ProductRepository | None = None,
        stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._repository = repository
        self._stream = stream
        self._output = output

    def _history_tree(self):
        return (self._repository or get_repository()).history()

    def _show(self, title: str, products: Iterable[Product]) -> None:
        self.clear_screen()
        (self._output or sys.stdout).write(BORDER + title + BORDER)
        self.render_page_directly(ShowProductPage(products, self._output))
        self.render_page_directly(PausePage(self._stream, self._output))


class InOrderHistoryPage(_HistoryView):
    """Removed products ordered by name."""

    def execute(self) -> None:
        self._show(IN_ORDER_TITLE, self._history_tree().inorder())


class PostOrderHistoryPage(_HistoryView):
    """Removed products in post-order of the history tree."""

    def execute(self) -> None:
        self._show(POST_ORDER_TITLE, self._history_tree().postorder())


class PreOrderHistoryPage(_HistoryView):
    """Removed products in pre-order of the history tree."""

    def execute(self) -> None:
        self._show(PRE_ORDER_TITLE, self._history_tree().preorder())


class HistoryPage(MenuPage):
    """Menu choosing how to list the removed products."""

    def __init__(
        self,
        repository: ProductRepository | None = None,
        stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        super().__init__(stream, output)
        self._repository = repository

    def configure_menu(self) -> None:
        self.change_renderer(ModernMenuRenderer("HISTORY", self._output))
        views = (self._repository, self._stream, self._output)
        self.add_menu("IN ORDER", InOrderHistoryPage(*views))
        self.add_menu("POST ORDER", PostOrderHistoryPage(*views))
        self.add_menu("PRE ORDER", PreOrderHistoryPage(*views))
        self.add_exit("Kembali")

    def before(self) -> None:
        self.clear_screen()