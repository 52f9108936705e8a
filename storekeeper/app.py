"""The store's main menu and the command that starts it."""

from __future__ import annotations

import argparse
from typing import TextIO

from .browse import ShowPage
from .editing import InsertPage, RemovePage
from .history import HistoryPage
from .menu import LoopPage, MenuPage
from .renderers import ModernMenuRenderer
from .repository import ProductRepository

MAIN_TITLE = "MENU MANAJEMEN TOKO"


class MainPage(MenuPage):
    """Top-level menu: add, list, remove products and view history."""

    def __init__(
        self,
        repository: ProductRepository | None = None,
        stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        super().__init__(stream, output)
        self._repository = repository

    def configure_menu(self) -> None:
        context = (self._repository, self._stream, self._output)
        self.add_menu("Input Produk", InsertPage(*context))
        self.add_menu("Tampil Produk", ShowPage(*context))
        self.add_menu("Hapus Produk", RemovePage(*context))
        self.add_menu("History", HistoryPage(*context))
        self.add_exit("exit")

    def before(self) -> None:
        self.clear_screen()


def main(argv: list[str] | None = None) -> int:
    """Run the store menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(
        prog="storekeeper",
        description="Manage store products kept in data.csv and remove.csv.",
    )
    parser.parse_args(argv)

    main_page = MainPage()
    main_page.change_renderer(ModernMenuRenderer(MAIN_TITLE))
    try:
        LoopPage(main_page).execute()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())