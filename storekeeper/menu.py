"""Menu pages that read a numbered choice and run the chosen page."""

from __future__ import annotations

import sys
from abc import abstractmethod
from typing import TextIO

from .constraints import MustInRangeConstraint, MustIntegerConstraint
from .inputs import InputBuilder
from .page import CanLoopPage, ExitPage, Page, PageItem
from .renderers import BasicMenuRenderer, MenuRenderer

MENU_PROMPT = "Masukkan input anda > "


class MenuPage(Page):
    """A page listing entries and running the one the user picks.

    When an exit entry has been added, picking the last entry stops the menu
    instead of running a page.
    """

    def __init__(
        self, stream: TextIO | None = None, output: TextIO | None = None
    ) -> None:
        self.is_stop = False
        self.exit_label = ""
        self.page_items: list[PageItem] = []
        self.renderer: MenuRenderer = BasicMenuRenderer(output)
        self._configured = False
        self._stream = stream
        self._output = output

    @property
    def _out(self) -> TextIO:
        return self._output or sys.stdout

    def change_renderer(self, renderer: MenuRenderer) -> None:
        self.renderer = renderer

    def add_menu(self, label: str, page: Page) -> None:
        self.page_items.append(PageItem(label, page))

    def add_exit(self, label: str) -> None:
        self.exit_label = label
        self.add_menu(label, ExitPage())

    @abstractmethod
    def configure_menu(self) -> None:
        """Add the menu's entries; called once, before the first run."""

    def before(self) -> None:
        """Run before the menu is drawn."""

    def after(self) -> None:
        """Run after the chosen entry has been handled."""

    def set_stop(self) -> None:
        self.is_stop = True

    def execute(self) -> None:
        if not self._configured:
            self.configure_menu()
            self._configured = True

        self.before()
        self.renderer.render(self.page_items)

        count = len(self.page_items)
        choice = (
            InputBuilder(self._stream, self._output)
            .set_prefix(MENU_PROMPT)
            .set_constraint(MustIntegerConstraint())
            .set_constraint(MustInRangeConstraint(1, count))
            .build()
        )
        choice.execute()
        while not choice.is_valid():
            self._out.write(f"{choice.error_bag.errors[0]}\n")
            choice.execute()

        selected = int(choice.raw_input)
        if selected == count and self.exit_label:
            self.set_stop()
        else:
            self.page_items[selected - 1].page.execute()

        self.after()


class LoopPage(Page):
    """Runs a menu over and over until it stops."""

    def __init__(self, page: MenuPage) -> None:
        self.page = page

    def execute(self) -> None:
        while not self.page.is_stop:
            self.page.execute()


class MenuLoopPage(MenuPage, CanLoopPage):
    """A menu page that can also be stopped as a loop page."""

    def execute(self) -> None:
        MenuPage.execute(self)