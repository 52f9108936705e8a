"""Base pages of the console interface."""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass


def clear_screen() -> None:
    """Clear the terminal with the system's clear command."""
    try:
        if os.name == "posix":
            subprocess.run(["clear"], check=False)
        else:
            subprocess.run("cls", shell=True, check=False)
    except OSError:
        pass


class Page(ABC):
    """A screen that does its work when executed."""

    @abstractmethod
    def execute(self) -> None:
        """Show the page and handle its interaction."""

    def render_page_directly(self, page: Page) -> None:
        page.execute()

    def clear_screen(self) -> None:
        clear_screen()


@dataclass
class PageItem:
    """A labelled entry of a menu."""

    label: str
    page: Page


class ClearScreenPage(Page):
    """A page that only clears the terminal."""

    def execute(self) -> None:
        clear_screen()


class ExitPage(Page):
    """The page behind a menu's exit entry; executing it does nothing."""

    def execute(self) -> None:
        return None


class CanLoopPage(Page):
    """A page that can tell a surrounding loop to stop."""

    def __init__(self) -> None:
        self.is_stop = False

    def set_stop(self) -> None:
        self.is_stop = True