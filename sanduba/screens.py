"""Text screens shown by the application, read from files on disk."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class Screen(Enum):
    """A screen and the file that holds its art."""

    LOGO = "logoscreen.txt"
    LOGIN = "loginscreen.txt"
    REGISTRATION = "cadastroscreen.txt"
    CART = "carrinhoscreen.txt"
    STORAGE = "storagescreen.txt"
    ADMIN = "adminscreen.txt"
    CONFIG = "configscreen.txt"
    FINANCE = "financeiroscreen.txt"

    @property
    def filename(self) -> str:
        return self.value


def read_screen(screen: Screen, directory=".") -> str:
    """Return the text of a screen; raise FileNotFoundError if its file is absent."""
    return (Path(directory) / screen.filename).read_text(encoding="utf-8")


def show_screen(screen: Screen, directory=".", out: TextIO | None = None) -> None:
    """Write a screen to ``out`` (standard output by default)."""
    text = read_screen(screen, directory)
    (out if out is not None else sys.stdout).write(text)