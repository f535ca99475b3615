from __future__ import annotations

"""TUI configuration and style constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    info: str = "blue"
    neutral: str = "white"


THEME = Theme()

LINE_WIDTH = 45
BANNER_TITLE = "WELCOME TO PROGRAMMING ACTIVITY SYSTEM"
MAIN_MENU_TITLE = "PROGRAMMING ACTIVITY MENU"
RETURN_TO_MAIN = "Successfully Navigated to Main Menu\n"
