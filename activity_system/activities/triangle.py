"""Triangle Loop Activity: asterisk triangles of a chosen height."""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.text import Text

from activity_system.ui.tui.config import RETURN_TO_MAIN
from activity_system.ui.tui.display import create_header, create_line, create_options
from activity_system.utils.decorators import log_execution
from activity_system.validation.validator import InputValidator

OPTIONS = ("Right Triangle", "Inverted Triangle", "Both", "Exit")
EXIT_CHOICE = 4
MIN_HEIGHT = 1
MAX_HEIGHT = 20


def right_triangle(height: int) -> List[str]:
    """Rows growing from one star to ``height`` stars."""
    return ["*" * row for row in range(1, height + 1)]


def inverted_triangle(height: int) -> List[str]:
    """Rows shrinking from ``height`` stars to one."""
    return ["*" * row for row in range(height, 0, -1)]


class TriangleActivity:
    title = "Triangle Loop Activity"

    def __init__(self, validator: InputValidator, console: Console, line_width: int = 45):
        self.validator = validator
        self.console = console
        self.line_width = line_width

    @log_execution("triangle")
    def run(self) -> None:
        self.console.print(create_header(self.title))

        while True:
            self.console.print(create_options("Triangle Options", OPTIONS))
            self.console.print(create_line(self.line_width))

            choice = self.validator.read_choice(f"Enter choice (1-{len(OPTIONS)}): ", 1, len(OPTIONS))
            if choice == EXIT_CHOICE:
                self.console.print("Exiting Triangle Activity...")
                self.console.print(RETURN_TO_MAIN)
                return

            height = self.validator.read_choice(
                f"Enter height ({MIN_HEIGHT}-{MAX_HEIGHT}): ", MIN_HEIGHT, MAX_HEIGHT
            )

            self.console.print()
            if choice in (1, 3):
                self._draw("Right Triangle:", right_triangle(height))
            if choice == 3:
                self.console.print()
            if choice in (2, 3):
                self._draw("Inverted Triangle:", inverted_triangle(height))
            self.validator.pause()
            self.console.print()

    def _draw(self, caption: str, rows: List[str]) -> None:
        self.console.print(caption)
        for row in rows:
            self.console.print(Text(row))
