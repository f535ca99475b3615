from __future__ import annotations

import logging
from typing import Optional, TextIO

from rich.console import Console

from activity_system.activities.currency_exchange import CurrencyExchangeActivity
from activity_system.activities.grade_evaluator import GradeEvaluatorActivity
from activity_system.activities.student_info import StudentInfoActivity
from activity_system.activities.triangle import TriangleActivity
from activity_system.config import Config
from activity_system.exchange.converter import CurrencyConverter
from activity_system.validation.validator import InputValidator

from .config import THEME, MAIN_MENU_TITLE
from .display import create_banner, create_menu

logger = logging.getLogger(__name__)

EXIT_LABEL = "Exit Program"
GOODBYE = "Exiting program... Goodbye!"


class ActivitySystemTUI:
    """Terminal menu routing to the four activities."""

    def __init__(
        self,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        converter: Optional[CurrencyConverter] = None,
    ) -> None:
        self.console = console or Console()
        self.line_width = config.line_width if config else 45
        self.validator = InputValidator.from_console(self.console, stream, error_style=THEME.error)

        profile = config.student_profile if config else None
        self.activities = [
            StudentInfoActivity(self.validator, self.console, profile),
            GradeEvaluatorActivity(self.validator, self.console, self.line_width),
            TriangleActivity(self.validator, self.console, self.line_width),
            CurrencyExchangeActivity(self.validator, self.console, converter, self.line_width),
        ]

    @property
    def menu_items(self):
        return [activity.title for activity in self.activities] + [EXIT_LABEL]

    def run(self) -> None:
        """Main entry point (sync)."""
        self.console.print(create_banner(self.line_width))

        try:
            self._menu_loop()
        except (KeyboardInterrupt, EOFError):
            logger.info("Input closed, leaving main menu")
            self.console.print(f"\n[{THEME.warning}]Interrupted. Goodbye![/]")
            return

        self.console.print(GOODBYE)

    def _menu_loop(self) -> None:
        items = self.menu_items
        while True:
            self.console.print(create_menu(MAIN_MENU_TITLE, items, self.line_width))
            choice = self.validator.read_choice(f"Enter choice (1-{len(items)}): ", 1, len(items))

            if choice == len(items):
                return
            self.activities[choice - 1].run()
