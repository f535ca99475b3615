"""Currency Exchange Calculator: PHP into USD, EUR, JPY and AUD."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from activity_system.exchange.converter import CurrencyConverter
from activity_system.exchange.models import ConversionResult
from activity_system.ui.tui.config import RETURN_TO_MAIN
from activity_system.ui.tui.display import (
    create_conversion_table,
    create_header,
    create_line,
    create_options,
    create_policy_table,
    create_rates_table,
    create_summary_table,
)
from activity_system.ui.tui.renderer import format_percentage
from activity_system.utils.decorators import log_execution
from activity_system.validation.validator import InputValidator

OPTIONS = ("Exchange Currency", "View Rates", "Exit")
EXCHANGE_CHOICE = 1
VIEW_RATES_CHOICE = 2
EXIT_CHOICE = 3


def show_conversion(console: Console, converter: CurrencyConverter, result: ConversionResult,
                    line_width: int = 45) -> None:
    console.print(create_header("Conversion Result"))
    console.print(create_line(line_width))
    console.print(create_summary_table(result))
    console.print(create_line(line_width))
    console.print(create_conversion_table(result, converter.rates))


def show_rates(console: Console, converter: CurrencyConverter, line_width: int = 45) -> None:
    console.print(create_header("Today's Exchange Rates"))
    console.print(create_line(line_width))
    console.print(create_rates_table(converter.rates))
    console.print(create_line(line_width))
    console.print(create_policy_table(converter.policy))
    console.print(create_line(line_width))


def fee_notice(converter: CurrencyConverter) -> str:
    percent = format_percentage(converter.policy.fee_percent)
    return f"A {percent} transaction fee will be charged for the exchange."


class CurrencyExchangeActivity:
    title = "Currency Exchange Calculator"

    def __init__(self, validator: InputValidator, console: Console,
                 converter: Optional[CurrencyConverter] = None, line_width: int = 45):
        self.validator = validator
        self.console = console
        self.converter = converter or CurrencyConverter()
        self.line_width = line_width

    @log_execution("currency_exchange")
    def run(self) -> None:
        while True:
            self.console.print(create_header(self.title))
            self.console.print(create_options("Currency Exchange Options", OPTIONS))
            self.console.print(create_line(self.line_width))

            choice = self.validator.read_choice(f"Enter choice (1-{len(OPTIONS)}): ", 1, len(OPTIONS))
            if choice == EXIT_CHOICE:
                self.console.print("Exiting Currency Exchange Calculator...")
                self.console.print(RETURN_TO_MAIN)
                return

            if choice == EXCHANGE_CHOICE:
                self.exchange()
            elif choice == VIEW_RATES_CHOICE:
                show_rates(self.console, self.converter, self.line_width)
            self.validator.pause()

    def exchange(self) -> Optional[ConversionResult]:
        """Ask for an amount, confirm the fee, then convert and show the result.

        Returns None when the user declines the fee; nothing is converted then.
        """
        policy = self.converter.policy
        amount = self.validator.read_range("Enter amount in PHP (₱): ", policy.min_amount, policy.max_amount)

        self.console.print(fee_notice(self.converter))
        if not self.validator.read_yes_no("Would you like to proceed?"):
            self.console.print("Transaction cancelled.")
            return None

        result = self.converter.convert(amount)
        show_conversion(self.console, self.converter, result, self.line_width)
        return result
