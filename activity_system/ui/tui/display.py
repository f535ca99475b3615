from __future__ import annotations

"""Rich display components for the TUI."""

from typing import Sequence

from rich import box
from rich.console import Group
from rich.table import Table
from rich.text import Text

from activity_system.exchange.models import ConversionPolicy, ConversionResult, ExchangeRateTable
from .config import THEME, LINE_WIDTH, BANNER_TITLE
from .renderer import format_amount, format_percentage, format_php, format_php_limit, format_rate


def create_header(title: str) -> Text:
    return Text(f"\n>>> ===== {title} ===== <<<", style=f"{THEME.primary} bold")


def create_line(width: int = LINE_WIDTH) -> Text:
    return Text("-" * width, style=THEME.info)


def create_banner(width: int = LINE_WIDTH) -> Group:
    stars = Text("*" * width, style=THEME.primary)
    return Group(Text(""), stars, Text(f"   {BANNER_TITLE}", style="bold"), stars)


def create_menu(title: str, items: Sequence[str], width: int = LINE_WIDTH) -> Group:
    """Numbered main menu: ``[1] Item`` rows between separator lines."""
    rows = [Text(f"[{i}] {item}") for i, item in enumerate(items, 1)]
    return Group(
        create_line(width),
        Text(f">>> ===== {title} ===== <<<", style="bold"),
        create_line(width),
        *rows,
        create_line(width),
    )


def create_options(title: str, options: Sequence[str]) -> Group:
    """Sub-menu listing in the ``1. Option`` style."""
    rows = [Text(f"{i}. {option}") for i, option in enumerate(options, 1)]
    return Group(Text(f"{title}:"), *rows)


def create_rates_table(rates: ExchangeRateTable) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Currency", style=f"{THEME.primary} bold", width=10)
    table.add_column("Rate", style=THEME.neutral)
    for currency in rates:
        table.add_row(currency.label, f"1 PHP = {format_rate(currency.per_php)} {currency.code}")
    return table


def create_policy_table(policy: ConversionPolicy) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Policy", style=f"{THEME.primary} bold", width=20)
    table.add_column("Value", style=THEME.neutral)
    table.add_row("Transaction Fee", format_percentage(policy.fee_percent))
    table.add_row("Minimum Transaction", format_php_limit(policy.min_amount))
    table.add_row("Maximum Transaction", format_php_limit(policy.max_amount))
    return table


def create_summary_table(result: ConversionResult) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style=f"{THEME.primary} bold", width=18)
    table.add_column("Value", style=THEME.neutral)
    table.add_row("Original Amount", format_php(result.amount))
    table.add_row("Transaction Fee", format_php(result.fee))
    table.add_row("Net Amount", format_php(result.net))
    return table


def create_conversion_table(result: ConversionResult, rates: ExchangeRateTable) -> Table:
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("Currency", style=f"{THEME.primary} bold", width=10)
    table.add_column("Rate (PHP per unit)", justify="right")
    table.add_column("Converted", justify="right", style=THEME.success)
    for currency in rates:
        table.add_row(
            currency.label,
            format_rate(currency.php_per_unit),
            format_amount(result[currency.code], currency.code),
        )
    return table
