from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from activity_system.activities.currency_exchange import fee_notice, show_conversion, show_rates
from activity_system.config import load_config
from activity_system.exchange.converter import CurrencyConverter
from activity_system.ui.tui.app import ActivitySystemTUI
from activity_system.ui.tui.config import THEME
from activity_system.utils.errors import ConfigurationError, ValidationError
from activity_system.validation.results import check_range, parse_float
from activity_system.validation.validator import InputValidator


app = typer.Typer(add_completion=False, help="Programming Activity System")


def _load(config_path: Optional[str]):
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        typer.secho(f"[ERROR] {e}", fg=typer.colors.RED)
        raise typer.Exit(code=2)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start the interactive menu when no command is given."""
    if ctx.invoked_subcommand is None:
        menu(config=None)


@app.command("menu")
def menu(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a YAML config file"),
):
    """Run the interactive activity menu."""

    cfg = _load(config)
    ActivitySystemTUI(cfg).run()


@app.command("convert", context_settings={"ignore_unknown_options": True})
def convert(
    amount: str = typer.Argument(..., help="Amount in PHP, between the minimum and maximum transaction"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept the transaction fee without asking"),
):
    """Convert a PHP amount into every supported currency."""

    cfg = _load(None)
    console = Console()
    converter = CurrencyConverter()
    policy = converter.policy

    try:
        value = parse_float(amount.strip()).unwrap()
        value = check_range(value, policy.min_amount, policy.max_amount).unwrap()
    except ValidationError as e:
        typer.secho(f"[ERROR] {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not yes:
        console.print(fee_notice(converter))
        validator = InputValidator.from_console(console, error_style=THEME.error)
        try:
            proceed = validator.read_yes_no("Would you like to proceed?")
        except EOFError:
            proceed = False
        if not proceed:
            typer.echo("Transaction cancelled.")
            raise typer.Exit(code=0)

    show_conversion(console, converter, converter.convert(value), cfg.line_width)


@app.command("rates")
def rates():
    """Show today's exchange rates and transaction limits."""

    cfg = _load(None)
    show_rates(Console(), CurrencyConverter(), cfg.line_width)


if __name__ == "__main__":
    app()
