from __future__ import annotations

"""Formatting helpers for the TUI."""

from typing import Optional


def format_php(amount: Optional[float]) -> str:
    if amount is None:
        return "—"
    return f"₱{amount:,.2f}"


def format_amount(amount: Optional[float], currency: Optional[str] = None) -> str:
    if amount is None:
        return "—"
    if not currency:
        return f"{amount:,.2f}"
    return f"{amount:,.2f} {currency}"


def format_rate(rate: Optional[float]) -> str:
    if rate is None:
        return "—"
    return f"{rate:.4f}"


def format_percentage(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "—"
    return f"{float(value):.{decimals}f}%"


def format_php_limit(amount: float) -> str:
    """Whole-peso limits such as ₱100,000."""
    return f"₱{amount:,.0f}"
