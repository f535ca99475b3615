"""PHP conversion with fixed rates and a flat fee."""

from activity_system.exchange.converter import DEFAULT_POLICY, DEFAULT_RATE_TABLE, CurrencyConverter
from activity_system.exchange.models import ConversionPolicy, ConversionResult, Currency, ExchangeRateTable

__all__ = [
    "CurrencyConverter",
    "ConversionPolicy",
    "ConversionResult",
    "Currency",
    "ExchangeRateTable",
    "DEFAULT_POLICY",
    "DEFAULT_RATE_TABLE",
]
