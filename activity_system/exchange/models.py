"""
Data models for peso conversions.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

from activity_system.utils.errors import ConfigurationError


@dataclass(frozen=True)
class Currency:
    """
    A foreign currency priced in Philippine pesos.
    """
    code: str  # e.g., "USD"
    name: str
    symbol: str  # e.g., "$"
    php_per_unit: float  # PHP needed to buy 1 unit of this currency

    def __post_init__(self):
        if not self.php_per_unit > 0:
            raise ConfigurationError(
                f"Rate for {self.code} must be positive, got {self.php_per_unit}"
            )

    @property
    def per_php(self) -> float:
        """Units of this currency bought by 1 PHP."""
        return 1.0 / self.php_per_unit

    @property
    def label(self) -> str:
        """Returns code with symbol, e.g. 'USD ($)'"""
        return f"{self.code} ({self.symbol})"


@dataclass(frozen=True)
class ExchangeRateTable:
    """
    Fixed PHP rates keyed by currency code, in display order.
    """
    currencies: Tuple[Currency, ...]

    def __post_init__(self):
        codes = [c.code for c in self.currencies]
        if not codes:
            raise ConfigurationError("Exchange rate table is empty")
        if len(set(codes)) != len(codes):
            raise ConfigurationError(f"Duplicate currency codes: {codes}")

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(c.code for c in self.currencies)

    @property
    def rates(self) -> Mapping[str, float]:
        """Code -> PHP per unit."""
        return MappingProxyType({c.code: c.php_per_unit for c in self.currencies})

    def __getitem__(self, code: str) -> Currency:
        for currency in self.currencies:
            if currency.code == code:
                return currency
        raise KeyError(code)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self.currencies)

    def __len__(self) -> int:
        return len(self.currencies)


@dataclass(frozen=True)
class ConversionPolicy:
    """
    Transaction fee and the accepted amount window, in PHP.
    """
    fee_rate: float = 0.05
    min_amount: float = 100.0
    max_amount: float = 100_000.0

    def __post_init__(self):
        if not 0 <= self.fee_rate < 1:
            raise ConfigurationError(f"Fee rate must be in [0, 1), got {self.fee_rate}")
        if not 0 < self.min_amount <= self.max_amount:
            raise ConfigurationError(
                f"Invalid amount bounds: {self.min_amount} - {self.max_amount}"
            )

    @property
    def fee_percent(self) -> float:
        return self.fee_rate * 100


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of converting one PHP amount.

    ``converted`` is read-only and keeps the rate table's currency order.
    """
    amount: float  # gross PHP entered
    fee: float
    net: float  # amount - fee, the basis of every conversion
    converted: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "converted", MappingProxyType(dict(self.converted)))

    def __getitem__(self, code: str) -> float:
        return self.converted[code]

    def __hash__(self) -> int:
        return hash((self.amount, self.fee, self.net, tuple(self.converted.items())))

    def __str__(self) -> str:
        parts = ", ".join(f"{code}={value:.2f}" for code, value in self.converted.items())
        return f"PHP {self.amount:.2f} - fee {self.fee:.2f} = {self.net:.2f} ({parts})"
