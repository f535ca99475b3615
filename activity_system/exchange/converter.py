"""PHP to foreign currency conversion with a flat transaction fee."""
from __future__ import annotations

import math
from numbers import Real
from typing import Dict, Optional

from activity_system.exchange.models import (
    ConversionPolicy,
    ConversionResult,
    Currency,
    ExchangeRateTable,
)
from activity_system.utils.errors import ContractViolationError


DEFAULT_RATE_TABLE = ExchangeRateTable(
    currencies=(
        Currency("USD", "US Dollar", "$", 58.2554),
        Currency("EUR", "Euro", "€", 67.6375),
        Currency("JPY", "Japanese Yen", "¥", 0.3818),
        Currency("AUD", "Australian Dollar", "A$", 38.3071),
    )
)

DEFAULT_POLICY = ConversionPolicy()


class CurrencyConverter:
    """Converts a PHP amount into every currency of a rate table.

    The converter is stateless apart from the immutable table and policy it
    is given, so equal inputs always produce equal results.
    """

    def __init__(
        self,
        rates: Optional[ExchangeRateTable] = None,
        policy: Optional[ConversionPolicy] = None,
    ):
        self.rates = rates or DEFAULT_RATE_TABLE
        self.policy = policy or DEFAULT_POLICY

    def convert(self, amount: float) -> ConversionResult:
        """Apply the fee, then divide the net amount by each PHP rate.

        The amount window is the caller's job (see ``ConversionPolicy``);
        only negative, non-finite or non-numeric amounts are refused here.

        Raises:
            ContractViolationError: If ``amount`` is not a finite, non-negative number
        """
        if isinstance(amount, bool) or not isinstance(amount, Real):
            raise ContractViolationError(f"Amount must be a real number, got {amount!r}")
        if not math.isfinite(amount) or amount < 0:
            raise ContractViolationError(f"Amount must be finite and non-negative, got {amount}")

        amount = float(amount)
        fee = amount * self.policy.fee_rate
        net = amount - fee

        converted: Dict[str, float] = {
            currency.code: net / currency.php_per_unit for currency in self.rates
        }
        return ConversionResult(amount=amount, fee=fee, net=net, converted=converted)

    def per_php_rates(self) -> Dict[str, float]:
        """How much of each currency 1 PHP buys."""
        return {currency.code: currency.per_php for currency in self.rates}
