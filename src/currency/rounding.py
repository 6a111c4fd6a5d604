"""
Rounding Policy Resolver — округление по валюте и usage

Алгоритм:
1. Активная валюта: явная из конфигурации, иначе fallback-валюта локали
2. Валюты нет → default policy (по generic полям конфигурации)
3. (fraction_digits, increment) берутся одним запросом для валюты и usage
4. increment > 0 → INCREMENT policy (increment как точный Decimal)
5. increment == 0 → MAGNITUDE policy

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fraction digits и increment всегда из одной записи (валюта + usage)
2. Float increment переводится в Decimal через str(), без двоичной погрешности
"""

import logging
from decimal import Decimal
from typing import Callable, Optional, Union

from src.core.domain import CurrencyConfig, LocaleSymbols, RoundingPolicy
from src.locale_data import LocaleDataProvider

logger = logging.getLogger(__name__)

DefaultPolicyFactory = Callable[[CurrencyConfig], RoundingPolicy]


def to_decimal(value: Union[Decimal, float, int, str]) -> Decimal:
    """
    Точный Decimal из канонического строкового представления.

    Examples:
        >>> to_decimal(0.05)
        Decimal('0.05')
        >>> to_decimal("0.10")
        Decimal('0.10')
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def default_rounding_policy(config: CurrencyConfig) -> RoundingPolicy:
    """
    Generic policy числового форматирования (без валютного контекста).

    rounding_increment > 0 → INCREMENT, иначе MAGNITUDE; в обоих случаях
    с границами fraction digits конфигурации.
    """
    increment = config.rounding_increment
    if increment is not None and increment > 0:
        return RoundingPolicy.increment(
            increment,
            config.maximum_fraction_digits,
            rounding_mode=config.rounding_mode,
            minimum_fraction_digits=config.minimum_fraction_digits,
        )
    return RoundingPolicy.magnitude(
        config.minimum_fraction_digits,
        maximum_fraction_digits=config.maximum_fraction_digits,
        rounding_mode=config.rounding_mode,
    )


class CurrencyRoundingResolver:
    """Разрешение RoundingPolicy для валюты и usage."""

    def __init__(
        self,
        data: LocaleDataProvider,
        default_policy: Optional[DefaultPolicyFactory] = None,
    ):
        """
        Args:
            data: источник данных о валютах
            default_policy: policy при отсутствии валюты (default: default_rounding_policy)
        """
        self.data = data
        self.default_policy = default_policy or default_rounding_policy

    def resolve(self, symbols: LocaleSymbols, config: CurrencyConfig) -> RoundingPolicy:
        """RoundingPolicy для конфигурации; без валюты — default policy."""
        currency = config.currency or symbols.currency
        if currency is None:
            # Placeholder валюты есть, но валютного контекста нет
            logger.debug("No currency in %s, using default rounding policy", symbols.locale)
            return self.default_policy(config)

        fraction_digits, increment = self.data.get_currency_rounding(
            currency, config.currency_usage
        )
        increment = to_decimal(increment)

        if increment > 0:
            return RoundingPolicy.increment(
                increment, fraction_digits, rounding_mode=config.rounding_mode
            )
        return RoundingPolicy.magnitude(fraction_digits, rounding_mode=config.rounding_mode)
