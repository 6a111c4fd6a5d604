"""
RoundingPolicy — политика округления денежной суммы

Два вида политики:
- INCREMENT: округление к кратному rounding_increment (например, 0.05)
- MAGNITUDE: округление по числу знаков после запятой (increment не задан)

Increment хранится только как Decimal: значение из float переводится
через строковое представление, без двоичной погрешности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fraction digits >= 0, maximum >= minimum
2. INCREMENT ⇔ rounding_increment > 0
3. MAGNITUDE ⇔ rounding_increment is None
"""

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.currency import ROUNDING_MODES


class RoundingKind(str, Enum):
    """Вид политики округления"""

    INCREMENT = "INCREMENT"
    MAGNITUDE = "MAGNITUDE"


class RoundingPolicy(BaseModel):
    """Политика округления: fraction digits + increment или magnitude."""

    kind: RoundingKind = Field(..., description="Вид политики")
    minimum_fraction_digits: int = Field(..., ge=0, description="Минимум знаков после запятой")
    maximum_fraction_digits: int = Field(..., ge=0, description="Максимум знаков после запятой")
    rounding_increment: Optional[Decimal] = Field(None, description="Шаг округления (INCREMENT)")
    rounding_mode: str = Field(ROUND_HALF_EVEN, description="Режим округления decimal")

    model_config = {"frozen": True}

    @field_validator("rounding_mode")
    @classmethod
    def validate_rounding_mode(cls, v: str) -> str:
        if v not in ROUNDING_MODES:
            raise ValueError(f"Unsupported rounding mode: {v}")
        return v

    @model_validator(mode="after")
    def validate_consistency(self) -> "RoundingPolicy":
        """Согласованность kind, increment и fraction digits"""
        if self.maximum_fraction_digits < self.minimum_fraction_digits:
            raise ValueError(
                f"maximum_fraction_digits {self.maximum_fraction_digits} must be >= "
                f"minimum_fraction_digits {self.minimum_fraction_digits}"
            )
        if self.kind == RoundingKind.INCREMENT:
            if self.rounding_increment is None or self.rounding_increment <= 0:
                raise ValueError("INCREMENT policy requires a positive rounding_increment")
        elif self.rounding_increment is not None:
            raise ValueError("MAGNITUDE policy must not carry a rounding_increment")
        return self

    @classmethod
    def increment(
        cls,
        rounding_increment: Decimal,
        fraction_digits: int,
        rounding_mode: str = ROUND_HALF_EVEN,
        minimum_fraction_digits: Optional[int] = None,
    ) -> "RoundingPolicy":
        """
        Политика округления к кратному increment.

        Args:
            rounding_increment: Шаг округления (> 0)
            fraction_digits: Максимум (и, если не задан minimum, минимум) знаков
            rounding_mode: Режим округления decimal
            minimum_fraction_digits: Минимум знаков после запятой
        """
        return cls(
            kind=RoundingKind.INCREMENT,
            minimum_fraction_digits=(
                fraction_digits if minimum_fraction_digits is None else minimum_fraction_digits
            ),
            maximum_fraction_digits=fraction_digits,
            rounding_increment=rounding_increment,
            rounding_mode=rounding_mode,
        )

    @classmethod
    def magnitude(
        cls,
        fraction_digits: int,
        maximum_fraction_digits: Optional[int] = None,
        rounding_mode: str = ROUND_HALF_EVEN,
    ) -> "RoundingPolicy":
        """
        Политика округления по разряду.

        Args:
            fraction_digits: Минимум (и, если не задан maximum, максимум) знаков
            maximum_fraction_digits: Максимум знаков после запятой
            rounding_mode: Режим округления decimal
        """
        return cls(
            kind=RoundingKind.MAGNITUDE,
            minimum_fraction_digits=fraction_digits,
            maximum_fraction_digits=(
                fraction_digits if maximum_fraction_digits is None else maximum_fraction_digits
            ),
            rounding_mode=rounding_mode,
        )

    @property
    def fraction_digits(self) -> int:
        return self.maximum_fraction_digits

    def apply(self, value: Decimal) -> Decimal:
        """
        Округление значения по политике.

        Результат округляется до maximum_fraction_digits, затем хвостовые
        нули отбрасываются, но не ниже minimum_fraction_digits.
        Точность контекста расширяется под величину значения, режимы
        traps текущего контекста сохраняются.

        Examples:
            >>> RoundingPolicy.increment(Decimal("0.05"), 2).apply(Decimal("1.03"))
            Decimal('1.05')
            >>> RoundingPolicy.magnitude(0).apply(Decimal("2.5"))
            Decimal('2')
            >>> RoundingPolicy.magnitude(0, maximum_fraction_digits=3).apply(Decimal("2.5"))
            Decimal('2.5')
        """
        quantum = Decimal(1).scaleb(-self.maximum_fraction_digits)
        digits = self.maximum_fraction_digits
        if self.rounding_increment is not None:
            digits = max(digits, -self.rounding_increment.adjusted())

        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + digits + 3)
            if self.kind == RoundingKind.INCREMENT:
                steps = (value / self.rounding_increment).quantize(
                    Decimal(1), rounding=self.rounding_mode
                )
                value = steps * self.rounding_increment
            result = value.quantize(quantum, rounding=self.rounding_mode)

            if self.minimum_fraction_digits < self.maximum_fraction_digits:
                trimmed = result.normalize()
                if -trimmed.as_tuple().exponent < self.minimum_fraction_digits:
                    trimmed = result.quantize(Decimal(1).scaleb(-self.minimum_fraction_digits))
                result = trimmed
        return result
