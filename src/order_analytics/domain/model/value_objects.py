"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from order_analytics.domain.exceptions import ValidationError

Number = int | float | str | Decimal


def to_decimal(value: Number) -> Decimal:
    """Coerce a plain number to Decimal without float artefacts.

    ``Decimal(str(0.1))`` is ``Decimal("0.1")`` whereas ``Decimal(0.1)``
    carries the full binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"Invalid numeric value: {value!r}")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid numeric value: {value!r}") from exc


@dataclass(frozen=True)
class Money:
    """A non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Single currency only.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: Number) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            number = to_decimal(amount)
        except ValidationError as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(number)


@dataclass(frozen=True)
class Quantity:
    """A positive quantity, whole or fractional.

    Guards new line items against zero or negative units.  Whole numbers
    stay ``int`` so they serialize back unchanged.
    """

    value: int | Decimal

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, Decimal)):
            raise ValidationError(
                f"Quantity must be an integer or Decimal, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    @staticmethod
    def of(value: Number) -> Quantity:
        if isinstance(value, int) and not isinstance(value, bool):
            return Quantity(value)
        number = to_decimal(value)
        if number == number.to_integral_value():
            return Quantity(int(number))
        return Quantity(number)
