"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal, Inexact, InvalidOperation, Overflow, localcontext

from ims.domain.exceptions import ValidationError

# Sums and products are computed exactly; anything that would need rounding
# or overflow the exponent range is reported instead of silently adjusted.
_EXACT = Context(prec=60, traps=[Inexact, Overflow, InvalidOperation])


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that totals such as ``10 * 2.50 + 5 * 9.99`` come out
    as exactly ``74.95``.
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

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(_exact(lambda: self.amount + other.amount))

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(_exact(lambda: self.amount * factor))

    # --- Display --------------------------------------------------------------

    def format(self, symbol: str = "$") -> str:
        """Render with a currency symbol and thousands separators."""
        return f"{symbol}{self.amount:,.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount).strip())
            if value.is_zero():
                value = abs(value)  # "-0" parses as negative zero
            return Money(value)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))


def _exact(operation) -> Decimal:
    try:
        with localcontext(_EXACT):
            return operation()
    except ArithmeticError as exc:
        raise ValidationError("Money amount out of range") from exc
