"""Value Objects shared across the domain.

Immutable, compared by value, and validated on creation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from checkout.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    The Decimal amount keeps the precision it was created with, so
    ``Money.of("15").plain`` is ``"15"``. Only ``percent()`` rounds.

    Amounts are non-negative unless ``signed=True``. Product prices are
    signed, and so is anything computed from a signed amount.
    """

    amount: Decimal
    currency: str = "USD"
    signed: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if not self.signed and self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return self._derive(self.amount + other.amount, other)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0") and not (self.signed or other.signed):
            raise ValidationError("Money subtraction would result in a negative amount")
        return self._derive(result, other)

    def percent(self, percentage: int) -> Money:
        """Return *percentage* percent of this amount, rounded to the cent."""
        raw = self.amount * Decimal(percentage) / Decimal(100)
        return self._derive(raw.quantize(CENT, rounding=ROUND_HALF_EVEN))

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @property
    def plain(self) -> str:
        """The amount exactly as held, e.g. ``14.99`` or ``15``."""
        return str(self.amount)

    @property
    def fixed(self) -> str:
        """The amount with exactly two decimals, e.g. ``15.00``."""
        return f"{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    def _derive(self, amount: Decimal, other: Money | None = None) -> Money:
        signed = self.signed or (other is not None and other.signed)
        return Money(amount, self.currency, signed=signed)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, *, signed: bool = False) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), signed=signed)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(*, signed: bool = False) -> Money:
        return Money(Decimal("0"), signed=signed)
