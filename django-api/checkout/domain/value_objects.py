"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

MIN_QUANTITY = 1
MAX_QUANTITY = 5

_MINOR_UNITS = Decimal(100)


@dataclass(frozen=True)
class Quantity:
    """Number of tickets in one checkout, bounded to cap exposure."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Quantity must be an integer")
        if not MIN_QUANTITY <= self.value <= MAX_QUANTITY:
            raise ValueError(f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}")


@dataclass(frozen=True)
class Price:
    """Authoritative unit price of an event, in major currency units."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Price cannot be negative")

    def total(self, quantity: Quantity) -> Decimal:
        return self.amount * quantity.value

    def total_minor_units(self, quantity: Quantity) -> int:
        """Charge in minor units, rounded half-up to a whole unit."""
        return int((self.total(quantity) * _MINOR_UNITS).quantize(Decimal(1), rounding=ROUND_HALF_UP))
