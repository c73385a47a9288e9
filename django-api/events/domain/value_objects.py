"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds; ``maximum`` of None means open-ended."""

    minimum: Decimal
    maximum: Decimal | None = None

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError("Price range cannot start below zero")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError("Price range maximum is below minimum")

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        """Parse ``"0-20"`` or ``"100+"``. Returns None for "All" or garbage."""
        if not value or value == "All":
            return None
        try:
            if value.endswith("+"):
                return cls(minimum=Decimal(int(value[:-1])))
            if "-" in value:
                low, high = value.split("-", 1)
                return cls(minimum=Decimal(int(low)), maximum=Decimal(int(high)))
        except ValueError:
            return None
        return None

    def contains(self, price: Decimal) -> bool:
        if price < self.minimum:
            return False
        return self.maximum is None or price <= self.maximum
