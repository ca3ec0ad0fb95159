"""Data Transfer Objects passed between the CLI and the use cases.

Receipt DTOs hold already-formatted amounts so the CLI only lays them out.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: one product as described on the command line."""

    category: str
    name: str
    brand: str
    price: str
    color: str
    size: str


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single product line on the receipt."""

    name: str
    brand: str
    price: str  # as given, e.g. "14.99"
    discount_percentage: int
    discount_amount: str  # two decimals, e.g. "3.00"

    @property
    def has_discount(self) -> bool:
        return self.discount_percentage > 0


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a complete receipt ready to be rendered."""

    purchased_datetime: str
    lines: list[ReceiptLineDTO]
    subtotal: str
    discount_total: str
    has_discount: bool
    total: str
