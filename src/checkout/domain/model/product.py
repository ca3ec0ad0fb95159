"""Product hierarchy.

Every product belongs to exactly one category, and each category has its
own rule for which sizes are valid. The size is checked once, when the
product is built, so a product with an invalid size can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from checkout.domain.exceptions import InvalidSizeError, ValidationError
from checkout.domain.model.value_objects import Money


class ProductCategory(Enum):
    SHIRT = "shirt"
    SHOES = "shoes"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Size rules
# ---------------------------------------------------------------------------
SHIRT_SIZES = frozenset({"XS", "S", "M", "L", "XL", "2XL"})
SHOE_SIZE_RANGE = (39, 46)
OTHER_SIZE_RANGE = (42, 66)

_NUMERIC_SIZE = re.compile(r"\s*[+-]?\d{1,9}\s*", re.ASCII)


def _parse_numeric_size(size: str) -> int:
    if not isinstance(size, str) or not _NUMERIC_SIZE.fullmatch(size):
        raise InvalidSizeError(f"Invalid size: {size!r} is not a number")
    return int(size)


def _validate_shirt_size(size: str) -> None:
    if size not in SHIRT_SIZES:
        raise InvalidSizeError(
            f"Invalid size: {size!r}, expected one of {', '.join(sorted(SHIRT_SIZES))}"
        )


def _validate_shoe_size(size: str) -> None:
    low, high = SHOE_SIZE_RANGE
    if not low <= _parse_numeric_size(size) <= high:
        raise InvalidSizeError(f"Invalid size: {size!r}, expected {low}-{high}")


def _validate_other_size(size: str) -> None:
    low, high = OTHER_SIZE_RANGE
    value = _parse_numeric_size(size)
    if not low <= value <= high or value % 2 != 0:
        raise InvalidSizeError(
            f"Invalid size: {size!r}, expected an even number {low}-{high}"
        )


_SIZE_RULES = {
    ProductCategory.SHIRT: _validate_shirt_size,
    ProductCategory.SHOES: _validate_shoe_size,
    ProductCategory.OTHER: _validate_other_size,
}


def validate_size(category: ProductCategory, size: str) -> None:
    """Raise InvalidSizeError unless *size* is valid for *category*."""
    _SIZE_RULES[category](size)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Product:
    """A product on sale.

    Not meant to be built directly; use one of the category subclasses,
    or ``create_product()`` when the category is only known at runtime.
    ``price`` may be given as anything ``Money.of`` accepts and is not
    checked for sign.
    """

    category: ClassVar[ProductCategory]

    name: str
    brand: str
    price: Money
    color: str
    size: str

    def __post_init__(self) -> None:
        if type(self) is Product:
            raise TypeError("Product is abstract; use Shirt, Shoes or OtherProduct")
        if not isinstance(self.price, Money):
            object.__setattr__(self, "price", Money.of(self.price, signed=True))
        validate_size(self.category, self.size)


@dataclass(frozen=True)
class Shirt(Product):
    category: ClassVar[ProductCategory] = ProductCategory.SHIRT


@dataclass(frozen=True)
class Shoes(Product):
    category: ClassVar[ProductCategory] = ProductCategory.SHOES


@dataclass(frozen=True)
class OtherProduct(Product):
    category: ClassVar[ProductCategory] = ProductCategory.OTHER


_PRODUCT_TYPES: dict[ProductCategory, type[Product]] = {
    ProductCategory.SHIRT: Shirt,
    ProductCategory.SHOES: Shoes,
    ProductCategory.OTHER: OtherProduct,
}


def create_product(
    category: ProductCategory | str,
    name: str,
    brand: str,
    price: Money | str | float | int | Decimal,
    color: str,
    size: str,
) -> Product:
    """Build the product variant matching *category*."""
    if not isinstance(category, ProductCategory):
        try:
            category = ProductCategory(str(category).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown product category: {category!r}. "
                f"Expected one of {', '.join(c.value for c in ProductCategory)}"
            ) from None
    return _PRODUCT_TYPES[category](name, brand, price, color, size)  # type: ignore[arg-type]
