"""Demonstration carts printed by ``checkout demo``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from checkout.domain.model.cart import Cart
from checkout.domain.model.cashier import Cashier
from checkout.domain.model.product import OtherProduct, Shirt, Shoes

TUESDAY_MORNING = "2022-11-15 7:00:00"


@dataclass(frozen=True)
class Scenario:
    title: str
    cashier: Cashier


def _cart(*products) -> Cart:
    cart = Cart()
    for product in products:
        cart.add_to_cart(product)
    return cart


def demo_scenarios(clock: Callable[[], datetime]) -> list[Scenario]:
    """Build the four demonstration receipts.

    1. Five items bought now: the quantity discount applies to all.
    2. Two shirts on a Tuesday: shirt discount only.
    3. Five items on a Tuesday: shoes keep 25%, the rest get 20%.
    4. Two items bought now: no discount unless it happens to be Tuesday.
    """
    example_1 = _cart(
        Shirt("Blue Cotton Shirt", "BrandS", "14.99", "blue", "M"),
        Shirt("White Cotton Shirt", "BrandS", "15.99", "white", "M"),
        OtherProduct("Black Cotton Trousers", "BrandT", "29.99", "black", "50"),
        Shoes("Black Leather Shoes", "BrandS", "59.99", "black", "43"),
        OtherProduct("Black Cotton Suit Jacket", "BrandJ", "99.99", "black", "50"),
    )
    example_2 = _cart(
        Shirt("Black Silk Shirt", "BrandS", "29.99", "black", "L"),
        Shirt("White Silk Shirt", "BrandS", "29.99", "white", "L"),
    )
    example_3 = _cart(
        OtherProduct("Red Linen Trousers", "BrandT", "49.99", "red", "56"),
        Shoes("Red Suede Shoes", "BrandS", "59.99", "red", "44"),
        Shoes("Black Suede Shoes", "BrandS", "59.99", "black", "44"),
        OtherProduct("Red Linen Suit Jacket", "BrandJ", "99.99", "red", "56"),
        Shirt("White Linen Shirt", "BrandS", "29.99", "white", "L"),
    )
    example_4 = _cart(
        OtherProduct("Black Cotton Trousers", "BrandT", "29.99", "black", "42"),
        OtherProduct("Black Cotton Suit Jacket", "BrandJ", "99.99", "black", "50"),
    )

    return [
        Scenario("Example 1", Cashier.create(example_1, clock=clock)),
        Scenario("Example 2", Cashier.create(example_2, TUESDAY_MORNING)),
        Scenario("Example 3", Cashier.create(example_3, TUESDAY_MORNING)),
        Scenario("Example 4", Cashier.create(example_4, clock=clock)),
    ]
