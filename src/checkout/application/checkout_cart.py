"""Application service: Checkout Cart use case.

Turns plain item descriptions into products, fills a cart with them
and stamps it with a purchase date, ready for a receipt.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from checkout.application.dto import ItemSpec
from checkout.domain.model.cart import Cart
from checkout.domain.model.cashier import Cashier
from checkout.domain.model.product import create_product


class CheckoutCartHandler:

    def __init__(self, clock: Callable[[], datetime]) -> None:
        self._clock = clock

    def handle(
        self,
        item_specs: list[ItemSpec],
        purchased_datetime: str | None = None,
    ) -> Cashier:
        """Build a Cashier for the given items.

        Products are validated as they are created, so the first invalid
        item aborts the checkout. A supplied date must match the purchase
        datetime format exactly.
        """
        cart = Cart()
        for spec in item_specs:
            cart.add_to_cart(
                create_product(
                    category=spec.category,
                    name=spec.name,
                    brand=spec.brand,
                    price=spec.price,
                    color=spec.color,
                    size=spec.size,
                )
            )

        return Cashier.create(
            cart,
            purchased_datetime,
            clock=self._clock,
            strict=True,
        )
