"""Application service: Build Receipt use case (query).

Walks the cashier's cart in order, asks the discount service for each
item's discount and accumulates the totals. Each item's discount is
rounded to the cent before it is added to the discount total.
"""

from __future__ import annotations

import logging

from checkout.application.dto import ReceiptDTO, ReceiptLineDTO
from checkout.domain.model.cashier import Cashier
from checkout.domain.model.value_objects import Money
from checkout.domain.service.discount_service import (
    calculate_discount_amount,
    calculate_discount_percentage,
)

logger = logging.getLogger(__name__)


class BuildReceiptHandler:

    def handle(self, cashier: Cashier) -> ReceiptDTO:
        products = cashier.cart.products
        item_count = len(products)

        subtotal = Money.zero(signed=True)
        discount_total = Money.zero(signed=True)
        lines: list[ReceiptLineDTO] = []

        for product in products:
            percentage = calculate_discount_percentage(
                product, cashier.purchased_at, item_count
            )
            discount = calculate_discount_amount(product.price, percentage)
            logger.debug(
                "%s (%s): %s at %d%% -> -%s",
                product.name,
                product.category.value,
                product.price,
                percentage,
                discount,
            )

            subtotal = subtotal + product.price
            discount_total = discount_total + discount
            lines.append(
                ReceiptLineDTO(
                    name=product.name,
                    brand=product.brand,
                    price=product.price.plain,
                    discount_percentage=percentage,
                    discount_amount=discount.fixed,
                )
            )

        # Without a discount the total keeps the precision the prices were given in.
        total = subtotal if discount_total.is_zero() else subtotal - discount_total

        return ReceiptDTO(
            purchased_datetime=cashier.purchased_datetime,
            lines=lines,
            subtotal=subtotal.plain,
            discount_total=discount_total.fixed,
            has_discount=discount_total.is_positive(),
            total=total.plain,
        )
