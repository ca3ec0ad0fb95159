"""Domain service: discount rules.

Two rules apply to every item in a cart:

- Tuesday: shirts get 10% off and shoes 25% off.
- Quantity: a cart of 3 or more items lifts any item below 20% up to 20%.

The quantity rule only ever raises a discount, so Tuesday shoes keep
their 25% in a large cart. Rules never stack.
"""

from __future__ import annotations

from datetime import datetime

from checkout.domain.model.cashier import parse_purchase_datetime
from checkout.domain.model.product import Product, ProductCategory
from checkout.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TUESDAY = 1  # datetime.weekday()
TUESDAY_DISCOUNTS: dict[ProductCategory, int] = {
    ProductCategory.SHIRT: 10,
    ProductCategory.SHOES: 25,
}
QUANTITY_DISCOUNT_MIN_ITEMS = 3
QUANTITY_DISCOUNT_PERCENTAGE = 20


def is_tuesday(purchased_at: datetime | str) -> bool:
    return _as_datetime(purchased_at).weekday() == TUESDAY


def calculate_discount_percentage(
    product: Product,
    purchased_at: datetime | str,
    cart_item_count: int,
) -> int:
    """Return the whole-number discount percentage for one cart item.

    *purchased_at* may be a datetime or text in the purchase datetime
    format; unparseable text counts as a non-Tuesday.
    """
    percentage = 0

    if is_tuesday(purchased_at):
        percentage = TUESDAY_DISCOUNTS.get(product.category, 0)

    if cart_item_count >= QUANTITY_DISCOUNT_MIN_ITEMS:
        percentage = max(percentage, QUANTITY_DISCOUNT_PERCENTAGE)

    return percentage


def calculate_discount_amount(price: Money, percentage: int) -> Money:
    """Discount for a single item, rounded to the cent."""
    return price.percent(percentage)


def _as_datetime(purchased_at: datetime | str) -> datetime:
    if isinstance(purchased_at, datetime):
        return purchased_at
    return parse_purchase_datetime(purchased_at)
