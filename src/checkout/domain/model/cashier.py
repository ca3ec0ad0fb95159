"""Purchase context: a cart together with the moment it was bought.

Purchase dates travel as text in the ``yyyy-MM-dd H:mm:ss`` layout
(hour without a leading zero). Parsing is soft by default: text that does
not match falls back to ``DEFAULT_PURCHASE_DATETIME`` instead of raising.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from checkout.domain.exceptions import InvalidPurchaseDateError
from checkout.domain.model.cart import Cart

logger = logging.getLogger(__name__)

PURCHASE_DATETIME_FORMAT = "yyyy-MM-dd H:mm:ss"
_STRPTIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_PURCHASE_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}:\d{2}")

# Monday, so a fallback date never earns a Tuesday discount.
DEFAULT_PURCHASE_DATETIME = datetime(1, 1, 1)


def parse_purchase_datetime(text: str, *, strict: bool = False) -> datetime:
    """Parse *text* in the purchase datetime format.

    With ``strict=False`` (the default) malformed text is logged and
    ``DEFAULT_PURCHASE_DATETIME`` is returned. With ``strict=True`` it
    raises InvalidPurchaseDateError.
    """
    parsed = _try_parse(text)
    if parsed is not None:
        return parsed

    if strict:
        raise InvalidPurchaseDateError(
            f"Invalid purchase date {text!r}, expected {PURCHASE_DATETIME_FORMAT}"
        )
    logger.warning(
        "Unparseable purchase date %r, falling back to %s",
        text,
        format_purchase_datetime(DEFAULT_PURCHASE_DATETIME),
    )
    return DEFAULT_PURCHASE_DATETIME


def _try_parse(text: str) -> datetime | None:
    if not isinstance(text, str) or not _PURCHASE_DATETIME_PATTERN.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, _STRPTIME_FORMAT)
    except ValueError:
        return None


def format_purchase_datetime(moment: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour}:{moment.minute:02d}:{moment.second:02d}"
    )


@dataclass(frozen=True)
class Cashier:
    """A cart at the till, stamped with its purchase datetime.

    Use ``Cashier.create()`` to stamp with either a textual date or the
    current time from *clock*.
    """

    cart: Cart
    purchased_at: datetime

    @staticmethod
    def create(
        cart: Cart,
        purchased_datetime: str | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
        strict: bool = False,
    ) -> Cashier:
        if purchased_datetime is None:
            purchased_at = clock().replace(microsecond=0)
        else:
            purchased_at = parse_purchase_datetime(purchased_datetime, strict=strict)
        return Cashier(cart=cart, purchased_at=purchased_at)

    @property
    def purchased_datetime(self) -> str:
        """The purchase datetime rendered in the purchase format."""
        return format_purchase_datetime(self.purchased_at)
