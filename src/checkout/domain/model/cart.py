"""Shopping cart."""

from __future__ import annotations

from collections.abc import Iterator

from checkout.domain.model.product import Product


class Cart:
    """Ordered, append-only collection of products awaiting checkout.

    Insertion order is preserved and the same product may be added more
    than once. There is no way to remove a product.
    """

    def __init__(self) -> None:
        self._products: list[Product] = []

    def add_to_cart(self, product: Product) -> None:
        self._products.append(product)

    @property
    def products(self) -> tuple[Product, ...]:
        """Read-only view of the products, in the order they were added."""
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __repr__(self) -> str:
        return f"Cart(products={self._products!r})"
