"""Product domain exceptions.

Raised by the Service Layer when a product look-up misses.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.products.constants import PRODUCT_NOT_FOUND


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, id: str) -> None:
        self.id = id
        super().__init__(PRODUCT_NOT_FOUND.format(id=id))
