from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple

from apps.catalog.dtos import ProductDTO
from .cart import Cart


class CartStoreProtocol(Protocol):
    def load(self, session: Any) -> Cart:
        ...

    def save(self, session: Any, cart: Cart) -> None:
        ...


class ProductPricingProtocol(Protocol):
    def price_for(
        self, product_id: Any, bundle_size: Optional[int] = None
    ) -> Tuple[ProductDTO, Any, str]:
        ...
