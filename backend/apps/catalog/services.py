from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from apps.common import get_logger
from .dtos import ProductDTO
from .mappers import ProductMapper
from .protocols import CacheBackendProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductNotFoundError(Exception):
    """Raised when a product id does not match an active product."""


class BundleNotAvailableError(Exception):
    """Raised when a product is not offered in the requested bundle size."""


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        cache_backend: CacheBackendProtocol,
        disable_cache: bool = False,
    ):
        self.products = products
        self.cache = cache_backend
        self.disable_cache = disable_cache
        self.logger = logger.bind(service="ProductService")
        self._cache_prefix = "products:list"
        self._cache_version_key = f"{self._cache_prefix}:version"
        self._default_version = 1

    def _get_cache_version(self) -> int:
        v = self.cache.get(self._cache_version_key)
        return v or self._default_version

    def bump_cache_version(self) -> None:
        v = self._get_cache_version()
        # Version key should not expire
        self.cache.set(self._cache_version_key, v + 1, timeout=None)
        self.logger.debug("Bumped product cache version", new_version=v + 1)

    def _cache_key(self, category: Optional[str]) -> str:
        version = self._get_cache_version()
        cat = (category or "all").lower()
        return f"{self._cache_prefix}:v{version}:{cat}"

    def list_products(self, category: Optional[str] = None) -> List[ProductDTO]:
        self.logger.debug(
            "Listing products", category=category, cache_enabled=not self.disable_cache
        )
        if self.disable_cache:
            return ProductMapper.many_to_dto(self.products.list_active(category))
        key = self._cache_key(category)
        cached = self.cache.get(key)
        if cached is not None:
            self.logger.debug("Product list cache hit", cache_key=key)
            return cached
        self.logger.debug("Product list cache miss", cache_key=key)
        data = ProductMapper.many_to_dto(self.products.list_active(category))
        self.cache.set(key, data)
        return data

    def get_product(self, product_id: Any) -> Optional[ProductDTO]:
        try:
            pk = uuid.UUID(str(product_id))
        except (TypeError, ValueError):
            self.logger.info("Rejected malformed product id", product_id=product_id)
            return None
        product = self.products.get_active(pk)
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            return None
        return ProductMapper.to_dto(product)

    def price_for(
        self, product_id: Any, bundle_size: Optional[int] = None
    ) -> Tuple[ProductDTO, Decimal, str]:
        """Return ``(product, unit_price, category)`` for a cart line.

        A bundle size selects the matching bundle option; its price replaces
        the single-unit price and its tag (``Bundle-<size>``) becomes the
        line's category so the two variants stay distinct in the cart.
        """
        product = self.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")
        if bundle_size is None:
            return product, product.price, product.category
        for option in product.bundle_options:
            if option.size == bundle_size:
                return product, option.price, option.category
        self.logger.info(
            "Bundle size not offered", product_id=product.id, bundle_size=bundle_size
        )
        raise BundleNotAvailableError(
            f"Product {product.id} is not offered in bundles of {bundle_size}"
        )
