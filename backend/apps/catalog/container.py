from __future__ import annotations

from django.conf import settings
from django.core.cache import cache

from .repositories import ProductRepository
from .services import ProductService


def build_product_service() -> ProductService:
    return ProductService(
        products=ProductRepository(),
        cache_backend=cache,
        disable_cache=bool(getattr(settings, "DISABLE_PRODUCT_CACHE", False)),
    )
