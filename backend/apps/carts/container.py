from __future__ import annotations

from apps.catalog.container import build_product_service

from .repositories import SessionCartRepository
from .services import CartService


def build_cart_service() -> CartService:
    return CartService(
        store=SessionCartRepository(),
        products=build_product_service(),
    )
