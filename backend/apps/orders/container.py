from __future__ import annotations

from django.conf import settings

from .payments import StripeCheckoutGateway
from .repositories import OrderItemRepository, OrderNumberRepository, OrderRepository
from .services import OrderService


def build_payment_gateway() -> StripeCheckoutGateway:
    return StripeCheckoutGateway(
        secret_key=settings.STRIPE_SECRET_KEY,
        success_url=settings.STRIPE_SUCCESS_URL,
        cancel_url=settings.STRIPE_CANCEL_URL,
    )


def build_order_service() -> OrderService:
    return OrderService(
        orders=OrderRepository(),
        items=OrderItemRepository(),
        numbers=OrderNumberRepository(),
        gateway=build_payment_gateway(),
        currency=settings.STOREFRONT_CURRENCY,
    )
