from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, List, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.common import get_logger
from apps.common.money import ZERO, quantize_money, sum_money, to_minor_units
from .commands import CreateOrderCommand, OrderLineCommand
from .dtos import OrderDTO, OrderReceipt
from .mappers import OrderMapper
from .models import OrderStatus
from .payments import PaymentGatewayError
from .protocols import (
    OrderItemRepositoryProtocol,
    OrderNumberRepositoryProtocol,
    OrderRepositoryProtocol,
    PaymentGatewayProtocol,
)

logger = get_logger(__name__).bind(component="orders", layer="service")

CANONICAL_PRODUCT_ID_LENGTH = 36


class InvalidOrderError(Exception):
    """Raised when customer data or cart lines cannot form an order."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details


class OrderPersistenceError(Exception):
    """Raised when the order number, header or lines could not be stored."""


class PaymentSessionError(Exception):
    """Raised when the payment session for a persisted order could not be opened."""

    def __init__(self, message: str, order_id: str, order_number: str):
        super().__init__(message)
        self.order_id = order_id
        self.order_number = order_number


class PaymentNotCompletedError(Exception):
    """Raised when a payment confirmation arrives for an unpaid session."""


def canonical_product_id(product_id: Any) -> str:
    """Strip variant suffixes appended to a product UUID (``<uuid>-bundle-5``)."""
    return str(product_id).strip()[:CANONICAL_PRODUCT_ID_LENGTH]


class OrderService:
    def __init__(
        self,
        orders: OrderRepositoryProtocol,
        items: OrderItemRepositoryProtocol,
        numbers: OrderNumberRepositoryProtocol,
        gateway: PaymentGatewayProtocol,
        currency: str = "usd",
        today: Callable[[], date] = timezone.localdate,
    ):
        self.orders = orders
        self.items = items
        self.numbers = numbers
        self.gateway = gateway
        self.currency = currency
        self.today = today
        self.logger = logger.bind(service="OrderService")

    def _validate(self, command: CreateOrderCommand) -> None:
        missing = command.customer.missing_fields()
        if missing:
            raise InvalidOrderError(
                "Missing required customer fields", {"missing": missing}
            )
        if not command.items:
            raise InvalidOrderError("Cart is empty")
        bad = [
            index
            for index, line in enumerate(command.items)
            if line.quantity < 1 or line.unit_price < ZERO or not line.product_id
        ]
        if bad:
            raise InvalidOrderError("Invalid cart lines", {"lines": bad})
        shipping = command.shipping
        if shipping.shipping_cost < ZERO or shipping.collection_cost < ZERO:
            raise InvalidOrderError("Shipping costs cannot be negative")

    @staticmethod
    def _line_rows(lines: List[OrderLineCommand]) -> List[Dict[str, Any]]:
        return [
            {
                "product_id": canonical_product_id(line.product_id),
                "title": line.stored_title,
                "unit_price": line.unit_price,
                "quantity": line.quantity,
                "line_total": quantize_money(line.unit_price * line.quantity),
            }
            for line in lines
        ]

    def create_order(self, command: CreateOrderCommand) -> OrderReceipt:
        self._validate(command)
        rows = self._line_rows(command.items)
        subtotal = sum_money(row["line_total"] for row in rows)
        shipping = command.shipping
        total = quantize_money(subtotal + shipping.shipping_cost + shipping.collection_cost)
        if command.client_subtotal is not None and command.client_subtotal != subtotal:
            self.logger.warning(
                "Client subtotal ignored",
                client_subtotal=command.client_subtotal,
                subtotal=subtotal,
            )
        status = OrderStatus.QUOTE if command.quote_only else OrderStatus.PENDING
        customer = command.customer

        try:
            order_number = self.numbers.next_number(self.today())
            with transaction.atomic():
                order = self.orders.create(
                    order_number=order_number,
                    customer_name=customer.name,
                    customer_email=customer.email,
                    customer_phone=customer.phone,
                    company_name=customer.company,
                    event_name=customer.event_name,
                    event_start_date=customer.event_start_date,
                    event_end_date=customer.event_end_date,
                    postal_code=customer.postal_code,
                    shipping_address=customer.shipping_address,
                    message=customer.message,
                    subtotal=subtotal,
                    shipping_cost=shipping.shipping_cost,
                    collection_cost=shipping.collection_cost,
                    total_amount=total,
                    status=status,
                )
                self.items.create_many(order, rows)
        except DatabaseError as exc:
            self.logger.error("Order persistence failed", error=str(exc))
            raise OrderPersistenceError("Order could not be saved") from exc

        order_id = str(order.id)
        self.logger.info(
            "Order persisted",
            order_id=order_id,
            order_number=order_number,
            status=status,
            lines=len(rows),
            total=total,
        )
        receipt = OrderReceipt(
            order_id=order_id,
            order_number=order_number,
            status=str(status),
            subtotal=subtotal,
            shipping_cost=shipping.shipping_cost,
            collection_cost=shipping.collection_cost,
            total_amount=total,
        )
        if command.quote_only:
            return receipt

        try:
            session = self.gateway.create_session(
                to_minor_units(total),
                self.currency,
                {"order_id": order_id, "order_number": order_number},
            )
        except PaymentGatewayError as exc:
            self._mark_session_failed(order)
            raise PaymentSessionError(str(exc), order_id, order_number) from exc

        try:
            self.orders.update(order, payment_session_ref=session.ref)
        except DatabaseError as exc:
            self.logger.error(
                "Could not store payment session reference",
                order_id=order_id,
                session_ref=session.ref,
                error=str(exc),
            )
            raise OrderPersistenceError("Order could not be saved") from exc
        receipt.redirect_url = session.redirect_url
        return receipt

    def _mark_session_failed(self, order) -> None:
        try:
            self.orders.update(order, status=OrderStatus.PAYMENT_SESSION_FAILED)
        except DatabaseError as exc:
            self.logger.error(
                "Could not flag order after payment session failure",
                order_id=str(order.id),
                error=str(exc),
            )
            return
        self.logger.warning(
            "Payment session failed; order left for reconciliation",
            order_id=str(order.id),
            order_number=order.order_number,
        )

    def get_order(self, order_id: Any) -> Optional[OrderDTO]:
        order = self.orders.get_with_items(order_id)
        if not order:
            self.logger.info("Order not found", order_id=order_id)
            return None
        return OrderMapper.to_dto(order)

    def mark_paid(self, order_id: Any, session_ref: Optional[str] = None) -> Optional[OrderDTO]:
        order = self.orders.get_with_items(order_id)
        if not order:
            return None
        if order.status == OrderStatus.PAID:
            return OrderMapper.to_dto(order)
        if not order.payment_session_ref:
            raise InvalidOrderError("Order has no payment session")
        if session_ref and session_ref != order.payment_session_ref:
            raise InvalidOrderError(
                "Payment session does not belong to this order",
                {"session_id": session_ref},
            )
        try:
            paid = self.gateway.session_is_paid(order.payment_session_ref)
        except PaymentGatewayError as exc:
            raise PaymentSessionError(str(exc), str(order.id), order.order_number) from exc
        if not paid:
            self.logger.info("Payment not completed yet", order_id=str(order.id))
            raise PaymentNotCompletedError("Payment has not been completed")
        try:
            self.orders.update(order, status=OrderStatus.PAID)
        except DatabaseError as exc:
            self.logger.error("Could not mark order paid", order_id=str(order.id), error=str(exc))
            raise OrderPersistenceError("Order could not be saved") from exc
        self.logger.info("Order marked paid", order_id=str(order.id), order_number=order.order_number)
        return OrderMapper.to_dto(order)
