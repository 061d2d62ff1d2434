from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .dtos import PaymentSession
from .models import Order, OrderItem


class OrderRepositoryProtocol(Protocol):
    def create(self, **data: Any) -> Order:
        ...

    def update(self, obj: Order, **data: Any) -> Order:
        ...

    def get_with_items(self, order_id: Any) -> Optional[Order]:
        ...


class OrderItemRepositoryProtocol(Protocol):
    def create_many(self, order: Order, lines: Iterable[dict]) -> List[OrderItem]:
        ...


class OrderNumberRepositoryProtocol(Protocol):
    def next_number(self, day: date) -> str:
        ...


class PaymentGatewayProtocol(Protocol):
    def create_session(
        self, amount_minor: int, currency: str, metadata: Dict[str, str]
    ) -> PaymentSession:
        ...

    def session_is_paid(self, session_ref: str) -> bool:
        ...
