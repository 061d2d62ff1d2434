from datetime import date
from typing import Iterable, List, Optional

from django.db import transaction

from apps.common.repository import GenericRepository
from .models import Order, OrderItem, OrderNumberSequence

ORDER_NUMBER_PREFIX = "ORD"


class OrderRepository(GenericRepository[Order]):
    def __init__(self):
        super().__init__(Order)

    def get_with_items(self, order_id) -> Optional[Order]:
        return self.model.objects.filter(id=order_id).prefetch_related("items").first()


class OrderItemRepository(GenericRepository[OrderItem]):
    def __init__(self):
        super().__init__(OrderItem)

    def create_many(self, order: Order, lines: Iterable[dict]) -> List[OrderItem]:
        return self.bulk_create(OrderItem(order=order, **line) for line in lines)


class OrderNumberRepository:
    """Draws order numbers from a per-day counter row in the database.

    The row is locked with ``SELECT ... FOR UPDATE`` for the duration of the
    increment so concurrent checkouts never receive the same number.
    """

    def __init__(self, prefix: str = ORDER_NUMBER_PREFIX):
        self.prefix = prefix

    def next_number(self, day: date) -> str:
        stamp = day.strftime("%Y%m%d")
        with transaction.atomic():
            sequence, _ = OrderNumberSequence.objects.select_for_update().get_or_create(
                name=f"orders:{stamp}"
            )
            sequence.last_value += 1
            sequence.save(update_fields=["last_value"])
        return f"{self.prefix}-{stamp}-{sequence.last_value:05d}"
