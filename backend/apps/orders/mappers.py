from typing import Iterable, List

from apps.common.money import to_decimal

from .dtos import OrderDTO, OrderItemDTO
from .models import Order, OrderItem


class OrderItemMapper:
    @staticmethod
    def to_dto(item: OrderItem) -> OrderItemDTO:
        return OrderItemDTO(
            product_id=item.product_id,
            title=item.title,
            unit_price=to_decimal(item.unit_price),
            quantity=int(item.quantity),
            line_total=to_decimal(item.line_total),
        )

    @staticmethod
    def many_to_dto(items: Iterable[OrderItem]) -> List[OrderItemDTO]:
        return [OrderItemMapper.to_dto(i) for i in items]


class OrderMapper:
    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        items = getattr(order, "items", None)
        items = list(items.all()) if items is not None else []
        return OrderDTO(
            id=str(order.id),
            order_number=order.order_number,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            customer_phone=order.customer_phone,
            company_name=order.company_name or "",
            event_name=order.event_name or "",
            event_start_date=order.event_start_date,
            event_end_date=order.event_end_date,
            postal_code=order.postal_code or "",
            shipping_address=order.shipping_address or "",
            message=order.message or "",
            subtotal=to_decimal(order.subtotal),
            shipping_cost=to_decimal(order.shipping_cost),
            collection_cost=to_decimal(order.collection_cost),
            total_amount=to_decimal(order.total_amount),
            status=order.status,
            payment_session_ref=order.payment_session_ref or "",
            created_at=getattr(order, "created_at", None),
            updated_at=getattr(order, "updated_at", None),
            items=OrderItemMapper.many_to_dto(items),
        )
