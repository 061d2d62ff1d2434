from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional


@dataclass
class OrderItemDTO:
    product_id: str
    title: str
    unit_price: Decimal
    quantity: int
    line_total: Decimal


@dataclass
class OrderDTO:
    id: str
    order_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    company_name: str
    event_name: str
    event_start_date: Optional[date]
    event_end_date: Optional[date]
    postal_code: str
    shipping_address: str
    message: str
    subtotal: Decimal
    shipping_cost: Decimal
    collection_cost: Decimal
    total_amount: Decimal
    status: str
    payment_session_ref: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[OrderItemDTO] = field(default_factory=list)


@dataclass
class OrderReceipt:
    order_id: str
    order_number: str
    status: str
    subtotal: Decimal
    shipping_cost: Decimal
    collection_cost: Decimal
    total_amount: Decimal
    redirect_url: Optional[str] = None


@dataclass
class PaymentSession:
    ref: str
    redirect_url: str
