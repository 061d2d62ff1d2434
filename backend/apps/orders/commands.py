from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from apps.common.money import InvalidAmountError, to_decimal

BUNDLE_CATEGORY_PREFIX = "Bundle-"


def _parse_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # accept ISO date or datetime; split at 'T'
    return datetime.strptime(str(value).split("T")[0], "%Y-%m-%d").date()


def _text(raw: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return str(value).strip()
    return ""


@dataclass
class CustomerData:
    name: str
    email: str
    phone: str
    company: str = ""
    event_name: str = ""
    event_start_date: Optional[date] = None
    event_end_date: Optional[date] = None
    postal_code: str = ""
    shipping_address: str = ""
    message: str = ""

    def missing_fields(self) -> List[str]:
        return [name for name in ("name", "email", "phone") if not getattr(self, name)]

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> "CustomerData":
        if not isinstance(raw, dict):
            raise ValueError("Customer data must be a dict")
        return CustomerData(
            name=_text(raw, "name"),
            email=_text(raw, "email"),
            phone=_text(raw, "phone"),
            company=_text(raw, "company"),
            event_name=_text(raw, "event_name"),
            event_start_date=_parse_date(raw.get("event_start_date") or raw.get("event_date")),
            event_end_date=_parse_date(raw.get("event_end_date")),
            postal_code=_text(raw, "postal_code", "zip_code"),
            shipping_address=_text(raw, "shipping_address", "shipping_details"),
            message=_text(raw, "message"),
        )


@dataclass
class OrderLineCommand:
    product_id: str
    title: str
    unit_price: Decimal
    quantity: int
    category: str = ""

    @property
    def stored_title(self) -> str:
        """Title persisted on the order line; bundle lines carry their pack tag."""
        if self.category.startswith(BUNDLE_CATEGORY_PREFIX) and self.category not in self.title:
            return f"{self.title} ({self.category})".strip()
        return self.title

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> "OrderLineCommand":
        if not isinstance(raw, dict):
            raise ValueError("Line item must be a dict")
        pid = raw.get("product_id") or raw.get("productId") or raw.get("id")
        if not pid:
            raise ValueError("Line item is missing product_id")
        try:
            price = to_decimal(raw.get("unit_price", raw.get("price")))
        except InvalidAmountError as exc:
            raise ValueError(str(exc)) from exc
        try:
            qty = int(raw.get("quantity"))
        except (TypeError, ValueError) as exc:
            raise ValueError("Line item quantity must be an integer") from exc
        return OrderLineCommand(
            product_id=str(pid),
            title=str(raw.get("title") or ""),
            unit_price=price,
            quantity=qty,
            category=str(raw.get("category") or "").strip(),
        )


@dataclass
class ShippingCharges:
    zone_name: str
    shipping_cost: Decimal
    collection_cost: Decimal

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> "ShippingCharges":
        return ShippingCharges(
            zone_name=str(raw.get("zone_name") or ""),
            shipping_cost=to_decimal(raw.get("shipping_cost", "0")),
            collection_cost=to_decimal(raw.get("collection_cost", "0")),
        )


@dataclass
class CreateOrderCommand:
    customer: CustomerData
    items: List[OrderLineCommand]
    shipping: ShippingCharges
    quote_only: bool = False
    client_subtotal: Optional[Decimal] = None
