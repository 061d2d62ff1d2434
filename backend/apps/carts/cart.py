"""Session cart aggregator.

A ``Cart`` holds the line items a shopper has picked for one rental, keyed by
``(product_id, category)`` so the single-unit and bundle variants of the same
product are separate lines. It is built per request from the session by
``SessionCartRepository`` and written back after every mutation.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple

from apps.common.money import ZERO, quantize_money, to_decimal

RECENTLY_ADDED_SECONDS = 2.0

LineKey = Tuple[str, str]


@dataclass
class CartLineItem:
    product_id: str
    title: str
    unit_price: Decimal
    category: str
    image_ref: str = ""
    quantity: int = 1

    def __post_init__(self):
        self.product_id = str(self.product_id)
        self.category = str(self.category or "")
        self.unit_price = to_decimal(self.unit_price)
        self.quantity = int(self.quantity)

    @property
    def key(self) -> LineKey:
        return (self.product_id, self.category)

    @property
    def line_total(self) -> Decimal:
        return quantize_money(self.unit_price * self.quantity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "title": self.title,
            "unit_price": str(self.unit_price),
            "category": self.category,
            "image_ref": self.image_ref,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CartLineItem":
        return cls(
            product_id=raw["product_id"],
            title=raw.get("title", ""),
            unit_price=raw["unit_price"],
            category=raw.get("category", ""),
            image_ref=raw.get("image_ref", ""),
            quantity=raw.get("quantity", 1),
        )


class Cart:
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self.items: List[CartLineItem] = []
        self.is_open = False
        self.rental_start_date: Optional[date] = None
        self.rental_end_date: Optional[date] = None
        self._last_added_id: Optional[str] = None
        self._last_added_at: Optional[float] = None

    def _find(self, key: LineKey) -> Optional[CartLineItem]:
        for line in self.items:
            if line.key == key:
                return line
        return None

    @property
    def last_added_id(self) -> Optional[str]:
        if self._last_added_at is None:
            return None
        if self._clock() - self._last_added_at >= RECENTLY_ADDED_SECONDS:
            return None
        return self._last_added_id

    def add_item(self, item: CartLineItem, quantity: int = 1) -> CartLineItem:
        existing = self._find(item.key)
        if existing is not None:
            existing.quantity += quantity
            line = existing
        else:
            item.quantity = quantity
            self.items.append(item)
            line = item
        self._last_added_id = line.product_id
        self._last_added_at = self._clock()
        return line

    def remove_item(self, product_id: str, category: str) -> None:
        key = (str(product_id), str(category or ""))
        self.items = [line for line in self.items if line.key != key]

    def update_quantity(self, product_id: str, category: str, quantity: int) -> None:
        quantity = max(0, int(quantity))
        if quantity == 0:
            self.remove_item(product_id, category)
            return
        line = self._find((str(product_id), str(category or "")))
        if line is not None:
            line.quantity = quantity

    def set_dates(self, start: Optional[date], end: Optional[date]) -> None:
        self.rental_start_date = start
        self.rental_end_date = end

    def total_items(self) -> int:
        return sum(line.quantity for line in self.items)

    def total_price(self) -> Decimal:
        total = ZERO
        for line in self.items:
            total += line.unit_price * line.quantity
        return quantize_money(total)

    def clear(self) -> None:
        self.items = []

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def snapshot(self) -> Dict[str, Any]:
        return {
            "items": [line.to_dict() for line in self.items],
            "is_open": self.is_open,
            "rental_start_date": _iso(self.rental_start_date),
            "rental_end_date": _iso(self.rental_end_date),
            "last_added_id": self._last_added_id,
            "last_added_at": self._last_added_at,
        }

    @classmethod
    def from_snapshot(
        cls, data: Optional[Dict[str, Any]], clock: Callable[[], float] = time.time
    ) -> "Cart":
        cart = cls(clock=clock)
        if not data:
            return cart
        cart.items = [CartLineItem.from_dict(raw) for raw in data.get("items", [])]
        cart.is_open = bool(data.get("is_open", False))
        cart.rental_start_date = _parse_date(data.get("rental_start_date"))
        cart.rental_end_date = _parse_date(data.get("rental_end_date"))
        cart._last_added_id = data.get("last_added_id")
        cart._last_added_at = data.get("last_added_at")
        return cart


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)
