from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass
class CartLineDTO:
    product_id: str
    title: str
    unit_price: Decimal
    category: str
    image_ref: str
    quantity: int
    line_total: Decimal


@dataclass
class CartDTO:
    items: List[CartLineDTO] = field(default_factory=list)
    is_open: bool = False
    rental_start_date: Optional[date] = None
    rental_end_date: Optional[date] = None
    last_added_id: Optional[str] = None
    total_items: int = 0
    total_price: Decimal = Decimal("0.00")
