from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class AddItemCommand:
    product_id: str
    quantity: int = 1
    bundle_size: Optional[int] = None

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> "AddItemCommand":
        if not isinstance(raw, dict):
            raise ValueError("Payload must be a dict")
        pid = raw.get("productId") or raw.get("product_id")
        if not pid:
            raise ValueError("product_id is required")
        # the storefront never adds fewer than one unit
        qty = max(1, _coerce_int(raw.get("quantity", 1), 1))
        bundle = raw.get("bundleSize", raw.get("bundle_size"))
        bundle_size = _coerce_int(bundle, 0) if bundle is not None else None
        return AddItemCommand(
            product_id=str(pid),
            quantity=qty,
            bundle_size=bundle_size or None,
        )


@dataclass
class LineRefCommand:
    product_id: str
    category: str
    quantity: int = 0

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> "LineRefCommand":
        pid = raw.get("productId") or raw.get("product_id")
        if not pid:
            raise ValueError("product_id is required")
        return LineRefCommand(
            product_id=str(pid),
            category=str(raw.get("category") or ""),
            quantity=_coerce_int(raw.get("quantity", 0), 0),
        )


@dataclass
class RentalDatesCommand:
    start: Optional[date]
    end: Optional[date]
