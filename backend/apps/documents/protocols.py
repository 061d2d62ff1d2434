from __future__ import annotations

from typing import Any, Optional, Protocol

from apps.orders.dtos import OrderDTO


class OrderReaderProtocol(Protocol):
    def get_order(self, order_id: Any) -> Optional[OrderDTO]:
        ...


class PdfConverterProtocol(Protocol):
    def convert(self, html: str, filename: str) -> bytes:
        ...
