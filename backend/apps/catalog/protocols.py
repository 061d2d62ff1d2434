from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

from .models import Product


class ProductRepositoryProtocol(Protocol):
    def list_active(self, category: Optional[str] = None) -> Iterable[Product]:
        ...

    def get_active(self, product_id: Any) -> Optional[Product]:
        ...


class CacheBackendProtocol(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        ...
