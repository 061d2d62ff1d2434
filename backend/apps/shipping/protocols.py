from __future__ import annotations

from typing import Optional, Protocol

from .dtos import GeocodeResult
from .models import ShippingZone


class GeocoderProtocol(Protocol):
    def lookup(self, postal_code: str) -> Optional[GeocodeResult]:
        ...


class ShippingZoneRepositoryProtocol(Protocol):
    def get_by_region(self, region_code: str) -> Optional[ShippingZone]:
        ...
