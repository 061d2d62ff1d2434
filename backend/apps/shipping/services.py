from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Optional

from django.db import DatabaseError

from apps.common import get_logger
from apps.common.money import to_decimal
from .dtos import AddressInfo, GeocodeResult, ShippingQuote
from .geocoding import GeocodingUnavailable
from .protocols import GeocoderProtocol, ShippingZoneRepositoryProtocol

logger = get_logger(__name__).bind(component="shipping", layer="service")

DEFAULT_REGION_CODE = "CA"
DEFAULT_SHIPPING_COST = Decimal("75.00")
DEFAULT_COLLECTION_COST = Decimal("75.00")

_POSTAL_CODE_RE = re.compile(r"^\d{5}(-\d{4})?$")
_STRIP_RE = re.compile(r"[^\d-]")


class InvalidPostalCodeError(ValueError):
    """Raised when a postal code is empty or not a US ZIP / ZIP+4."""


def normalize_postal_code(raw: Any) -> str:
    if raw is None or not str(raw).strip():
        raise InvalidPostalCodeError("ZIP code is required")
    cleaned = _STRIP_RE.sub("", str(raw).strip())
    if not _POSTAL_CODE_RE.match(cleaned):
        raise InvalidPostalCodeError(
            "Invalid ZIP code format. Please enter a 5-digit ZIP code."
        )
    return cleaned


class ShippingService:
    def __init__(
        self,
        geocoder: GeocoderProtocol,
        zones: ShippingZoneRepositoryProtocol,
        default_region: str = DEFAULT_REGION_CODE,
        default_shipping_cost: Decimal = DEFAULT_SHIPPING_COST,
        default_collection_cost: Decimal = DEFAULT_COLLECTION_COST,
    ):
        self.geocoder = geocoder
        self.zones = zones
        self.default_region = default_region
        self.default_shipping_cost = to_decimal(default_shipping_cost)
        self.default_collection_cost = to_decimal(default_collection_cost)
        self.logger = logger.bind(service="ShippingService")

    def _geocode(self, postal_code: str) -> Optional[GeocodeResult]:
        try:
            return self.geocoder.lookup(postal_code)
        except GeocodingUnavailable as exc:
            self.logger.warning(
                "Geocoding unavailable, using fallback", postal_code=postal_code, reason=str(exc)
            )
            return None

    def _region_for(self, postal_code: str) -> str:
        result = self._geocode(postal_code)
        if result is None or not result.state:
            self.logger.info(
                "Using default region", postal_code=postal_code, region=self.default_region
            )
            return self.default_region
        return result.state

    def resolve(self, raw_postal_code: Any) -> ShippingQuote:
        postal_code = normalize_postal_code(raw_postal_code)
        region = self._region_for(postal_code)
        try:
            zone = self.zones.get_by_region(region)
        except DatabaseError as exc:
            self.logger.error("Shipping zone lookup failed", region=region, error=str(exc))
            zone = None
        if zone is None:
            self.logger.info("No shipping zone for region, applying defaults", region=region)
            quote = ShippingQuote(
                zone_name=f"{region} Zone",
                shipping_cost=self.default_shipping_cost,
                collection_cost=self.default_collection_cost,
            )
        else:
            quote = ShippingQuote(
                zone_name=zone.zone_name or f"{region} Zone",
                shipping_cost=to_decimal(zone.shipping_cost),
                collection_cost=to_decimal(zone.collection_cost),
            )
        self.logger.info(
            "Resolved shipping quote",
            postal_code=postal_code,
            region=region,
            zone=quote.zone_name,
            total_shipping=quote.total_shipping,
        )
        return quote

    def lookup_address(self, raw_postal_code: Any) -> AddressInfo:
        postal_code = normalize_postal_code(raw_postal_code)
        result = self._geocode(postal_code)
        if result is None:
            return AddressInfo(
                formatted_address=f"{postal_code}, USA",
                city="Unknown City",
                state="Unknown",
                country="US",
                postal_code=postal_code,
                full_address=f"Unknown City, Unknown {postal_code}, US",
            )
        return AddressInfo(
            formatted_address=result.formatted_address,
            city=result.city,
            state=result.state,
            country=result.country,
            postal_code=postal_code,
            full_address=f"{result.city}, {result.state} {postal_code}, {result.country}",
        )
