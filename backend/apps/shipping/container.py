from __future__ import annotations

from django.conf import settings

from .geocoding import GoogleGeocoder
from .repositories import ShippingZoneRepository
from .services import ShippingService


def build_shipping_service() -> ShippingService:
    geocoder = GoogleGeocoder(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        url=settings.GEOCODING_URL,
        timeout=settings.GEOCODING_TIMEOUT,
    )
    return ShippingService(
        geocoder=geocoder,
        zones=ShippingZoneRepository(),
        default_region=settings.SHIPPING_DEFAULT_REGION,
        default_shipping_cost=settings.SHIPPING_DEFAULT_SHIPPING_COST,
        default_collection_cost=settings.SHIPPING_DEFAULT_COLLECTION_COST,
    )
