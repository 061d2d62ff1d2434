from dataclasses import dataclass
from decimal import Decimal

from apps.common.money import quantize_money


@dataclass
class ShippingQuote:
    zone_name: str
    shipping_cost: Decimal
    collection_cost: Decimal

    @property
    def total_shipping(self) -> Decimal:
        return quantize_money(self.shipping_cost + self.collection_cost)


@dataclass
class GeocodeResult:
    formatted_address: str
    city: str
    state: str
    country: str


@dataclass
class AddressInfo:
    formatted_address: str
    city: str
    state: str
    country: str
    postal_code: str
    full_address: str
