from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class BundleOptionDTO:
    size: int
    price: Decimal
    category: str


@dataclass
class ProductDTO:
    id: str
    title: str
    description: str
    price: Decimal
    category: str
    image_url: str
    is_active: bool
    bundle_options: List[BundleOptionDTO] = field(default_factory=list)
