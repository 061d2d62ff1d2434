from typing import Iterable, List

from apps.common.money import to_decimal

from .dtos import BundleOptionDTO, ProductDTO
from .models import BundleOption, Product


class BundleOptionMapper:
    @staticmethod
    def to_dto(option: BundleOption) -> BundleOptionDTO:
        return BundleOptionDTO(
            size=option.size,
            price=to_decimal(option.price),
            category=option.category_tag,
        )


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        options = getattr(product, "bundle_options", None)
        options = list(options.all()) if options is not None else []
        return ProductDTO(
            id=str(product.id),
            title=product.title,
            description=product.description or "",
            price=to_decimal(product.price),
            category=product.category,
            image_url=product.image_url or "",
            is_active=bool(product.is_active),
            bundle_options=[BundleOptionMapper.to_dto(o) for o in options],
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]
