from typing import Iterable, List

from .cart import Cart, CartLineItem
from .dtos import CartDTO, CartLineDTO


class CartLineMapper:
    @staticmethod
    def to_dto(line: CartLineItem) -> CartLineDTO:
        return CartLineDTO(
            product_id=line.product_id,
            title=line.title,
            unit_price=line.unit_price,
            category=line.category,
            image_ref=line.image_ref,
            quantity=line.quantity,
            line_total=line.line_total,
        )

    @staticmethod
    def many_to_dto(lines: Iterable[CartLineItem]) -> List[CartLineDTO]:
        return [CartLineMapper.to_dto(line) for line in lines]


class CartMapper:
    @staticmethod
    def to_dto(cart: Cart) -> CartDTO:
        return CartDTO(
            items=CartLineMapper.many_to_dto(cart.items),
            is_open=cart.is_open,
            rental_start_date=cart.rental_start_date,
            rental_end_date=cart.rental_end_date,
            last_added_id=cart.last_added_id,
            total_items=cart.total_items(),
            total_price=cart.total_price(),
        )
