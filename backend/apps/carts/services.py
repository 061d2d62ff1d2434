from __future__ import annotations

from datetime import date
from typing import Any, Optional

from apps.common import get_logger
from .cart import Cart, CartLineItem
from .commands import AddItemCommand, LineRefCommand, RentalDatesCommand
from .dtos import CartDTO
from .mappers import CartMapper
from .protocols import CartStoreProtocol, ProductPricingProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class InvalidRentalDatesError(Exception):
    """Raised when the rental end date falls before the start date."""


class CartService:
    def __init__(self, store: CartStoreProtocol, products: ProductPricingProtocol):
        self.store = store
        self.products = products
        self.logger = logger.bind(service="CartService")

    def load(self, session: Any) -> Cart:
        return self.store.load(session)

    def _commit(self, session: Any, cart: Cart) -> CartDTO:
        self.store.save(session, cart)
        return CartMapper.to_dto(cart)

    def get_cart(self, session: Any) -> CartDTO:
        return CartMapper.to_dto(self.store.load(session))

    def add_product(self, session: Any, command: AddItemCommand) -> CartDTO:
        product, unit_price, category = self.products.price_for(
            command.product_id, command.bundle_size
        )
        cart = self.store.load(session)
        line = cart.add_item(
            CartLineItem(
                product_id=product.id,
                title=product.title,
                unit_price=unit_price,
                category=category,
                image_ref=product.image_url,
            ),
            command.quantity,
        )
        self.logger.info(
            "Added product to cart",
            product_id=product.id,
            category=category,
            quantity=command.quantity,
            line_quantity=line.quantity,
        )
        return self._commit(session, cart)

    def remove_product(self, session: Any, command: LineRefCommand) -> CartDTO:
        cart = self.store.load(session)
        cart.remove_item(command.product_id, command.category)
        self.logger.info(
            "Removed product from cart",
            product_id=command.product_id,
            category=command.category,
        )
        return self._commit(session, cart)

    def update_quantity(self, session: Any, command: LineRefCommand) -> CartDTO:
        cart = self.store.load(session)
        cart.update_quantity(command.product_id, command.category, command.quantity)
        self.logger.debug(
            "Updated cart quantity",
            product_id=command.product_id,
            category=command.category,
            quantity=command.quantity,
        )
        return self._commit(session, cart)

    def set_rental_dates(self, session: Any, command: RentalDatesCommand) -> CartDTO:
        start: Optional[date] = command.start
        end: Optional[date] = command.end
        if start and end and end < start:
            self.logger.info("Rejected rental dates", start=start, end=end)
            raise InvalidRentalDatesError("Rental end date cannot be before start date")
        cart = self.store.load(session)
        cart.set_dates(start, end)
        return self._commit(session, cart)

    def clear(self, session: Any) -> CartDTO:
        cart = self.store.load(session)
        cart.clear()
        self.logger.info("Cleared cart")
        return self._commit(session, cart)

    def open(self, session: Any) -> CartDTO:
        cart = self.store.load(session)
        cart.open()
        return self._commit(session, cart)

    def close(self, session: Any) -> CartDTO:
        cart = self.store.load(session)
        cart.close()
        return self._commit(session, cart)
