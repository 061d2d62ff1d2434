import unittest
from decimal import Decimal

from apps.carts.cart import Cart, CartLineItem
from apps.carts.mappers import CartMapper


class CartMapperTests(unittest.TestCase):
    def test_cart_to_dto_includes_totals(self):
        cart = Cart(clock=lambda: 0.0)
        cart.add_item(CartLineItem("P1", "iPad", "39.75", "Individual"), 3)
        cart.add_item(CartLineItem("P1", "iPad x5", "199.00", "Bundle-5"), 1)
        dto = CartMapper.to_dto(cart)
        self.assertEqual(dto.total_items, 4)
        self.assertEqual(dto.total_price, Decimal("318.25"))
        self.assertEqual(dto.items[0].line_total, Decimal("119.25"))
        self.assertEqual(dto.items[1].category, "Bundle-5")
        self.assertEqual(dto.last_added_id, "P1")

    def test_empty_cart(self):
        dto = CartMapper.to_dto(Cart())
        self.assertEqual(dto.items, [])
        self.assertEqual(dto.total_price, Decimal("0.00"))
        self.assertIsNone(dto.last_added_id)


if __name__ == "__main__":
    unittest.main()
