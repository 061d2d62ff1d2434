import unittest
from datetime import date
from decimal import Decimal

from apps.carts.commands import AddItemCommand, LineRefCommand, RentalDatesCommand
from apps.carts.repositories import SessionCartRepository
from apps.carts.services import CartService, InvalidRentalDatesError
from apps.catalog.dtos import ProductDTO
from apps.catalog.services import BundleNotAvailableError, ProductNotFoundError


class FakeSession(dict):
    modified = False


class FakeProductPricing:
    def __init__(self):
        self.product = ProductDTO(
            id="p-1",
            title="iPad 10th Gen",
            description="",
            price=Decimal("39.75"),
            category="Individual",
            image_url="ipad.png",
            is_active=True,
        )
        self.calls = []

    def price_for(self, product_id, bundle_size=None):
        self.calls.append((product_id, bundle_size))
        if product_id != self.product.id:
            raise ProductNotFoundError(product_id)
        if bundle_size is None:
            return self.product, self.product.price, "Individual"
        if bundle_size == 5:
            return self.product, Decimal("199.00"), "Bundle-5"
        raise BundleNotAvailableError(bundle_size)


class CartServiceTests(unittest.TestCase):
    def setUp(self):
        self.session = FakeSession()
        self.pricing = FakeProductPricing()
        self.service = CartService(SessionCartRepository(), self.pricing)

    def test_add_product_persists_to_session(self):
        dto = self.service.add_product(self.session, AddItemCommand("p-1", 3))
        self.assertEqual(dto.total_items, 3)
        self.assertEqual(dto.total_price, Decimal("119.25"))
        self.assertTrue(self.session.modified)
        reloaded = self.service.get_cart(self.session)
        self.assertEqual(reloaded.items[0].image_ref, "ipad.png")
        self.assertEqual(reloaded.items[0].unit_price, Decimal("39.75"))

    def test_bundle_and_individual_lines(self):
        self.service.add_product(self.session, AddItemCommand("p-1", 3))
        dto = self.service.add_product(self.session, AddItemCommand("p-1", 1, bundle_size=5))
        self.assertEqual([line.category for line in dto.items], ["Individual", "Bundle-5"])
        self.assertEqual(dto.total_items, 4)
        self.assertEqual(dto.total_price, Decimal("318.25"))

    def test_add_unknown_product_leaves_cart_untouched(self):
        with self.assertRaises(ProductNotFoundError):
            self.service.add_product(self.session, AddItemCommand("missing"))
        self.assertNotIn("storefront_cart", self.session)

    def test_update_and_remove(self):
        self.service.add_product(self.session, AddItemCommand("p-1", 2))
        self.service.add_product(self.session, AddItemCommand("p-1", 1, bundle_size=5))
        dto = self.service.update_quantity(
            self.session, LineRefCommand("p-1", "Individual", 5)
        )
        self.assertEqual(dto.total_items, 6)
        dto = self.service.remove_product(self.session, LineRefCommand("p-1", "Bundle-5"))
        self.assertEqual(dto.total_items, 5)
        dto = self.service.update_quantity(
            self.session, LineRefCommand("p-1", "Individual", -1)
        )
        self.assertEqual(dto.items, [])

    def test_set_rental_dates(self):
        dto = self.service.set_rental_dates(
            self.session, RentalDatesCommand(date(2026, 6, 1), date(2026, 6, 3))
        )
        self.assertEqual(dto.rental_start_date, date(2026, 6, 1))
        self.assertEqual(dto.rental_end_date, date(2026, 6, 3))

    def test_set_rental_dates_rejects_end_before_start(self):
        with self.assertRaises(InvalidRentalDatesError):
            self.service.set_rental_dates(
                self.session, RentalDatesCommand(date(2026, 6, 3), date(2026, 6, 1))
            )

    def test_clear_and_panel_state(self):
        self.service.add_product(self.session, AddItemCommand("p-1", 2))
        self.assertTrue(self.service.open(self.session).is_open)
        dto = self.service.clear(self.session)
        self.assertEqual(dto.total_items, 0)
        self.assertTrue(dto.is_open)
        self.assertFalse(self.service.close(self.session).is_open)


class AddItemCommandTests(unittest.TestCase):
    def test_quantity_below_one_is_coerced(self):
        self.assertEqual(AddItemCommand.from_raw({"product_id": "p-1", "quantity": 0}).quantity, 1)
        self.assertEqual(AddItemCommand.from_raw({"productId": "p-1", "quantity": "x"}).quantity, 1)

    def test_bundle_size_parsed(self):
        cmd = AddItemCommand.from_raw({"product_id": "p-1", "bundle_size": "10"})
        self.assertEqual(cmd.bundle_size, 10)

    def test_missing_product_id(self):
        with self.assertRaises(ValueError):
            AddItemCommand.from_raw({"quantity": 2})


if __name__ == "__main__":
    unittest.main()
