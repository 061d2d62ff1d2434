import unittest
import uuid
from decimal import Decimal
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.carts.cart import Cart, CartLineItem
from apps.orders.dtos import OrderReceipt
from apps.orders.guards import IN_FLIGHT_KEY
from apps.orders.services import (
    InvalidOrderError,
    OrderPersistenceError,
    PaymentNotCompletedError,
    PaymentSessionError,
)
from apps.orders.views import OrderDetailView, OrderListView, OrderPaymentConfirmView

ORDER_ID = "0b7e3c1a-7d5e-4f52-9a77-2f1d3c4b5a69"


def make_payload(**overrides):
    payload = {
        "customer": {
            "name": "Dana Reyes",
            "email": "dana@example.com",
            "phone": "555-0100",
            "event_name": "Spring Expo",
            "event_start_date": "2026-04-10",
            "event_end_date": "2026-04-12",
            "postal_code": "07927",
        },
        "items": [
            {"product_id": "p-1", "title": "iPad", "unit_price": "39.75", "quantity": 3},
        ],
        "shipping": {"zone_name": "NJ Zone", "shipping_cost": "75.00", "collection_cost": "75.00"},
        "subtotal": "9999.00",
    }
    payload.update(overrides)
    return payload


def make_receipt(redirect_url="https://pay.example/cs_1", status="pending"):
    return OrderReceipt(
        order_id=ORDER_ID,
        order_number="ORD-20261019-00001",
        status=status,
        subtotal=Decimal("119.25"),
        shipping_cost=Decimal("75.00"),
        collection_cost=Decimal("75.00"),
        total_amount=Decimal("269.25"),
        redirect_url=redirect_url,
    )


class OrderCreateViewUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.service_mock = Mock()
        self.cart_mock = Mock()
        self.patchers = [
            patch.object(OrderListView, "service", self.service_mock),
            patch.object(OrderListView, "cart_service", self.cart_mock),
        ]
        for p in self.patchers:
            p.start()

    def tearDown(self):
        for p in self.patchers:
            p.stop()

    def post(self, payload, session=None):
        request = self.factory.post("/api/orders/", payload, format="json")
        request.session = session if session is not None else {}
        return OrderListView.as_view()(request)

    def test_create_order_returns_receipt_and_clears_cart(self):
        self.service_mock.create_order.return_value = make_receipt()
        session = {}
        response = self.post(make_payload(), session)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["redirect_url"], "https://pay.example/cs_1")
        self.assertEqual(response.data["total_amount"], "269.25")
        command = self.service_mock.create_order.call_args[0][0]
        self.assertEqual(command.customer.email, "dana@example.com")
        self.assertEqual(command.items[0].unit_price, Decimal("39.75"))
        self.assertEqual(command.client_subtotal, Decimal("9999.00"))
        self.assertFalse(command.quote_only)
        self.cart_mock.clear.assert_called_once_with(session)
        self.assertNotIn(IN_FLIGHT_KEY, session)

    def test_quote_only_passes_flag(self):
        self.service_mock.create_order.return_value = make_receipt(None, "quote")
        response = self.post(make_payload(quote_only=True))
        self.assertEqual(response.status_code, 201)
        self.assertIsNone(response.data["redirect_url"])
        self.assertTrue(self.service_mock.create_order.call_args[0][0].quote_only)

    def test_items_default_to_session_cart(self):
        cart = Cart()
        cart.add_item(CartLineItem("p-9", "Stand", "25.00", "Individual"), 2)
        self.cart_mock.load.return_value = cart
        self.service_mock.create_order.return_value = make_receipt()
        payload = make_payload()
        del payload["items"]
        response = self.post(payload)
        self.assertEqual(response.status_code, 201)
        items = self.service_mock.create_order.call_args[0][0].items
        self.assertEqual([(i.product_id, i.quantity) for i in items], [("p-9", 2)])

    def test_duplicate_submission_conflict(self):
        session = {IN_FLIGHT_KEY: 10 ** 12}
        response = self.post(make_payload(), session)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["error"]["code"], "CONFLICT")
        self.service_mock.create_order.assert_not_called()

    def test_invalid_payload(self):
        payload = make_payload()
        payload["customer"] = {"name": "Dana"}
        session = {}
        response = self.post(payload, session)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        self.assertNotIn(IN_FLIGHT_KEY, session)

    def test_invalid_order(self):
        self.service_mock.create_order.side_effect = InvalidOrderError("Cart is empty")
        response = self.post(make_payload())
        self.assertEqual(response.status_code, 400)
        self.cart_mock.clear.assert_not_called()

    def test_persistence_failure(self):
        self.service_mock.create_order.side_effect = OrderPersistenceError("Order could not be saved")
        response = self.post(make_payload())
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["error"]["code"], "ORDER_PERSISTENCE_FAILED")

    def test_payment_failure_reports_order_reference(self):
        self.service_mock.create_order.side_effect = PaymentSessionError(
            "declined", ORDER_ID, "ORD-20261019-00001"
        )
        response = self.post(make_payload())
        self.assertEqual(response.status_code, 502)
        self.assertEqual(
            response.data["error"]["details"],
            {"orderId": ORDER_ID, "orderNumber": "ORD-20261019-00001"},
        )
        self.cart_mock.clear.assert_not_called()


class OrderDetailViewUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_not_found(self):
        service_mock = Mock()
        service_mock.get_order.return_value = None
        with patch.object(OrderDetailView, "service", service_mock):
            request = self.factory.get(f"/api/orders/{ORDER_ID}/")
            response = OrderDetailView.as_view()(request, order_id=uuid.UUID(ORDER_ID))
        self.assertEqual(response.status_code, 404)

    def test_confirm_payment_not_completed(self):
        service_mock = Mock()
        service_mock.mark_paid.side_effect = PaymentNotCompletedError("Payment has not been completed")
        with patch.object(OrderPaymentConfirmView, "service", service_mock):
            request = self.factory.post(
                f"/api/orders/{ORDER_ID}/confirm-payment/", {"session_id": "cs_1"}, format="json"
            )
            response = OrderPaymentConfirmView.as_view()(request, order_id=uuid.UUID(ORDER_ID))
        self.assertEqual(response.status_code, 409)
        service_mock.mark_paid.assert_called_once_with(uuid.UUID(ORDER_ID), "cs_1")

    def test_confirm_payment_write_failure(self):
        service_mock = Mock()
        service_mock.mark_paid.side_effect = OrderPersistenceError("Order could not be saved")
        with patch.object(OrderPaymentConfirmView, "service", service_mock):
            request = self.factory.post(
                f"/api/orders/{ORDER_ID}/confirm-payment/", {"session_id": "cs_1"}, format="json"
            )
            response = OrderPaymentConfirmView.as_view()(request, order_id=uuid.UUID(ORDER_ID))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["error"]["code"], "ORDER_PERSISTENCE_FAILED")


if __name__ == "__main__":
    unittest.main()
