import types
import unittest
from unittest.mock import patch

import stripe

from apps.orders.payments import PaymentGatewayError, StripeCheckoutGateway


def make_gateway(secret_key="sk_test_123"):
    return StripeCheckoutGateway(
        secret_key=secret_key,
        success_url="https://shop.example/payment-success?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="https://shop.example/checkout",
    )


class StripeCheckoutGatewayTests(unittest.TestCase):
    def test_create_session_passes_amount_and_metadata(self):
        fake_session = types.SimpleNamespace(id="cs_test_1", url="https://checkout.stripe.test/cs_test_1")
        metadata = {"order_id": "abc", "order_number": "ORD-20261019-00001"}
        with patch("apps.orders.payments.stripe.checkout.Session.create", return_value=fake_session) as create:
            session = make_gateway().create_session(46825, "usd", metadata)
        self.assertEqual(session.ref, "cs_test_1")
        self.assertEqual(session.redirect_url, "https://checkout.stripe.test/cs_test_1")
        kwargs = create.call_args.kwargs
        self.assertEqual(kwargs["api_key"], "sk_test_123")
        self.assertEqual(kwargs["mode"], "payment")
        self.assertEqual(kwargs["metadata"], metadata)
        price_data = kwargs["line_items"][0]["price_data"]
        self.assertEqual(price_data["unit_amount"], 46825)
        self.assertEqual(price_data["currency"], "usd")

    def test_stripe_error_is_wrapped(self):
        with patch(
            "apps.orders.payments.stripe.checkout.Session.create",
            side_effect=stripe.StripeError("declined"),
        ):
            with self.assertRaises(PaymentGatewayError):
                make_gateway().create_session(100, "usd", {"order_id": "x", "order_number": "y"})

    def test_missing_key_fails_without_calling_stripe(self):
        with patch("apps.orders.payments.stripe.checkout.Session.create") as create:
            with self.assertRaises(PaymentGatewayError):
                make_gateway(secret_key="").create_session(100, "usd", {})
        create.assert_not_called()

    def test_session_is_paid(self):
        paid = types.SimpleNamespace(payment_status="paid")
        unpaid = types.SimpleNamespace(payment_status="unpaid")
        gateway = make_gateway()
        with patch("apps.orders.payments.stripe.checkout.Session.retrieve", return_value=paid):
            self.assertTrue(gateway.session_is_paid("cs_test_1"))
        with patch("apps.orders.payments.stripe.checkout.Session.retrieve", return_value=unpaid):
            self.assertFalse(gateway.session_is_paid("cs_test_1"))


if __name__ == "__main__":
    unittest.main()
