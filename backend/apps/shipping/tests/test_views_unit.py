import unittest
from decimal import Decimal
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.shipping.dtos import AddressInfo, ShippingQuote
from apps.shipping.services import InvalidPostalCodeError
from apps.shipping.views import AddressLookupView, ShippingQuoteView


class ShippingViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_quote_success(self):
        service_mock = Mock()
        service_mock.resolve.return_value = ShippingQuote(
            "CA Zone", Decimal("75.00"), Decimal("75.00")
        )
        with patch.object(ShippingQuoteView, "service", service_mock):
            request = self.factory.post("/api/shipping/quote/", {"zip_code": "07927"}, format="json")
            response = ShippingQuoteView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["zone_name"], "CA Zone")
        self.assertEqual(response.data["total_shipping"], "150.00")
        service_mock.resolve.assert_called_once_with("07927")

    def test_quote_invalid_postal_code(self):
        service_mock = Mock()
        service_mock.resolve.side_effect = InvalidPostalCodeError("Invalid ZIP code format.")
        with patch.object(ShippingQuoteView, "service", service_mock):
            request = self.factory.post("/api/shipping/quote/", {"zip_code": "ABCDE"}, format="json")
            response = ShippingQuoteView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        self.assertEqual(response.data["error"]["details"], {"zip_code": "ABCDE"})

    def test_quote_missing_field(self):
        service_mock = Mock()
        with patch.object(ShippingQuoteView, "service", service_mock):
            request = self.factory.post("/api/shipping/quote/", {}, format="json")
            response = ShippingQuoteView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        service_mock.resolve.assert_not_called()

    def test_address_lookup(self):
        service_mock = Mock()
        service_mock.lookup_address.return_value = AddressInfo(
            formatted_address="07927, USA",
            city="Unknown City",
            state="Unknown",
            country="US",
            postal_code="07927",
            full_address="Unknown City, Unknown 07927, US",
        )
        with patch.object(AddressLookupView, "service", service_mock):
            request = self.factory.post("/api/shipping/address/", {"zip_code": "07927"}, format="json")
            response = AddressLookupView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["full_address"], "Unknown City, Unknown 07927, US")


if __name__ == "__main__":
    unittest.main()
