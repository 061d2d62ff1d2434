import unittest
from datetime import date
from decimal import Decimal

import httpx

from apps.documents.pdf import HtmlCssToImageConverter, PdfConversionError, PdfUnavailable
from apps.documents.renderer import InvalidDocumentTypeError
from apps.documents.services import DocumentOrderNotFoundError, DocumentService
from apps.orders.dtos import OrderDTO, OrderItemDTO

ORDER_ID = "0b7e3c1a-7d5e-4f52-9a77-2f1d3c4b5a69"


def make_order():
    return OrderDTO(
        id=ORDER_ID,
        order_number="ORD-20261019-00007",
        customer_name="Dana Reyes",
        customer_email="dana@example.com",
        customer_phone="555-0100",
        company_name="",
        event_name="Spring Expo",
        event_start_date=None,
        event_end_date=None,
        postal_code="07927",
        shipping_address="",
        message="",
        subtotal=Decimal("119.25"),
        shipping_cost=Decimal("75.00"),
        collection_cost=Decimal("75.00"),
        total_amount=Decimal("269.25"),
        status="pending",
        payment_session_ref="cs_1",
        items=[OrderItemDTO("p-1", "iPad", Decimal("39.75"), 3, Decimal("119.25"))],
    )


class FakeOrders:
    def __init__(self, order=None):
        self.order = order

    def get_order(self, order_id):
        if self.order and str(order_id) == self.order.id:
            return self.order
        return None


class FakeConverter:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def convert(self, html, filename):
        self.calls.append((html, filename))
        if self.error:
            raise self.error
        return b"%PDF-1.7 fake"


class DocumentServiceTests(unittest.TestCase):
    def make_service(self, converter, order=None):
        return DocumentService(
            orders=FakeOrders(order or make_order()),
            converter=converter,
            today=lambda: date(2026, 10, 19),
        )

    def test_pdf_returned_when_converter_succeeds(self):
        converter = FakeConverter()
        document = self.make_service(converter).generate(ORDER_ID, "receipt")
        self.assertTrue(document.is_pdf)
        self.assertEqual(document.content, b"%PDF-1.7 fake")
        self.assertEqual(document.filename, "receipt_ORD-20261019-00007.pdf")
        self.assertIsNone(document.error)
        html, filename = converter.calls[0]
        self.assertIn("RECEIPT", html)
        self.assertEqual(filename, "receipt_ORD-20261019-00007.pdf")

    def test_html_fallback_when_converter_missing(self):
        converter = FakeConverter(PdfUnavailable("No PDF service configured"))
        document = self.make_service(converter).generate(ORDER_ID, "quote")
        self.assertFalse(document.is_pdf)
        self.assertEqual(document.filename, "quote_ORD-20261019-00007.html")
        self.assertEqual(document.error, "No PDF service configured")
        self.assertIn(b"ORD-20261019-00007", document.content)

    def test_html_fallback_when_converter_fails(self):
        converter = FakeConverter(PdfConversionError("PDF service error: 502"))
        document = self.make_service(converter).generate(ORDER_ID, "quote")
        self.assertEqual(document.content_type, "text/html; charset=utf-8")
        self.assertIn("502", document.error)

    def test_unknown_order(self):
        service = self.make_service(FakeConverter())
        with self.assertRaises(DocumentOrderNotFoundError):
            service.generate("00000000-0000-4000-8000-000000000000", "quote")

    def test_unknown_type_checked_before_lookup(self):
        converter = FakeConverter()
        service = DocumentService(orders=FakeOrders(None), converter=converter)
        with self.assertRaises(InvalidDocumentTypeError):
            service.generate(ORDER_ID, "invoice")
        self.assertEqual(converter.calls, [])

    def test_render_email(self):
        html = self.make_service(FakeConverter()).render_email(ORDER_ID, "confirmation")
        self.assertIn("Order Confirmation", html)

    def test_unknown_email_kind_checked_before_lookup(self):
        service = DocumentService(orders=FakeOrders(None), converter=FakeConverter())
        with self.assertRaises(InvalidDocumentTypeError):
            service.render_email(ORDER_ID, "reminder")

    def test_html_fallback_when_converter_reply_is_not_an_object(self):
        converter = HtmlCssToImageConverter(
            api_key="user-id:api-key",
            url="https://hcti.example.test/v1/image",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=["x"])),
        )
        document = self.make_service(converter).generate(ORDER_ID, "quote")
        self.assertFalse(document.is_pdf)
        self.assertEqual(document.filename, "quote_ORD-20261019-00007.html")
        self.assertEqual(document.error, "PDF generation failed")


if __name__ == "__main__":
    unittest.main()
