import unittest
import uuid
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.documents.dtos import GeneratedDocument
from apps.documents.renderer import InvalidDocumentTypeError
from apps.documents.services import DocumentOrderNotFoundError
from apps.documents.views import OrderDocumentView, OrderEmailPreviewView

ORDER_ID = uuid.UUID("0b7e3c1a-7d5e-4f52-9a77-2f1d3c4b5a69")


class DocumentViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def get(self, document_type, service_mock):
        with patch.object(OrderDocumentView, "service", service_mock):
            request = self.factory.get(f"/api/orders/{ORDER_ID}/documents/{document_type}/")
            return OrderDocumentView.as_view()(
                request, order_id=ORDER_ID, document_type=document_type
            )

    def test_pdf_attachment(self):
        service_mock = Mock()
        service_mock.generate.return_value = GeneratedDocument(
            content=b"%PDF", content_type="application/pdf", filename="quote_ORD-1.pdf"
        )
        response = self.get("quote", service_mock)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "application/pdf")
        self.assertIn('filename="quote_ORD-1.pdf"', response["Content-Disposition"])
        self.assertEqual(response.content, b"%PDF")

    def test_html_fallback_json(self):
        service_mock = Mock()
        service_mock.generate.return_value = GeneratedDocument(
            content=b"<html>doc</html>",
            content_type="text/html; charset=utf-8",
            filename="receipt_ORD-1.html",
            error="No PDF service configured",
        )
        response = self.get("receipt", service_mock)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["html"], "<html>doc</html>")
        self.assertEqual(response.data["filename"], "receipt_ORD-1.html")
        self.assertEqual(response.data["error"], "No PDF service configured")

    def test_unknown_type(self):
        service_mock = Mock()
        service_mock.generate.side_effect = InvalidDocumentTypeError("Unknown document type: invoice")
        response = self.get("invoice", service_mock)
        self.assertEqual(response.status_code, 400)

    def test_unknown_order(self):
        service_mock = Mock()
        service_mock.generate.side_effect = DocumentOrderNotFoundError("missing")
        response = self.get("quote", service_mock)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["code"], "NOT_FOUND")

    def test_email_preview(self):
        service_mock = Mock()
        service_mock.render_email.return_value = "<html>mail</html>"
        with patch.object(OrderEmailPreviewView, "service", service_mock):
            request = self.factory.get(f"/api/orders/{ORDER_ID}/emails/confirmation/")
            response = OrderEmailPreviewView.as_view()(
                request, order_id=ORDER_ID, kind="confirmation"
            )
        self.assertEqual(response.data, {"kind": "confirmation", "html": "<html>mail</html>"})

    def test_email_preview_unknown_kind(self):
        service_mock = Mock()
        service_mock.render_email.side_effect = InvalidDocumentTypeError("Unknown email kind: reminder")
        with patch.object(OrderEmailPreviewView, "service", service_mock):
            request = self.factory.get(f"/api/orders/{ORDER_ID}/emails/reminder/")
            response = OrderEmailPreviewView.as_view()(request, order_id=ORDER_ID, kind="reminder")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")


if __name__ == "__main__":
    unittest.main()
