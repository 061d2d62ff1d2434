from __future__ import annotations

from datetime import date
from typing import Any, Callable

from django.utils import timezone

from apps.common import get_logger
from .dtos import GeneratedDocument
from .pdf import PdfConversionError, PdfUnavailable
from .protocols import OrderReaderProtocol, PdfConverterProtocol
from .renderer import (
    DOCUMENT_TITLES,
    EMAIL_TITLES,
    InvalidDocumentTypeError,
    render_order_document,
    render_order_email,
)

logger = get_logger(__name__).bind(component="documents", layer="service")

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
PDF_CONTENT_TYPE = "application/pdf"


class DocumentOrderNotFoundError(Exception):
    pass


class DocumentService:
    def __init__(
        self,
        orders: OrderReaderProtocol,
        converter: PdfConverterProtocol,
        today: Callable[[], date] = timezone.localdate,
    ):
        self.orders = orders
        self.converter = converter
        self.today = today
        self.logger = logger.bind(service="DocumentService")

    def _load(self, order_id: Any):
        order = self.orders.get_order(order_id)
        if order is None:
            raise DocumentOrderNotFoundError(f"Order {order_id} not found")
        return order

    def generate(self, order_id: Any, document_type: str) -> GeneratedDocument:
        if document_type not in DOCUMENT_TITLES:
            raise InvalidDocumentTypeError(f"Unknown document type: {document_type}")
        order = self._load(order_id)
        html = render_order_document(order, document_type, self.today())
        filename = f"{document_type}_{order.order_number}.pdf"
        self.logger.debug(
            "Rendered order document", order_id=order.id, document_type=document_type
        )
        try:
            pdf = self.converter.convert(html, filename)
        except (PdfUnavailable, PdfConversionError) as exc:
            self.logger.warning(
                "Returning HTML instead of PDF", order_id=order.id, reason=str(exc)
            )
            return GeneratedDocument(
                content=html.encode("utf-8"),
                content_type=HTML_CONTENT_TYPE,
                filename=filename.replace(".pdf", ".html"),
                error=str(exc),
            )
        return GeneratedDocument(content=pdf, content_type=PDF_CONTENT_TYPE, filename=filename)

    def render_email(self, order_id: Any, kind: str) -> str:
        if kind not in EMAIL_TITLES:
            raise InvalidDocumentTypeError(f"Unknown email kind: {kind}")
        return render_order_email(self._load(order_id), kind)
