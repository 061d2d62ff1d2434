from __future__ import annotations

from django.conf import settings

from apps.orders.container import build_order_service
from .pdf import HtmlCssToImageConverter
from .services import DocumentService


def build_document_service() -> DocumentService:
    converter = HtmlCssToImageConverter(
        api_key=settings.HTMLCSSTOIMAGE_API_KEY,
        url=settings.HTMLCSSTOIMAGE_URL,
        timeout=settings.PDF_SERVICE_TIMEOUT,
    )
    return DocumentService(orders=build_order_service(), converter=converter)
