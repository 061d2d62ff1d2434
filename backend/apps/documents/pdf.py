"""HTML to PDF conversion through the htmlcsstoimage API."""

from typing import Optional

import httpx

from apps.common import get_logger

logger = get_logger(__name__).bind(component="documents", layer="pdf")


class PdfUnavailable(Exception):
    """No converter is configured."""


class PdfConversionError(Exception):
    """The converter was called but did not produce a PDF."""


class HtmlCssToImageConverter:
    def __init__(
        self,
        api_key: str,
        url: str,
        timeout: float = 20.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.transport = transport
        self.logger = logger.bind(client="HtmlCssToImageConverter")

    def convert(self, html: str, filename: str) -> bytes:
        if not self.api_key:
            raise PdfUnavailable("No PDF service configured")
        payload = {
            "html": html,
            "css": "",
            "google_fonts": "Arial",
            "format": "pdf",
            "viewport_width": 800,
            "viewport_height": 1200,
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.url, json=payload, auth=(self.api_key, ""))
                response.raise_for_status()
                body = response.json()
                result_url = body.get("url") if isinstance(body, dict) else None
                if not isinstance(result_url, str) or not result_url:
                    raise PdfConversionError("PDF generation failed")
                pdf = client.get(result_url)
                pdf.raise_for_status()
        except httpx.HTTPError as exc:
            self.logger.warning("PDF service request failed", filename=filename, error=str(exc))
            raise PdfConversionError(f"PDF service error: {exc}") from exc
        except ValueError as exc:
            raise PdfConversionError("PDF service returned an unreadable response") from exc
        self.logger.info("Converted document to PDF", filename=filename, size=len(pdf.content))
        return pdf.content
