"""HTML rendering for order quotes, receipts and emails.

Rendering is a pure function of the hydrated order and the generation date:
the same order rendered twice on the same day yields identical markup.
Totals are printed exactly as persisted on the order.
"""

from datetime import date
from typing import Any, Dict

from django.conf import settings
from django.template.loader import render_to_string

from apps.orders.dtos import OrderDTO

DOCUMENT_TEMPLATE = "documents/order_document.html"
EMAIL_TEMPLATE = "documents/order_email.html"

DOCUMENT_TITLES = {"quote": "QUOTE", "receipt": "RECEIPT"}
EMAIL_TITLES = {
    "confirmation": "Order Confirmation",
    "thank_you": "Thank You for Your Order!",
}

DEFAULT_NOTE = "Chargers and cables will be included with the order."

COMPANY = {
    "tagline": "Global Event Technology Solutions Partner • hire@oneworldrental.com",
    "regions": "UK • USA • CANADA • EUROPE • UAE • SINGAPORE • AUSTRALIA",
    "branch_lines": [
        "One World Rental USA Inc,",
        "85 Horsehill Road, Cedar Knolls,",
        "NJ 07927, USA",
        "Tel: +1 602 737 0011",
        "E-Mail: givergy@oneworldrental.com",
    ],
}


class InvalidDocumentTypeError(ValueError):
    pass


def _company() -> Dict[str, Any]:
    return getattr(settings, "DOCUMENT_COMPANY", None) or COMPANY


def render_order_document(order: OrderDTO, document_type: str, generated_on: date) -> str:
    title = DOCUMENT_TITLES.get(document_type)
    if title is None:
        raise InvalidDocumentTypeError(f"Unknown document type: {document_type}")
    context = {
        "order": order,
        "title": title,
        "generated_on": generated_on,
        "company": _company(),
        "default_note": DEFAULT_NOTE,
    }
    return render_to_string(DOCUMENT_TEMPLATE, context)


def render_order_email(order: OrderDTO, kind: str) -> str:
    title = EMAIL_TITLES.get(kind)
    if title is None:
        raise InvalidDocumentTypeError(f"Unknown email kind: {kind}")
    context = {
        "order": order,
        "title": title,
        "contact_email": getattr(settings, "STOREFRONT_CONTACT_EMAIL", "contact@company.com"),
    }
    return render_to_string(EMAIL_TEMPLATE, context)
