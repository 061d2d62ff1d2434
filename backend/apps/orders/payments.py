"""Stripe Checkout adapter for the order pipeline."""

from typing import Dict

import stripe

from apps.common import get_logger
from .dtos import PaymentSession

logger = get_logger(__name__).bind(component="orders", layer="payments")


class PaymentGatewayError(Exception):
    """The payment provider rejected the request or could not be reached."""


class StripeCheckoutGateway:
    def __init__(
        self,
        secret_key: str,
        success_url: str,
        cancel_url: str,
        product_name: str = "Equipment rental",
    ):
        self.secret_key = secret_key
        self.success_url = success_url
        self.cancel_url = cancel_url
        self.product_name = product_name
        self.logger = logger.bind(gateway="StripeCheckoutGateway")

    def _require_key(self):
        if not self.secret_key:
            raise PaymentGatewayError("Stripe secret key is not configured")

    def create_session(
        self, amount_minor: int, currency: str, metadata: Dict[str, str]
    ) -> PaymentSession:
        self._require_key()
        order_number = metadata.get("order_number", "")
        try:
            session = stripe.checkout.Session.create(
                api_key=self.secret_key,
                mode="payment",
                line_items=[
                    {
                        "price_data": {
                            "currency": currency,
                            "unit_amount": amount_minor,
                            "product_data": {
                                "name": f"{self.product_name} {order_number}".strip()
                            },
                        },
                        "quantity": 1,
                    }
                ],
                metadata=metadata,
                client_reference_id=metadata.get("order_id"),
                success_url=self.success_url,
                cancel_url=self.cancel_url,
            )
        except stripe.StripeError as exc:
            self.logger.error(
                "Stripe checkout session creation failed",
                order_number=order_number,
                error=str(exc),
            )
            raise PaymentGatewayError(str(exc)) from exc
        self.logger.info(
            "Created Stripe checkout session",
            order_number=order_number,
            session_id=session.id,
            amount_minor=amount_minor,
        )
        return PaymentSession(ref=session.id, redirect_url=session.url)

    def session_is_paid(self, session_ref: str) -> bool:
        self._require_key()
        try:
            session = stripe.checkout.Session.retrieve(session_ref, api_key=self.secret_key)
        except stripe.StripeError as exc:
            self.logger.error(
                "Stripe checkout session lookup failed", session_id=session_ref, error=str(exc)
            )
            raise PaymentGatewayError(str(exc)) from exc
        return session.payment_status == "paid"
