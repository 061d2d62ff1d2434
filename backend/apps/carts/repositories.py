from typing import Any, Callable
import time

from apps.common import get_logger
from .cart import Cart

logger = get_logger(__name__).bind(component="carts", layer="repository")

SESSION_KEY = "storefront_cart"


class SessionCartRepository:
    """Loads and stores the shopper's cart in the Django session."""

    def __init__(self, session_key: str = SESSION_KEY, clock: Callable[[], float] = time.time):
        self.session_key = session_key
        self.clock = clock

    def load(self, session: Any) -> Cart:
        return Cart.from_snapshot(session.get(self.session_key), clock=self.clock)

    def save(self, session: Any, cart: Cart) -> None:
        session[self.session_key] = cart.snapshot()
        # nested dict mutation is invisible to the session backend
        session.modified = True
        logger.debug("Cart saved to session", items=len(cart.items))
