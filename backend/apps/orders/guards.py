import time
from typing import Any, Callable

from rest_framework import status

from apps.api.exceptions import ApplicationError
from apps.common import get_logger

logger = get_logger(__name__).bind(component="orders", layer="guard")

IN_FLIGHT_KEY = "order_submission_in_flight"
IN_FLIGHT_TTL_SECONDS = 120


class SubmissionInProgressError(ApplicationError):
    def __init__(self):
        super().__init__(
            "CONFLICT",
            "An order submission is already in progress",
            status_code=status.HTTP_409_CONFLICT,
        )


class SubmissionGuard:
    """Session flag that blocks a second checkout while one is outstanding.

    A flag older than ``ttl`` is treated as abandoned so a crashed request
    cannot lock the shopper out.
    """

    def __init__(
        self,
        session: Any,
        key: str = IN_FLIGHT_KEY,
        ttl: float = IN_FLIGHT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.session = session
        self.key = key
        self.ttl = ttl
        self.clock = clock

    def _persist(self):
        save = getattr(self.session, "save", None)
        if callable(save):
            save()

    def acquire(self) -> bool:
        started = self.session.get(self.key)
        now = self.clock()
        if started is not None and now - started < self.ttl:
            logger.info("Rejected duplicate order submission", started=started)
            return False
        self.session[self.key] = now
        # written straight away so a parallel request from the same session sees it
        self._persist()
        return True

    def release(self) -> None:
        if self.key in self.session:
            del self.session[self.key]
            self._persist()
