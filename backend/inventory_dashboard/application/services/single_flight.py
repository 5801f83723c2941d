"""Single-flight guard: at most one in-flight operation per key."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from inventory_dashboard.domain.exceptions import OperationInProgressError

logger = logging.getLogger(__name__)


class SingleFlight:
    """Tracks in-flight keys on the event loop.

    A second claim on a busy key is rejected rather than queued, since a
    duplicate submit would race the first against the same record.
    """

    def __init__(self) -> None:
        self._in_flight: set[tuple[str, str]] = set()

    @asynccontextmanager
    async def claim(self, collection: str, key: str) -> AsyncIterator[None]:
        token = (collection, key)
        if token in self._in_flight:
            logger.warning("Rejected concurrent save for %s '%s'", collection, key)
            raise OperationInProgressError(collection, key)
        self._in_flight.add(token)
        try:
            yield
        finally:
            self._in_flight.discard(token)

    def is_busy(self, collection: str, key: str) -> bool:
        return (collection, key) in self._in_flight
