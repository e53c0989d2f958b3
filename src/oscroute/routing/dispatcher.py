"""Dispatcher — first-match routing of addresses to message variants.

Routes are tried in declaration order; the first one that matches
structurally *and* converts every capture wins. A capture that fails to
convert is not an error, it just means the next candidate gets a turn.
"""

import logging
from typing import Any

from oscroute.config import RouterConfig
from oscroute.errors import CaptureTypeMismatch, MalformedAddress, NoRouteMatched
from oscroute.messages import Message
from oscroute.routing.address import AddressPath, parse_address
from oscroute.routing.table import RouteTable

logger = logging.getLogger("oscroute.dispatch")


class Dispatcher:
    """Match incoming addresses against a ``RouteTable``.

    Holds no mutable state; one instance may serve many threads.
    """

    __slots__ = ("_config", "_table")

    def __init__(self, table: RouteTable, config: RouterConfig | None = None) -> None:
        self._table = table
        self._config = config or RouterConfig()

    def route(self, address: str | AddressPath, payload: Any = ()) -> Message:
        """Build the message variant for *address*, carrying *payload*.

        Raises ``MalformedAddress`` if a raw address fails to parse.
        Raises ``NoRouteMatched`` if no declared route accepts it.
        """
        if isinstance(address, AddressPath):
            path = address
        else:
            try:
                path = parse_address(address)
            except MalformedAddress as exc:
                if self._config.log_misses:
                    logger.info("Rejected OSC address %s", exc)
                raise

        for entry in self._table.candidates(len(path)):
            captured = entry.template.match(path)
            if captured is None:
                continue
            try:
                values = entry.template.convert(captured)
            except CaptureTypeMismatch as exc:
                logger.debug("Skipping %r: %s", entry.pattern, exc)
                continue

            message = entry.variant(**values, args=payload)
            if self._config.debug:
                logger.debug("Dispatched %s -> %r", path, message)
            return message

        if self._config.log_misses:
            logger.info("No route matched OSC address %r", str(path))
        raise NoRouteMatched(str(path))
