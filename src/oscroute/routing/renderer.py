"""AddressRenderer — the inverse of dispatch.

Walks a message's template: literals are emitted as-is, captures are
read from the message's fields and formatted by their converter.
"""

import logging

from oscroute.config import RouterConfig
from oscroute.messages import Message
from oscroute.routing.table import RouteTable

logger = logging.getLogger("oscroute.render")


class AddressRenderer:
    """Rebuild outgoing addresses from message variants."""

    __slots__ = ("_config", "_table")

    def __init__(self, table: RouteTable, config: RouterConfig | None = None) -> None:
        self._table = table
        self._config = config or RouterConfig()

    def render(self, message: Message) -> str:
        """Return the address *message* would be sent to.

        Raises ``KeyError`` if the message class is not in the table.
        Raises ``CaptureTypeMismatch`` if a capture field holds a value
        with no valid segment form (e.g. a ``str`` containing ``/``).
        """
        entry = self._table.entry_for(type(message))
        template = entry.template
        values = {name: getattr(message, name) for name in template.capture_names}
        address = template.build(values)
        if self._config.debug:
            logger.debug("Rendered %r -> %s", message, address)
        return address
