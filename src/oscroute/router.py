"""Router — the public face of a compiled message set.

Ties the route table, dispatcher and renderer together, and bridges
both directions to the wire codec.
"""

from typing import Any

from oscroute.codec import decode_packet, encode_message
from oscroute.config import RouterConfig
from oscroute.messages import Message
from oscroute.routing.address import AddressPath
from oscroute.routing.dispatcher import Dispatcher
from oscroute.routing.renderer import AddressRenderer
from oscroute.routing.table import RouteEntry, RouteTable


class Router:
    """Compiled, read-only router.

    Usually obtained from ``MessageSet.compile()``::

        router = synth.compile()
        msg = router.dispatch("/synth/3/freq", [440.0])
        router.encode(msg)  # ("/synth/3/freq", [440.0])

    Thread safety:
        Nothing here mutates after construction, so concurrent
        ``dispatch`` and ``render`` calls need no locking.
    """

    __slots__ = ("_dispatcher", "_renderer", "_table", "config")

    def __init__(self, table: RouteTable, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._table = table
        self._dispatcher = Dispatcher(table, self.config)
        self._renderer = AddressRenderer(table, self.config)

    @property
    def routes(self) -> tuple[RouteEntry, ...]:
        """Return all routes in declaration (dispatch) order."""
        return self._table.entries

    # -- Inbound --

    def dispatch(self, address: str | AddressPath, payload: Any = ()) -> Message:
        """Route *address* to its message variant. See ``Dispatcher.route``."""
        return self._dispatcher.route(address, payload)

    def dispatch_datagram(self, dgram: bytes) -> list[Message]:
        """Decode an OSC packet and dispatch every message in it.

        Raises ``PacketError`` for undecodable packets; routing errors from
        any contained message propagate and no messages are returned.
        """
        return [self.dispatch(address, args) for address, args in decode_packet(dgram)]

    # -- Outbound --

    def render(self, message: Message) -> str:
        """Return the address for *message*. See ``AddressRenderer.render``."""
        return self._renderer.render(message)

    def encode(self, message: Message) -> tuple[str, list[Any]]:
        """Return the ``(address, args)`` pair handed to the wire codec.

        A list or tuple payload becomes the argument list; any other
        payload (including ``str`` and ``bytes``) is sent as a single
        argument.
        """
        payload = message.args
        if isinstance(payload, list | tuple):
            return self.render(message), list(payload)
        return self.render(message), [payload]

    def to_datagram(self, message: Message) -> bytes:
        """Encode *message* as an OSC message datagram."""
        address, args = self.encode(message)
        return encode_message(address, args)
