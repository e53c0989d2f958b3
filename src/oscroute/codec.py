"""Adapter to the OSC wire codec (python-osc).

Keeps binary framing out of the routing core: the router only ever sees
``(address, args)`` pairs. Bundles are flattened in packet order and
their timetags dropped; scheduling is left to the caller.
"""

from collections.abc import Iterable
from typing import Any

from pythonosc.osc_message_builder import BuildError, OscMessageBuilder
from pythonosc.osc_packet import OscPacket, ParseError

from oscroute.errors import PacketError


def decode_packet(dgram: bytes) -> list[tuple[str, list[Any]]]:
    """Decode an OSC message or bundle into ``(address, args)`` pairs.

    Raises ``PacketError`` if *dgram* is not a valid OSC packet.
    """
    try:
        packet = OscPacket(dgram)
    except ParseError as exc:
        msg = f"Could not decode OSC packet: {exc}"
        raise PacketError(msg) from exc
    return [(timed.message.address, list(timed.message.params)) for timed in packet.messages]


def encode_message(address: str, args: Iterable[Any] = ()) -> bytes:
    """Encode *address* and *args* into an OSC message datagram.

    Argument types are inferred by python-osc (int, float, str, bytes,
    bool, None, nested lists).

    Raises ``PacketError`` if an argument cannot be encoded.
    """
    builder = OscMessageBuilder(address=address)
    try:
        for arg in args:
            builder.add_arg(arg)
        return builder.build().dgram
    except (BuildError, ValueError) as exc:
        msg = f"Could not encode OSC message for {address!r}: {exc}"
        raise PacketError(msg) from exc
