"""Assertion helpers for testing oscroute message sets.

Each assertion produces a clear error message on failure::

    from oscroute.testing import assert_round_trip, assert_routes_to

    def test_freq(router):
        msg = assert_routes_to(router, "/synth/3/freq", SetFreq, id=3)
        assert_round_trip(router, msg)
"""

from typing import Any

from oscroute.messages import Message
from oscroute.router import Router


def assert_routes_to(
    router: Router,
    address: str,
    variant: type[Message],
    payload: Any = (),
    **fields: Any,
) -> Message:
    """Assert *address* dispatches to *variant* with the given field values.

    Returns the dispatched message for further checks.
    """
    message = router.dispatch(address, payload)
    assert type(message) is variant, (
        f"Expected {address!r} to route to {variant.__qualname__}, "
        f"got {type(message).__qualname__}"
    )
    for name, expected in fields.items():
        actual = getattr(message, name)
        assert actual == expected, (
            f"Field {name!r} of {variant.__qualname__}: expected {expected!r}, got {actual!r}"
        )
    assert message.args is payload or message.args == payload, (
        f"Payload changed in dispatch: sent {payload!r}, got {message.args!r}"
    )
    return message


def assert_round_trip(router: Router, message: Message) -> str:
    """Assert rendering *message* and dispatching the address rebuilds it.

    Returns the rendered address.
    """
    address = router.render(message)
    rebuilt = router.dispatch(address, message.args)
    assert rebuilt == message, (
        f"Round trip through {address!r} changed the message: {message!r} -> {rebuilt!r}"
    )
    return address
