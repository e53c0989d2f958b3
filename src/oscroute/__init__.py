"""oscroute — typed Open Sound Control address routing.

Declares OSC messages as frozen dataclasses bound to address patterns,
routes incoming ``(address, args)`` pairs to the matching class, and
renders outgoing addresses back from message objects.

Basic usage::

    from dataclasses import dataclass

    from oscroute import Message, MessageSet

    synth = MessageSet()

    @synth.message("/synth/{id:int}/freq")
    @dataclass(frozen=True, slots=True)
    class SetFreq(Message):
        id: int

    router = synth.compile()
    msg = router.dispatch("/synth/3/freq", [440.0])
    router.render(msg)  # "/synth/3/freq"
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "AddressPath",
    "CaptureTypeMismatch",
    "ConfigurationError",
    "Converter",
    "DuplicateRoute",
    "MalformedAddress",
    "Message",
    "MessageSet",
    "NoRouteMatched",
    "OscRouteError",
    "PacketError",
    "Router",
    "RouterConfig",
    "parse_address",
]

# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "AddressPath": "oscroute.routing.address",
    "parse_address": "oscroute.routing.address",
    "Converter": "oscroute.routing.params",
    "Message": "oscroute.messages",
    "MessageSet": "oscroute.messages",
    "Router": "oscroute.router",
    "RouterConfig": "oscroute.config",
    "CaptureTypeMismatch": "oscroute.errors",
    "ConfigurationError": "oscroute.errors",
    "DuplicateRoute": "oscroute.errors",
    "MalformedAddress": "oscroute.errors",
    "NoRouteMatched": "oscroute.errors",
    "OscRouteError": "oscroute.errors",
    "PacketError": "oscroute.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import oscroute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
