"""oscroute exception hierarchy.

Shared across the route table, dispatcher, renderer and codec adapter so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class OscRouteError(Exception):
    """Base for all oscroute-specific errors."""


class ConfigurationError(OscRouteError):
    """Raised when message declarations are invalid.

    Always surfaces while the route table is built, before any dispatch.
    """


@dataclass(slots=True, eq=False)
class DuplicateRoute(ConfigurationError):  # noqa: N818
    """Two declarations share a structurally identical template.

    Fatal: the table would be ambiguous, so no table is produced.
    """

    pattern: str
    first: str
    second: str

    def __str__(self) -> str:
        return (
            f"Duplicate route {self.pattern!r}: declared for {self.first} "
            f"and again for {self.second}"
        )


@dataclass(frozen=True, slots=True)
class RoutingError(OscRouteError):
    """A per-message failure. Carries the offending address for diagnostics."""

    address: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.address!r}: {self.detail}"
        return repr(self.address)


class MalformedAddress(RoutingError):  # noqa: N818
    """The address string violates OSC path syntax. Reject, do not route."""

    def __init__(self, address: str, detail: str = "Malformed OSC address") -> None:
        super().__init__(address=address, detail=detail)


class NoRouteMatched(RoutingError):  # noqa: N818
    """Every declared route was tried and none matched the address."""

    def __init__(self, address: str, detail: str = "No route matched") -> None:
        super().__init__(address=address, detail=detail)


@dataclass(slots=True, eq=False)
class CaptureTypeMismatch(OscRouteError):  # noqa: N818
    """Captured segment text could not be converted to its declared type.

    The dispatcher recovers from this by trying the next candidate route.
    """

    text: str
    type_tag: str
    name: str = ""

    def __str__(self) -> str:
        target = f"capture {self.name!r}" if self.name else "capture"
        return f"Cannot convert {self.text!r} to {self.type_tag} for {target}"


class PacketError(OscRouteError):
    """The external codec could not decode or encode an OSC packet."""
