"""Message variants and the declarative MessageSet builder.

Mutable during setup (``@messages.message(...)`` at import time).
Frozen when ``compile()`` builds the route table.

Usage::

    synth = MessageSet()

    @synth.message("/synth/{id:int}/freq")
    @dataclass(frozen=True, slots=True)
    class SetFreq(Message):
        id: int

    router = synth.compile()
    router.dispatch("/synth/3/freq", [440.0])  # SetFreq(id=3, args=[440.0])
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from oscroute.config import RouterConfig
    from oscroute.router import Router

M = TypeVar("M", bound="type[Message]")


@dataclass(frozen=True, slots=True, kw_only=True)
class Message:
    """Base for every message variant.

    Subclasses declare one field per capture in their address pattern.
    ``args`` holds the argument payload exactly as the codec supplied it.
    """

    args: Any = ()


@dataclass(frozen=True, slots=True)
class Declaration:
    """A pattern bound to the message class it dispatches to."""

    pattern: str
    variant: type[Message]


class MessageSet:
    """An ordered set of message declarations.

    Declaration order is dispatch order: when two patterns can match the
    same address, the one declared first wins.

    ``include()`` splices another set in place, under a prefix that may
    itself carry captures::

        by_id = MessageSet()

        @by_id.message("/say")
        @dataclass(frozen=True, slots=True)
        class Say(Message):
            renderer: int

        renderer = MessageSet()
        renderer.include(by_id, prefix="/renderer/{renderer:int}")
    """

    __slots__ = ("_compiled", "_entries")

    def __init__(self) -> None:
        self._entries: list[Declaration | tuple[str, "MessageSet"]] = []
        self._compiled = False

    def message(self, pattern: str) -> Callable[[M], M]:
        """Register a message class for *pattern* via decorator."""

        def decorator(cls: M) -> M:
            self._check_not_compiled()
            self._entries.append(Declaration(pattern, cls))
            return cls

        return decorator

    def include(self, other: "MessageSet", prefix: str = "") -> None:
        """Splice *other*'s declarations here, each pattern under *prefix*.

        *other* is read when this set is compiled, so messages added to it
        later are still picked up.
        """
        self._check_not_compiled()
        if other is self:
            msg = "A MessageSet cannot include itself."
            raise ValueError(msg)
        self._entries.append((prefix.rstrip("/"), other))

    def declarations(self) -> list[Declaration]:
        """Return the flattened declarations in dispatch order."""
        result: list[Declaration] = []
        self._flatten("", result, ())
        return result

    def _flatten(
        self,
        prefix: str,
        result: list[Declaration],
        stack: tuple["MessageSet", ...],
    ) -> None:
        if self in stack:
            msg = "MessageSet includes form a cycle."
            raise ValueError(msg)
        for entry in self._entries:
            if isinstance(entry, Declaration):
                result.append(Declaration(prefix + entry.pattern, entry.variant))
            else:
                sub_prefix, other = entry
                other._flatten(prefix + sub_prefix, result, (*stack, self))

    def compile(self, config: "RouterConfig | None" = None) -> "Router":
        """Build the route table and return a ``Router``. Freezes this set."""
        from oscroute.router import Router
        from oscroute.routing.table import RouteTable

        cfg = config
        if cfg is None:
            from oscroute.config import RouterConfig

            cfg = RouterConfig()
        table = RouteTable.build(self.declarations(), converters=cfg.converters)
        self._compiled = True
        return Router(table, cfg)

    def _check_not_compiled(self) -> None:
        if self._compiled:
            msg = "Cannot add messages after compilation."
            raise RuntimeError(msg)
