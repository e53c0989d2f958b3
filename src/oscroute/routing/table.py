"""RouteTable — the closed, ordered set of compiled routes.

Built once from the declarations, read-only afterwards. Safe to share
between threads once built: no method mutates it.
"""

import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from oscroute.errors import ConfigurationError, DuplicateRoute
from oscroute.messages import Declaration, Message
from oscroute.routing.params import CONVERTERS, Converter
from oscroute.routing.template import RouteTemplate, parse_template

logger = logging.getLogger("oscroute.table")


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One compiled route: a template and the message class it builds."""

    template: RouteTemplate
    variant: type[Message]
    index: int

    @property
    def pattern(self) -> str:
        return self.template.pattern


def _qualname(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _check_variant(template: RouteTemplate, cls: type) -> None:
    """Verify *cls* can be built from *template*'s captures plus ``args``."""
    if not (
        isinstance(cls, type) and issubclass(cls, Message) and dataclasses.is_dataclass(cls)
    ):
        msg = f"{cls!r} for {template.pattern!r} must be a Message dataclass"
        raise ConfigurationError(msg)

    init_fields = {f.name: f for f in dataclasses.fields(cls) if f.init}
    for name in template.capture_names:
        if name not in init_fields or name == "args":
            msg = (
                f"Capture {name!r} in {template.pattern!r} is not a field "
                f"of {_qualname(cls)}"
            )
            raise ConfigurationError(msg)

    captures = set(template.capture_names)
    for name, f in init_fields.items():
        required = (
            f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        )
        if required and name not in captures:
            msg = (
                f"Field {name!r} of {_qualname(cls)} has no default and no "
                f"capture in {template.pattern!r}"
            )
            raise ConfigurationError(msg)


class RouteTable:
    """Ordered, immutable route table.

    Usage::

        table = RouteTable.build([
            Declaration("/synth/{id:int}/freq", SetFreq),
            Declaration("/synth/{id:int}/gate", SetGate),
        ])
        path = parse_address("/synth/3/freq")
        for entry in table.candidates(len(path)):
            ...
    """

    __slots__ = ("_by_length", "_by_variant", "_entries")

    def __init__(self, entries: tuple[RouteEntry, ...]) -> None:
        self._entries = entries
        # Only same-length templates can match; order within a bucket is
        # declaration order.
        by_length: dict[int, list[RouteEntry]] = {}
        for entry in entries:
            by_length.setdefault(len(entry.template), []).append(entry)
        self._by_length: dict[int, tuple[RouteEntry, ...]] = {
            length: tuple(bucket) for length, bucket in by_length.items()
        }
        self._by_variant: dict[type[Message], RouteEntry] = {e.variant: e for e in entries}

    @classmethod
    def build(
        cls,
        declarations: Iterable[Declaration],
        converters: Mapping[str, Converter] | None = None,
    ) -> "RouteTable":
        """Compile *declarations* into a table.

        Raises ``DuplicateRoute`` if two templates are structurally identical
        and ``ConfigurationError`` for any other invalid declaration. No
        table is produced on failure.
        """
        merged: Mapping[str, Converter] = (
            {**CONVERTERS, **converters} if converters else CONVERTERS
        )
        entries: list[RouteEntry] = []
        seen_templates: dict[tuple[object, ...], RouteEntry] = {}
        seen_variants: dict[type, RouteEntry] = {}

        for index, decl in enumerate(declarations):
            template = parse_template(decl.pattern, merged)
            _check_variant(template, decl.variant)

            previous = seen_templates.get(template.matchers)
            if previous is not None:
                raise DuplicateRoute(
                    pattern=decl.pattern,
                    first=f"{_qualname(previous.variant)} ({previous.pattern!r})",
                    second=_qualname(decl.variant),
                )
            if decl.variant in seen_variants:
                msg = (
                    f"{_qualname(decl.variant)} is declared for both "
                    f"{seen_variants[decl.variant].pattern!r} and {decl.pattern!r}"
                )
                raise ConfigurationError(msg)

            entry = RouteEntry(template=template, variant=decl.variant, index=index)
            seen_templates[template.matchers] = entry
            seen_variants[decl.variant] = entry
            entries.append(entry)

        logger.debug("Built route table with %d routes", len(entries))
        return cls(tuple(entries))

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        """All entries in declaration order."""
        return self._entries

    def candidates(self, length: int) -> tuple[RouteEntry, ...]:
        """Entries whose template has *length* segments, in declaration order."""
        return self._by_length.get(length, ())

    def entry_for(self, variant: type[Message]) -> RouteEntry:
        """Return the entry that builds *variant*.

        Raises ``KeyError`` if the class is not declared in this table.
        """
        entry = self._by_variant.get(variant)
        if entry is None:
            msg = f"Message type not registered: {variant.__qualname__}"
            raise KeyError(msg)
        return entry

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
