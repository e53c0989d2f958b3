"""Segment matchers and RouteTemplate frozen dataclasses.

A template is declared as a pattern string and compiled once::

    "/synth/{id:int}/freq" -> (Literal("synth"), Capture("id", "int"), Literal("freq"))
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from oscroute.errors import ConfigurationError
from oscroute.routing.address import AddressPath
from oscroute.routing.params import CONVERTERS, Converter, convert_capture, format_capture


@dataclass(frozen=True, slots=True)
class Literal:
    """Matches a segment whose text equals ``text`` exactly."""

    text: str


@dataclass(frozen=True, slots=True)
class Capture:
    """Matches any single segment and yields its text for conversion.

    ``name`` is excluded from equality: two templates that differ only in
    capture names are structurally identical.
    """

    name: str = field(compare=False)
    type_tag: str = "str"


SegmentMatcher = Literal | Capture


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A compiled address pattern. Fixed length, one matcher per segment."""

    pattern: str
    matchers: tuple[SegmentMatcher, ...]
    converters: Mapping[str, Converter] = field(
        default_factory=lambda: CONVERTERS, compare=False, repr=False
    )

    def __len__(self) -> int:
        return len(self.matchers)

    @property
    def capture_names(self) -> tuple[str, ...]:
        """Capture field names, in the order they appear in the pattern."""
        return tuple(m.name for m in self.matchers if isinstance(m, Capture))

    def match(self, path: AddressPath) -> tuple[str, ...] | None:
        """Return the raw captured texts, or ``None`` if *path* does not fit.

        Lengths must be equal and every literal must match byte-exact.
        """
        if len(path.segments) != len(self.matchers):
            return None
        captured: list[str] = []
        for matcher, segment in zip(self.matchers, path.segments, strict=True):
            if isinstance(matcher, Capture):
                captured.append(segment)
            elif matcher.text != segment:
                return None
        return tuple(captured)

    def convert(self, captured: tuple[str, ...]) -> dict[str, Any]:
        """Convert captured texts into typed values keyed by capture name.

        Raises ``CaptureTypeMismatch`` on the first text that fails.
        """
        captures = [m for m in self.matchers if isinstance(m, Capture)]
        return {
            capture.name: convert_capture(
                text, capture.type_tag, name=capture.name, converters=self.converters
            )
            for capture, text in zip(captures, captured, strict=True)
        }

    def build(self, values: Mapping[str, Any]) -> str:
        """Render the pattern with *values* substituted for its captures.

        Raises ``CaptureTypeMismatch`` if a value has no valid segment form.
        """
        parts: list[str] = []
        for matcher in self.matchers:
            if isinstance(matcher, Capture):
                parts.append(
                    format_capture(
                        values[matcher.name],
                        matcher.type_tag,
                        name=matcher.name,
                        converters=self.converters,
                    )
                )
            else:
                parts.append(matcher.text)
        return "/" + "/".join(parts)


def parse_template(
    pattern: str,
    converters: Mapping[str, Converter] = CONVERTERS,
) -> RouteTemplate:
    """Parse a pattern string into a ``RouteTemplate``.

    Examples::

        "/status"            -> (Literal("status"),)
        "/user/{name}"       -> (Literal("user"), Capture("name", "str"))
        "/synth/{id:int}/on" -> (Literal("synth"), Capture("id", "int"), Literal("on"))

    Raises ``ConfigurationError`` for malformed patterns, unknown type
    tags and repeated capture names.
    """
    if not pattern.startswith("/"):
        msg = f"Route pattern must start with '/': {pattern!r}"
        raise ConfigurationError(msg)

    matchers: list[SegmentMatcher] = []
    seen: set[str] = set()
    for part in pattern[1:].split("/"):
        if not part:
            msg = f"Route pattern contains an empty segment: {pattern!r}"
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            matchers.append(_parse_capture(part[1:-1], pattern, converters, seen))
        elif "{" in part or "}" in part:
            msg = (
                f"Capture must fill a whole segment, e.g. '/{{id:int}}', "
                f"got {part!r} in {pattern!r}"
            )
            raise ConfigurationError(msg)
        else:
            matchers.append(Literal(part))
    return RouteTemplate(pattern=pattern, matchers=tuple(matchers), converters=converters)


def _parse_capture(
    inner: str,
    pattern: str,
    converters: Mapping[str, Converter],
    seen: set[str],
) -> Capture:
    if ":" in inner:
        name, type_tag = inner.split(":", 1)
    else:
        name, type_tag = inner, "str"

    if not name.isidentifier():
        msg = f"Capture name {name!r} is not a valid identifier in {pattern!r}"
        raise ConfigurationError(msg)
    if type_tag not in converters:
        known = ", ".join(sorted(converters))
        msg = f"Unknown capture type {type_tag!r} in {pattern!r} (known: {known})"
        raise ConfigurationError(msg)
    if name in seen:
        msg = f"Capture name {name!r} used twice in {pattern!r}"
        raise ConfigurationError(msg)
    seen.add(name)
    return Capture(name=name, type_tag=type_tag)
