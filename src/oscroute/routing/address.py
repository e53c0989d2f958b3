"""AddressPath — a parsed, slash-delimited OSC address."""

from dataclasses import dataclass

from oscroute.errors import MalformedAddress


@dataclass(frozen=True, slots=True)
class AddressPath:
    """Ordered, non-empty segments of a concrete OSC address.

    ``"/synth/3/freq"`` -> ``AddressPath(("synth", "3", "freq"))``
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise MalformedAddress("/", "OSC address contains an empty segment")
        for segment in self.segments:
            if not segment or "/" in segment:
                raise MalformedAddress(
                    str(self), f"Invalid OSC address segment {segment!r}"
                )

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return "/" + "/".join(self.segments)


def parse_address(raw: str) -> AddressPath:
    """Split *raw* on ``/`` into an ``AddressPath``.

    The address must start with ``/`` and may not contain empty segments,
    which rules out ``""``, ``"/"``, ``"//"`` and a trailing slash.
    Segment text is kept verbatim (no whitespace trimming).

    Raises ``MalformedAddress`` on any violation.
    """
    if not raw.startswith("/"):
        raise MalformedAddress(raw, "OSC address must start with '/'")
    segments = tuple(raw[1:].split("/"))
    if "" in segments:
        raise MalformedAddress(raw, "OSC address contains an empty segment")
    return AddressPath(segments)
