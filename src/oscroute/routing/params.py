"""Capture conversion and its inverse.

Built-in converters for address segments like ``{id:int}``. Each converter
turns segment text into a typed value on the way in, and the value back
into segment text on the way out.
"""

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from oscroute.errors import CaptureTypeMismatch


@dataclass(frozen=True, slots=True)
class Converter:
    """A capture type: full-match regex plus parse/format callables.

    ``parse`` may raise ``ValueError``; ``format`` may raise ``ValueError``
    or ``TypeError``. Both are reported as ``CaptureTypeMismatch``.
    """

    pattern: str
    parse: Callable[[str], Any]
    format: Callable[[Any], str]

    @property
    def regex(self) -> re.Pattern[str]:
        return _compiled(self.pattern)


_REGEX_CACHE: dict[str, re.Pattern[str]] = {}


def _compiled(pattern: str) -> re.Pattern[str]:
    regex = _REGEX_CACHE.get(pattern)
    if regex is None:
        regex = re.compile(pattern)
        _REGEX_CACHE[pattern] = regex
    return regex


def _format_str(value: Any) -> str:
    if not isinstance(value, str):
        msg = f"expected str, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _format_int(value: Any) -> str:
    # bool is an int subclass but never a valid int capture
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected int, got {type(value).__name__}"
        raise TypeError(msg)
    return str(value)


def _parse_float(text: str) -> float:
    value = float(text)
    # Overflowing text like "1e999" parses to inf, which has no address form
    if not math.isfinite(value):
        msg = f"float {text!r} is out of range"
        raise ValueError(msg)
    return value


def _format_float(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"expected float, got {type(value).__name__}"
        raise TypeError(msg)
    if not math.isfinite(value):
        msg = f"non-finite float {value!r} has no address form"
        raise ValueError(msg)
    return repr(float(value))


def _parse_bool(text: str) -> bool:
    return text in ("true", "1")


def _format_bool(value: Any) -> str:
    if not isinstance(value, bool):
        msg = f"expected bool, got {type(value).__name__}"
        raise TypeError(msg)
    return "true" if value else "false"


CONVERTERS: Mapping[str, Converter] = {
    "str": Converter(r"[^/]+", str, _format_str),
    "int": Converter(r"[-+]?\d+", int, _format_int),
    "float": Converter(
        r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?", _parse_float, _format_float
    ),
    "bool": Converter(r"true|false|1|0", _parse_bool, _format_bool),
}


def convert_capture(
    text: str,
    type_tag: str,
    *,
    name: str = "",
    converters: Mapping[str, Converter] = CONVERTERS,
) -> Any:
    """Convert captured segment text to its declared type.

    Raises ``CaptureTypeMismatch`` if the text is not valid for the type.
    Raises ``KeyError`` if *type_tag* is not a registered converter.
    """
    converter = converters[type_tag]
    if converter.regex.fullmatch(text) is None:
        raise CaptureTypeMismatch(text=text, type_tag=type_tag, name=name)
    try:
        return converter.parse(text)
    except ValueError as exc:
        raise CaptureTypeMismatch(text=text, type_tag=type_tag, name=name) from exc


def format_capture(
    value: Any,
    type_tag: str,
    *,
    name: str = "",
    converters: Mapping[str, Converter] = CONVERTERS,
) -> str:
    """Render a typed capture value back to segment text.

    The result is checked against the converter's regex so that every
    rendered segment parses back to an equal value.

    Raises ``CaptureTypeMismatch`` if the value has no valid segment form.
    Raises ``KeyError`` if *type_tag* is not a registered converter.
    """
    converter = converters[type_tag]
    try:
        text = converter.format(value)
    except (TypeError, ValueError) as exc:
        raise CaptureTypeMismatch(text=repr(value), type_tag=type_tag, name=name) from exc
    if "/" in text or converter.regex.fullmatch(text) is None:
        raise CaptureTypeMismatch(text=text, type_tag=type_tag, name=name)
    return text
