"""Tests for oscroute.routing.params — capture conversion and formatting."""

import math

import pytest

from oscroute.errors import CaptureTypeMismatch
from oscroute.routing.params import CONVERTERS, Converter, convert_capture, format_capture


class TestConverters:
    def test_all_types_registered(self) -> None:
        assert set(CONVERTERS) == {"str", "int", "float", "bool"}

    def test_str_regex_excludes_slash(self) -> None:
        assert CONVERTERS["str"].regex.fullmatch("a/b") is None


class TestConvertCapture:
    def test_str_passthrough(self) -> None:
        assert convert_capture("hello", "str") == "hello"

    def test_int_conversion(self) -> None:
        value = convert_capture("42", "int")
        assert value == 42
        assert isinstance(value, int)

    def test_int_negative_and_leading_zero(self) -> None:
        assert convert_capture("-7", "int") == -7
        assert convert_capture("01", "int") == 1

    def test_float_conversion(self) -> None:
        assert convert_capture("3.14", "float") == pytest.approx(3.14)
        assert convert_capture("1e3", "float") == 1000.0

    def test_float_from_integer_string(self) -> None:
        assert convert_capture("10", "float") == 10.0

    def test_float_rejects_nan(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            convert_capture("nan", "float")

    @pytest.mark.parametrize("text", ["1e999", "-1e999", "+1e400"])
    def test_float_rejects_overflow(self, text: str) -> None:
        with pytest.raises(CaptureTypeMismatch) as exc_info:
            convert_capture(text, "float", name="g")
        assert exc_info.value.text == text
        assert exc_info.value.name == "g"

    def test_float_large_finite_accepted(self) -> None:
        assert convert_capture("1e308", "float") == 1e308

    def test_bool_conversion(self) -> None:
        assert convert_capture("true", "bool") is True
        assert convert_capture("0", "bool") is False

    def test_int_invalid_raises_mismatch(self) -> None:
        with pytest.raises(CaptureTypeMismatch) as exc_info:
            convert_capture("abc", "int", name="id")
        err = exc_info.value
        assert err.text == "abc"
        assert err.type_tag == "int"
        assert err.name == "id"

    def test_int_rejects_float_text(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            convert_capture("1.5", "int")

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(KeyError):
            convert_capture("value", "uuid")

    def test_parse_value_error_becomes_mismatch(self) -> None:
        def _strict(text: str) -> int:
            msg = "out of range"
            raise ValueError(msg)

        converters = {"strict": Converter(r"\d+", _strict, str)}
        with pytest.raises(CaptureTypeMismatch):
            convert_capture("5", "strict", converters=converters)


class TestFormatCapture:
    def test_int(self) -> None:
        assert format_capture(3, "int") == "3"

    def test_int_rejects_bool(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            format_capture(True, "int")

    def test_float(self) -> None:
        assert format_capture(440.0, "float") == "440.0"
        assert format_capture(2, "float") == "2.0"

    def test_float_rejects_non_finite(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            format_capture(math.inf, "float")

    def test_bool(self) -> None:
        assert format_capture(False, "bool") == "false"

    def test_str_rejects_slash(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            format_capture("a/b", "str")

    def test_str_rejects_empty(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            format_capture("", "str")

    def test_wrong_type(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            format_capture("3", "int")

    @pytest.mark.parametrize(
        ("value", "type_tag"),
        [(0, "int"), (-12, "int"), (0.5, "float"), (1e20, "float"), ("x y", "str"), (True, "bool")],
    )
    def test_formatted_text_converts_back(self, value: object, type_tag: str) -> None:
        text = format_capture(value, type_tag)
        assert convert_capture(text, type_tag) == value
