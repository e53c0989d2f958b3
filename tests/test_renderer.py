"""Tests for oscroute.routing.renderer — AddressRenderer."""

import logging
from dataclasses import dataclass

import pytest

from oscroute.config import RouterConfig
from oscroute.errors import CaptureTypeMismatch
from oscroute.messages import Declaration, Message
from oscroute.routing.address import parse_address
from oscroute.routing.dispatcher import Dispatcher
from oscroute.routing.renderer import AddressRenderer
from oscroute.routing.table import RouteTable


@dataclass(frozen=True, slots=True)
class SetFreq(Message):
    id: int


@dataclass(frozen=True, slots=True)
class Status(Message):
    pass


@dataclass(frozen=True, slots=True)
class Mix(Message):
    channel: int
    bus: str
    gain: float


@dataclass(frozen=True, slots=True)
class Unregistered(Message):
    pass


TABLE = RouteTable.build([
    Declaration("/synth/{id:int}/freq", SetFreq),
    Declaration("/status", Status),
    Declaration("/mix/{channel:int}/{bus}/{gain:float}", Mix),
])


class TestRender:
    def test_capture(self) -> None:
        assert AddressRenderer(TABLE).render(SetFreq(id=3, args=[440.0])) == "/synth/3/freq"

    def test_literal_only(self) -> None:
        assert AddressRenderer(TABLE).render(Status()) == "/status"

    def test_multiple_captures_in_order(self) -> None:
        msg = Mix(channel=2, bus="main", gain=0.5)
        assert AddressRenderer(TABLE).render(msg) == "/mix/2/main/0.5"

    def test_unregistered(self) -> None:
        with pytest.raises(KeyError):
            AddressRenderer(TABLE).render(Unregistered())

    def test_invalid_capture_value(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            AddressRenderer(TABLE).render(Mix(channel=1, bus="a/b", gain=1.0))

    def test_wrong_capture_type(self) -> None:
        with pytest.raises(CaptureTypeMismatch):
            AddressRenderer(TABLE).render(SetFreq(id="3"))  # type: ignore[arg-type]


class TestRoundTrip:
    @pytest.mark.parametrize(
        "address",
        ["/synth/3/freq", "/synth/-1/freq", "/status", "/mix/0/aux 1/1e-05"],
    )
    def test_render_then_dispatch(self, address: str) -> None:
        dispatcher = Dispatcher(TABLE)
        renderer = AddressRenderer(TABLE)
        msg = dispatcher.route(address, [1])
        rendered = renderer.render(msg)
        assert dispatcher.route(rendered, [1]) == msg

    def test_rendered_segments_match_parse(self) -> None:
        rendered = AddressRenderer(TABLE).render(Mix(channel=7, bus="fx", gain=2.0))
        assert parse_address(rendered).segments == ("mix", "7", "fx", "2.0")

    def test_text_need_not_be_identical(self) -> None:
        msg = Dispatcher(TABLE).route("/synth/007/freq")
        assert AddressRenderer(TABLE).render(msg) == "/synth/7/freq"


class TestRenderLogging:
    def test_debug_logs_under_render_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        renderer = AddressRenderer(TABLE, RouterConfig(debug=True))
        with caplog.at_level(logging.DEBUG, logger="oscroute.render"):
            renderer.render(Status())
        assert "Rendered" in caplog.text
        assert caplog.records
        assert {record.name for record in caplog.records} == {"oscroute.render"}

    def test_silent_without_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="oscroute.render"):
            AddressRenderer(TABLE).render(Status())
        assert caplog.records == []
