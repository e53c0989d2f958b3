"""Tests for the synth example."""

import pytest

from oscroute.errors import NoRouteMatched
from oscroute.testing import assert_round_trip, assert_routes_to


class TestSynthApp:
    """Verify every route in the synth example dispatches and renders."""

    def test_set_freq(self, example_module, example_router) -> None:
        msg = assert_routes_to(
            example_router, "/synth/3/freq", example_module.SetFreq, payload=[440.0], id=3
        )
        assert example_module.handle(msg) == "voice 3 -> 440.0 Hz"
        assert example_router.render(msg) == "/synth/3/freq"

    def test_gate(self, example_module, example_router) -> None:
        msg = example_router.dispatch("/synth/1/gate", [0])
        assert example_module.handle(msg) == "voice 1 gate off"

    def test_specific_route_before_generic_param(self, example_module, example_router) -> None:
        assert_routes_to(example_router, "/synth/2/cutoff", example_module.SetParam, id=2,
                         param="cutoff")
        assert_routes_to(example_router, "/synth/2/freq", example_module.SetFreq, id=2)

    def test_all_off_literal(self, example_module, example_router) -> None:
        msg = assert_routes_to(example_router, "/synth/all/off", example_module.AllOff)
        assert example_module.handle(msg) == "all voices off"

    def test_non_numeric_voice_falls_through(self, example_module, example_router) -> None:
        # "lead" is not an int, so every {id:int} route is skipped
        assert_routes_to(example_router, "/synth/lead/off", example_module.VoiceOff, voice="lead")

    def test_unknown_address(self, example_router) -> None:
        with pytest.raises(NoRouteMatched):
            example_router.dispatch("/synth/3")

    def test_encode(self, example_module, example_router) -> None:
        msg = example_module.SetFreq(id=1, args=[220.0])
        assert example_router.encode(msg) == ("/synth/1/freq", [220.0])

    def test_round_trips(self, example_module, example_router) -> None:
        assert_round_trip(example_router, example_module.SetGate(id=4, args=[1]))
        assert_round_trip(example_router, example_module.SetParam(id=4, param="res"))
