"""Synth — a small polyphonic synth control surface.

Demonstrates typed captures, literal-before-capture precedence, payload
pass-through, and rendering addresses for outgoing messages.

Run:
    python app.py
"""

from dataclasses import dataclass

from oscroute import Message, MessageSet

synth = MessageSet()


@synth.message("/synth/{id:int}/freq")
@dataclass(frozen=True, slots=True)
class SetFreq(Message):
    id: int


@synth.message("/synth/{id:int}/gate")
@dataclass(frozen=True, slots=True)
class SetGate(Message):
    id: int


# Must precede /synth/{voice}/off, which matches the same address
@synth.message("/synth/all/off")
@dataclass(frozen=True, slots=True)
class AllOff(Message):
    pass


@synth.message("/synth/{id:int}/{param}")
@dataclass(frozen=True, slots=True)
class SetParam(Message):
    id: int
    param: str


@synth.message("/synth/{voice}/off")
@dataclass(frozen=True, slots=True)
class VoiceOff(Message):
    voice: str


router = synth.compile()


def handle(message: Message) -> str:
    match message:
        case SetFreq(id=voice, args=[hz]):
            return f"voice {voice} -> {hz} Hz"
        case SetGate(id=voice, args=[gate]):
            return f"voice {voice} gate {'on' if gate else 'off'}"
        case SetParam(id=voice, param=name, args=[value]):
            return f"voice {voice} {name}={value}"
        case AllOff():
            return "all voices off"
        case VoiceOff(voice=voice):
            return f"voice {voice} off"
    return f"unhandled {message!r}"


if __name__ == "__main__":
    for address, args in [
        ("/synth/3/freq", [440.0]),
        ("/synth/3/gate", [1]),
        ("/synth/3/cutoff", [0.25]),
        ("/synth/all/off", []),
    ]:
        msg = router.dispatch(address, args)
        print(f"{address:<18} {handle(msg)}")
    print(router.encode(SetFreq(id=1, args=[220.0])))
