"""Byte framing used on the wire: start/end markers with byte escaping."""

from __future__ import annotations

from enum import Enum, auto

FRAMING_SOF = 0xAB
FRAMING_ESC = 0xAC
FRAMING_EOF = 0xAD

_SPECIAL = frozenset((FRAMING_SOF, FRAMING_ESC, FRAMING_EOF))


class FramingError(ValueError):
    """The incoming byte stream does not follow the framing rules."""


class ExpectedStartOfFrame(FramingError):
    """A byte other than start-of-frame arrived between frames."""

    def __init__(self) -> None:
        super().__init__("Expected start-of-frame byte")


class UnexpectedStartOfFrameMidFrame(FramingError):
    """A start-of-frame byte arrived inside an unfinished frame."""

    def __init__(self) -> None:
        super().__init__("Unexpected start-of-frame mid-frame")


def encode_frame(payload: bytes) -> bytes:
    """Wrap a payload in start/end markers, escaping marker bytes inside it."""
    out = bytearray([FRAMING_SOF])
    for byte in payload:
        if byte in _SPECIAL:
            out.append(FRAMING_ESC)
        out.append(byte)
    out.append(FRAMING_EOF)
    return bytes(out)


class _State(Enum):
    IDLE = auto()
    AWAITING_DATA = auto()
    ESCAPED = auto()


class FrameDecoder:
    """Incremental decoder turning a byte stream into frame payloads."""

    def __init__(self) -> None:
        self._state = _State.IDLE
        self._data = bytearray()

    def _reset(self) -> None:
        self._data.clear()
        self._state = _State.IDLE

    def push(self, chunk: bytes) -> list[bytes]:
        """Feed bytes and return every frame completed by them.

        On a framing error the partial frame is dropped, the decoder returns
        to its idle state and the error is raised.
        """
        frames: list[bytes] = []
        for byte in chunk:
            if self._state is _State.IDLE:
                if byte != FRAMING_SOF:
                    self._reset()
                    raise ExpectedStartOfFrame()
                self._state = _State.AWAITING_DATA
            elif self._state is _State.AWAITING_DATA:
                if byte == FRAMING_SOF:
                    self._reset()
                    raise UnexpectedStartOfFrameMidFrame()
                if byte == FRAMING_ESC:
                    self._state = _State.ESCAPED
                elif byte == FRAMING_EOF:
                    frames.append(bytes(self._data))
                    self._data.clear()
                    self._state = _State.IDLE
                else:
                    self._data.append(byte)
            else:
                self._data.append(byte)
                self._state = _State.AWAITING_DATA
        return frames