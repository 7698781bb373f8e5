"""Serial port transport for talking to a device."""

from __future__ import annotations

import serial

DEFAULT_BAUD_RATE = 12_500
DEFAULT_TIMEOUT = 0.5


class SerialTransportError(OSError):
    """The serial port could not be opened."""


class SerialTransport:
    """A blocking byte stream over a serial port.

    Reads wait up to the configured timeout and raise TimeoutError when no
    data arrives in that time.
    """

    def __init__(self, port: serial.SerialBase) -> None:
        self._port = port

    @classmethod
    def open(
        cls,
        path: str,
        baud_rate: int = DEFAULT_BAUD_RATE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> SerialTransport:
        """Open the port at ``path`` (a device name or a pyserial URL)."""
        try:
            port = serial.serial_for_url(path, baudrate=baud_rate, timeout=timeout)
        except (serial.SerialException, ValueError) as exc:
            raise SerialTransportError(f"Failed to open serial port: {exc}") from exc
        return cls(port)

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, waiting at most the timeout for data."""
        if size <= 0:
            return b""
        data = self._port.read(size)
        if not data:
            raise TimeoutError("Timed out waiting for serial data")
        return bytes(data)

    def write(self, data: bytes) -> int:
        """Write all of ``data`` and return the number of bytes written."""
        written = self._port.write(data)
        return len(data) if written is None else written

    def flush(self) -> None:
        """Wait until all written data has been sent."""
        self._port.flush()

    def close(self) -> None:
        """Close the port."""
        self._port.close()

    def __enter__(self) -> SerialTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()