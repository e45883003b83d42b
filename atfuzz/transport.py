"""
UART transport – write one command, wait for any answer.

The outcome is deliberately coarse: either the modem said *something* within
the read timeout (``Responded``) or it did not (``Silent``). Write and read
errors are not reported separately, they simply end up as ``Silent``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import serial
import serial.tools.list_ports

from . import config
from .errors import DeviceNotFound, OpenError

log = logging.getLogger(__name__)


############################ Outcomes #######################################
@dataclass(frozen=True)
class Responded:
    data: bytes


class _Silent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Silent"


Silent = _Silent()


############################ Device lookup ##################################
def available_devices() -> list:
    return [p.device for p in serial.tools.list_ports.comports()]


############################ UART ###########################################
class TransportChannel:
    def __init__(self, ser, window: int = config.RESPONSE_WINDOW):
        self.ser = ser
        self.window = window

    @classmethod
    def open(cls, device: str, baud: int = config.BAUD_RATE,
             timeout: float = config.READ_TIMEOUT) -> "TransportChannel":
        ports = available_devices()
        if device not in ports:
            raise DeviceNotFound(device, ports)
        try:
            ser = serial.Serial(device, baudrate=baud, timeout=timeout)
        except (serial.SerialException, OSError) as e:
            raise OpenError(f"Failed to open port {device}: {e}") from e
        log.info("[UART] connected %s %d bps (timeout %.1fs)", device, baud, timeout)
        return cls(ser)

    def close(self):
        if self.ser is not None and self.ser.is_open:
            self.ser.close()
            log.info("[UART] closed")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def write(self, data: bytes):
        try:
            # stale bytes from the previous command must not count as an answer
            self.ser.reset_input_buffer()
            self.ser.write(data)
            self.ser.flush()
        except Exception as e:
            # SerialException, OSError or termios.error; the read below decides
            log.debug("[TX] write failed: %s", e)

    def read(self) -> Optional[bytes]:
        """Block for the first byte, then drain up to the window; None on timeout or error."""
        try:
            data = self.ser.read(min(self.ser.in_waiting, self.window) or 1)
            if data and len(data) < self.window:
                data += self.ser.read(min(self.ser.in_waiting, self.window - len(data)))
        except Exception as e:
            log.debug("[RX] read failed: %s", e)
            return None
        return data or None

    def send_and_await(self, command: bytes):
        self.write(command + config.TERMINATOR)
        data = self.read()
        if data is None:
            return Silent
        log.debug("[RX] %s", data.hex())
        return Responded(data.ljust(self.window, b"\x00"))
