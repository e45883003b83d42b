"""Pytest configuration and shared fakes for the atfuzz test suite.

Hypothesis profiles:
- dev: local runs (200 examples)
- ci: CI=true or HYPOTHESIS_PROFILE=ci (50 examples, derandomized)

Nothing here touches a real serial port: transport tests run against
FakeSerial, loop and replay tests against ScriptedChannel.
"""

import os

import pytest
import serial
from hypothesis import settings

from atfuzz.transport import Responded, Silent

settings.register_profile("dev", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=50, deadline=None, derandomize=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FAKES
# =============================================================================


class FakeSerial:
    """Just enough of serial.Serial for TransportChannel.

    ``replies`` holds one answer per write; it only becomes visible once
    read() is blocking, like a modem answering after the command went out.
    ``stale`` is already sitting in the input buffer before anything is sent.
    """

    def __init__(self, replies=(), stale=b"", write_error=False, flush_error=None,
                 in_waiting_error=None, read_error=False):
        self.replies = list(replies)
        self.rx = bytearray(stale)
        self.arriving = b""
        self.tx = []
        self.write_error = write_error
        self.flush_error = flush_error
        self.in_waiting_error = in_waiting_error
        self.read_error = read_error
        self.is_open = True
        self.reads = 0

    @property
    def in_waiting(self):
        if self.in_waiting_error is not None:
            raise self.in_waiting_error
        return len(self.rx)

    def reset_input_buffer(self):
        self.rx.clear()

    def write(self, data):
        self.arriving = self.replies.pop(0) if self.replies else b""
        if self.write_error:
            raise serial.SerialTimeoutException("Write timeout")
        self.tx.append(bytes(data))
        return len(data)

    def flush(self):
        if self.flush_error is not None:
            raise self.flush_error

    def read(self, size=1):
        self.reads += 1
        if self.read_error:
            raise serial.SerialException("device reports readiness to read but returned no data")
        self.rx += self.arriving
        self.arriving = b""
        data = bytes(self.rx[:size])
        del self.rx[:size]
        return data

    def close(self):
        self.is_open = False


class ScriptedChannel:
    """Channel whose n-th send (1-based) is silent when silent_on(n) is true."""

    def __init__(self, silent_on=lambda n: False):
        self.silent_on = silent_on
        self.sent = []

    def send_and_await(self, command):
        self.sent.append(command)
        if self.silent_on(len(self.sent)):
            return Silent
        return Responded(b"\r\nOK\r\n".ljust(64, b"\x00"))


class StaticWords:
    def __init__(self, word=b"HELLO"):
        self.word = word
        self.picks = 0

    def pick_random(self):
        self.picks += 1
        return self.word


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def word_file(tmp_path):
    def make(content):
        path = tmp_path / "dictionary.txt"
        path.write_bytes(content)
        return path
    return make


@pytest.fixture
def crash_log_path(tmp_path):
    return tmp_path / "success.txt"
