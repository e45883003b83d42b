import pytest

from atfuzz.crashlog import CrashLog
from atfuzz.errors import NoLogFound
from atfuzz.escape import escape
from atfuzz.replay import ReplayEngine

from .conftest import ScriptedChannel

L1 = b"AT+" + b"\x01" * 997
L2 = b"AT%" + b"\xfe" * 997
L3 = b"AT#" + b"\x7f" * 997


def _write(path, *lines):
    path.write_text("".join(line + "\n" for line in lines))


def test_first_crasher_wins(crash_log_path):
    _write(crash_log_path, escape(L1), escape(L2), escape(L3))
    channel = ScriptedChannel(silent_on=lambda n: channel.sent[-1] in (L2, L3))
    result = ReplayEngine(channel, CrashLog(crash_log_path)).run()

    assert result.reproduced
    assert result.command == L2
    assert result.reproducer == escape(L2)
    assert channel.sent == [L1, L2]
    assert result.sent == 2


def test_nothing_reproduces(crash_log_path):
    _write(crash_log_path, escape(L1), escape(L2))
    channel = ScriptedChannel()
    result = ReplayEngine(channel, CrashLog(crash_log_path)).run()
    assert not result.reproduced
    assert result.command is None
    assert channel.sent == [L1, L2]


def test_undecodable_lines_are_skipped(crash_log_path):
    _write(crash_log_path, "AT\\", "AT\\q", "AT\\xg0")
    channel = ScriptedChannel()
    result = ReplayEngine(channel, CrashLog(crash_log_path)).run()
    assert not result.reproduced
    assert result.skipped == 3
    assert result.sent == 0
    assert channel.sent == []


def test_bad_line_does_not_stop_replay(crash_log_path):
    _write(crash_log_path, "AT\\q", escape(L3))
    channel = ScriptedChannel(silent_on=lambda n: True)
    result = ReplayEngine(channel, CrashLog(crash_log_path)).run()
    assert result.command == L3
    assert result.skipped == 1


def test_missing_log(crash_log_path):
    channel = ScriptedChannel()
    with pytest.raises(NoLogFound):
        ReplayEngine(channel, CrashLog(crash_log_path)).run()
    assert channel.sent == []
