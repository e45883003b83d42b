"""
Replay engine – feed logged crashers back to the modem.

Lines are tried top to bottom; the first one that silences the device again
is the confirmed reproducer and nothing after it is sent.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .classifier import Classification, classify
from .errors import DecodeError
from .escape import unescape

log = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    reproducer: Optional[str] = None
    command: Optional[bytes] = None
    sent: int = 0
    skipped: int = 0

    @property
    def reproduced(self) -> bool:
        return self.reproducer is not None


class ReplayEngine:
    def __init__(self, channel, crash_log, classifier=classify):
        self.channel = channel
        self.crash_log = crash_log
        self.classifier = classifier

    def run(self) -> ReplayResult:
        lines = self.crash_log.lines()  # raises NoLogFound
        result = ReplayResult()
        for lineno, line in enumerate(lines, 1):
            try:
                command = unescape(line)
            except DecodeError as e:
                log.warning("[REPLAY] skipping line %d: %s", lineno, e)
                result.skipped += 1
                continue

            outcome = self.channel.send_and_await(command)
            result.sent += 1
            if self.classifier(outcome) is Classification.CRASHED:
                log.info("[!!! REPRODUCED !!!] Code works: %s", line)
                result.reproducer = line
                result.command = command
                return result

        log.error("[REPLAY] None of the codes worked (%d sent, %d skipped)",
                  result.sent, result.skipped)
        return result
