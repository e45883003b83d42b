import logging
from typing import Optional

from .classifier import Classification, classify
from .escape import escape

log = logging.getLogger(__name__)


class FuzzLoop:
    """generate → send → classify, until the modem goes quiet."""

    def __init__(self, generator, channel, crash_log, classifier=classify):
        self.generator = generator
        self.channel = channel
        self.crash_log = crash_log
        self.classifier = classifier
        self.iterations = 0

    def step(self):
        command = self.generator.generate()
        outcome = self.channel.send_and_await(command)
        self.iterations += 1
        return command, self.classifier(outcome)

    def run(self, max_iterations: Optional[int] = None) -> Optional[bytes]:
        """Returns the crashing command, or None if max_iterations ran out first."""
        log.info("[FZ] fuzzing started")
        while max_iterations is None or self.iterations < max_iterations:
            command, verdict = self.step()
            if verdict is Classification.STABLE:
                log.info("[OK] Stable for command: %s", escape(command))
                continue

            log.error("[CRASH] Command crashed the device!: %s", escape(command))
            self.crash_log.record(command)
            log.info("[FZ] stopped after %d commands", self.iterations)
            return command

        log.info("[FZ] no crash in %d commands", self.iterations)
        return None
