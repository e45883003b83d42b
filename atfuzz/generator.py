"""
Command generator – one fuzz payload per call.

Layout of every payload:

    AT <splitter> [WORD] <random filler ...>   (exactly PAYLOAD_LENGTH bytes)

The filler never contains CR, because CR is the command terminator and would
cut the payload short on the modem side.
"""

import logging
import random
from typing import Optional

from . import config

log = logging.getLogger(__name__)

CR = 0x0D


class CommandGenerator:
    def __init__(self, words, rng: Optional[random.Random] = None,
                 word_probability: float = config.WORD_PROBABILITY,
                 length: int = config.PAYLOAD_LENGTH):
        self.words = words
        self.rng = rng or random.Random()
        self.word_probability = word_probability
        self.length = length

    def random_byte(self) -> int:
        b = self.rng.getrandbits(8)
        while b == CR:
            b = self.rng.getrandbits(8)
        return b

    def generate(self) -> bytes:
        command = bytearray(config.COMMAND_PREFIX)
        command += self.rng.choice(config.SPLITTERS)

        if self.rng.random() < self.word_probability:
            word = self.words.pick_random().replace(b"\r", b"")
            log.debug("[GEN] inserting word %r", word)
            command += word

        del command[self.length:]
        while len(command) < self.length:
            command.append(self.random_byte())
        return bytes(command)
