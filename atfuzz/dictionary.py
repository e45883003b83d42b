import logging
import random
from typing import Optional

from .errors import EmptyResource, ResourceError

log = logging.getLogger(__name__)


class DictionaryWordProvider:
    """Picks one random line from a newline-delimited word list.

    The file is streamed once per pick with reservoir sampling, so the list
    can be arbitrarily large without being held in memory.
    """

    def __init__(self, path, rng: Optional[random.Random] = None):
        self.path = path
        self.rng = rng or random.Random()

    def pick_random(self) -> bytes:
        chosen, seen = None, 0
        try:
            with open(self.path, "rb") as fh:
                for seen, line in enumerate(fh, 1):
                    # keep line i with probability 1/i
                    if self.rng.randrange(seen) == 0:
                        chosen = line
        except OSError as e:
            raise ResourceError(f"cannot read word list {self.path}: {e}") from e

        if chosen is None:
            raise EmptyResource(f"word list {self.path} is empty")

        log.debug("[DICT] picked line out of %d in %s", seen, self.path)
        word = chosen.rstrip(b"\n")
        if word.endswith(b"\r"):
            word = word[:-1]
        # bytes.upper() only touches a-z
        return word.upper()
