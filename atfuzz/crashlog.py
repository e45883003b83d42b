"""
Append-only crash log.

One escaped payload per line. The file is opened lazily on the first crash
and kept open by its single owner until close().
"""

import logging
import os
from typing import Iterator, Optional, TextIO

from .errors import NoLogFound, PersistenceError
from .escape import escape

log = logging.getLogger(__name__)


class CrashLog:
    def __init__(self, path):
        self.path = path
        self._fh: Optional[TextIO] = None

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def record(self, command: bytes):
        line = escape(command)
        try:
            if self._fh is None:
                self._fh = open(self.path, "a", encoding="ascii", newline="\n")
            self._fh.write(line + "\n")
            self._fh.flush()
        except OSError as e:
            raise PersistenceError(f"Cannot write crash log {self.path}: {e}") from e
        log.info("[LOG] crash recorded in %s", self.path)

    def lines(self) -> Iterator[str]:
        """Stored lines in file order, terminators stripped."""
        if not self.exists():
            raise NoLogFound(self.path)
        return self._read_lines()

    def _read_lines(self):
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace", newline="\n") as fh:
                for line in fh:
                    yield line.rstrip("\r\n")
        except OSError as e:
            raise PersistenceError(f"Cannot read crash log {self.path}: {e}") from e

    def close(self):
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
