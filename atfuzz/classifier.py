"""Liveness oracle: an answer means the device survived, silence means it did not."""

import enum

from .transport import Responded, Silent


class Classification(enum.Enum):
    STABLE = "stable"
    CRASHED = "crashed"


def classify(outcome) -> Classification:
    # No retry: a slow modem and a dead one look the same here.
    if isinstance(outcome, Responded):
        return Classification.STABLE
    if outcome is Silent:
        return Classification.CRASHED
    raise TypeError(f"not a transport outcome: {outcome!r}")
