"""Exceptions raised by atfuzz."""


class ATFuzzError(Exception):
    """Base class for everything atfuzz raises on purpose."""


class ResourceError(ATFuzzError):
    """Word list missing or unreadable."""


class EmptyResource(ResourceError):
    """Word list exists but has no lines."""


class DeviceError(ATFuzzError):
    pass


class DeviceNotFound(DeviceError):
    def __init__(self, device: str, available=()):
        self.device = device
        self.available = list(available)
        msg = f"Could not find device: {device}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)


class OpenError(DeviceError):
    pass


class PersistenceError(ATFuzzError):
    """Crash log could not be written or read."""


class NoLogFound(PersistenceError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"No crash log at {path}")


class DecodeError(ATFuzzError):
    """Crash log line is not a valid escaped byte string."""

    def __init__(self, message: str, position: int = -1):
        self.position = position
        super().__init__(message if position < 0 else f"{message} at offset {position}")
