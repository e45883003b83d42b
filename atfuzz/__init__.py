"""
atfuzz – black-box AT-command fuzzer for serial modems.

Random AT payloads go out over UART, silence within the read timeout counts
as a crash. Crashing payloads land in an append-only log and can be replayed
later to confirm the device still dies on them.
"""

__version__ = "0.1.0"
