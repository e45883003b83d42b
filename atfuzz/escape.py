"""
Escape codec for crash log lines.

Printable ASCII goes through untouched, everything else becomes a backslash
escape, so a 1000-byte payload full of control bytes still fits on a single
text line and comes back byte-exact.
"""

from .errors import DecodeError

_NAMED = {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
    0x22: '\\"',
    0x27: "\\'",
    0x5C: "\\\\",
}

_UNNAMED = {
    "t": 0x09,
    "n": 0x0A,
    "r": 0x0D,
    "0": 0x00,
    '"': 0x22,
    "'": 0x27,
    "\\": 0x5C,
}

_HEX = "0123456789abcdefABCDEF"

_TABLE = []
for _b in range(256):
    if _b in _NAMED:
        _TABLE.append(_NAMED[_b])
    elif 0x20 <= _b <= 0x7E:
        _TABLE.append(chr(_b))
    else:
        _TABLE.append(f"\\x{_b:02x}")


def escape(data: bytes) -> str:
    return "".join(_TABLE[b] for b in data)


def unescape(text: str) -> bytes:
    """Inverse of :func:`escape`. Raises DecodeError on malformed input."""
    out = bytearray()
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch != "\\":
            if ord(ch) > 0x7F:
                raise DecodeError(f"non-ASCII character {ch!r}", i)
            out.append(ord(ch))
            i += 1
            continue

        if i + 1 >= n:
            raise DecodeError("dangling backslash", i)
        code = text[i + 1]
        if code == "x":
            digits = text[i + 2:i + 4]
            if len(digits) != 2 or any(d not in _HEX for d in digits):
                raise DecodeError(f"bad hex escape {text[i:i + 4]!r}", i)
            out.append(int(digits, 16))
            i += 4
        elif code in _UNNAMED:
            out.append(_UNNAMED[code])
            i += 2
        else:
            raise DecodeError(f"unknown escape \\{code}", i)
    return bytes(out)
