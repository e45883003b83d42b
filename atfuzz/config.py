###########################################################################
# Configuration constants
###########################################################################
BAUD_RATE       = 115200
READ_TIMEOUT    = 10.0               # seconds of silence before we call it a crash
RESPONSE_WINDOW = 64                 # bytes read back per command

PAYLOAD_LENGTH   = 1000
COMMAND_PREFIX   = b"AT"
SPLITTERS        = (b"", b"+", b"%", b"!", b"$", b"#", b"^", b"*")
TERMINATOR       = b"\r"
WORD_PROBABILITY = 0.5

DEFAULT_DICTIONARY = "dictionary.txt"
DEFAULT_CRASH_LOG  = "success.txt"

LOG_FORMAT = "%(asctime)s %(levelname)-4s [%(name)s] %(message)s"
