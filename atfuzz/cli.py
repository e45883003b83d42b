#!/usr/bin/env python3
"""
atfuzz – AT-command UART fuzzer
===============================
Throws random ``AT<splitter>[WORD]<garbage>`` payloads at a modem until it
stops answering, then writes the killer payload to the crash log.

Usage:
    atfuzz -d /dev/ttyUSB0                  # fuzz until the modem goes silent
    atfuzz -d /dev/ttyUSB0 --replay         # re-send logged crashers
    atfuzz -d /dev/ttyACM0 --dictionary words.txt --crash-log crashes.txt
"""

import argparse
import logging
import random
import sys

from . import __version__, config
from .crashlog import CrashLog
from .dictionary import DictionaryWordProvider
from .errors import ATFuzzError, DeviceError, NoLogFound
from .fuzzloop import FuzzLoop
from .generator import CommandGenerator
from .replay import ReplayEngine
from .transport import TransportChannel

log = logging.getLogger("atfuzz")


############################ Logging ########################################
def setup_logging(verbose: bool = False, log_file=None):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, "a"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=config.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


############################ Arguments ######################################
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("atfuzz", description="AT-command fuzzer for serial modems")
    ap.add_argument("-d", "--device", required=True, help="serial device, e.g. /dev/ttyUSB0")
    ap.add_argument("-r", "--replay", action="store_true", help="replay the crash log instead of fuzzing")
    ap.add_argument("--dictionary", default=config.DEFAULT_DICTIONARY, help="word list (default: %(default)s)")
    ap.add_argument("--crash-log", default=config.DEFAULT_CRASH_LOG, help="crash log file (default: %(default)s)")
    ap.add_argument("--seed", type=int, help="seed the payload RNG")
    ap.add_argument("--log-file", help="also write log output to this file")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


############################ Modes ##########################################
def fuzz(channel, args):
    rng = random.Random(args.seed)
    words = DictionaryWordProvider(args.dictionary, rng)
    generator = CommandGenerator(words, rng)
    with CrashLog(args.crash_log) as crash_log:
        FuzzLoop(generator, channel, crash_log).run()


def replay(channel, args):
    with CrashLog(args.crash_log) as crash_log:
        try:
            ReplayEngine(channel, crash_log).run()
        except NoLogFound as e:
            log.error("[!] %s", e)


############################ Main ###########################################
def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        channel = TransportChannel.open(args.device)
    except DeviceError as e:
        log.error("[!!!] %s", e)
        return 1

    try:
        with channel:
            if args.replay:
                replay(channel, args)
            else:
                fuzz(channel, args)
    except ATFuzzError as e:
        log.error("[!!!] %s", e)
        return 1
    except KeyboardInterrupt:
        log.info("[i] Fuzzing aborted by user.")
    except Exception as e:
        log.error("[!!!] An unexpected error occurred: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
