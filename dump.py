import os
import sys
import getopt
from dataclasses import dataclass

import hexformat

VERSION = "1.00"


def usage_message(exe):
    return f"Usage: {exe} [-n LEN] FILE"


class UsageError(Exception):
    def __init__(self, exe, detail=None):
        super().__init__(detail)
        self.exe = exe
        self.detail = detail

    def __str__(self):
        if self.detail:
            return f"{self.detail}\n{usage_message(self.exe)}"
        return usage_message(self.exe)


@dataclass
class Options:
    file_path: str = None
    length: int = None
    version: bool = False


def parse_length(exe, val):
    # int() alone would also take signs, blanks and underscores.
    if not val.isascii() or not val.isdigit():
        raise UsageError(exe, f"Invalid length: {val}")
    return int(val)


def parse_args(argv):
    exe = os.path.basename(argv[0]) if argv else "hexdump"
    options = Options()

    try:
        opts, args = getopt.gnu_getopt(argv[1:], "n:?v")
    except getopt.GetoptError:
        raise UsageError(exe)

    for opt, val in opts:
        if opt == "-n":
            options.length = parse_length(exe, val)
        elif opt == "-v":
            options.version = True
            return options
        else:
            raise UsageError(exe)

    # Only the first FILE counts, the rest are ignored.
    if not args:
        raise UsageError(exe)
    options.file_path = args[0]
    return options


def error_reason(e):
    return e.strerror or str(e)


def main(argv=None):
    if argv is None:
        argv = sys.argv
    exe = os.path.basename(argv[0]) if argv else "hexdump"

    try:
        options = parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    if options.version:
        print(f"Halfword Hex Dump  Version {VERSION}")
        return 0

    try:
        f = open(options.file_path, 'rb')
    except OSError as e:
        print(f"{exe}: {options.file_path}: {error_reason(e)}", file=sys.stderr)
        return 1

    with f:
        try:
            hexformat.HexFormatter().run(f, sys.stdout, options.length)
        except OSError as e:
            print(f"{exe}: {error_reason(e)}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
