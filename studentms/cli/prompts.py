"""
Console prompt helpers.

Every escapable prompt returns a ``Prompted`` result tagged with an
``InputCtl``:

- ``OK``   - the value passed validation (or was kept unchanged);
- ``BACK`` - the user typed 0/b/B: cancel the current action;
- ``EXIT`` - the user typed x/X/q/Q: leave the program.

Sentinels are checked before validation. Invalid input prints a short
message and asks again; it never ends the action.

When the input stream is exhausted there is nothing left to re-read, so
escapable prompts report ``EXIT`` and the session winds down normally.
"""

import logging
import sys
from enum import Enum
from typing import Callable, NamedTuple, Optional, TextIO

logger = logging.getLogger(__name__)

BACK_INPUTS = frozenset({"0", "b", "B"})
EXIT_INPUTS = frozenset({"x", "X", "q", "Q"})

Validator = Callable[[str], bool]


class InputCtl(Enum):
    OK = "ok"
    BACK = "back"
    EXIT = "exit"


class Prompted(NamedTuple):
    ctl: InputCtl
    value: object = None

    @property
    def ok(self) -> bool:
        return self.ctl is InputCtl.OK


BACK = Prompted(InputCtl.BACK)
EXIT = Prompted(InputCtl.EXIT)


def _fmt(number: float) -> str:
    return f"{number:g}"


def classify(text: str) -> Optional[Prompted]:
    """Map a sentinel to BACK/EXIT; None for anything else."""
    if text in BACK_INPUTS:
        return BACK
    if text in EXIT_INPUTS:
        return EXIT
    return None


class Prompter:
    """Blocking line-oriented prompts over a pair of text streams."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    # ==========================
    # Raw I/O
    # ==========================

    def write(self, text: str = "") -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, text: str = "") -> None:
        self.write(text + "\n")

    def error(self, message: str) -> None:
        self.say(f"  -> {message}")

    def read_line(self, label: str) -> Optional[str]:
        """
        Show ``label`` and read one trimmed line.

        A read that fails part way (bad bytes, I/O hiccup) discards the line
        and asks again. Returns None once the stream is exhausted.
        """
        while True:
            self.write(label)
            try:
                line = self.stdin.readline()
            except (UnicodeDecodeError, OSError, ValueError) as e:
                logger.debug(f"Discarding unreadable input line: {e}")
                continue
            if line == "":
                return None
            return line.strip()

    # ==========================
    # Prompts
    # ==========================

    def until_valid(self, label: str, validator: Validator, error_msg: str) -> Optional[str]:
        """Ask until the validator accepts. No Back/Exit. None at end of input."""
        while True:
            v = self.read_line(label)
            if v is None:
                return None
            if validator(v):
                return v
            self.error(error_msg)

    def until_valid_or_back(self, label: str, validator: Validator, error_msg: str) -> Prompted:
        while True:
            v = self.read_line(f"{label} (0=Back, x=Exit): ")
            if v is None:
                return EXIT
            ctl = classify(v)
            if ctl is not None:
                return ctl
            if validator(v):
                return Prompted(InputCtl.OK, v)
            self.error(error_msg)

    def number_or_back(self, label: str, lo: float, hi: float) -> Prompted:
        """Ask for a number in [lo, hi]."""
        while True:
            v = self.read_line(f"{label} [{_fmt(lo)}-{_fmt(hi)}] (0=Back, x=Exit): ")
            if v is None:
                return EXIT
            ctl = classify(v)
            if ctl is not None:
                return ctl
            try:
                number = float(v)
            except ValueError:
                self.error("Please enter a number.")
                continue
            # NaN fails both comparisons, so test for being inside the range
            if not (lo <= number <= hi):
                self.error(f"Must be between {_fmt(lo)} and {_fmt(hi)}.")
                continue
            return Prompted(InputCtl.OK, number)

    def edit_string(self, label: str, current: str, validator: Validator, error_msg: str) -> Prompted:
        """Edit a value in place: empty input keeps ``current``."""
        while True:
            v = self.read_line(f"{label} [{current}] (Enter=keep, 0=Back, x=Exit): ")
            if v is None:
                return EXIT
            if v == "":
                return Prompted(InputCtl.OK, current)
            ctl = classify(v)
            if ctl is not None:
                return ctl
            if validator(v):
                return Prompted(InputCtl.OK, v)
            self.error(error_msg)

    def confirm_or_back(self, message: str) -> Prompted:
        """Yes/no question. Anything but an explicit yes cancels."""
        while True:
            v = self.read_line(f"{message} [y/N] (0=Back, x=Exit): ")
            if v is None:
                return EXIT
            if v in ("", "n", "N"):
                return BACK
            ctl = classify(v)
            if ctl is not None:
                return ctl
            if v in ("y", "Y"):
                return Prompted(InputCtl.OK, True)
            self.error("Please enter y or n.")
