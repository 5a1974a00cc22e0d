"""
Input validators.

Every validator takes the raw text typed at a prompt and answers whether it
is acceptable for one field kind. Leading and trailing whitespace is
stripped before checking. Validators never raise: anything that is not a
string is simply rejected.
"""

import re
from typing import Any

ROLL_RE = re.compile(r"^S\d{3,6}$")
NAME_RE = re.compile(r"^[A-Za-z '\-]+$")
# NZ numbers: 02x mobiles and 03-09 regional lines, "-" or " " separators optional
PHONE_RE = re.compile(r"^0(2[0-9]|[3-9][0-9])[- ]?\d{3}[- ]?\d{3,4}$")
COURSE_CODE_RE = re.compile(r"^[A-Z]{3}\d{3}$")

NAME_MIN_LEN = 2
NAME_MAX_LEN = 40
SHORT_TEXT_MAX_LEN = 60

MARK_MIN = 0.0
MARK_MAX = 100.0


def _clean(value: Any):
    if not isinstance(value, str):
        return None
    return value.strip()


def is_valid_roll(value: str) -> bool:
    """S followed by 3-6 digits, e.g. S001 or S12345."""
    v = _clean(value)
    return v is not None and ROLL_RE.fullmatch(v) is not None


def is_valid_name(value: str) -> bool:
    """Letters, spaces, hyphen and apostrophe; 2-40 characters."""
    v = _clean(value)
    if v is None or not (NAME_MIN_LEN <= len(v) <= NAME_MAX_LEN):
        return False
    return NAME_RE.fullmatch(v) is not None


def is_valid_phone(value: str) -> bool:
    v = _clean(value)
    return v is not None and PHONE_RE.fullmatch(v) is not None


def is_valid_course_code(value: str) -> bool:
    """Three uppercase letters and three digits, e.g. ENG101."""
    v = _clean(value)
    return v is not None and COURSE_CODE_RE.fullmatch(v) is not None


def is_non_empty_short(value: str) -> bool:
    v = _clean(value)
    return bool(v) and len(v) <= SHORT_TEXT_MAX_LEN


def is_valid_mark(value: Any, lo: float = MARK_MIN, hi: float = MARK_MAX) -> bool:
    # bool is an int subclass; True is not a mark
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return lo <= value <= hi
