"""Transforms module – pure string helpers for case, length and whitespace.

Every public function accepts any value. A non-``str`` argument short-circuits
to the function's zero value (``""``, ``0`` or ``False``) instead of raising.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

DEFAULT_MAX_LENGTH = 50
ELLIPSIS = "..."

_SEPARATOR_RUN = re.compile(r"[^a-zA-Z0-9]+")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_WHITESPACE_RUN = re.compile(r"\s+")
_NOT_ALNUM = re.compile(r"[^a-z0-9]")


# ── Case conversion ──────────────────────────────────────────────────

def capitalize(text: Any) -> str:
    """Uppercase the first character and lowercase the rest."""
    if not isinstance(text, str):
        return ""
    return text[:1].upper() + text[1:].lower()


def title_case(text: Any) -> str:
    """Capitalize every word, splitting on single spaces only.

    Runs of spaces produce empty words, which survive the rejoin, so the
    spacing of *text* is preserved.
    """
    if not isinstance(text, str):
        return ""
    return " ".join(capitalize(word) for word in text.lower().split(" "))


def camel_case(text: Any) -> str:
    """Convert *text* to camelCase.

    Anything outside ``[a-zA-Z0-9]`` is a separator. Each inner separator run
    is dropped and the character after it uppercased; leading and trailing
    runs are dropped outright.
    """
    if not isinstance(text, str):
        return ""
    words = [word for word in _SEPARATOR_RUN.split(text.lower()) if word]
    if not words:
        return ""
    return words[0] + "".join(word[0].upper() + word[1:] for word in words[1:])


def _delimit(text: str, delimiter: str) -> str:
    # Only a lowercase letter followed by an uppercase one is a word boundary;
    # "HTTPServer" and "v2Api" are left joined.
    text = _LOWER_UPPER.sub(rf"\1{delimiter}\2", text)
    return _WHITESPACE_RUN.sub(delimiter, text).lower()


def kebab_case(text: Any) -> str:
    """Convert *text* to kebab-case."""
    if not isinstance(text, str):
        return ""
    return _delimit(text, "-")


def snake_case(text: Any) -> str:
    """Convert *text* to snake_case."""
    if not isinstance(text, str):
        return ""
    return _delimit(text, "_")


# ── Length and whitespace ────────────────────────────────────────────

def truncate(text: Any, max_length: Any = DEFAULT_MAX_LENGTH) -> str:
    """Shorten *text* to at most *max_length* characters, ending in ``...``.

    Text that already fits is returned unchanged. When *max_length* is below
    3 there is no room for any of the original text, so the result is just
    the ellipsis (which is then longer than *max_length*).

    Fractional lengths are floored. ``None`` or any other non-number falls
    back to ``DEFAULT_MAX_LENGTH``. NaN and negative infinity leave no room,
    positive infinity fits everything.
    """
    if not isinstance(text, str):
        return ""
    if not isinstance(max_length, numbers.Real):
        max_length = DEFAULT_MAX_LENGTH
    if len(text) <= max_length:
        return text
    if not math.isfinite(max_length):
        return ELLIPSIS
    keep = max(0, math.floor(max_length) - len(ELLIPSIS))
    return text[:keep] + ELLIPSIS


def word_count(text: Any) -> int:
    """Count whitespace-separated words in *text*."""
    if not isinstance(text, str):
        return 0
    return len(text.split())


def clean_whitespace(text: Any) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    if not isinstance(text, str):
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


# ── Ordering ─────────────────────────────────────────────────────────

def reverse(text: Any) -> str:
    """Reverse *text* character by character."""
    if not isinstance(text, str):
        return ""
    return text[::-1]


def is_palindrome(text: Any) -> bool:
    """Return True if *text* reads the same backwards.

    Case is ignored and anything outside ``[a-z0-9]`` after lowercasing is
    treated as noise, so ``"A man, a plan, a canal: Panama"`` qualifies.
    The empty string is a palindrome.
    """
    if not isinstance(text, str):
        return False
    cleaned = _NOT_ALNUM.sub("", text.lower())
    return cleaned == cleaned[::-1]
