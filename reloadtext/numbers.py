"""Conversion of ``(bin)`` and ``(hex)`` tagged numbers to decimal."""

import re
import string

_BIN = re.compile(r"\b(\w+)\s*\(\s*bin\s*\)", re.ASCII)
_HEX = re.compile(r"\b(\w+)\s*\(\s*hex\s*\)", re.ASCII)
_LEFTOVER = re.compile(r"\(\s*(bin|hex)\s*\)", re.ASCII)
_INT64_MAX = 2**63 - 1
_DIGITS = {2: frozenset("01"), 16: frozenset(string.hexdigits)}


def _parse(digits, base):
    """Parse ``digits`` as a signed 64-bit number, or return None."""
    if not set(digits) <= _DIGITS[base]:
        return None
    value = int(digits, base)
    return value if value <= _INT64_MAX else None


def _substitute(pattern, base, text):
    converted = False

    def repl(match):
        nonlocal converted
        value = _parse(match.group(1), base)
        if value is None:
            return match.group(0)
        converted = True
        return str(value)

    return pattern.sub(repl, text), converted


def replace_numbers(text):
    """Replace tagged binary and hexadecimal numbers by their decimal value.

    Tags that could not be applied are removed.
    """
    while True:
        text, bin_done = _substitute(_BIN, 2, text)
        text, hex_done = _substitute(_HEX, 16, text)
        if not (bin_done or hex_done):
            break
    return _LEFTOVER.sub("", text)


def add_space(text):
    """Make sure parentheses are separated from their neighbours by a space."""
    out = []
    last = len(text) - 1
    for i, ch in enumerate(text):
        if ch == "(" and i > 0 and text[i - 1] != " ":
            out.append(" ")
        out.append(ch)
        if ch == ")" and i < last and text[i + 1] != " ":
            out.append(" ")
    return "".join(out)