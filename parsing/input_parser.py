"""Turns raw user input like ``" 4, 4, 2, 2 "`` into a list of numbers."""

import re

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?\d+")
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _to_number(token):
    # an empty entry between two commas reads as 0
    if not token:
        return 0
    if _INTEGER.fullmatch(token):
        return int(token)
    if not _NUMBER.fullmatch(token):
        return None
    value = float(token)
    return int(value) if value.is_integer() else value


def parse_input(text):
    """Parse a comma separated string into numbers.

    All whitespace is removed, leading and trailing commas are stripped and
    tokens that are not numbers are dropped. Integral values come back as
    ``int``; fractional ones stay ``float`` so a command lookup rejects them.
    """
    text = _WHITESPACE.sub("", text or "").strip(",")
    if not text:
        return []
    values = []
    for token in text.split(","):
        value = _to_number(token)
        if value is not None:
            values.append(value)
    return values


def coerce_input(args):
    """Accept either a single raw string or an already numeric sequence."""
    if isinstance(args, str):
        return parse_input(args)
    if len(args) == 1 and isinstance(args[0], str):
        return parse_input(args[0])
    return list(args)
