"""Lenient integer parsing shared by the corpus loader and the remote scorer."""

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(text: str) -> int | None:
    """Return the integer at the start of *text*, or None if there is none.

    Leading whitespace is skipped and anything after the digits is ignored,
    so ``" 85"``, ``"85."`` and ``"85/100"`` all parse as 85 while
    ``"Score: 85"`` does not parse.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))
