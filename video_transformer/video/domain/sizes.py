"""
Human-readable size parsing.
"""

import re

from ...core.errors import InvalidSizeFormat

SIZE_UNITS = {
    "kb": 1024,
    "mb": 1024 * 1024,
    "gb": 1024 * 1024 * 1024,
}

_SIZE_PATTERN = re.compile(r"([0-9]+)(kb|mb|gb)")


def parse_size(text: str) -> int:
    """
    Convert a size such as "5mb" or "1GB" to a byte count.

    The whole string must be an integer immediately followed by one of
    kb, mb or gb (any case). No bound is enforced here.
    """
    if not isinstance(text, str):
        raise InvalidSizeFormat(str(text))

    match = _SIZE_PATTERN.fullmatch(text.lower())
    if not match:
        raise InvalidSizeFormat(text)

    value, unit = match.groups()
    return int(value) * SIZE_UNITS[unit]
