"""Binary digit string predicate."""

import re

_BINARY_PATTERN = re.compile(r"[01]*")


def is_binary_string(text: str) -> bool:
    """
    Return True if text consists only of '0' and '1' characters.

    The empty string is a valid binary string and denotes the integer 0.

    Examples:
        >>> is_binary_string("1101")
        True
        >>> is_binary_string("10 01")
        False
        >>> is_binary_string("")
        True
    """
    return _BINARY_PATTERN.fullmatch(text) is not None
