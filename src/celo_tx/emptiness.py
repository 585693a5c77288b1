"""
Emptiness checks for transaction field values.

Wallets and RPC clients often encode an unset optional field as an explicit
zero or as the bare `0x` prefix instead of leaving the key out. Treating
all of those as *empty* lets the variant predicates rely on plain presence
checks.
"""

import re
from numbers import Integral, Number
from typing import Any

from .logging import get_logger

logger = get_logger(__name__)

HEX_STRING = re.compile(r"0[xX][0-9a-fA-F]*")


def is_zero_hex(value: str) -> bool:
    """
    Return True if `value` is a `0x`-prefixed hex string with no digits or
    only zero digits.

    Strings with characters outside the hex alphabet are never zero.
    """
    if HEX_STRING.fullmatch(value) is None:
        return False
    return value[2:].strip("0") == ""


def is_empty(value: Any) -> bool:
    """
    Return True if `value` carries no information for classification.

    Empty values are `None`, `""`, `"0"`, numeric zero of any width, hex
    strings whose quantity is zero (including the bare `"0x"`), and byte
    strings made only of zero bytes. Values of any other type are also
    considered empty. Never raises.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value in ("", "0") or is_zero_hex(value)
    if isinstance(value, bool):
        logger.debug("Treating boolean field value %r as empty.", value)
        return True
    if isinstance(value, Integral):
        # Covers int and the `ethereum_types` unsigned types, which are
        # registered as Integral without subclassing int.
        return int(value) == 0
    if isinstance(value, Number):
        try:
            return bool(value == 0)
        except ArithmeticError:
            # Signaling NaN decimals refuse comparison; they are not zero.
            return False
    if isinstance(value, (bytes, bytearray, memoryview)):
        return not any(bytes(value))
    logger.debug(
        "Treating field value of type %s as empty.", type(value).__name__
    )
    return True


def is_present(value: Any) -> bool:
    """Return True if `value` is not empty."""
    return not is_empty(value)
