"""
Hex decoding utilities for Quai RPC payloads.

All numeric fields on the Quai wire format are 0x-prefixed hex strings,
some of them grouped into fixed-arity tuples. Every formatter goes through
the helpers in this module so absent-field defaults live in one place.
"""

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from eth_utils import is_0x_prefixed, is_hex
from web3 import Web3

from ..errors import HexDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_absent(value: Any) -> bool:
    """Return True when a raw field carries no value (missing, null or empty)."""
    return value is None or value == ""


def hex_to_int(value: Any, field: str, default: T = 0) -> int | T:
    """
    Decode a hex string into an integer, substituting a default when absent.

    Args:
        value: Raw field value (0x-prefixed hex string, None or "")
        field: Field name, used in the error when the value is malformed
        default: Value returned when the field is absent

    Returns:
        The decoded non-negative integer, or ``default``

    Raises:
        HexDecodeError: If the value is present but is not a 0x-prefixed hex string
    """
    if is_absent(value):
        return default

    if not isinstance(value, str) or not is_0x_prefixed(value) or not is_hex(value):
        raise HexDecodeError(field, value)

    # "0x" alone is a valid empty quantity
    if value in ("0x", "0X"):
        return 0

    return Web3.to_int(hexstr=value)


def hex_to_optional_int(value: Any, field: str) -> int | None:
    """Decode a hex string, returning None instead of zero when absent."""
    return hex_to_int(value, field, default=None)


def hex_tuple_to_ints(values: Sequence[Any] | None, field: str, arity: int) -> tuple[int, ...]:
    """
    Decode a fixed-arity tuple of hex strings element-wise.

    Partial tuples are legal: every missing element defaults to zero
    independently, and the result always has exactly ``arity`` elements.

    Args:
        values: Raw tuple (or list) of hex strings, possibly short or None
        field: Field name, used in the error when an element is malformed
        arity: Number of elements in the decoded tuple

    Returns:
        Tuple of decoded integers

    Raises:
        HexDecodeError: If ``values`` is not a sequence (a bare string
            included) or one of its elements is malformed
    """
    if is_absent(values):
        values = ()
    elif isinstance(values, str) or not isinstance(values, Sequence):
        raise HexDecodeError(field, values)

    return tuple(
        hex_to_int(values[i] if i < len(values) else None, f"{field}[{i}]")
        for i in range(arity)
    )


def int_to_hex(value: int) -> str:
    """Encode a non-negative integer as a 0x-prefixed hex quantity."""
    if value < 0:
        raise ValueError(f"Cannot encode negative quantity: {value}")
    return Web3.to_hex(value)
