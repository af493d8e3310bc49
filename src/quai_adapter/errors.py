"""
Error types raised by the Quai adapter.
"""

from typing import Any


class HexDecodeError(ValueError):
    """Raised when a field declared as hex holds a value that is not valid hex.

    Absent fields never raise; they decode to their documented default.
    This error marks a corrupt value so callers can tell the two apart.

    Attributes:
        field: Name of the offending RPC field (dotted for nested fields)
        value: The raw value as received from the node
    """

    def __init__(self, field: str, value: Any) -> None:
        self.field: str = field
        self.value: Any = value
        super().__init__(f"Invalid hex value for field '{field}': {value!r}")
