"""
Hex String and Naming Convention Utilities

This module provides utilities for handling hex strings and converting between
different naming conventions used in JSON data and Python code.
"""

import re


def camel_to_snake(name: str) -> str:
    """
    Convert camelCase naming to snake_case naming.

    Beacon nodes answer in snake_case, but some clients emit camelCase keys;
    both map onto the same container field names.

    Examples:
        >>> camel_to_snake("thisIsCamelCase")
        "this_is_camel_case"
        >>> camel_to_snake("snake_case")
        "snake_case"
    """
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes.

    Args:
        hex_str: Hex string (with or without '0x' prefix)

    Returns:
        Bytes representation of the hex string

    Raises:
        ValueError: If the string is not valid hex

    Examples:
        >>> hex_to_bytes("0x1234")
        b'\x12\x34'
    """
    if not isinstance(hex_str, str):
        raise ValueError(f"Expected a hex string, got {type(hex_str).__name__}")
    if hex_str.startswith("0x"):
        hex_str = hex_str[2:]

    # Pad to even length
    if len(hex_str) % 2 == 1:
        hex_str = "0" + hex_str

    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """
    Convert bytes to a lowercase hex string.

    Examples:
        >>> bytes_to_hex(b'\x12\x34')
        "0x1234"
        >>> bytes_to_hex(b'\x12\x34', prefix=False)
        "1234"
    """
    hex_str = data.hex()
    return f"0x{hex_str}" if prefix else hex_str
