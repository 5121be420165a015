"""
SSZ Type Strings

Container fields are described with SSZ type strings, for example ``uint64``,
``bytes32``, ``ByteList[32]``, ``Bitvector[512]``, ``Vector[bytes32, 5]``,
``List[Validator, 1099511627776]`` or the name of a registered container class.
This module parses those strings and answers the size questions the
serializer needs.
"""

import re
from functools import lru_cache
from typing import Dict, Optional, Tuple

from .constants import BYTES_PER_LENGTH_OFFSET

# Container classes by name, filled in by SSZContainer.__init_subclass__
CONTAINER_TYPES: Dict[str, type] = {}

_COMPOSITE_PATTERN = re.compile(r"^(Vector|List)\[(.+),\s*(\d+)\]$")
_SIZED_PATTERN = re.compile(r"^(ByteList|Bitvector)\[(\d+)\]$")

_UINT_SIZES = {8, 16, 32, 64, 128, 256}


def register_container(cls: type) -> type:
    """Make a container class usable by name inside type strings."""
    CONTAINER_TYPES[cls.__name__] = cls
    return cls


def container_class(type_str: str) -> type:
    try:
        return CONTAINER_TYPES[type_str]
    except KeyError:
        raise ValueError(f"Unknown SSZ container type: {type_str}")


@lru_cache(maxsize=None)
def parse_type(type_str: str) -> Tuple[str, Optional[str], int]:
    """
    Parse an SSZ type string.

    Args:
        type_str: SSZ type string

    Returns:
        Tuple of (kind, element_type, length) where kind is one of
        'uint', 'boolean', 'bytes', 'bytelist', 'bitvector', 'vector',
        'list' or 'container'. For 'uint' the length is the byte width,
        for 'bytes' the byte length, and for the sized kinds their bound.

    Raises:
        ValueError: If the type string is not understood

    Examples:
        >>> parse_type("uint64")
        ('uint', None, 8)
        >>> parse_type("Vector[bytes32, 5]")
        ('vector', 'bytes32', 5)
    """
    if type_str.startswith("uint") and type_str[4:].isdigit():
        bits = int(type_str[4:])
        if bits not in _UINT_SIZES:
            raise ValueError(f"Unsupported uint width: {type_str}")
        return ("uint", None, bits // 8)

    if type_str == "boolean":
        return ("boolean", None, 1)

    if type_str.startswith("bytes") and type_str[5:].isdigit():
        return ("bytes", None, int(type_str[5:]))

    match = _SIZED_PATTERN.match(type_str)
    if match:
        kind = "bytelist" if match.group(1) == "ByteList" else "bitvector"
        return (kind, None, int(match.group(2)))

    match = _COMPOSITE_PATTERN.match(type_str)
    if match:
        return (match.group(1).lower(), match.group(2).strip(), int(match.group(3)))

    if type_str in CONTAINER_TYPES:
        return ("container", None, 0)

    raise ValueError(f"Unsupported SSZ type: {type_str}")


def is_basic_type(type_str: str) -> bool:
    """Basic types are the ones packed several to a chunk."""
    kind, _, _ = parse_type(type_str)
    return kind in ("uint", "boolean")


def is_fixed_size(type_str: str) -> bool:
    kind, elem_type, _ = parse_type(type_str)
    if kind in ("uint", "boolean", "bytes", "bitvector"):
        return True
    if kind in ("bytelist", "list"):
        return False
    if kind == "vector":
        return is_fixed_size(elem_type)
    return all(is_fixed_size(t) for _, t in container_class(type_str).FIELDS)


def fixed_size(type_str: str) -> int:
    """
    Serialized size of a fixed-size type.

    Raises:
        ValueError: If the type is variable-size
    """
    if not is_fixed_size(type_str):
        raise ValueError(f"{type_str} is variable-size")

    kind, elem_type, length = parse_type(type_str)
    if kind in ("uint", "boolean", "bytes"):
        return length
    if kind == "bitvector":
        return (length + 7) // 8
    if kind == "vector":
        return length * fixed_size(elem_type)
    return sum(fixed_size(t) for _, t in container_class(type_str).FIELDS)


def fixed_part_size(type_str: str) -> int:
    """Bytes a field occupies in the fixed part of its parent container."""
    if is_fixed_size(type_str):
        return fixed_size(type_str)
    return BYTES_PER_LENGTH_OFFSET
