"""
SSZ Serialization Functions

This module implements SSZ (Simple Serialize) serialization and deserialization
for basic types and for the composite types described by SSZ type strings
(vectors, lists, byte lists, bitvectors and containers).

Layout rules:
- Fixed-size values are written in place.
- Variable-size values leave a 4-byte little-endian offset in the fixed part
  and are appended, in field order, after the fixed part.

References:
- SSZ Specification: https://github.com/ethereum/consensus-specs/blob/dev/ssz/simple-serialize.md
"""

from typing import Any, List, Optional, Sequence, Tuple

from .constants import BYTES_PER_LENGTH_OFFSET
from .types import (
    container_class,
    fixed_part_size,
    fixed_size,
    is_fixed_size,
    parse_type,
)


def serialize_uint(value: int, size: int) -> bytes:
    """
    Serialize an unsigned integer of `size` bytes to SSZ format.

    SSZ Rule: Integers are serialized as little-endian byte arrays
    of their respective byte length.

    Args:
        value: Integer value (0 <= value < 2^(8*size))
        size: Byte width of the integer type

    Returns:
        Little-endian representation

    Raises:
        ValueError: If value is negative
        OverflowError: If value does not fit the type

    Examples:
        >>> serialize_uint(1, 8)
        b'\\x01\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    if value < 0:
        raise ValueError(f"uint{size * 8} values must be non-negative")
    if value >= 2 ** (size * 8):
        raise OverflowError(f"Value too large for uint{size * 8}")

    return value.to_bytes(size, "little")


def serialize_uint32(value: int) -> bytes:
    return serialize_uint(value, 4)


def serialize_bool(value: bool) -> bytes:
    """
    Serialize a boolean value to SSZ format.

    SSZ Rule: Booleans are serialized as a single byte,
    0x00 for False, 0x01 for True.
    """
    return b"\x01" if value else b"\x00"


def serialize_bytes(value: bytes, length: int) -> bytes:
    """
    Serialize a fixed-length byte array to SSZ format.

    Raises:
        ValueError: If the byte array length doesn't match expected length
    """
    if len(value) != length:
        raise ValueError(f"Expected {length} bytes, got {len(value)}")

    return bytes(value)


def deserialize_uint(data: bytes, size: int) -> int:
    if len(data) != size:
        raise ValueError(f"Expected {size} bytes for uint{size * 8}, got {len(data)}")

    return int.from_bytes(data, "little")


def deserialize_uint32(data: bytes) -> int:
    return deserialize_uint(data, 4)


def deserialize_bool(data: bytes) -> bool:
    """
    Deserialize a boolean from SSZ format.

    Raises:
        ValueError: If data is not exactly 1 byte or not 0x00/0x01
    """
    if len(data) != 1:
        raise ValueError(f"Expected 1 byte for boolean, got {len(data)}")

    if data[0] == 0:
        return False
    elif data[0] == 1:
        return True
    else:
        raise ValueError(f"Invalid boolean byte: {data[0]:02x}")


def _check_bitvector(data: bytes, length: int) -> bytes:
    if len(data) != (length + 7) // 8:
        raise ValueError(f"Expected {(length + 7) // 8} bytes for Bitvector[{length}], got {len(data)}")
    if length % 8 and data[-1] >> (length % 8):
        raise ValueError(f"Bitvector[{length}] has bits set beyond its length")
    return bytes(data)


def pack_offsets(fixed_parts: Sequence[Optional[bytes]], variable_parts: Sequence[bytes]) -> bytes:
    """
    Join serialized fields into one SSZ byte string.

    Args:
        fixed_parts: Serialized fixed-size fields, or None where the field is
            variable-size and an offset has to be written
        variable_parts: Serialized variable-size fields (b"" for fixed ones)

    Returns:
        Fixed part followed by the variable parts
    """
    offset = sum(
        len(part) if part is not None else BYTES_PER_LENGTH_OFFSET
        for part in fixed_parts
    )
    out = []
    for part, variable in zip(fixed_parts, variable_parts):
        if part is None:
            out.append(serialize_uint32(offset))
            offset += len(variable)
        else:
            out.append(part)
    return b"".join(out) + b"".join(variable_parts)


def serialize_fields(values: Sequence[Tuple[Any, str]]) -> bytes:
    """Serialize (value, type_str) pairs the way a container lays them out."""
    fixed_parts: List[Optional[bytes]] = []
    variable_parts: List[bytes] = []
    for value, type_str in values:
        if is_fixed_size(type_str):
            fixed_parts.append(serialize_value(value, type_str))
            variable_parts.append(b"")
        else:
            fixed_parts.append(None)
            variable_parts.append(serialize_value(value, type_str))
    return pack_offsets(fixed_parts, variable_parts)


def serialize_value(value: Any, type_str: str) -> bytes:
    """
    Serialize a value according to its SSZ type string.

    Args:
        value: Python value (int, bool, bytes, list or container)
        type_str: SSZ type string

    Returns:
        SSZ encoding of the value

    Raises:
        ValueError: If the value does not fit the type

    Examples:
        >>> serialize_value([1, 2], "List[uint16, 4]")
        b'\\x01\\x00\\x02\\x00'
    """
    kind, elem_type, length = parse_type(type_str)

    if kind == "uint":
        return serialize_uint(value, length)
    if kind == "boolean":
        return serialize_bool(value)
    if kind == "bytes":
        return serialize_bytes(value, length)
    if kind == "bitvector":
        return _check_bitvector(value, length)
    if kind == "bytelist":
        if len(value) > length:
            raise ValueError(f"ByteList[{length}] got {len(value)} bytes")
        return bytes(value)
    if kind == "vector":
        if len(value) != length:
            raise ValueError(f"{type_str} needs exactly {length} elements, got {len(value)}")
        return serialize_fields([(v, elem_type) for v in value])
    if kind == "list":
        if len(value) > length:
            raise ValueError(f"{type_str} holds at most {length} elements, got {len(value)}")
        return serialize_fields([(v, elem_type) for v in value])
    return value.serialize()


def unpack_offsets(data: bytes) -> List[bytes]:
    """
    Split the encoding of a list of variable-size items into the items.

    Raises:
        ValueError: If the offsets are malformed
    """
    if not data:
        return []
    if len(data) < BYTES_PER_LENGTH_OFFSET:
        raise ValueError("Data too short for an offset")

    first = deserialize_uint32(data[:BYTES_PER_LENGTH_OFFSET])
    if first == 0 or first % BYTES_PER_LENGTH_OFFSET or first > len(data):
        raise ValueError(f"Invalid first offset: {first}")

    count = first // BYTES_PER_LENGTH_OFFSET
    offsets = [
        deserialize_uint32(data[i * BYTES_PER_LENGTH_OFFSET:(i + 1) * BYTES_PER_LENGTH_OFFSET])
        for i in range(count)
    ]
    offsets.append(len(data))

    items = []
    for start, end in zip(offsets, offsets[1:]):
        if end < start:
            raise ValueError(f"Offsets are not increasing: {start} > {end}")
        items.append(data[start:end])
    return items


def deserialize_fields(data: bytes, types: Sequence[str]) -> List[Any]:
    """
    Deserialize a container-style layout of the given field types.

    Raises:
        ValueError: If the data is too short, too long or has bad offsets
    """
    values: List[Any] = [None] * len(types)
    offsets: List[Tuple[int, int]] = []
    pos = 0

    for i, type_str in enumerate(types):
        size = fixed_part_size(type_str)
        chunk = data[pos:pos + size]
        if len(chunk) != size:
            raise ValueError(f"Data too short: expected {size} more bytes at {pos}")
        if is_fixed_size(type_str):
            values[i] = deserialize_value(chunk, type_str)
        else:
            offsets.append((i, deserialize_uint32(chunk)))
        pos += size

    if not offsets:
        if pos != len(data):
            raise ValueError(f"Expected {pos} bytes, got {len(data)}")
        return values

    if offsets[0][1] != pos:
        raise ValueError(f"First offset {offsets[0][1]} does not match fixed part size {pos}")

    bounds = [offset for _, offset in offsets] + [len(data)]
    for (i, start), end in zip(offsets, bounds[1:]):
        if end < start or end > len(data):
            raise ValueError(f"Invalid offset range {start}..{end}")
        values[i] = deserialize_value(data[start:end], types[i])
    return values


def _deserialize_sequence(data: bytes, elem_type: str) -> List[Any]:
    if is_fixed_size(elem_type):
        size = fixed_size(elem_type)
        if len(data) % size:
            raise ValueError(f"Data length {len(data)} is not a multiple of {size}")
        return [
            deserialize_value(data[i:i + size], elem_type)
            for i in range(0, len(data), size)
        ]
    return [deserialize_value(item, elem_type) for item in unpack_offsets(data)]


def deserialize_value(data: bytes, type_str: str) -> Any:
    """
    Deserialize SSZ bytes according to a type string.

    Args:
        data: SSZ encoded bytes, exactly covering one value
        type_str: SSZ type string

    Returns:
        Python value

    Raises:
        ValueError: If the data is not a valid encoding of the type
    """
    kind, elem_type, length = parse_type(type_str)

    if kind == "uint":
        return deserialize_uint(data, length)
    if kind == "boolean":
        return deserialize_bool(data)
    if kind == "bytes":
        return serialize_bytes(data, length)
    if kind == "bitvector":
        return _check_bitvector(data, length)
    if kind == "bytelist":
        if len(data) > length:
            raise ValueError(f"ByteList[{length}] got {len(data)} bytes")
        return bytes(data)
    if kind in ("vector", "list"):
        values = _deserialize_sequence(data, elem_type)
        if kind == "vector" and len(values) != length:
            raise ValueError(f"{type_str} needs exactly {length} elements, got {len(values)}")
        if kind == "list" and len(values) > length:
            raise ValueError(f"{type_str} holds at most {length} elements, got {len(values)}")
        return values
    return container_class(type_str).deserialize(data)
