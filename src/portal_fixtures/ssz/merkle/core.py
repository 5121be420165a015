"""
Core Merkle Tree Functions for SSZ

This module implements hash_tree_root for every SSZ type string understood by
the serializer.

SSZ Merkleization Rules:
- Basic types are packed into 32-byte chunks
- Byte vectors and bitvectors are chunked and merkleized to their chunk count
- Lists are merkleized to their limit and then mixed with their length
- Containers have their field roots merkleized

References:
- SSZ Specification: https://github.com/ethereum/consensus-specs/blob/dev/ssz/simple-serialize.md
"""

from typing import Any, List

from ..constants import BYTES_PER_CHUNK
from ..serialization import serialize_value
from ..types import fixed_size, is_basic_type, parse_type
from .tree import merkleize_chunks, mix_in_length, pack_bytes


def _chunk_count(byte_length: int) -> int:
    return (byte_length + BYTES_PER_CHUNK - 1) // BYTES_PER_CHUNK


def _element_chunks(values: List[Any], elem_type: str) -> List[bytes]:
    if is_basic_type(elem_type):
        return pack_bytes(b"".join(serialize_value(v, elem_type) for v in values))
    return [merkle_root_value(v, elem_type) for v in values]


def _element_limit(elem_type: str, length: int) -> int:
    if is_basic_type(elem_type):
        return _chunk_count(length * fixed_size(elem_type))
    return length


def merkle_root_value(value: Any, type_str: str) -> bytes:
    """
    Calculate the hash_tree_root of a value of the given SSZ type.

    Args:
        value: Python value (int, bool, bytes, list or container)
        type_str: SSZ type string

    Returns:
        32-byte merkle root

    Examples:
        >>> merkle_root_value(123, 'uint64')  # Returns padded uint64
        >>> merkle_root_value(b'\\x01' * 32, 'bytes32')  # Returns as-is
        >>> merkle_root_value(b'\\x01' * 48, 'bytes48')  # Returns hash of two chunks
    """
    kind, elem_type, length = parse_type(type_str)

    if kind in ("uint", "boolean"):
        return pack_bytes(serialize_value(value, type_str))[0]
    if kind == "bytes":
        return merkleize_chunks(pack_bytes(serialize_value(value, type_str)), _chunk_count(length))
    if kind == "bitvector":
        return merkleize_chunks(pack_bytes(serialize_value(value, type_str)), (length + 255) // 256)
    if kind == "bytelist":
        data = serialize_value(value, type_str)
        return mix_in_length(merkleize_chunks(pack_bytes(data), _chunk_count(length)), len(data))
    if kind == "vector":
        if len(value) != length:
            raise ValueError(f"{type_str} needs exactly {length} elements, got {len(value)}")
        return merkleize_chunks(_element_chunks(value, elem_type), _element_limit(elem_type, length))
    if kind == "list":
        if len(value) > length:
            raise ValueError(f"{type_str} holds at most {length} elements, got {len(value)}")
        root = merkleize_chunks(_element_chunks(value, elem_type), _element_limit(elem_type, length))
        return mix_in_length(root, len(value))
    return value.merkle_root()


def merkle_root_container(obj: Any, fields: List[tuple]) -> bytes:
    """
    Calculate merkle root for an SSZ container.

    Args:
        obj: The container object
        fields: List of (field_name, field_type) tuples describing the container

    Returns:
        32-byte merkle root of the container
    """
    return merkleize_chunks(field_roots(obj, fields))


def field_roots(obj: Any, fields: List[tuple]) -> List[bytes]:
    """Merkle roots of each container field, in declaration order."""
    return [merkle_root_value(getattr(obj, name), type_str) for name, type_str in fields]
