"""
Container Utilities

This module converts beacon API JSON into SSZ container instances. The beacon
API encodes integers as decimal strings and byte data as 0x-prefixed hex;
both are mapped onto Python ints and bytes according to the field types.
"""

from typing import Any, Dict, Type

from ..types import container_class, parse_type
from ..utils.hex_helpers import camel_to_snake, hex_to_bytes


def value_from_json(value: Any, type_str: str) -> Any:
    """
    Convert a JSON value into the Python value for an SSZ type.

    Args:
        value: Decoded JSON value
        type_str: SSZ type string of the target field

    Returns:
        Python value (int, bool, bytes, list or container)

    Raises:
        ValueError: If the JSON value does not match the type
    """
    kind, elem_type, length = parse_type(type_str)

    if kind == "uint":
        if isinstance(value, bool):
            raise ValueError(f"Expected an integer for {type_str}, got a boolean")
        if isinstance(value, str):
            value = int(value, 16) if value.startswith("0x") else int(value)
        if not isinstance(value, int):
            raise ValueError(f"Expected an integer for {type_str}, got {value!r}")
        if not 0 <= value < 2 ** (8 * length):
            raise ValueError(f"{value} is out of range for {type_str}")
        return value

    if kind == "boolean":
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        if not isinstance(value, bool):
            raise ValueError(f"Expected a boolean, got {value!r}")
        return value

    if kind in ("bytes", "bytelist", "bitvector"):
        data = hex_to_bytes(value)
        if kind == "bytes" and len(data) != length:
            raise ValueError(f"Expected {length} bytes for {type_str}, got {len(data)}")
        if kind == "bitvector" and len(data) != (length + 7) // 8:
            raise ValueError(f"Expected {(length + 7) // 8} bytes for {type_str}, got {len(data)}")
        if kind == "bytelist" and len(data) > length:
            raise ValueError(f"{type_str} got {len(data)} bytes")
        return data

    if kind in ("vector", "list"):
        if not isinstance(value, list):
            raise ValueError(f"Expected a JSON array for {type_str}, got {type(value).__name__}")
        if kind == "vector" and len(value) != length:
            raise ValueError(f"{type_str} needs exactly {length} elements, got {len(value)}")
        if kind == "list" and len(value) > length:
            raise ValueError(f"{type_str} holds at most {length} elements, got {len(value)}")
        return [value_from_json(item, elem_type) for item in value]

    return json_to_class(value, container_class(type_str))


def json_to_class(data: Dict[str, Any], cls: Type) -> Any:
    """
    Build a container instance from a JSON object.

    Keys are converted to snake_case before lookup; keys that are not
    container fields are ignored.

    Raises:
        ValueError: If data is not an object or a field is missing
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")

    processed = {camel_to_snake(key): value for key, value in data.items()}
    kwargs = {}
    for name, type_str in cls.FIELDS:
        if name not in processed:
            raise ValueError(f"{cls.__name__} is missing field '{name}'")
        try:
            kwargs[name] = value_from_json(processed[name], type_str)
        except ValueError as e:
            raise ValueError(f"{cls.__name__}.{name}: {e}")
    return cls(**kwargs)
