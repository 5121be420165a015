"""
Base SSZ Container Classes

This module provides the base class for SSZ containers. Subclasses are
dataclasses that declare their layout in ``FIELDS`` as (field_name, type_str)
pairs; serialization, deserialization, JSON loading and merkleization are all
driven by that declaration.
"""

from typing import Any, Dict, List, Tuple

from ..merkle.core import field_roots, merkle_root_container
from ..merkle.proof import get_proof
from ..merkle.tree import build_merkle_tree
from ..serialization import deserialize_fields, serialize_fields
from ..types import register_container


class SSZContainer:
    """
    Base class for SSZ containers.

    All SSZ containers expose serialize/deserialize and the merkle_root method
    to calculate their SSZ hash_tree_root.
    """

    FIELDS: List[Tuple[str, str]] = []

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        register_container(cls)

    def serialize(self) -> bytes:
        """Encode the container to SSZ bytes."""
        return serialize_fields(
            [(getattr(self, name), type_str) for name, type_str in self.FIELDS]
        )

    @classmethod
    def deserialize(cls, data: bytes):
        """
        Decode a container from SSZ bytes.

        Raises:
            ValueError: If data is not a valid encoding of this container
        """
        values = deserialize_fields(data, [type_str for _, type_str in cls.FIELDS])
        return cls(**{name: value for (name, _), value in zip(cls.FIELDS, values)})

    @classmethod
    def from_json(cls, data: Dict[str, Any]):
        """
        Build the container from beacon API JSON.

        Raises:
            ValueError: If a field is missing or has the wrong shape
        """
        from .utils import json_to_class

        return json_to_class(data, cls)

    def merkle_tree(self) -> List[List[bytes]]:
        """Build complete merkle tree over the field roots."""
        return build_merkle_tree(field_roots(self, self.FIELDS))

    def merkle_root(self) -> bytes:
        """Calculate SSZ merkle root (hash_tree_root) for this container."""
        return merkle_root_container(self, self.FIELDS)

    def get_proof(self, index: int) -> List[bytes]:
        """Get merkle proof for field at index."""
        return get_proof(self.merkle_tree(), index)
