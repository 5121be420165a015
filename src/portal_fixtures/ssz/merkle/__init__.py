"""
SSZ Merkle Tree Operations

This package provides Merkle tree functionality for SSZ serialization.

The module is organized into three main components:
- core: hash_tree_root for every SSZ type string
- tree: Tree building and manipulation utilities
- proof: Proof extraction and verification functions
"""

from .core import (
    field_roots,
    merkle_root_container,
    merkle_root_value,
)

from .tree import (
    build_merkle_tree,
    merkle_root_list_fixed,
    merkleize_chunks,
    mix_in_length,
    next_power_of_two,
    pack_bytes,
)

from .proof import (
    compute_root_from_proof,
    get_proof,
    verify_merkle_proof,
)

__all__ = [
    # Core functions
    "field_roots",
    "merkle_root_container",
    "merkle_root_value",
    # Tree utilities
    "build_merkle_tree",
    "merkle_root_list_fixed",
    "merkleize_chunks",
    "mix_in_length",
    "next_power_of_two",
    "pack_bytes",
    # Proof functions
    "compute_root_from_proof",
    "get_proof",
    "verify_merkle_proof",
]
