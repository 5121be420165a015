"""
Merkle Tree Building and Manipulation Utilities

This module provides utilities for building merkle trees: chunk packing,
merkleization against a fixed capacity, and full tree construction for
small containers whose proofs are extracted level by level.
"""

from hashlib import sha256
from typing import List, Optional

from ..constants import BYTES_PER_CHUNK, ZERO_HASHES


def next_power_of_two(n: int) -> int:
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def pack_bytes(data: bytes) -> List[bytes]:
    """
    Split serialized data into 32-byte chunks, right-padding the last one.

    Examples:
        >>> pack_bytes(b'\\x01' * 40)  # Two chunks, the second zero-padded
    """
    if len(data) % BYTES_PER_CHUNK:
        data += b"\x00" * (BYTES_PER_CHUNK - len(data) % BYTES_PER_CHUNK)
    return [data[i:i + BYTES_PER_CHUNK] for i in range(0, len(data), BYTES_PER_CHUNK)]


def merkle_root_list_fixed(chunks: List[bytes], limit: int) -> bytes:
    """
    Merkle-root a list of 32-byte chunks, exactly out to 'limit' leaves.

    This function efficiently handles large fixed-capacity lists by using
    precomputed zero hashes for padding beyond the actual data.

    Args:
        chunks: List of 32-byte chunks (actual data)
        limit: Fixed capacity (must be power of two)

    Returns:
        32-byte merkle root
    """
    n = len(chunks)

    if not (limit & (limit - 1) == 0):
        raise ValueError("limit must be a power of two")
    if n > limit:
        raise ValueError(f"Too many leaves: {n} > {limit}")

    # Step A: hash the real chunks up to a subtree of m = next_pow2(n) leaves
    nodes = list(chunks) if n else [ZERO_HASHES[0]]
    level = 0
    while len(nodes) > 1:
        if len(nodes) % 2:
            nodes.append(ZERO_HASHES[level])
        nodes = [
            sha256(nodes[i] + nodes[i + 1]).digest()
            for i in range(0, len(nodes), 2)
        ]
        level += 1

    # Step B: keep doubling with ZERO_HASHES[level] until we reach 'limit'
    subtree_root = nodes[0]
    current_size = 1 << level
    while current_size < limit:
        subtree_root = sha256(subtree_root + ZERO_HASHES[level]).digest()
        current_size *= 2
        level += 1

    return subtree_root


def merkleize_chunks(chunks: List[bytes], limit: Optional[int] = None) -> bytes:
    """
    Merkleize a list of 32-byte chunks.

    Args:
        chunks: List of 32-byte chunks to merkleize
        limit: Maximum number of chunks; the tree is padded to the next power
            of two of this value. Defaults to the number of chunks.

    Returns:
        32-byte merkle root
    """
    if limit is None:
        limit = len(chunks)
    if len(chunks) > limit:
        raise ValueError(f"Too many chunks: {len(chunks)} > {limit}")
    return merkle_root_list_fixed(chunks, next_power_of_two(limit))


def mix_in_length(root: bytes, length: int) -> bytes:
    """Mix the length of a list into its data root (SSZ list requirement)."""
    return sha256(root + length.to_bytes(32, "little")).digest()


def build_merkle_tree(leaves: List[bytes]) -> List[List[bytes]]:
    """
    Build a complete binary merkle tree from leaf nodes.

    Returns the full tree structure, with leaves at index 0
    and root at the last index.

    Args:
        leaves: List of 32-byte leaf hashes, padded to a power of two

    Returns:
        List of tree levels, from leaves to root

    Examples:
        >>> tree = build_merkle_tree([b'\\x01'*32, b'\\x02'*32])
        >>> root = tree[-1][0]  # Root is at top level
    """
    if not leaves:
        return [[ZERO_HASHES[0]]]

    leaves = list(leaves) + [ZERO_HASHES[0]] * (next_power_of_two(len(leaves)) - len(leaves))
    tree = [leaves]
    current = leaves

    while len(current) > 1:
        current = [
            sha256(current[i] + current[i + 1]).digest()
            for i in range(0, len(current), 2)
        ]
        tree.append(current)

    return tree
