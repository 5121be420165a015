"""
Merkle Proof Generation and Verification

This module provides functions for extracting merkle branches from a built
tree and for checking a branch against a known root.
"""

from hashlib import sha256
from typing import List


def get_proof(tree: List[List[bytes]], index: int) -> List[bytes]:
    """
    Extract a Merkle proof from a tree for a given leaf index.

    This function traverses up the tree from a leaf to the root,
    collecting sibling nodes to form the proof path.

    Args:
        tree: Complete Merkle tree as list of levels, where tree[0] is leaves
        index: Index of the leaf to generate proof for

    Returns:
        List of sibling hashes forming the proof path, leaf level first

    Raises:
        IndexError: If index is outside the leaf level
    """
    if not 0 <= index < len(tree[0]):
        raise IndexError(f"Leaf index {index} out of range (0-{len(tree[0]) - 1})")

    proof = []
    i = index
    for level in tree[:-1]:
        proof.append(level[i ^ 1])  # XOR to get sibling index
        i //= 2
    return proof


def compute_root_from_proof(leaf: bytes, index: int, proof: List[bytes]) -> bytes:
    """
    Rebuild the merkle root from a 32-byte leaf and its proof.

    Args:
        leaf: 32-byte hash of the target element
        index: 0-based position of that leaf in the tree
        proof: List of sibling hashes, one per level

    Returns:
        The reconstructed 32-byte merkle root
    """
    current = leaf
    for level, sibling in enumerate(proof):
        if ((index >> level) & 1) == 0:
            current = sha256(current + sibling).digest()
        else:
            current = sha256(sibling + current).digest()
    return current


def verify_merkle_proof(
    leaf: bytes, proof: List[bytes], index: int, root: bytes
) -> bool:
    """
    Verify a merkle proof against a known root.

    Examples:
        >>> is_valid = verify_merkle_proof(leaf, proof, 27, state_root)
    """
    return compute_root_from_proof(leaf, index, proof) == root
