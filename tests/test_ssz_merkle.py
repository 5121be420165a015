"""
Tests for SSZ merkleization

This module verifies hash_tree_root for basic, composite and container types,
proof extraction from container trees, and the mainnet fork digests.
"""

import unittest
import sys
import os
from hashlib import sha256

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from portal_fixtures.content.forks import ForkName, compute_fork_digest
from portal_fixtures.config import GENESIS_VALIDATORS_ROOT
from portal_fixtures.ssz.constants import ZERO_HASHES
from portal_fixtures.ssz.containers import BeaconBlockHeader, Checkpoint
from portal_fixtures.ssz.merkle import (
    build_merkle_tree,
    compute_root_from_proof,
    get_proof,
    merkle_root_value,
    merkleize_chunks,
    mix_in_length,
    verify_merkle_proof,
)


def h(a: bytes, b: bytes) -> bytes:
    return sha256(a + b).digest()


class TestMerkleRoots(unittest.TestCase):
    """Test hash_tree_root of SSZ values."""

    def test_uint64_is_padded_chunk(self):
        root = merkle_root_value(123, "uint64")
        self.assertEqual(root, (123).to_bytes(8, "little") + b"\x00" * 24)

    def test_bytes32_is_its_own_root(self):
        self.assertEqual(merkle_root_value(b"\x01" * 32, "bytes32"), b"\x01" * 32)

    def test_bytes48_hashes_two_chunks(self):
        value = b"\x01" * 48
        expected = h(value[:32], value[32:] + b"\x00" * 16)
        self.assertEqual(merkle_root_value(value, "bytes48"), expected)

    def test_empty_list_mixes_in_zero_length(self):
        # 1024 uint64 values fill 256 chunks, a depth 8 tree
        root = merkle_root_value([], "List[uint64, 1024]")
        self.assertEqual(root, mix_in_length(ZERO_HASHES[8], 0))

    def test_list_of_roots(self):
        roots = [b"\x01" * 32, b"\x02" * 32, b"\x03" * 32]
        expected = mix_in_length(
            h(h(h(roots[0], roots[1]), h(roots[2], ZERO_HASHES[0])), ZERO_HASHES[2]),
            3,
        )
        self.assertEqual(merkle_root_value(roots, "List[bytes32, 8]"), expected)

    def test_merkleize_chunks_rejects_overflow(self):
        with self.assertRaises(ValueError):
            merkleize_chunks([b"\x00" * 32] * 3, 2)

    def test_checkpoint_root(self):
        checkpoint = Checkpoint(epoch=5, root=b"\xaa" * 32)
        expected = h((5).to_bytes(32, "little"), b"\xaa" * 32)
        self.assertEqual(checkpoint.merkle_root(), expected)

    def test_block_header_root(self):
        header = BeaconBlockHeader(
            slot=1,
            proposer_index=2,
            parent_root=b"\x03" * 32,
            state_root=b"\x04" * 32,
            body_root=b"\x05" * 32,
        )
        leaves = [
            (1).to_bytes(32, "little"),
            (2).to_bytes(32, "little"),
            b"\x03" * 32,
            b"\x04" * 32,
            b"\x05" * 32,
        ]
        zero = ZERO_HASHES[0]
        expected = h(
            h(h(leaves[0], leaves[1]), h(leaves[2], leaves[3])),
            h(h(leaves[4], zero), h(zero, zero)),
        )
        self.assertEqual(header.merkle_root(), expected)


class TestMerkleProofs(unittest.TestCase):
    """Test proof extraction and verification."""

    def setUp(self):
        self.leaves = [bytes([i]) * 32 for i in range(5)]
        self.tree = build_merkle_tree(self.leaves)

    def test_tree_is_padded_to_power_of_two(self):
        self.assertEqual(len(self.tree[0]), 8)
        self.assertEqual(len(self.tree), 4)

    def test_every_leaf_proves_against_root(self):
        root = self.tree[-1][0]
        for index, leaf in enumerate(self.leaves):
            proof = get_proof(self.tree, index)
            self.assertEqual(len(proof), 3)
            self.assertTrue(verify_merkle_proof(leaf, proof, index, root))

    def test_wrong_index_fails_verification(self):
        root = self.tree[-1][0]
        proof = get_proof(self.tree, 1)
        self.assertFalse(verify_merkle_proof(self.leaves[1], proof, 2, root))

    def test_out_of_range_index(self):
        with self.assertRaises(IndexError):
            get_proof(self.tree, 8)

    def test_container_field_proof(self):
        header = BeaconBlockHeader(
            slot=9,
            proposer_index=1,
            parent_root=b"\x03" * 32,
            state_root=b"\x04" * 32,
            body_root=b"\x05" * 32,
        )
        proof = header.get_proof(3)
        self.assertEqual(compute_root_from_proof(b"\x04" * 32, 3, proof), header.merkle_root())


class TestForkDigests(unittest.TestCase):
    """Test mainnet fork digests."""

    def test_deneb_digest(self):
        self.assertEqual(ForkName.DENEB.fork_digest.hex(), "6a95a1a9")

    def test_capella_digest(self):
        digest = compute_fork_digest(bytes.fromhex("03000000"), GENESIS_VALIDATORS_ROOT)
        self.assertEqual(digest.hex(), "bba4da96")

    def test_bellatrix_digest(self):
        self.assertEqual(ForkName.BELLATRIX.fork_digest.hex(), "4a26c58b")

    def test_digest_lookup(self):
        self.assertIs(ForkName.from_fork_digest(bytes.fromhex("6a95a1a9")), ForkName.DENEB)

    def test_every_fork_resolves_from_its_digest(self):
        digests = {fork.fork_digest for fork in ForkName}
        self.assertEqual(len(digests), len(ForkName))
        for fork in ForkName:
            self.assertIs(ForkName.from_fork_digest(fork.fork_digest), fork)


if __name__ == "__main__":
    unittest.main()
