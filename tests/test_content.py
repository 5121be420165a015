"""
Tests for Portal beacon content keys and values

This module checks the encoding of each content key variant, content ids,
and the fork-versioned encoding of content values.
"""

import unittest
import sys
import os
from hashlib import sha256

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from portal_fixtures.content.forks import ForkName
from portal_fixtures.content.keys import (
    HistoricalSummariesWithProofKey,
    LightClientBootstrapKey,
    LightClientFinalityUpdateKey,
    LightClientOptimisticUpdateKey,
    LightClientUpdatesByRangeKey,
    decode_content_key,
)
from portal_fixtures.content.values import (
    MAX_REQUEST_LIGHT_CLIENT_UPDATES,
    ForkVersionedLightClientBootstrap,
    ForkVersionedLightClientOptimisticUpdate,
    ForkVersionedLightClientUpdate,
    LightClientUpdatesByRange,
    decode_content_value,
)
from portal_fixtures.exceptions import DecodeError
from portal_fixtures.ssz.containers import (
    LightClientBootstrap,
    LightClientOptimisticUpdate,
    LightClientUpdate,
)

from builders import bootstrap_json, optimistic_update_json, update_json

DENEB_DIGEST = bytes.fromhex("6a95a1a9")


class TestContentKeys(unittest.TestCase):
    """Test content key encoding."""

    def test_bootstrap_key(self):
        key = LightClientBootstrapKey(block_hash=b"\xab" * 32)
        self.assertEqual(key.encode(), b"\x10" + b"\xab" * 32)

    def test_updates_by_range_key(self):
        key = LightClientUpdatesByRangeKey(start_period=1, count=1)
        self.assertEqual(key.to_hex(), "0x11" + "0100000000000000" * 2)

    def test_finality_update_key(self):
        key = LightClientFinalityUpdateKey(finalized_slot=12345)
        self.assertEqual(key.to_hex(), "0x123930000000000000")

    def test_optimistic_update_key(self):
        key = LightClientOptimisticUpdateKey(signature_slot=201)
        self.assertEqual(key.to_hex(), "0x13c900000000000000")

    def test_historical_summaries_key(self):
        key = HistoricalSummariesWithProofKey(epoch=250000)
        self.assertEqual(key.encode(), b"\x14" + (250000).to_bytes(8, "little"))

    def test_content_id_is_sha256_of_encoding(self):
        key = LightClientFinalityUpdateKey(finalized_slot=12345)
        self.assertEqual(key.content_id(), sha256(key.encode()).digest())

    def test_decode_content_key(self):
        key = LightClientUpdatesByRangeKey(start_period=1234, count=1)
        self.assertEqual(decode_content_key(key.encode()), key)

    def test_decode_unknown_selector(self):
        with self.assertRaisesRegex(DecodeError, "0x15"):
            decode_content_key(b"\x15" + b"\x00" * 8)

    def test_decode_empty_key(self):
        with self.assertRaises(DecodeError):
            decode_content_key(b"")

    def test_decode_truncated_payload(self):
        with self.assertRaises(DecodeError):
            decode_content_key(b"\x12\x00\x00")


class TestContentValues(unittest.TestCase):
    """Test fork-versioned content value encoding."""

    def setUp(self):
        self.bootstrap = LightClientBootstrap.from_json(bootstrap_json())
        self.update = LightClientUpdate.from_json(update_json())
        self.optimistic = LightClientOptimisticUpdate.from_json(optimistic_update_json())

    def test_value_starts_with_fork_digest(self):
        value = ForkVersionedLightClientBootstrap(fork_name=ForkName.DENEB, bootstrap=self.bootstrap)
        encoded = value.encode()
        self.assertEqual(encoded[:4], DENEB_DIGEST)
        self.assertEqual(encoded[4:], self.bootstrap.serialize())
        self.assertTrue(value.to_hex().startswith("0x6a95a1a9"))

    def test_decode_switches_on_digest(self):
        value = ForkVersionedLightClientOptimisticUpdate(fork_name=ForkName.DENEB, update=self.optimistic)
        decoded = decode_content_value(
            LightClientOptimisticUpdateKey(signature_slot=201), value.encode()
        )
        self.assertEqual(decoded, value)

    def test_decode_unknown_digest(self):
        with self.assertRaisesRegex(DecodeError, "Unknown fork digest"):
            ForkVersionedLightClientOptimisticUpdate.decode(b"\xde\xad\xbe\xef" + self.optimistic.serialize())

    def test_decode_unsupported_fork(self):
        for fork in (ForkName.BELLATRIX, ForkName.CAPELLA, ForkName.ELECTRA):
            with self.subTest(fork=fork):
                with self.assertRaisesRegex(DecodeError, fork.value):
                    ForkVersionedLightClientOptimisticUpdate.decode(
                        fork.fork_digest + self.optimistic.serialize()
                    )

    def test_decode_malformed_payload(self):
        with self.assertRaises(DecodeError):
            ForkVersionedLightClientBootstrap.decode(DENEB_DIGEST + b"\x00" * 10)

    def test_updates_by_range_encoding(self):
        item = ForkVersionedLightClientUpdate(fork_name=ForkName.DENEB, update=self.update)
        value = LightClientUpdatesByRange(updates=[item])
        encoded = value.encode()
        # A single variable-size item: one offset, then the item with its own digest
        self.assertEqual(encoded[:4], b"\x04\x00\x00\x00")
        self.assertEqual(encoded[4:8], DENEB_DIGEST)
        self.assertEqual(encoded[8:], self.update.serialize())
        self.assertEqual(LightClientUpdatesByRange.decode(encoded), value)

    def test_updates_by_range_capacity(self):
        item = ForkVersionedLightClientUpdate(fork_name=ForkName.DENEB, update=self.update)
        LightClientUpdatesByRange(updates=[item] * MAX_REQUEST_LIGHT_CLIENT_UPDATES)
        with self.assertRaises(ValueError):
            LightClientUpdatesByRange(updates=[item] * (MAX_REQUEST_LIGHT_CLIENT_UPDATES + 1))

    def test_updates_by_range_rejects_bad_offsets(self):
        with self.assertRaises(DecodeError):
            LightClientUpdatesByRange.decode(b"\x05\x00\x00\x00" + DENEB_DIGEST)


if __name__ == "__main__":
    unittest.main()
