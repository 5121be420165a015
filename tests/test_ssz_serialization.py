"""
Tests for SSZ serialization

This module checks the byte layout produced by the SSZ serializer for basic
types, composite types and containers with variable-size fields.
"""

import unittest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from portal_fixtures.ssz.serialization import (
    deserialize_bool,
    deserialize_value,
    pack_offsets,
    serialize_bool,
    serialize_value,
    unpack_offsets,
)
from portal_fixtures.ssz.types import fixed_part_size, is_fixed_size, parse_type
from portal_fixtures.ssz.containers import (
    BeaconBlockHeader,
    ExecutionPayloadHeader,
    LightClientHeader,
)
from portal_fixtures.ssz.containers.utils import value_from_json

from builders import execution_header_json, hex_fill


class TestTypeStrings(unittest.TestCase):
    """Test SSZ type string parsing."""

    def test_parse_basic_and_composite_types(self):
        self.assertEqual(parse_type("uint64"), ("uint", None, 8))
        self.assertEqual(parse_type("uint256"), ("uint", None, 32))
        self.assertEqual(parse_type("bytes20"), ("bytes", None, 20))
        self.assertEqual(parse_type("ByteList[32]"), ("bytelist", None, 32))
        self.assertEqual(parse_type("Vector[bytes32, 5]"), ("vector", "bytes32", 5))
        self.assertEqual(
            parse_type("List[HistoricalSummary, 16777216]"),
            ("list", "HistoricalSummary", 16777216),
        )
        self.assertEqual(parse_type("BeaconBlockHeader"), ("container", None, 0))

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValueError):
            parse_type("uint7")
        with self.assertRaises(ValueError):
            parse_type("NotAContainer")

    def test_fixed_sizes(self):
        self.assertTrue(is_fixed_size("BeaconBlockHeader"))
        self.assertFalse(is_fixed_size("ExecutionPayloadHeader"))
        self.assertEqual(fixed_part_size("BeaconBlockHeader"), 112)
        self.assertEqual(fixed_part_size("ExecutionPayloadHeader"), 4)


class TestBasicSerialization(unittest.TestCase):
    """Test serialization of basic types."""

    def test_uint64_little_endian(self):
        self.assertEqual(serialize_value(1, "uint64"), b"\x01" + b"\x00" * 7)
        self.assertEqual(serialize_value(12345, "uint64").hex(), "3930000000000000")

    def test_uint_bounds(self):
        with self.assertRaises(OverflowError):
            serialize_value(2 ** 64, "uint64")
        with self.assertRaises(ValueError):
            serialize_value(-1, "uint64")

    def test_boolean(self):
        self.assertEqual(serialize_bool(True), b"\x01")
        self.assertEqual(serialize_bool(False), b"\x00")
        self.assertFalse(deserialize_bool(b"\x00"))
        with self.assertRaises(ValueError):
            deserialize_bool(b"\x02")

    def test_fixed_bytes_length_enforced(self):
        with self.assertRaises(ValueError):
            serialize_value(b"\x00" * 31, "bytes32")

    def test_byte_list_limit(self):
        self.assertEqual(serialize_value(b"\xab\xcd", "ByteList[32]"), b"\xab\xcd")
        with self.assertRaises(ValueError):
            serialize_value(b"\x00" * 33, "ByteList[32]")

    def test_bitvector_padding_bits(self):
        self.assertEqual(serialize_value(b"\x0f", "Bitvector[4]"), b"\x0f")
        with self.assertRaises(ValueError):
            serialize_value(b"\x1f", "Bitvector[4]")

    def test_list_of_basic_values(self):
        self.assertEqual(serialize_value([1, 2], "List[uint16, 4]"), b"\x01\x00\x02\x00")
        with self.assertRaises(ValueError):
            serialize_value([1] * 5, "List[uint16, 4]")


class TestOffsets(unittest.TestCase):
    """Test the offset layout of variable-size values."""

    def test_pack_offsets_layout(self):
        data = pack_offsets([b"\x01", None, None], [b"", b"ab", b"cde"])
        # 1 fixed byte and two offsets make a 9 byte fixed part
        self.assertEqual(data, b"\x01" + b"\x09\x00\x00\x00" + b"\x0b\x00\x00\x00" + b"abcde")

    def test_unpack_offsets(self):
        data = pack_offsets([None, None], [b"ab", b"cde"])
        self.assertEqual(unpack_offsets(data), [b"ab", b"cde"])
        self.assertEqual(unpack_offsets(b""), [])

    def test_unpack_offsets_rejects_bad_first_offset(self):
        with self.assertRaises(ValueError):
            unpack_offsets(b"\x03\x00\x00\x00abc")
        with self.assertRaises(ValueError):
            unpack_offsets(b"\x40\x00\x00\x00")

    def test_unpack_offsets_rejects_decreasing_offsets(self):
        with self.assertRaises(ValueError):
            unpack_offsets(b"\x08\x00\x00\x00\x07\x00\x00\x00")

    def test_list_of_variable_items(self):
        data = serialize_value([b"a", b"bc"], "List[ByteList[4], 8]")
        self.assertEqual(data, b"\x08\x00\x00\x00\x09\x00\x00\x00abc")
        self.assertEqual(deserialize_value(data, "List[ByteList[4], 8]"), [b"a", b"bc"])


class TestContainerSerialization(unittest.TestCase):
    """Test container encoding with fixed and variable fields."""

    def setUp(self):
        self.beacon = BeaconBlockHeader(
            slot=12345,
            proposer_index=3,
            parent_root=b"\x55" * 32,
            state_root=b"\x66" * 32,
            body_root=b"\x77" * 32,
        )
        self.execution = value_from_json(
            execution_header_json(block_number=100, extra_data="0xabcd"),
            "ExecutionPayloadHeader",
        )

    def test_fixed_container(self):
        data = self.beacon.serialize()
        self.assertEqual(len(data), 112)
        self.assertEqual(data[:16].hex(), "3930000000000000" + "0300000000000000")
        self.assertEqual(BeaconBlockHeader.deserialize(data), self.beacon)

    def test_execution_payload_header_layout(self):
        data = self.execution.serialize()
        self.assertEqual(len(data), 584 + 2)
        # Offset of extra_data points just past the fixed part
        self.assertEqual(data[436:440].hex(), "48020000")
        self.assertEqual(data[404:412].hex(), "6400000000000000")
        self.assertEqual(data[-2:], b"\xab\xcd")

    def test_nested_variable_container(self):
        header = LightClientHeader(
            beacon=self.beacon,
            execution=self.execution,
            execution_branch=[b"\x88" * 32] * 4,
        )
        data = header.serialize()
        self.assertEqual(len(data), 244 + 586)
        self.assertEqual(data[112:116].hex(), "f4000000")
        self.assertEqual(LightClientHeader.deserialize(data), header)

    def test_deserialize_rejects_truncated_data(self):
        with self.assertRaises(ValueError):
            BeaconBlockHeader.deserialize(self.beacon.serialize()[:-1])

    def test_deserialize_rejects_trailing_bytes(self):
        with self.assertRaises(ValueError):
            BeaconBlockHeader.deserialize(self.beacon.serialize() + b"\x00")

    def test_deserialize_rejects_bad_first_offset(self):
        data = bytearray(self.execution.serialize())
        data[436:440] = (600).to_bytes(4, "little")
        with self.assertRaises(ValueError):
            ExecutionPayloadHeader.deserialize(bytes(data))


class TestJsonConversion(unittest.TestCase):
    """Test conversion of beacon API JSON into container values."""

    def test_decimal_and_hex_integers(self):
        self.assertEqual(value_from_json("12345", "uint64"), 12345)
        self.assertEqual(value_from_json("0x10", "uint64"), 16)

    def test_integer_range_checked(self):
        self.assertEqual(value_from_json(str(2 ** 32 - 1), "uint32"), 2 ** 32 - 1)
        for bad in ("-1", str(2 ** 64), 2 ** 64):
            with self.assertRaises(ValueError):
                value_from_json(bad, "uint64")

    def test_byte_length_checked(self):
        with self.assertRaises(ValueError):
            value_from_json(hex_fill(0, 31), "bytes32")

    def test_vector_length_checked(self):
        with self.assertRaises(ValueError):
            value_from_json([hex_fill(0, 32)] * 4, "Vector[bytes32, 5]")

    def test_missing_field_reported(self):
        data = execution_header_json()
        del data["blob_gas_used"]
        with self.assertRaisesRegex(ValueError, "blob_gas_used"):
            ExecutionPayloadHeader.from_json(data)

    def test_camel_case_keys_accepted(self):
        header = BeaconBlockHeader.from_json({
            "slot": "1",
            "proposerIndex": "2",
            "parentRoot": hex_fill(1, 32),
            "stateRoot": hex_fill(2, 32),
            "bodyRoot": hex_fill(3, 32),
        })
        self.assertEqual(header.proposer_index, 2)


if __name__ == "__main__":
    unittest.main()
