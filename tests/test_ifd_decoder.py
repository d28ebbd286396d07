# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""Tests for directory entry decoding."""

import struct

import pytest

from pdnconv.exceptions import TruncatedDirectoryError
from pdnconv.ifd_decoder import decode_entry, decode_directory
from pdnconv.pdn_tags import IFDDataType

from conftest import pack_entry, BYTE, ASCII, SHORT, LONG, RATIONAL


def decode(type_, count, value, trailer=b''):
    data = pack_entry(0x0100, type_, count, value) + trailer
    return decode_entry(data, 0)


@pytest.mark.parametrize("count, expected", [
    (1, (0x11,)),
    (2, (0x11, 0x22)),
    (3, (0x11, 0x22, 0x33)),
    (4, (0x11, 0x22, 0x33, 0x44)),
])
def test_inline_bytes(count, expected):
    entry = decode(BYTE, count, 0x11223344)
    assert entry.type == IFDDataType.BYTE
    assert entry.values == expected
    assert entry.is_inline


@pytest.mark.parametrize("count, expected", [
    (1, (0x1122,)),
    (2, (0x1122, 0x3344)),
])
def test_inline_shorts(count, expected):
    assert decode(SHORT, count, 0x11223344).values == expected


def test_shorts_by_offset():
    # values stored right after the 12-byte entry
    entry = decode(SHORT, 3, 12, struct.pack('>HHH', 8, 16, 0xFFFF))
    assert entry.values == (8, 16, 0xFFFF)
    assert not entry.is_inline


def test_single_long():
    entry = decode(LONG, 1, 0xDEADBEEF)
    assert entry.values == (0xDEADBEEF,)
    assert entry.scalar == 0xDEADBEEF


def test_longs_by_offset():
    entry = decode(LONG, 2, 12, struct.pack('>II', 1000, 0x01020304))
    assert entry.values == (1000, 0x01020304)


@pytest.mark.parametrize("type_, count", [
    (RATIONAL, 1),
    (ASCII, 4),
    (BYTE, 5),
    (9, 1),
])
def test_unsupported_encodings_have_no_values(type_, count):
    entry = decode(type_, count, 0x11223344)
    assert entry.values == ()


def test_unknown_type_code():
    entry = decode(9, 1, 0)
    assert entry.type == IFDDataType.UNKNOWN
    assert entry.scalar is None
    assert not entry.is_supported


def test_scalar_uses_high_bits():
    assert decode(BYTE, 1, 0xAB000000).scalar == 0xAB
    assert decode(SHORT, 1, 0x01230000).scalar == 0x0123
    assert decode(RATIONAL, 1, 0x01230000).scalar is None


def test_entry_fields():
    entry = decode(SHORT, 1, 640 << 16)
    assert entry.tag == 256
    assert entry.name == "ImageWidth"
    assert entry.count == 1
    assert entry.raw_value == 640 << 16
    assert entry.scalar == 640


def test_decode_directory():
    data = struct.pack('>H', 2)
    data += pack_entry(256, SHORT, 1, 10 << 16)
    data += pack_entry(0x9999, LONG, 1, 7)
    entries = decode_directory(data, 0)

    assert [e.tag for e in entries] == [256, 0x9999]
    assert entries[1].offset == 14
    assert entries[1].name == "Tag0x9999"


def test_truncated_directory_reads_zeros():
    data = struct.pack('>H', 3) + pack_entry(256, SHORT, 1, 10 << 16)
    entries = decode_directory(data, 0)

    assert len(entries) == 3
    assert entries[0].scalar == 10
    assert entries[1].tag == 0
    assert entries[2].count == 0


def test_truncated_directory_strict():
    data = struct.pack('>H', 3) + pack_entry(256, SHORT, 1, 10 << 16)
    with pytest.raises(TruncatedDirectoryError):
        decode_directory(data, 0, strict=True)


def test_directory_offset_past_end_strict():
    with pytest.raises(TruncatedDirectoryError):
        decode_directory(b'\x00', 100, strict=True)
    assert decode_directory(b'\x00', 100) == []


def test_out_of_line_values_past_end_strict():
    data = struct.pack('>H', 1) + pack_entry(273, LONG, 4, 1000)
    with pytest.raises(TruncatedDirectoryError):
        decode_directory(data, 0, strict=True)
    assert decode_directory(data, 0)[0].values == ()


def test_out_of_line_values_limited_to_file():
    entry = decode(LONG, 3, 12, struct.pack('>II', 7, 8))
    assert entry.values == (7, 8)


def test_huge_count_past_end_is_cheap():
    data = struct.pack('>H', 1) + pack_entry(0x9000, LONG, 0xFFFFFFFF, 0xFFFFFF00)
    entry = decode_directory(data, 0)[0]

    assert entry.count == 0xFFFFFFFF
    assert entry.values == ()


def test_huge_short_count_inside_file():
    entry = decode(SHORT, 0xFFFFFFFF, 12, struct.pack('>HH', 1, 2))
    assert entry.values == (1, 2)


@pytest.mark.parametrize("type_, count, supported", [
    (BYTE, 4, True),
    (BYTE, 5, False),
    (SHORT, 3, True),
    (LONG, 2, True),
    (RATIONAL, 1, False),
    (ASCII, 1, False),
])
def test_is_supported_follows_type_and_count(type_, count, supported):
    assert decode(type_, count, 12).is_supported is supported
