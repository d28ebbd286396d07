# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Shared fixtures: synthetic PDN files.

Copyright 2025 DNAi inc.
"""

import struct

import pytest

BYTE, ASCII, SHORT, LONG, RATIONAL = 1, 2, 3, 4, 5
PDN_MAGIC = 0x50444E31
HEADER_SIZE = 28


def pack_entry(tag, type_, count, value):
    return struct.pack('>HHII', tag, type_, count, value)


def build_pdn(
    ccd_width=4,
    ccd_height=4,
    strip=None,
    compression=1,
    magic=PDN_MAGIC,
    with_strip_offsets=True,
    extra_entries=(),
):
    """
    Build a minimal uncompressed PDN file.

    Layout: header, base IFD at offset 28, BitsPerSample array, CCD strip.
    extra_entries are (tag, type, count, raw value) tuples appended to
    the directory.
    """
    if strip is None:
        strip = bytes(ccd_width * ccd_height * 3)

    num_entries = 8 + (1 if with_strip_offsets else 0) + len(extra_entries)
    ifd_offset = HEADER_SIZE
    bits_offset = ifd_offset + 2 + num_entries * 12 + 4
    strip_offset = bits_offset + 6

    entries = [
        (256, SHORT, 1, ccd_width << 16),
        (257, SHORT, 1, ccd_height << 16),
        (258, SHORT, 3, bits_offset),
        (259, SHORT, 1, compression << 16),
        (262, SHORT, 1, 2 << 16),
    ]
    if with_strip_offsets:
        entries.append((273, LONG, 1, strip_offset))
    entries += [
        (277, SHORT, 1, 3 << 16),
        (278, LONG, 1, ccd_height),
        (279, LONG, 1, len(strip)),
    ]
    entries += list(extra_entries)

    header = b'MM' + struct.pack('>HII', 42, 0, magic) + struct.pack('>IHHII', ifd_offset, 1, 2, 0, 0)
    directory = struct.pack('>H', len(entries))
    directory += b''.join(pack_entry(*e) for e in entries)
    directory += struct.pack('>I', 0)
    bits = struct.pack('>HHH', 8, 8, 8)

    return header + directory + bits + bytes(strip)


@pytest.fixture
def make_pdn():
    return build_pdn


@pytest.fixture
def uniform_pdn():
    """4x4 CCD where every cell is (10, 20, 30)."""
    return build_pdn(4, 4, bytes([10, 20, 30]) * 16)


@pytest.fixture
def pdn_file(tmp_path, uniform_pdn):
    path = tmp_path / "IMG0001.PDN"
    path.write_bytes(uniform_pdn)
    return path
