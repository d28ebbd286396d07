# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Big-endian scalar readers

PDN files are always stored in Motorola ('MM') byte order. Reads that
would run past the end of the buffer return 0 instead of raising, so a
file that ends early decodes as if it were zero-padded.

Copyright 2025 DNAi inc.
"""

import struct
from typing import Tuple


def _in_bounds(data: bytes, offset: int, width: int) -> bool:
    return offset >= 0 and offset + width <= len(data)


def read_u8(data: bytes, offset: int) -> int:
    """Read an unsigned 8-bit value, or 0 when out of range."""
    if not _in_bounds(data, offset, 1):
        return 0
    return data[offset]


def read_u16(data: bytes, offset: int) -> int:
    """Read a big-endian unsigned 16-bit value, or 0 when out of range."""
    if not _in_bounds(data, offset, 2):
        return 0
    return struct.unpack('>H', data[offset:offset + 2])[0]


def read_u32(data: bytes, offset: int) -> int:
    """Read a big-endian unsigned 32-bit value, or 0 when out of range."""
    if not _in_bounds(data, offset, 4):
        return 0
    return struct.unpack('>I', data[offset:offset + 4])[0]


def read_u16_array(data: bytes, offset: int, count: int) -> Tuple[int, ...]:
    """
    Read consecutive big-endian 16-bit values.

    Args:
        data: Source buffer
        offset: Offset of the first value
        count: Number of values to read

    Returns:
        Tuple of values; elements past the end of the buffer are 0
    """
    if _in_bounds(data, offset, 2 * count):
        return struct.unpack(f'>{count}H', data[offset:offset + 2 * count])
    return tuple(read_u16(data, offset + i * 2) for i in range(count))


def read_u32_array(data: bytes, offset: int, count: int) -> Tuple[int, ...]:
    """
    Read consecutive big-endian 32-bit values.

    Args:
        data: Source buffer
        offset: Offset of the first value
        count: Number of values to read

    Returns:
        Tuple of values; elements past the end of the buffer are 0
    """
    if _in_bounds(data, offset, 4 * count):
        return struct.unpack(f'>{count}I', data[offset:offset + 4 * count])
    return tuple(read_u32(data, offset + i * 4) for i in range(count))
