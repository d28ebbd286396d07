# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image File Directory (IFD) decoder

This module decodes the TIFF-style tag directories found in PDN files.
Each 12-byte entry holds its value inline when it fits in the 4-byte
value field, otherwise the field is an offset to the values.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from pdnconv.byte_reader import read_u16, read_u32, read_u16_array, read_u32_array
from pdnconv.exceptions import TruncatedDirectoryError
from pdnconv.pdn_tags import IFDDataType, TYPE_SIZES, get_tag_name

ENTRY_SIZE = 12


@dataclass(frozen=True)
class IFDEntry:
    """A decoded directory entry."""
    tag: int
    type: IFDDataType
    count: int
    raw_value: int  # the value if it fits in four bytes, else an offset to it
    offset: int = 0
    scalar: Optional[int] = None
    values: Tuple[int, ...] = ()

    @property
    def name(self) -> str:
        return get_tag_name(self.tag)

    @property
    def is_inline(self) -> bool:
        """True when the value field holds the values themselves."""
        if self.type == IFDDataType.BYTE:
            return self.count <= 4
        if self.type == IFDDataType.SHORT:
            return self.count <= 2
        if self.type == IFDDataType.LONG:
            return self.count <= 1
        return False

    @property
    def is_supported(self) -> bool:
        """True when the type and count have a decodable form."""
        if self.type == IFDDataType.BYTE:
            return self.count <= 4
        return self.type in (IFDDataType.SHORT, IFDDataType.LONG)


def entry_scalar(type_: IFDDataType, raw_value: int) -> Optional[int]:
    """
    Extract a single value from the 4-byte value field.

    Only valid for entries with a count of 1. The value is left-justified
    in the field, so BYTE and SHORT values sit in the high bits.

    Returns:
        The value, or None for types without a scalar form
    """
    if type_ == IFDDataType.BYTE:
        return raw_value >> 24
    if type_ == IFDDataType.SHORT:
        return raw_value >> 16
    if type_ == IFDDataType.LONG:
        return raw_value
    return None


def entry_values(data: bytes, type_: IFDDataType, count: int, raw_value: int) -> Tuple[int, ...]:
    """
    Decode all values of an entry.

    Out-of-line values are limited to those that lie inside data.

    Args:
        data: File data, used when the values are stored out of line
        type_: Field type
        count: Number of values
        raw_value: The entry's 4-byte value field

    Returns:
        Tuple of values; empty for unsupported type/count combinations
    """
    if type_ == IFDDataType.BYTE and count <= 4:
        return tuple((raw_value >> (24 - i * 8)) & 0xFF for i in range(count))
    if type_ == IFDDataType.SHORT and count <= 2:
        return tuple((raw_value >> (16 - i * 16)) & 0xFFFF for i in range(count))
    if type_ == IFDDataType.SHORT:
        return read_u16_array(data, raw_value, _available(data, raw_value, 2, count))
    if type_ == IFDDataType.LONG and count == 1:
        return (raw_value,)
    if type_ == IFDDataType.LONG:
        return read_u32_array(data, raw_value, _available(data, raw_value, 4, count))
    return ()


def _available(data: bytes, offset: int, size: int, count: int) -> int:
    return min(count, max(0, (len(data) - offset) // size))


def decode_entry(data: bytes, entry_offset: int, strict: bool = False) -> IFDEntry:
    """
    Decode the 12-byte directory entry at entry_offset.

    Layout: tag (2), type (2), count (4), value or offset (4).

    Args:
        data: File data
        entry_offset: Offset of the entry
        strict: Raise TruncatedDirectoryError when out-of-line values
            extend past the end of the file
    """
    tag = read_u16(data, entry_offset)
    type_ = IFDDataType.from_code(read_u16(data, entry_offset + 2))
    count = read_u32(data, entry_offset + 4)
    raw_value = read_u32(data, entry_offset + 8)

    entry = IFDEntry(
        tag=tag,
        type=type_,
        count=count,
        raw_value=raw_value,
        offset=entry_offset,
        scalar=entry_scalar(type_, raw_value),
    )
    if strict:
        _check_entry_extent(data, entry)

    return replace(entry, values=entry_values(data, type_, count, raw_value))


def _check_entry_extent(data: bytes, entry: IFDEntry) -> None:
    if entry.is_inline or entry.type not in (IFDDataType.SHORT, IFDDataType.LONG):
        return
    end = entry.raw_value + entry.count * TYPE_SIZES[entry.type]
    if end > len(data):
        raise TruncatedDirectoryError(
            f"{entry.name} values at {entry.raw_value} extend past end of file ({len(data)} bytes)"
        )


def decode_directory(data: bytes, directory_offset: int, strict: bool = False) -> List[IFDEntry]:
    """
    Decode every entry of the directory at directory_offset.

    Args:
        data: File data
        directory_offset: Offset of the directory's 16-bit entry count
        strict: Raise TruncatedDirectoryError instead of reading zeros
            when the directory runs past the end of the file

    Returns:
        List of entries in file order
    """
    if strict and directory_offset + 2 > len(data):
        raise TruncatedDirectoryError(
            f"Directory offset {directory_offset} is past end of file ({len(data)} bytes)"
        )

    num_entries = read_u16(data, directory_offset)
    first_entry = directory_offset + 2

    if strict and first_entry + num_entries * ENTRY_SIZE > len(data):
        raise TruncatedDirectoryError(
            f"Directory at {directory_offset} declares {num_entries} entries "
            f"but the file ends at {len(data)} bytes"
        )

    entries = []
    for i in range(num_entries):
        entries.append(decode_entry(data, first_entry + i * ENTRY_SIZE, strict))

    return entries
