# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatter for PDN diagnostic output.

This module turns parsed headers, descriptors and directory entries
into human-readable lines and flat metadata dictionaries.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict, List

from pdnconv.ifd_decoder import IFDEntry
from pdnconv.pdn_parser import PDNHeader, PDNImage

HEADER_PREFIX = "PDNImageHeader"

HEADER_FIELDS = (
    ('order', 'order'),
    ('identifier', 'identifier'),
    ('ifdOffset', 'ifd_offset'),
    ('pdnIdentifier', 'pdn_identifier'),
    ('baseIFDOffset', 'base_ifd_offset'),
    ('deviceID', 'device_id'),
    ('dsiID', 'dsi_id'),
    ('dsiSize', 'dsi_size'),
    ('dsiOffset', 'dsi_offset'),
)


def format_field(prefix: str, field: str, value: int) -> str:
    """Format an integer field in decimal and hex."""
    return f"{prefix}.{field}: {value} (0x{value:X})"


def format_header(header: PDNHeader) -> List[str]:
    """Format every header field, one line each."""
    return [format_field(HEADER_PREFIX, label, getattr(header, attr)) for label, attr in HEADER_FIELDS]


def format_descriptor(image: PDNImage) -> List[str]:
    """Format the image description of a parsed file."""
    d = image.descriptor
    return [
        f"File size: {image.data_length}",
        f"CCD Width x Height( {d.ccd_width} x {d.ccd_height} )",
        f"Width x Height( {d.width} x {d.height} )",
        f"Bit Per Sample( {list(d.bits_per_sample)} )",
        f"Compression( {d.compression} )",
        f"Strip Offsets( {list(d.strip_offsets)} )",
        f"Samples Per Pixel: {d.samples_per_pixel}",
        f"Rows Per Strip: {d.rows_per_strip}",
        f"Strip Byte Counts: {d.strip_byte_counts}",
    ]


def format_entry(entry: IFDEntry) -> str:
    """Format one directory entry."""
    line = (
        f"IFD: {entry.name} (tag {entry.tag}, {entry.type.name}, count {entry.count}, "
        f"{entry.raw_value} (0x{entry.raw_value:X}))"
    )
    if not entry.is_supported:
        line += f" Unhandled type: {entry.type.name}"
    return line


def get_metadata(image: PDNImage) -> Dict[str, Any]:
    """
    Flatten a parsed file into a tag dictionary.

    Returns:
        Dictionary of 'PDN:Field' keys to values
    """
    header = image.header
    d = image.descriptor

    metadata: Dict[str, Any] = {}
    metadata['File:FileType'] = 'PDN'
    metadata['File:FileTypeExtension'] = 'pdn'
    metadata['File:FileSize'] = image.data_length

    metadata['PDN:ByteOrder'] = 'Big-endian (Motorola, MM)' if header.is_big_endian else hex(header.order)
    metadata['PDN:Identifier'] = header.identifier
    metadata['PDN:ThumbnailIFDOffset'] = header.ifd_offset
    metadata['PDN:BaseIFDOffset'] = header.base_ifd_offset
    metadata['PDN:DeviceID'] = header.device_id
    metadata['PDN:DeviceSpecificInfoID'] = header.dsi_id
    metadata['PDN:DeviceSpecificInfoSize'] = header.dsi_size
    metadata['PDN:DeviceSpecificInfoOffset'] = header.dsi_offset

    metadata['PDN:CCDWidth'] = d.ccd_width
    metadata['PDN:CCDHeight'] = d.ccd_height
    metadata['PDN:ImageWidth'] = d.width
    metadata['PDN:ImageHeight'] = d.height
    metadata['PDN:BitsPerSample'] = list(d.bits_per_sample)
    metadata['PDN:Compression'] = d.compression
    metadata['PDN:PhotometricInterpretation'] = d.photometric_interpretation
    metadata['PDN:StripOffsets'] = list(d.strip_offsets)
    metadata['PDN:SamplesPerPixel'] = d.samples_per_pixel
    metadata['PDN:RowsPerStrip'] = d.rows_per_strip
    metadata['PDN:StripByteCounts'] = d.strip_byte_counts

    return metadata
