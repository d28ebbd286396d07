# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
PDN (Polaroid Digital Negative) container parser

PDN files are TIFF files with vendor extensions. The standard TIFF
header is followed by PDN-specific fields:
- Byte order (2 bytes, always 'MM')
- TIFF identifier (2 bytes, always 42)
- Offset to the first IFD (4 bytes, the thumbnail)
- PDN identifier (4 bytes, 'PDN1')
- Offset to the base image IFD (4 bytes)
- Device identifier (2 bytes)
- Device specific information identifier (2 bytes)
- Device specific information size and offset (4 bytes each)

The base image IFD describes the raw CCD capture.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, field, replace
from functools import reduce
from pathlib import Path
from typing import Optional, Tuple, List

from pdnconv.byte_reader import read_u16, read_u32
from pdnconv.exceptions import (
    FileReadError,
    InvalidMagicError,
    UnsupportedCompressionError,
    MissingStripDataError,
)
from pdnconv.ifd_decoder import IFDEntry, decode_directory
from pdnconv.pdn_tags import (
    TAG_IMAGE_WIDTH,
    TAG_IMAGE_LENGTH,
    TAG_BITS_PER_SAMPLE,
    TAG_COMPRESSION,
    TAG_PHOTOMETRIC_INTERPRETATION,
    TAG_STRIP_OFFSETS,
    TAG_SAMPLES_PER_PIXEL,
    TAG_ROWS_PER_STRIP,
    TAG_STRIP_BYTE_COUNTS,
)

PDN_MAGIC = 0x50444E31  # 'PDN1'
MOTOROLA_ORDER = 0x4D4D  # 'MM'
TIFF_IDENTIFIER = 42
HEADER_SIZE = 28

# Compression values that denote uncompressed sensor data
UNCOMPRESSED = (0, 1)


@dataclass(frozen=True)
class PDNHeader:
    """The fixed 28-byte PDN file header."""
    order: int
    identifier: int
    ifd_offset: int
    pdn_identifier: int
    base_ifd_offset: int
    device_id: int
    dsi_id: int
    dsi_size: int
    dsi_offset: int

    @property
    def is_valid(self) -> bool:
        return self.pdn_identifier == PDN_MAGIC

    @property
    def is_big_endian(self) -> bool:
        return self.order == MOTOROLA_ORDER

    @property
    def has_tiff_identifier(self) -> bool:
        return self.identifier == TIFF_IDENTIFIER


@dataclass(frozen=True)
class ImageDescriptor:
    """Sensor image description folded from the base image IFD."""
    ccd_width: int = 0
    ccd_height: int = 0
    bits_per_sample: Tuple[int, ...] = (8, 8, 8)
    compression: int = 0
    photometric_interpretation: int = 0
    strip_offsets: Tuple[int, ...] = ()
    samples_per_pixel: int = 0
    rows_per_strip: int = 0
    strip_byte_counts: int = 0

    @property
    def width(self) -> int:
        """Output width; each CCD pixel spans three output columns."""
        return self.ccd_width * 3

    @property
    def height(self) -> int:
        """Output height; each CCD row spans two output rows."""
        return self.ccd_height * 2

    @property
    def is_compressed(self) -> bool:
        return self.compression not in UNCOMPRESSED


# Tag -> (descriptor field, decoded as array)
_DESCRIPTOR_TAGS = {
    TAG_IMAGE_WIDTH: ('ccd_width', False),
    TAG_IMAGE_LENGTH: ('ccd_height', False),
    TAG_BITS_PER_SAMPLE: ('bits_per_sample', True),
    TAG_COMPRESSION: ('compression', False),
    TAG_PHOTOMETRIC_INTERPRETATION: ('photometric_interpretation', False),
    TAG_STRIP_OFFSETS: ('strip_offsets', True),
    TAG_SAMPLES_PER_PIXEL: ('samples_per_pixel', False),
    TAG_ROWS_PER_STRIP: ('rows_per_strip', False),
    TAG_STRIP_BYTE_COUNTS: ('strip_byte_counts', False),
}


def apply_entry(descriptor: ImageDescriptor, entry: IFDEntry) -> ImageDescriptor:
    """
    Return a descriptor updated with one directory entry.

    Unrecognized tags leave the descriptor unchanged. Entries whose
    encoding cannot be decoded set the field to 0 (or an empty tuple).
    """
    target = _DESCRIPTOR_TAGS.get(entry.tag)
    if target is None:
        return descriptor

    field_name, is_array = target
    if is_array:
        return replace(descriptor, **{field_name: entry.values})
    scalar = entry.scalar if entry.scalar is not None else 0
    return replace(descriptor, **{field_name: scalar})


def build_descriptor(entries: List[IFDEntry]) -> ImageDescriptor:
    """Fold directory entries into an ImageDescriptor."""
    return reduce(apply_entry, entries, ImageDescriptor())


def read_header(data: bytes) -> PDNHeader:
    """Read the fixed PDN header from the start of the file data."""
    return PDNHeader(
        order=read_u16(data, 0),
        identifier=read_u16(data, 2),
        ifd_offset=read_u32(data, 4),
        pdn_identifier=read_u32(data, 8),
        base_ifd_offset=read_u32(data, 12),
        device_id=read_u16(data, 16),
        dsi_id=read_u16(data, 18),
        dsi_size=read_u32(data, 20),
        dsi_offset=read_u32(data, 24),
    )


@dataclass(frozen=True)
class PDNImage:
    """Result of parsing a PDN file."""
    header: PDNHeader
    descriptor: ImageDescriptor
    entries: Tuple[IFDEntry, ...] = ()
    data: bytes = field(default=b'', repr=False)

    @property
    def data_length(self) -> int:
        return len(self.data)

    def strip_data(self) -> bytes:
        """
        Return the raw CCD data referenced by the first strip offset.

        Raises:
            MissingStripDataError: If the image has no strip offsets
        """
        return extract_strip(self.data, self.descriptor)


def extract_strip(data: bytes, descriptor: ImageDescriptor) -> bytes:
    """
    Slice the sensor capture out of the file data.

    The capture starts at the first strip offset and spans
    StripByteCounts bytes. A strip cut short by the end of the file is
    returned as is.
    """
    if not descriptor.strip_offsets:
        raise MissingStripDataError("Image has no strip offsets; no sensor data to decode")
    start = descriptor.strip_offsets[0]
    return data[start:start + descriptor.strip_byte_counts]


class PDNParser:
    """
    Parser for PDN (Polaroid Digital Negative) files.

    Validates the PDN header, walks the base image IFD and folds the
    recognized tags into an ImageDescriptor.
    """

    def __init__(self, file_path: Optional[str] = None, file_data: Optional[bytes] = None,
                 strict: bool = False):
        """
        Initialize PDN parser.

        Args:
            file_path: Path to PDN file
            file_data: PDN file data bytes
            strict: Reject truncated directories instead of reading zeros
        """
        if file_path:
            self.file_path = Path(file_path)
            self.file_data = None
        elif file_data is not None:
            self.file_data = file_data
            self.file_path = None
        else:
            raise ValueError("Either file_path or file_data must be provided")
        self.strict = strict

    def _read_file(self) -> bytes:
        if self.file_data is not None:
            return self.file_data
        try:
            with open(self.file_path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise FileReadError(f"Cannot read {self.file_path}: {e.strerror or e}")

    def parse(self) -> PDNImage:
        """
        Parse the PDN file.

        Returns:
            PDNImage with header, descriptor and decoded entries

        Raises:
            FileReadError: If the file cannot be read or is empty
            InvalidMagicError: If the file is not a PDN file
            UnsupportedCompressionError: If the sensor data is compressed
            MissingStripDataError: If the image has no strip offsets
            TruncatedDirectoryError: In strict mode, if the directory is cut short
        """
        data = self._read_file()
        if not data:
            raise FileReadError("File is of zero length")

        header = read_header(data)
        if not header.is_valid:
            raise InvalidMagicError(
                f"Invalid PDN file: identifier 0x{header.pdn_identifier:08X} is not 'PDN1'"
            )

        entries = decode_directory(data, header.base_ifd_offset, strict=self.strict)
        descriptor = build_descriptor(entries)

        if descriptor.is_compressed:
            raise UnsupportedCompressionError(
                f"Compressed PDN files cannot be read (compression {descriptor.compression})",
                compression=descriptor.compression,
            )
        if not descriptor.strip_offsets:
            raise MissingStripDataError("Image has no strip offsets; no sensor data to decode")

        return PDNImage(header=header, descriptor=descriptor, entries=tuple(entries), data=data)


def parse_pdn(data: bytes, strict: bool = False) -> Tuple[PDNHeader, ImageDescriptor]:
    """
    Parse PDN file data.

    Args:
        data: Complete file contents
        strict: Reject truncated directories instead of reading zeros

    Returns:
        Tuple of (header, descriptor)
    """
    image = PDNParser(file_data=data, strict=strict).parse()
    return image.header, image.descriptor
