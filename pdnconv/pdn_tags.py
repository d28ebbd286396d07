# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
PDN tag and field type definitions

PDN files reuse the baseline TIFF tag numbers for the sensor image
directory. Only the tags needed to locate and describe the sensor
raster are interpreted; the rest are named here for diagnostic dumps.

Copyright 2025 DNAi inc.
"""

from enum import IntEnum


class IFDDataType(IntEnum):
    """Directory entry field types"""
    UNKNOWN = 0
    BYTE = 1       # 8-bit unsigned integer
    ASCII = 2      # 8-bit, NUL-terminated string
    SHORT = 3      # 16-bit unsigned integer
    LONG = 4       # 32-bit unsigned integer
    RATIONAL = 5   # Two 32-bit unsigned integers

    @classmethod
    def from_code(cls, code: int) -> "IFDDataType":
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


# Field sizes in bytes
TYPE_SIZES = {
    IFDDataType.BYTE: 1,
    IFDDataType.ASCII: 1,
    IFDDataType.SHORT: 2,
    IFDDataType.LONG: 4,
    IFDDataType.RATIONAL: 8,
}

TAG_IMAGE_WIDTH = 0x0100
TAG_IMAGE_LENGTH = 0x0101
TAG_BITS_PER_SAMPLE = 0x0102
TAG_COMPRESSION = 0x0103
TAG_PHOTOMETRIC_INTERPRETATION = 0x0106
TAG_STRIP_OFFSETS = 0x0111
TAG_SAMPLES_PER_PIXEL = 0x0115
TAG_ROWS_PER_STRIP = 0x0116
TAG_STRIP_BYTE_COUNTS = 0x0117

PDN_TAG_NAMES = {
    0x00FE: "SubfileType",
    0x0100: "ImageWidth",
    0x0101: "ImageLength",
    0x0102: "BitsPerSample",
    0x0103: "Compression",
    0x0106: "PhotometricInterpretation",
    0x010E: "ImageDescription",
    0x010F: "Make",
    0x0110: "Model",
    0x0111: "StripOffsets",
    0x0112: "Orientation",
    0x0115: "SamplesPerPixel",
    0x0116: "RowsPerStrip",
    0x0117: "StripByteCounts",
    0x011A: "XResolution",
    0x011B: "YResolution",
    0x011C: "PlanarConfiguration",
    0x0128: "ResolutionUnit",
    0x0131: "Software",
    0x0132: "DateTime",
    0x014A: "SubIFDs",
}


def get_tag_name(tag: int) -> str:
    """Return the tag name, or a hex placeholder for unknown tags."""
    return PDN_TAG_NAMES.get(tag, f"Tag0x{tag:04X}")
