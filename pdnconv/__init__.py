# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
pdnconv - Polaroid Digital Negative converter

Decodes PDN files, the TIFF-derived raw format written by Polaroid's
1990s digital cameras, and reconstructs a full-resolution RGB image
from the CCD readout. Only uncompressed PDN files are supported.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from pdnconv.core import PDNConverter, convert_file
from pdnconv.exceptions import (
    PDNError,
    FileReadError,
    PDNReadError,
    InvalidMagicError,
    UnsupportedCompressionError,
    MissingStripDataError,
    TruncatedDirectoryError,
    ImageWriteError,
)
from pdnconv.pdn_parser import (
    PDNHeader,
    ImageDescriptor,
    PDNImage,
    PDNParser,
    parse_pdn,
    read_header,
)
from pdnconv.ifd_decoder import IFDEntry, decode_entry, decode_directory
from pdnconv.raster import reconstruct_raster
from pdnconv.sharpen import sharpen_mild, sharpen_strong, apply_sharpening

__all__ = [
    "PDNConverter",
    "convert_file",
    "PDNError",
    "FileReadError",
    "PDNReadError",
    "InvalidMagicError",
    "UnsupportedCompressionError",
    "MissingStripDataError",
    "TruncatedDirectoryError",
    "ImageWriteError",
    "PDNHeader",
    "ImageDescriptor",
    "PDNImage",
    "PDNParser",
    "parse_pdn",
    "read_header",
    "IFDEntry",
    "decode_entry",
    "decode_directory",
    "reconstruct_raster",
    "sharpen_mild",
    "sharpen_strong",
    "apply_sharpening",
]
