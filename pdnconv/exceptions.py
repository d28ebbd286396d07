# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for pdnconv

This module defines custom exceptions for reading, decoding and
writing Polaroid Digital Negative (PDN) images.

Copyright 2025 DNAi inc.
"""

from typing import Optional


class PDNError(Exception):
    """
    Base exception for all pdnconv errors.

    All pdnconv exceptions inherit from this class, allowing
    catch-all error handling for any conversion-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class FileReadError(PDNError):
    """
    Raised when a PDN file cannot be loaded into memory.

    This exception is raised when:
    - The file does not exist
    - The file is of zero length
    - File permissions prevent reading
    """
    pass


class PDNReadError(PDNError):
    """
    Raised when the PDN container cannot be decoded.

    Parse failures are raised before any raster reconstruction
    begins and are never retried.
    """
    pass


class InvalidMagicError(PDNReadError):
    """Raised when the vendor identifier is not 'PDN1'."""
    pass


class UnsupportedCompressionError(PDNReadError):
    """
    Raised when the sensor data uses a compressed encoding.

    Only compression modes 0 and 1 (uncompressed) can be reconstructed.
    """
    def __init__(self, message: str = "", compression: Optional[int] = None):
        self.compression = compression
        super().__init__(message)


class MissingStripDataError(PDNReadError):
    """Raised when the base image directory holds no strip offsets."""
    pass


class TruncatedDirectoryError(PDNReadError):
    """
    Raised in strict mode when a directory extends past the end of the file.

    Without strict mode truncated directories degrade to zero-valued reads.
    """
    pass


class ImageWriteError(PDNError):
    """
    Raised when a reconstructed raster cannot be written.

    This exception is raised when:
    - The requested output format is not supported
    - The image encoder fails
    - File permissions prevent writing
    """
    pass
