# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Core PDNConverter class

This module provides the main API for converting Polaroid Digital
Negative files. It combines the container parser, the raster
reconstruction, the sharpening filters and the image writer.

Copyright 2025 DNAi inc.
"""

from pathlib import Path
from typing import Optional, Union

from pdnconv.exceptions import FileReadError
from pdnconv.image_writer import derive_output_path, write_image, DEFAULT_JPEG_QUALITY
from pdnconv.pdn_parser import PDNImage, PDNParser
from pdnconv.raster import reconstruct_raster
from pdnconv.sharpen import apply_sharpening, SHARPEN_NONE


class PDNConverter:
    """
    Main class for converting PDN files to standard image formats.

    Example:
        >>> with PDNConverter('IMG0001.PDN') as pdn:
        ...     print(pdn.image.descriptor.width)
        ...     pdn.convert(sharpen=1)
    """

    def __init__(
        self,
        file_path: Optional[Union[str, Path]] = None,
        file_data: Optional[bytes] = None,
        strict: bool = False
    ):
        """
        Initialize PDNConverter with a PDN file or its contents.

        Args:
            file_path: Path to the PDN file
            file_data: PDN file contents (alternative to file_path)
            strict: Reject truncated directories instead of reading zeros

        Raises:
            FileReadError: If the file does not exist, is empty or unreadable
        """
        if file_path is None and file_data is None:
            raise ValueError("Either file_path or file_data must be provided")

        self.file_path = Path(file_path) if file_path is not None else None
        self.strict = strict
        self.file_data = file_data if file_data is not None else self._load_file()
        if not self.file_data:
            raise FileReadError(f"File is of zero length: {self.file_path or '<data>'}")
        self._image: Optional[PDNImage] = None

    def _load_file(self) -> bytes:
        if not self.file_path.is_file():
            raise FileReadError(f"File does not exist: {self.file_path}")
        try:
            return self.file_path.read_bytes()
        except OSError as e:
            raise FileReadError(f"Cannot read {self.file_path}: {e.strerror or e}")

    @property
    def data_length(self) -> int:
        return len(self.file_data)

    def parse(self) -> PDNImage:
        """
        Parse the PDN container.

        Returns:
            The parsed image; cached after the first call

        Raises:
            PDNReadError: If the container is invalid or unsupported
        """
        if self._image is None:
            self._image = PDNParser(file_data=self.file_data, strict=self.strict).parse()
        return self._image

    @property
    def image(self) -> PDNImage:
        return self.parse()

    @property
    def width(self) -> int:
        return self.image.descriptor.width

    @property
    def height(self) -> int:
        return self.image.descriptor.height

    def reconstruct(self) -> bytes:
        """Reconstruct the unsharpened RGB raster."""
        image = self.parse()
        return reconstruct_raster(image.descriptor, image.strip_data())

    def to_raster(self, sharpen: int = SHARPEN_NONE) -> bytes:
        """
        Reconstruct the RGB raster and apply the requested sharpening.

        Args:
            sharpen: 0 for none, 1 for mild, 2 for strong. Other values
                are treated as 0.
        """
        raster = self.reconstruct()
        return apply_sharpening(raster, self.width, self.height, sharpen)

    def convert(
        self,
        output_path: Optional[Union[str, Path]] = None,
        sharpen: int = SHARPEN_NONE,
        image_format: str = 'JPEG',
        quality: int = DEFAULT_JPEG_QUALITY
    ) -> Path:
        """
        Convert the PDN file and write the result.

        Args:
            output_path: Destination; defaults to the source path with
                the format's extension appended
            sharpen: Sharpening level (0, 1 or 2)
            image_format: 'JPEG', 'PNG' or 'TIFF'
            quality: JPEG quality

        Returns:
            Path of the written file
        """
        if output_path is None:
            if self.file_path is None:
                raise ValueError("output_path is required when converting from file data")
            output_path = derive_output_path(self.file_path, image_format)

        raster = self.to_raster(sharpen)
        return write_image(raster, self.width, self.height, output_path, image_format, quality)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.file_data = b''
        self._image = None


def convert_file(
    file_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    sharpen: int = SHARPEN_NONE,
    image_format: str = 'JPEG',
    strict: bool = False
) -> Path:
    """
    Convert a PDN file in one call.

    Returns:
        Path of the written file
    """
    with PDNConverter(file_path, strict=strict) as pdn:
        return pdn.convert(output_path, sharpen=sharpen, image_format=image_format)
