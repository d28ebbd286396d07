# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image writer

Encodes a reconstructed RGB raster into a standard image format with
Pillow and writes it next to the source file.

Copyright 2025 DNAi inc.
"""

from pathlib import Path
from typing import Union

from PIL import Image

from pdnconv.exceptions import ImageWriteError

# Output format -> file extension appended to the source name
OUTPUT_FORMATS = {
    'JPEG': 'jpeg',
    'PNG': 'png',
    'TIFF': 'tiff',
}

DEFAULT_JPEG_QUALITY = 100


def normalize_format(image_format: str) -> str:
    """Return the canonical format name, accepting common aliases."""
    name = image_format.upper().lstrip('.')
    if name == 'JPG':
        name = 'JPEG'
    elif name == 'TIF':
        name = 'TIFF'
    if name not in OUTPUT_FORMATS:
        raise ImageWriteError(f"Unsupported output format: {image_format}")
    return name


def derive_output_path(source_path: Union[str, Path], image_format: str = 'JPEG') -> Path:
    """
    Derive the output path from the source path.

    The extension is appended rather than substituted, so
    'IMG0001.PDN' becomes 'IMG0001.PDN.jpeg'.
    """
    source_path = Path(source_path)
    extension = OUTPUT_FORMATS[normalize_format(image_format)]
    return source_path.with_name(f"{source_path.name}.{extension}")


def write_image(
    pixel_data: bytes,
    width: int,
    height: int,
    output_path: Union[str, Path],
    image_format: str = 'JPEG',
    quality: int = DEFAULT_JPEG_QUALITY
) -> Path:
    """
    Encode an interleaved 8-bit RGB raster and write it to disk.

    Args:
        pixel_data: width * height * 3 bytes, row-major
        width: Raster width in pixels
        height: Raster height in pixels
        output_path: Destination file
        image_format: 'JPEG', 'PNG' or 'TIFF'
        quality: JPEG quality (ignored for other formats)

    Returns:
        Path of the written file

    Raises:
        ImageWriteError: If encoding or writing fails
    """
    image_format = normalize_format(image_format)
    output_path = Path(output_path)

    expected = width * height * 3
    if len(pixel_data) != expected:
        raise ImageWriteError(
            f"Raster holds {len(pixel_data)} bytes, expected {expected} for {width}x{height} RGB"
        )
    if width <= 0 or height <= 0:
        raise ImageWriteError(f"Cannot encode an empty {width}x{height} image")

    try:
        img = Image.frombytes('RGB', (width, height), bytes(pixel_data))
        if image_format == 'JPEG':
            img.save(output_path, 'JPEG', quality=quality)
        else:
            img.save(output_path, image_format)
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"Failed to write {output_path}: {str(e)}")

    return output_path
