# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Sharpening filters

Two Laplacian-style kernels applied to each channel independently:

    value = 5 * center - north - south - east - west

The mild filter samples neighbours one pixel away, the strong filter
two pixels away. Pixels outside the image count as 0 and results are
clamped to [0, 255]. Filters never modify their input.

Copyright 2025 DNAi inc.
"""

from typing import Union

import numpy as np

SHARPEN_NONE = 0
SHARPEN_MILD = 1
SHARPEN_STRONG = 2

RasterData = Union[bytes, bytearray, memoryview]


def _sharpen(pixel_data: RasterData, width: int, height: int, distance: int) -> bytes:
    if width * height == 0:
        return bytes(len(pixel_data))

    img = np.frombuffer(pixel_data, dtype=np.uint8, count=width * height * 3)
    img = img.reshape(height, width, 3).astype(np.int32)

    d = distance
    p = np.pad(img, ((d, d), (d, d), (0, 0)), mode="constant", constant_values=0)

    center = p[d:d + height, d:d + width]
    north = p[0:height, d:d + width]
    south = p[2 * d:2 * d + height, d:d + width]
    west = p[d:d + height, 0:width]
    east = p[d:d + height, 2 * d:2 * d + width]

    out = 5 * center - north - south - east - west
    return np.clip(out, 0, 255).astype(np.uint8).tobytes()


def sharpen_mild(pixel_data: RasterData, width: int, height: int) -> bytes:
    """Sharpen with neighbours one pixel away."""
    return _sharpen(pixel_data, width, height, 1)


def sharpen_strong(pixel_data: RasterData, width: int, height: int) -> bytes:
    """Sharpen with neighbours two pixels away."""
    return _sharpen(pixel_data, width, height, 2)


def apply_sharpening(pixel_data: RasterData, width: int, height: int, level: int = SHARPEN_NONE) -> bytes:
    """
    Apply the sharpening filter selected by level.

    Args:
        pixel_data: Interleaved RGB raster
        width: Raster width in pixels
        height: Raster height in pixels
        level: 1 for mild, 2 for strong; any other value leaves the
            raster unchanged

    Returns:
        A new raster buffer
    """
    if level == SHARPEN_MILD:
        return sharpen_mild(pixel_data, width, height)
    if level == SHARPEN_STRONG:
        return sharpen_strong(pixel_data, width, height)
    return bytes(pixel_data)


def parse_sharpen_level(value: str) -> int:
    """
    Parse a sharpening argument.

    Expects a key and a level separated by '=', such as 'sharpen=2'.
    Empty pieces are ignored, so '=2' or a bare '2' carries no level.
    Anything else yields SHARPEN_NONE.
    """
    parts = [part for part in value.strip().split('=') if part]
    if len(parts) != 2:
        return SHARPEN_NONE
    try:
        return int(parts[1])
    except ValueError:
        return SHARPEN_NONE
