# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
CCD raster reconstruction

The PDN sensor stores one R, G, B triplet per CCD cell. Each CCD cell
covers three output columns and two output rows:

    R G B R G B ...
    becomes
    Rgb rGb rgB Rgb rGb rgB ...
    Rgb rGb rgB Rgb rGb rgB ...

Reconstruction runs in three passes over an (height, width, 3) uint8
array:
1. Seed: copy each CCD triplet into three adjacent pixels of an even row.
2. Horizontal: interpolate the channel values between seeded pixels,
   skipping a 30-pixel margin on every side.
3. Vertical: fill each odd row with the average of its neighbours and
   duplicate the second-to-last row into the last row.

Copyright 2025 DNAi inc.
"""

import numpy as np

from pdnconv.exceptions import MissingStripDataError
from pdnconv.pdn_parser import ImageDescriptor

HORIZONTAL_MARGIN = 30


def seed_pass(descriptor: ImageDescriptor, strip: bytes) -> np.ndarray:
    """
    Allocate the output raster and copy the CCD data into its even rows.

    Args:
        descriptor: Image descriptor with the CCD dimensions
        strip: Raw CCD data, three bytes per cell in row-major order.
            Missing trailing bytes are treated as 0.

    Returns:
        uint8 array of shape (height, width, 3)
    """
    ccd_width, ccd_height = descriptor.ccd_width, descriptor.ccd_height
    needed = ccd_width * ccd_height * 3

    ccd = np.zeros(needed, dtype=np.uint8)
    available = min(len(strip), needed)
    if available:
        ccd[:available] = np.frombuffer(strip, dtype=np.uint8, count=available)
    ccd = ccd.reshape(ccd_height, ccd_width, 3)

    raster = np.zeros((descriptor.height, descriptor.width, 3), dtype=np.uint8)
    raster[0::2] = np.repeat(ccd, 3, axis=1)
    return raster


def _interpolate_row(row: bytearray, margin: int, width: int) -> None:
    # Runs left to right in place: each step reads values the previous
    # steps have just written. Each step reads up to five pixels ahead.
    for x in range(margin, min(width - margin, width - 5)):
        i = x * 3

        # R0 and R3 come from the CCD, R1 and R2 are generated
        r0 = row[i]
        r3 = row[i + 9]
        row[i + 3] = (2 * r0 + r3) // 3
        row[i + 6] = (r0 + 2 * r3) // 3

        # G1 and G4 come from the CCD, G2 and G3 are generated
        g1 = row[i + 4]
        g4 = row[i + 13]
        row[i + 7] = (2 * g1 + g4) // 3
        row[i + 10] = (g1 + 2 * g4) // 3

        # B2 and B5 come from the CCD, B3 and B4 are generated.
        # B4 is derived from B3, not B2; existing conversions depend on it.
        b2 = row[i + 8]
        b5 = row[i + 17]
        b3 = (2 * b2 + b5) // 3
        b4 = (b3 + 2 * b5) // 3
        row[i + 11] = b3
        row[i + 14] = b4


def interpolate_horizontal(raster: np.ndarray, margin: int = HORIZONTAL_MARGIN) -> np.ndarray:
    """
    Generate interstitial channel values along each seeded row.

    Only even rows carry CCD data at this point; odd rows are rebuilt
    entirely by interpolate_vertical, so they are skipped here.

    Args:
        raster: Seeded (height, width, 3) uint8 array, modified in place
        margin: Pixels left untouched on every side

    Returns:
        The same array
    """
    height, width = raster.shape[0], raster.shape[1]
    first_row = margin + margin % 2

    for y in range(first_row, height - margin, 2):
        row = bytearray(raster[y].tobytes())
        _interpolate_row(row, margin, width)
        raster[y] = np.frombuffer(bytes(row), dtype=np.uint8).reshape(width, 3)

    return raster


def interpolate_vertical(raster: np.ndarray) -> np.ndarray:
    """
    Generate the interstitial odd rows.

    Row y+1 becomes the truncated average of rows y and y+2 for every
    even y with y+2 inside the image. The last row is a copy of the
    second-to-last one.

    Args:
        raster: (height, width, 3) uint8 array, modified in place

    Returns:
        The same array
    """
    height = raster.shape[0]
    pairs = (height - 1) // 2 if height >= 3 else 0

    if pairs:
        above = raster[0:2 * pairs - 1:2].astype(np.uint16)
        below = raster[2:2 * pairs + 1:2].astype(np.uint16)
        raster[1:2 * pairs:2] = ((above + below) // 2).astype(np.uint8)

    if height >= 2:
        raster[height - 1] = raster[height - 2]

    return raster


def reconstruct_raster(descriptor: ImageDescriptor, strip: bytes) -> bytes:
    """
    Reconstruct the full RGB raster from raw CCD data.

    Args:
        descriptor: Parsed image descriptor
        strip: Raw CCD data (see extract_strip)

    Returns:
        width * height * 3 bytes of interleaved RGB, row-major

    Raises:
        MissingStripDataError: If the descriptor has no strip offsets
    """
    if not descriptor.strip_offsets:
        raise MissingStripDataError("Image has no strip offsets; no sensor data to decode")

    raster = seed_pass(descriptor, strip)
    raster = interpolate_horizontal(raster)
    raster = interpolate_vertical(raster)
    return raster.tobytes()

