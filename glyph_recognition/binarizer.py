#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Binarization of grayscale rasters into pixel grids.

The source images are pure black/white renderings upscaled by a fixed factor,
so one sample per block is enough. Any gray sample means the input is not the
format we decode and is rejected rather than thresholded.
"""

from typing import Sequence, Union

import numpy as np

from config import DOWNSAMPLE_SCALE, PIXEL_OFF_VALUE, PIXEL_ON_VALUE
from utils.logging import get_logger
from utils.validation import validate_positive_int
from .errors import RasterFormatError
from .pixels import Grid, Pixel

log = get_logger()


def binarize(raster: np.ndarray, scale: int = DOWNSAMPLE_SCALE) -> Grid:
    """
    Downsample a grayscale raster into a grid of ON/OFF pixels.

    The top-left sample of every ``scale`` x ``scale`` block is kept. A trailing
    partial block still yields a row/column, so the grid is
    ceil(height / scale) x ceil(width / scale).

    Args:
        raster: 2-D array of 8-bit intensities (rows x columns)
        scale: Downsampling factor (> 0)

    Returns:
        Row-major grid of Pixel values

    Raises:
        RasterFormatError: If the raster is not 2-D or a sample is neither 0 nor 255
    """
    validate_positive_int(scale, "scale")

    raster = np.asarray(raster)
    if raster.ndim != 2:
        raise RasterFormatError(f"Expected a 2-D grayscale raster, got shape {raster.shape}")

    samples = raster[::scale, ::scale]
    on_mask = samples == PIXEL_ON_VALUE
    invalid = ~(on_mask | (samples == PIXEL_OFF_VALUE))

    if invalid.any():
        row, col = np.argwhere(invalid)[0]
        value = samples[row, col]
        raise RasterFormatError(
            f"Non-binary sample {value} at source pixel ({col * scale}, {row * scale}); "
            f"expected {PIXEL_OFF_VALUE} or {PIXEL_ON_VALUE}"
        )

    grid = [[Pixel.ON if on else Pixel.OFF for on in row] for row in on_mask.tolist()]
    log.debug(f"Binarized {raster.shape[1]}x{raster.shape[0]} raster into "
              f"{samples.shape[1]}x{samples.shape[0]} grid (scale {scale})")
    return grid


def binarize_buffer(samples: Union[bytes, bytearray, Sequence[int]],
                    width: int, height: int,
                    scale: int = DOWNSAMPLE_SCALE) -> Grid:
    """
    Binarize a flat row-major buffer of 8-bit samples.

    Args:
        samples: width * height intensity values
        width: Raster width in pixels
        height: Raster height in pixels
        scale: Downsampling factor (> 0)

    Returns:
        Row-major grid of Pixel values
    """
    if isinstance(samples, (bytes, bytearray)):
        flat = np.frombuffer(bytes(samples), dtype=np.uint8)
    else:
        flat = np.asarray(samples)

    if flat.size != width * height:
        raise RasterFormatError(
            f"Buffer holds {flat.size} samples, expected {width}x{height} = {width * height}"
        )

    return binarize(flat.reshape(height, width), scale)
