#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Loading image files into grayscale rasters.
"""

from pathlib import Path
from typing import Union

import cv2
import numpy as np

from utils.logging import get_logger
from .errors import ImageLoadError

log = get_logger()


def load_raster(path: Union[str, Path]) -> np.ndarray:
    """
    Read an image file as an 8-bit single-channel raster.

    Color images are converted to luma by OpenCV.

    Args:
        path: Image file path

    Returns:
        2-D uint8 array (rows x columns)

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"Image file not found: {path}")

    raster = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if raster is None:
        raise ImageLoadError(f"Could not decode image: {path}")

    log.debug(f"Loaded {path.name}: {raster.shape[1]}x{raster.shape[0]}")
    return raster
