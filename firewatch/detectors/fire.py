"""
Fire candidate detection.

A pixel is a fire candidate when it is both in the bright warm HSV
band and brighter than the grayscale intensity threshold.
"""

import cv2
import numpy as np
from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    HSVBand,
    FIRE_HSV_LOWER,
    FIRE_HSV_UPPER,
    FIRE_INTENSITY_THRESHOLD,
    FIRE_KERNEL_SIZE,
    MASK_ON,
)
from ..core.regions import clean_mask, ellipse_kernel, mask_area, to_gray, validate_frame
from ..utils.config import DetectionConfig


@dataclass
class FireDetection:
    """Fire candidate mask for one frame."""
    mask: np.ndarray
    area: int


def detect_fire_mask(
    frame: np.ndarray,
    hsv_lower: HSVBand = FIRE_HSV_LOWER,
    hsv_upper: HSVBand = FIRE_HSV_UPPER,
    intensity_threshold: int = FIRE_INTENSITY_THRESHOLD,
    kernel: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Compute the fire candidate mask of a frame.

    Args:
        frame: BGR frame (H, W, 3)
        hsv_lower: Inclusive lower HSV bound of the warm band
        hsv_upper: Inclusive upper HSV bound of the warm band
        intensity_threshold: Grayscale values strictly above this pass
        kernel: Structuring element for cleanup (default: 5x5 ellipse)

    Returns:
        Binary mask (H, W), values 0/255
    """
    validate_frame(frame)
    if kernel is None:
        kernel = ellipse_kernel(FIRE_KERNEL_SIZE)

    hsv = cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)
    color_mask = cv2.inRange(hsv, np.array(hsv_lower, dtype=np.uint8), np.array(hsv_upper, dtype=np.uint8))

    _, bright_mask = cv2.threshold(to_gray(frame), intensity_threshold, MASK_ON, cv2.THRESH_BINARY)

    fire_mask = cv2.bitwise_and(color_mask, bright_mask)
    return clean_mask(fire_mask, kernel)


class FireDetector:
    """
    Stateless fire candidate detector.

    Args:
        config: Detection configuration (color band, intensity threshold,
                kernel size)
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or DetectionConfig()
        self.kernel = ellipse_kernel(self.config.fire_kernel_size)

    def detect(self, frame: np.ndarray) -> FireDetection:
        mask = detect_fire_mask(
            frame,
            hsv_lower=self.config.fire_hsv_lower,
            hsv_upper=self.config.fire_hsv_upper,
            intensity_threshold=self.config.fire_intensity_threshold,
            kernel=self.kernel,
        )
        return FireDetection(mask=mask, area=mask_area(mask))
