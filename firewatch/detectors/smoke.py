"""
Smoke candidate detection.

Smoke is approximated as pixels that changed since the previous frame
and fall into a low-saturation gray band. Connected regions larger
than the smoke area threshold qualify as significant smoke.
"""

import cv2
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import (
    HSVBand,
    SMOKE_HSV_LOWER,
    SMOKE_HSV_UPPER,
    MOTION_THRESHOLD,
    SMOKE_KERNEL_SIZE,
    MASK_ON,
)
from ..core.regions import (
    Region,
    clean_mask,
    ellipse_kernel,
    empty_mask,
    extract_regions,
    to_gray,
    validate_frame,
)
from ..utils.config import DetectionConfig


@dataclass
class SmokeDetection:
    """Smoke candidate mask and qualifying regions for one frame."""
    mask: np.ndarray
    present: bool = False
    regions: List[Region] = field(default_factory=list)


def _is_absent(frame: Optional[np.ndarray]) -> bool:
    return frame is None or frame.size == 0


def detect_smoke_mask(
    frame: np.ndarray,
    prev_frame: Optional[np.ndarray],
    hsv_lower: HSVBand = SMOKE_HSV_LOWER,
    hsv_upper: HSVBand = SMOKE_HSV_UPPER,
    motion_threshold: int = MOTION_THRESHOLD,
    kernel: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Compute the smoke candidate mask from a pair of frames.

    Args:
        frame: Current BGR frame (H, W, 3)
        prev_frame: Previous BGR frame, or None on the first frame
        hsv_lower: Inclusive lower HSV bound of the gray band
        hsv_upper: Inclusive upper HSV bound of the gray band
        motion_threshold: Absolute gray differences strictly above this
                          count as motion
        kernel: Structuring element for cleanup (default: 10x10 ellipse)

    Returns:
        Binary mask (H, W), values 0/255. All zero when either frame is
        missing.
    """
    if _is_absent(frame):
        return np.zeros((0, 0), dtype=np.uint8)
    validate_frame(frame)
    if _is_absent(prev_frame):
        return empty_mask(frame.shape)

    validate_frame(prev_frame, "prev_frame")
    if prev_frame.shape != frame.shape:
        raise ValueError(f"Frame shape mismatch: {frame.shape} vs previous {prev_frame.shape}")

    if kernel is None:
        kernel = ellipse_kernel(SMOKE_KERNEL_SIZE)

    # Motion: pixels whose brightness changed
    diff = cv2.absdiff(to_gray(frame), to_gray(prev_frame))
    _, motion_mask = cv2.threshold(diff, motion_threshold, MASK_ON, cv2.THRESH_BINARY)

    # Color: grayish pixels
    hsv = cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)
    gray_mask = cv2.inRange(hsv, np.array(hsv_lower, dtype=np.uint8), np.array(hsv_upper, dtype=np.uint8))

    smoke_mask = cv2.bitwise_and(motion_mask, gray_mask)
    return clean_mask(smoke_mask, kernel)


class SmokeDetector:
    """
    Smoke detector over (current, previous) frame pairs.

    Holds no state of its own; the previous frame is supplied by the
    caller on every call.

    Args:
        config: Detection configuration (color band, motion threshold,
                kernel size, area threshold)
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or DetectionConfig()
        self.kernel = ellipse_kernel(self.config.smoke_kernel_size)

    def detect(self, frame: np.ndarray, prev_frame: Optional[np.ndarray]) -> SmokeDetection:
        mask = detect_smoke_mask(
            frame,
            prev_frame,
            hsv_lower=self.config.smoke_hsv_lower,
            hsv_upper=self.config.smoke_hsv_upper,
            motion_threshold=self.config.motion_threshold,
            kernel=self.kernel,
        )

        regions = [
            region for region in extract_regions(mask)
            if region.area > self.config.smoke_area_threshold
        ]
        return SmokeDetection(mask=mask, present=bool(regions), regions=regions)
