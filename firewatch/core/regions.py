"""
Mask and region utilities.

Provides the Region dataclass and helper functions shared by the fire
and smoke detectors: structuring elements, noise cleanup, pixel
counting and connected-region extraction.
"""

import cv2
import numpy as np
from dataclasses import dataclass
from typing import List, Tuple

from .constants import MASK_ON


@dataclass
class Region:
    """Connected group of true pixels in a mask."""
    contour: np.ndarray
    area: int

    @property
    def bbox(self) -> Tuple[int, int, int, int]:
        """Return bbox as integer tuple (x1, y1, x2, y2)."""
        x, y, w, h = cv2.boundingRect(self.contour)
        return (x, y, x + w, y + h)


def ellipse_kernel(size: int) -> np.ndarray:
    """
    Build an elliptical structuring element.

    Args:
        size: Kernel width and height in pixels

    Returns:
        uint8 kernel of shape (size, size)
    """
    return cv2.getStructuringElement(cv2.MORPH_ELLIPSE, (size, size))


def clean_mask(mask: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Remove speckle noise and close small gaps.

    Opening runs first so isolated pixels are gone before closing
    merges the surviving regions.

    Args:
        mask: Binary mask (H, W), values 0/255
        kernel: Structuring element

    Returns:
        Cleaned mask with the same shape
    """
    opened = cv2.morphologyEx(mask, cv2.MORPH_OPEN, kernel)
    return cv2.morphologyEx(opened, cv2.MORPH_CLOSE, kernel)


def empty_mask(shape: Tuple[int, ...]) -> np.ndarray:
    """Return an all-false mask for a frame or mask shape."""
    return np.zeros(shape[:2], dtype=np.uint8)


def mask_area(mask: np.ndarray) -> int:
    """Count true pixels in a mask."""
    if mask.size == 0:
        return 0
    return int(cv2.countNonZero(mask))


def to_gray(frame: np.ndarray) -> np.ndarray:
    """Convert a BGR frame to single channel grayscale."""
    return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)


def validate_frame(frame: np.ndarray, name: str = "frame") -> None:
    """
    Check that a frame is an (H, W, 3) uint8 raster.

    Raises:
        ValueError: If the frame has the wrong shape or dtype
    """
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"{name} must have shape (H, W, 3), got {frame.shape}")
    if frame.dtype != np.uint8:
        raise ValueError(f"{name} must be uint8, got {frame.dtype}")


def extract_regions(mask: np.ndarray) -> List[Region]:
    """
    Extract connected regions from a binary mask.

    The area of each region is the number of true mask pixels enclosed
    by its outer boundary.

    Args:
        mask: Binary mask (H, W), values 0/255

    Returns:
        List of Region objects (outer contours only)
    """
    if mask.size == 0 or not mask.any():
        return []

    contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

    regions = []
    for contour in contours:
        x, y, w, h = cv2.boundingRect(contour)
        filled = np.zeros((h, w), dtype=np.uint8)
        cv2.drawContours(filled, [contour], -1, MASK_ON, thickness=cv2.FILLED, offset=(-x, -y))
        inside = (filled > 0) & (mask[y:y + h, x:x + w] > 0)
        regions.append(Region(contour=contour, area=int(np.count_nonzero(inside))))

    return regions
