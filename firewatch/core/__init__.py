"""
Core modules for the fire and smoke monitor.

This package provides shared functionality for frame processing,
including constants, mask/region helpers, and video capture.
"""

from .constants import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_ALERT_RUN_LENGTH,
    DEFAULT_FIRE_AREA_THRESHOLD,
    DEFAULT_SMOKE_AREA_THRESHOLD,
    DEFAULT_FIRE_GROWTH_THRESHOLD,
    FIRE_HSV_LOWER,
    FIRE_HSV_UPPER,
    FIRE_INTENSITY_THRESHOLD,
    SMOKE_HSV_LOWER,
    SMOKE_HSV_UPPER,
    MOTION_THRESHOLD,
    FIRE_KERNEL_SIZE,
    SMOKE_KERNEL_SIZE,
    WINDOW_NAME,
)

from .regions import (
    Region,
    ellipse_kernel,
    clean_mask,
    empty_mask,
    mask_area,
    to_gray,
    validate_frame,
    extract_regions,
)

from .video import (
    parse_source,
    open_capture,
    FrameSource,
)

__all__ = [
    # Constants - Temporal
    'DEFAULT_HISTORY_SIZE',
    'DEFAULT_ALERT_RUN_LENGTH',
    # Constants - Thresholds
    'DEFAULT_FIRE_AREA_THRESHOLD',
    'DEFAULT_SMOKE_AREA_THRESHOLD',
    'DEFAULT_FIRE_GROWTH_THRESHOLD',
    'FIRE_INTENSITY_THRESHOLD',
    'MOTION_THRESHOLD',
    # Constants - Color bands
    'FIRE_HSV_LOWER',
    'FIRE_HSV_UPPER',
    'SMOKE_HSV_LOWER',
    'SMOKE_HSV_UPPER',
    # Constants - Morphology / display
    'FIRE_KERNEL_SIZE',
    'SMOKE_KERNEL_SIZE',
    'WINDOW_NAME',
    # Regions
    'Region',
    'ellipse_kernel',
    'clean_mask',
    'empty_mask',
    'mask_area',
    'to_gray',
    'validate_frame',
    'extract_regions',
    # Video
    'parse_source',
    'open_capture',
    'FrameSource',
]
