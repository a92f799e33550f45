"""
Shared constants for the fire and smoke monitor.

Contains default detection thresholds, color bands, and display
parameters used across the detectors, the pipeline and the renderer.
"""

from typing import Tuple, List

HSVBand = Tuple[int, int, int]

# =============================================================================
# Temporal Parameters
# =============================================================================

DEFAULT_HISTORY_SIZE: int = 10  # Fire masks retained for the growth baseline
DEFAULT_ALERT_RUN_LENGTH: int = 3  # Consecutive frames required on both signals

# =============================================================================
# Area Thresholds (pixels)
# =============================================================================

DEFAULT_FIRE_AREA_THRESHOLD: int = 100
DEFAULT_SMOKE_AREA_THRESHOLD: int = 1000
DEFAULT_FIRE_GROWTH_THRESHOLD: int = 50

# =============================================================================
# Color Bands (OpenCV HSV: H in 0-179, S and V in 0-255)
# =============================================================================

# Fire: bright, warm hues
FIRE_HSV_LOWER: HSVBand = (0, 50, 200)
FIRE_HSV_UPPER: HSVBand = (25, 255, 255)
FIRE_INTENSITY_THRESHOLD: int = 200  # Grayscale, strict

# Smoke: low saturation, mid-to-high brightness
SMOKE_HSV_LOWER: HSVBand = (0, 0, 100)
SMOKE_HSV_UPPER: HSVBand = (179, 30, 200)
MOTION_THRESHOLD: int = 15  # Absolute grayscale difference, strict

# =============================================================================
# Morphology
# =============================================================================

FIRE_KERNEL_SIZE: int = 5
SMOKE_KERNEL_SIZE: int = 10  # Smoke regions are diffuse

MASK_ON: int = 255

# =============================================================================
# Display Settings (BGR format for OpenCV)
# =============================================================================

WINDOW_NAME: str = "Fire and Smoke Detection"
DEFAULT_WAIT_MS: int = 30

FRAME_BLEND_WEIGHT: float = 0.7
MASK_BLEND_WEIGHT: float = 0.3
FIRE_MASK_COLOR: Tuple[int, int, int] = (255, 255, 255)

SMOKE_OUTLINE_COLOR: Tuple[int, int, int] = (0, 255, 0)  # green
SMOKE_OUTLINE_THICKNESS: int = 2

ALERT_TEXT: str = "FIRE ALERT!"
ALERT_TEXT_ORIGIN: Tuple[int, int] = (10, 50)
ALERT_TEXT_COLOR: Tuple[int, int, int] = (0, 0, 255)  # red
ALERT_TEXT_SCALE: float = 1.0
ALERT_TEXT_THICKNESS: int = 2

# Keys that end the monitor loop: 'q' and ESC
QUIT_KEYS: List[int] = [ord('q'), 27]

# =============================================================================
# Capture
# =============================================================================

DEFAULT_CAMERA_INDEX: int = 0
DEFAULT_CAMERA_FALLBACKS: int = 10  # Indices 0..9 are probed

ALERT_MESSAGE: str = "Alert: Fire and smoke detected!"
END_OF_STREAM_MESSAGE: str = "End of video stream"
