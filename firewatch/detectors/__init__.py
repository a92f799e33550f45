from .fire import FireDetector, FireDetection, detect_fire_mask
from .smoke import SmokeDetector, SmokeDetection, detect_smoke_mask

__all__ = [
    'FireDetector',
    'FireDetection',
    'detect_fire_mask',
    'SmokeDetector',
    'SmokeDetection',
    'detect_smoke_mask',
]
