"""
Detection configuration module.

Holds every tunable threshold of the fire and smoke pipeline in one
place, so that defaults can be overridden from the command line or
from a YAML file at startup.
"""

import numbers
from dataclasses import dataclass, asdict, fields, replace as dataclass_replace
from pathlib import Path
from typing import Dict, Tuple, Union

import yaml

from ..core.constants import (
    HSVBand,
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
)

# OpenCV stores 8-bit hue as degrees / 2
_HSV_LIMITS: Tuple[int, int, int] = (179, 255, 255)

_INT_FIELDS: Tuple[str, ...] = (
    'history_size',
    'fire_area_threshold',
    'smoke_area_threshold',
    'fire_growth_threshold',
    'alert_run_length',
    'fire_intensity_threshold',
    'motion_threshold',
    'fire_kernel_size',
    'smoke_kernel_size',
)


@dataclass(frozen=True)
class DetectionConfig:
    """
    Detection configuration.

    All areas are in pixels, all intensities are 8-bit values, and color
    bands are inclusive (lower, upper) HSV triples in OpenCV ranges.

    Example:
        # Defaults
        config = DetectionConfig()

        # Less sensitive smoke qualification
        config = DetectionConfig(smoke_area_threshold=2500)

        # From a YAML file
        config = DetectionConfig.from_yaml('monitor.yaml')
    """
    history_size: int = DEFAULT_HISTORY_SIZE
    fire_area_threshold: int = DEFAULT_FIRE_AREA_THRESHOLD
    smoke_area_threshold: int = DEFAULT_SMOKE_AREA_THRESHOLD
    fire_growth_threshold: int = DEFAULT_FIRE_GROWTH_THRESHOLD
    alert_run_length: int = DEFAULT_ALERT_RUN_LENGTH
    fire_hsv_lower: HSVBand = FIRE_HSV_LOWER
    fire_hsv_upper: HSVBand = FIRE_HSV_UPPER
    fire_intensity_threshold: int = FIRE_INTENSITY_THRESHOLD
    motion_threshold: int = MOTION_THRESHOLD
    smoke_hsv_lower: HSVBand = SMOKE_HSV_LOWER
    smoke_hsv_upper: HSVBand = SMOKE_HSV_UPPER
    fire_kernel_size: int = FIRE_KERNEL_SIZE
    smoke_kernel_size: int = SMOKE_KERNEL_SIZE

    def __post_init__(self):
        # Lists coming from YAML or argparse nargs become tuples
        for name in ('fire_hsv_lower', 'fire_hsv_upper', 'smoke_hsv_lower', 'smoke_hsv_upper'):
            object.__setattr__(self, name, _as_band(name, getattr(self, name)))

        for name in _INT_FIELDS:
            object.__setattr__(self, name, _as_int(name, getattr(self, name)))

        for name in ('history_size', 'alert_run_length', 'fire_kernel_size', 'smoke_kernel_size'):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")

        for name in ('fire_area_threshold', 'smoke_area_threshold', 'fire_growth_threshold'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")

        for name in ('fire_intensity_threshold', 'motion_threshold'):
            if not 0 <= getattr(self, name) <= 255:
                raise ValueError(f"{name} must be in 0-255, got {getattr(self, name)}")

        for prefix in ('fire', 'smoke'):
            lower = getattr(self, f'{prefix}_hsv_lower')
            upper = getattr(self, f'{prefix}_hsv_upper')
            if any(lo > hi for lo, hi in zip(lower, upper)):
                raise ValueError(f"{prefix} color band lower {lower} exceeds upper {upper}")

    def to_dict(self) -> Dict:
        """Serialize to a plain dictionary (tuples become lists)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'DetectionConfig':
        """Build from a dictionary; unknown keys and None values are ignored."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names and v is not None})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'DetectionConfig':
        """Load configuration from a YAML mapping."""
        return cls.from_dict(load_config(path))

    def replace(self, **overrides) -> 'DetectionConfig':
        """Return a copy with the given fields overridden."""
        return dataclass_replace(self, **overrides)

    def __str__(self) -> str:
        return (
            f"DetectionConfig: history={self.history_size}, run_length={self.alert_run_length}, "
            f"fire_area>{self.fire_area_threshold}, growth>{self.fire_growth_threshold}, "
            f"smoke_area>{self.smoke_area_threshold}, motion>{self.motion_threshold}, "
            f"kernels={self.fire_kernel_size}/{self.smoke_kernel_size}"
        )


def load_config(path: Union[str, Path]) -> Dict:
    """Load a YAML config file that holds a mapping."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def _as_int(name: str, value) -> int:
    # Whole floats such as 5.0 are accepted, 5.5 and strings are not
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _as_band(name: str, value) -> HSVBand:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list of 3 integers (H, S, V), got {value!r}")
    band = tuple(_as_int(name, v) for v in value)
    if len(band) != 3:
        raise ValueError(f"{name} must have 3 components (H, S, V), got {value!r}")
    for component, limit in zip(band, _HSV_LIMITS):
        if not 0 <= component <= limit:
            raise ValueError(f"{name} component {component} out of range 0-{limit}")
    return band
