"""
Fire growth analysis against the history baseline.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.config import DetectionConfig


def significant_growth(current_area: int, baseline_area: int, growth_threshold: int) -> bool:
    """True when the fire area grew by strictly more than the threshold."""
    return (current_area - baseline_area) > growth_threshold


def is_fire_frame(
    current_area: int,
    baseline_area: int,
    area_threshold: int,
    growth_threshold: int
) -> bool:
    """True when the fire area is large enough and growing."""
    return current_area > area_threshold and significant_growth(current_area, baseline_area, growth_threshold)


@dataclass
class GrowthResult:
    """Growth evaluation for one frame."""
    current_area: int
    baseline_area: int
    significant_growth: bool
    fire_frame: bool

    @property
    def growth(self) -> int:
        return self.current_area - self.baseline_area


class GrowthAnalyzer:
    """
    Classifies frames as fire frames from area and growth.

    Args:
        config: Detection configuration (fire area and growth thresholds)
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or DetectionConfig()

    def evaluate(self, current_area: int, baseline_area: int) -> GrowthResult:
        growing = significant_growth(current_area, baseline_area, self.config.fire_growth_threshold)
        return GrowthResult(
            current_area=current_area,
            baseline_area=baseline_area,
            significant_growth=growing,
            fire_frame=current_area > self.config.fire_area_threshold and growing,
        )
