"""
Per-frame fire and smoke pipeline.

All state carried between frames (previous frame, fire mask history,
run counters) lives in a PipelineContext owned by the caller and passed
into every process_frame call.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional

from .core.regions import Region, validate_frame
from .detectors import FireDetector, SmokeDetector
from .temporal import AlertStateMachine, GrowthAnalyzer, GrowthResult, HistoryBuffer
from .utils.config import DetectionConfig


@dataclass
class PipelineContext:
    """State threaded through consecutive pipeline cycles."""
    config: DetectionConfig
    fire_detector: FireDetector
    smoke_detector: SmokeDetector
    growth_analyzer: GrowthAnalyzer
    history: HistoryBuffer
    alert_state: AlertStateMachine
    prev_frame: Optional[np.ndarray] = None
    frame_index: int = 0

    @classmethod
    def create(cls, config: Optional[DetectionConfig] = None) -> 'PipelineContext':
        """Build a fresh context for a new stream."""
        config = config or DetectionConfig()
        return cls(
            config=config,
            fire_detector=FireDetector(config),
            smoke_detector=SmokeDetector(config),
            growth_analyzer=GrowthAnalyzer(config),
            history=HistoryBuffer(config.history_size),
            alert_state=AlertStateMachine(config.alert_run_length),
        )

    def reset(self):
        """Forget all temporal state (e.g. after the source changes)."""
        self.history.clear()
        self.alert_state.reset()
        self.prev_frame = None
        self.frame_index = 0


@dataclass
class FrameResult:
    """Everything the renderer needs for one frame."""
    frame_index: int
    frame: np.ndarray
    fire_mask: np.ndarray
    fire_area: int
    smoke_mask: np.ndarray
    smoke_present: bool
    growth: GrowthResult
    fire_frames: int
    smoke_frames: int
    alert: bool
    smoke_regions: List[Region] = field(default_factory=list)

    @property
    def fire_frame(self) -> bool:
        return self.growth.fire_frame


def process_frame(frame: np.ndarray, context: PipelineContext) -> FrameResult:
    """
    Run one pipeline cycle.

    Detection runs first; the history push, counter update and
    previous-frame swap are applied only after both detectors finish.

    Args:
        frame: Current BGR frame (H, W, 3)
        context: Pipeline state, updated in place

    Returns:
        FrameResult for this frame
    """
    validate_frame(frame)

    fire = context.fire_detector.detect(frame)
    smoke = context.smoke_detector.detect(frame, context.prev_frame)

    context.history.push(fire.mask)
    growth = context.growth_analyzer.evaluate(fire.area, context.history.baseline())
    alert = context.alert_state.update(growth.fire_frame, smoke.present)

    frame_index = context.frame_index
    context.prev_frame = frame.copy()
    context.frame_index += 1

    return FrameResult(
        frame_index=frame_index,
        frame=frame,
        fire_mask=fire.mask,
        fire_area=fire.area,
        smoke_mask=smoke.mask,
        smoke_present=smoke.present,
        growth=growth,
        fire_frames=context.alert_state.fire_frames,
        smoke_frames=context.alert_state.smoke_frames,
        alert=alert,
        smoke_regions=smoke.regions,
    )


class FramePipeline:
    """
    Object wrapper around a PipelineContext.

    Example:
        pipeline = FramePipeline(DetectionConfig())
        for _, frame in source:
            result = pipeline.process(frame)
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.context = PipelineContext.create(config)

    @property
    def config(self) -> DetectionConfig:
        return self.context.config

    def process(self, frame: np.ndarray) -> FrameResult:
        return process_frame(frame, self.context)

    def reset(self):
        self.context.reset()
