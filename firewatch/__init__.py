from .detectors import FireDetector, FireDetection, SmokeDetector, SmokeDetection
from .temporal import HistoryBuffer, GrowthAnalyzer, GrowthResult, AlertStateMachine, DetectionState
from .pipeline import PipelineContext, FrameResult, FramePipeline, process_frame
from .render import OverlayRenderer, DisplayWindow
from .runner import MonitorStats, run_monitor
from .core import Region, FrameSource, open_capture
from .utils import DetectionConfig

__version__ = '0.1.0'

__all__ = [
    # Detectors
    'FireDetector',
    'FireDetection',
    'SmokeDetector',
    'SmokeDetection',
    # Temporal
    'HistoryBuffer',
    'GrowthAnalyzer',
    'GrowthResult',
    'AlertStateMachine',
    'DetectionState',
    # Pipeline
    'PipelineContext',
    'FrameResult',
    'FramePipeline',
    'process_frame',
    # Display / loop
    'OverlayRenderer',
    'DisplayWindow',
    'MonitorStats',
    'run_monitor',
    # Core
    'Region',
    'FrameSource',
    'open_capture',
    # Config
    'DetectionConfig',
]
