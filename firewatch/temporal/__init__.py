from .history import HistoryBuffer
from .growth import GrowthAnalyzer, GrowthResult, significant_growth, is_fire_frame
from .alert import AlertStateMachine, DetectionState

__all__ = [
    'HistoryBuffer',
    'GrowthAnalyzer',
    'GrowthResult',
    'significant_growth',
    'is_fire_frame',
    'AlertStateMachine',
    'DetectionState',
]
