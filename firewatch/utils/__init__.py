from .config import DetectionConfig, load_config

__all__ = [
    'DetectionConfig',
    'load_config',
]
