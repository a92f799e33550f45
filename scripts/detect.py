#!/usr/bin/env python3
"""
Fire and smoke monitor script

Usage:
    # Default webcam
    python detect.py

    # Video file without a window
    python detect.py --source /path/to/video.mp4 --no_display --progress

    # Thresholds from a YAML file
    python detect.py --source 1 --config monitor.yaml
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from firewatch.cli import main


if __name__ == '__main__':
    sys.exit(main())
