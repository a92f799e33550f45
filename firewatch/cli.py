"""
Fire and smoke monitor command line.

Usage:
    # Default webcam (falls back to camera indices 0..9)
    firewatch

    # Video file, headless, with a progress bar
    firewatch --source samples/warehouse.mp4 --no_display --progress

    # IP camera stream with thresholds from a YAML file
    firewatch --source http://192.168.1.10:8080/video --config monitor.yaml
"""

import sys
import argparse
from typing import List, Optional

import yaml

from .core.constants import DEFAULT_CAMERA_FALLBACKS, DEFAULT_CAMERA_INDEX, DEFAULT_WAIT_MS, WINDOW_NAME
from .core.video import FrameSource
from .pipeline import PipelineContext
from .render import DisplayWindow, OverlayRenderer
from .runner import run_monitor
from .utils.config import DetectionConfig, load_config

_DEFAULTS = DetectionConfig()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Classical fire and smoke monitor for a single video stream')

    # Source
    parser.add_argument('--source', type=str, default=str(DEFAULT_CAMERA_INDEX),
                        help='Camera index, video file, or stream URL (default: 0)')
    parser.add_argument('--fallback_cameras', type=int, default=DEFAULT_CAMERA_FALLBACKS,
                        help='Camera indices 0..N-1 tried when the requested camera fails (default: 10)')
    parser.add_argument('--target_size', type=int, nargs=2, default=None, metavar=('W', 'H'),
                        help='Resize frames before processing')
    parser.add_argument('--max_frames', type=int, default=None,
                        help='Stop after this many frames')

    # Detection
    parser.add_argument('--history_size', type=int, default=_DEFAULTS.history_size,
                        help='Fire masks kept for the growth baseline')
    parser.add_argument('--fire_area_threshold', type=int, default=_DEFAULTS.fire_area_threshold,
                        help='Minimum fire area in pixels')
    parser.add_argument('--smoke_area_threshold', type=int, default=_DEFAULTS.smoke_area_threshold,
                        help='Minimum smoke region area in pixels')
    parser.add_argument('--fire_growth_threshold', type=int, default=_DEFAULTS.fire_growth_threshold,
                        help='Minimum fire area growth over the baseline')
    parser.add_argument('--alert_run_length', type=int, default=_DEFAULTS.alert_run_length,
                        help='Consecutive fire and smoke frames required for an alert')
    parser.add_argument('--fire_hsv_lower', type=int, nargs=3, default=list(_DEFAULTS.fire_hsv_lower),
                        metavar=('H', 'S', 'V'), help='Fire color band lower bound')
    parser.add_argument('--fire_hsv_upper', type=int, nargs=3, default=list(_DEFAULTS.fire_hsv_upper),
                        metavar=('H', 'S', 'V'), help='Fire color band upper bound')
    parser.add_argument('--fire_intensity_threshold', type=int, default=_DEFAULTS.fire_intensity_threshold,
                        help='Grayscale brightness a fire pixel must exceed')
    parser.add_argument('--motion_threshold', type=int, default=_DEFAULTS.motion_threshold,
                        help='Grayscale change a smoke pixel must exceed')
    parser.add_argument('--smoke_hsv_lower', type=int, nargs=3, default=list(_DEFAULTS.smoke_hsv_lower),
                        metavar=('H', 'S', 'V'), help='Smoke color band lower bound')
    parser.add_argument('--smoke_hsv_upper', type=int, nargs=3, default=list(_DEFAULTS.smoke_hsv_upper),
                        metavar=('H', 'S', 'V'), help='Smoke color band upper bound')
    parser.add_argument('--fire_kernel_size', type=int, default=_DEFAULTS.fire_kernel_size,
                        help='Fire mask cleanup kernel size')
    parser.add_argument('--smoke_kernel_size', type=int, default=_DEFAULTS.smoke_kernel_size,
                        help='Smoke mask cleanup kernel size')

    # Output
    parser.add_argument('--no_display', action='store_true',
                        help='Run without a window')
    parser.add_argument('--wait_ms', type=int, default=DEFAULT_WAIT_MS,
                        help='Keyboard poll per frame in milliseconds (default: 30)')
    parser.add_argument('--window_name', type=str, default=WINDOW_NAME,
                        help='Display window title')
    parser.add_argument('--progress', action='store_true',
                        help='Show a progress bar for video files')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress console messages')

    # Config file
    parser.add_argument('--config', type=str, default=None,
                        help='YAML config file; its keys override command line values')

    return parser.parse_args(argv)


def apply_config_file(args: argparse.Namespace) -> argparse.Namespace:
    """Override parsed arguments with matching keys from --config."""
    if args.config:
        config = load_config(args.config)
        for key, value in config.items():
            if hasattr(args, key):
                setattr(args, key, value)
    return args


def build_config(args: argparse.Namespace) -> DetectionConfig:
    return DetectionConfig.from_dict(vars(args))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet

    try:
        args = apply_config_file(args)
        config = build_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    target_size = tuple(args.target_size) if args.target_size else None
    source = FrameSource(args.source, fallback_indices=range(args.fallback_cameras), target_size=target_size)

    try:
        source.open()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if verbose:
        print(f"Source: {source.describe()}")
        print(f"  FPS: {source.fps:.2f}, Total frames: {source.total_frames or 'live'}")
        print(config)

    context = PipelineContext.create(config)
    window = None if args.no_display else DisplayWindow(args.window_name, args.wait_ms)

    try:
        stats = run_monitor(
            source,
            context,
            renderer=OverlayRenderer(),
            window=window,
            max_frames=args.max_frames,
            progress=args.progress,
            verbose=verbose,
        )
    finally:
        source.release()
        if window is not None:
            window.close()

    if verbose:
        print("-" * 60)
        print(f"  Frames: {stats.frames}")
        print(f"  Fire frames: {stats.fire_frames}")
        print(f"  Smoke frames: {stats.smoke_frames}")
        print(f"  Alert frames: {stats.alert_frames}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
