"""
Monitor loop: frame source -> pipeline -> renderer.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from tqdm import tqdm

from .core.constants import ALERT_MESSAGE, END_OF_STREAM_MESSAGE
from .core.video import FrameSource
from .pipeline import PipelineContext, process_frame
from .render import DisplayWindow, OverlayRenderer


@dataclass
class MonitorStats:
    """Counters collected over one monitoring run."""
    frames: int = 0
    fire_frames: int = 0
    smoke_frames: int = 0
    alert_frames: int = 0
    quit_requested: bool = False
    end_of_stream: bool = False

    def to_dict(self) -> Dict:
        return {
            'frames': self.frames,
            'fire_frames': self.fire_frames,
            'smoke_frames': self.smoke_frames,
            'alert_frames': self.alert_frames,
            'quit_requested': self.quit_requested,
            'end_of_stream': self.end_of_stream,
        }


def run_monitor(
    source: FrameSource,
    context: PipelineContext,
    renderer: Optional[OverlayRenderer] = None,
    window: Optional[DisplayWindow] = None,
    max_frames: Optional[int] = None,
    progress: bool = False,
    verbose: bool = True
) -> MonitorStats:
    """
    Process frames until end of stream, a quit key, or max_frames.

    Args:
        source: Opened frame source
        context: Pipeline context owned by this loop
        renderer: Overlay renderer (created on demand when a window is given)
        window: Display window; None runs headless
        max_frames: Stop after this many frames (None = no limit)
        progress: Show a progress bar when the source reports a length
        verbose: Print alert and end-of-stream messages

    Returns:
        MonitorStats for the run
    """
    if window is not None and renderer is None:
        renderer = OverlayRenderer()

    stats = MonitorStats()

    total = source.total_frames or None
    if max_frames is not None and total is not None:
        total = min(total, max_frames)
    pbar = tqdm(total=total, desc="Monitoring", unit="frame") if progress else None

    try:
        while max_frames is None or stats.frames < max_frames:
            ret, frame = source.read()
            if not ret:
                stats.end_of_stream = True
                if verbose:
                    print(END_OF_STREAM_MESSAGE)
                break

            result = process_frame(frame, context)

            stats.frames += 1
            stats.fire_frames += int(result.fire_frame)
            stats.smoke_frames += int(result.smoke_present)
            stats.alert_frames += int(result.alert)

            if result.alert and verbose:
                if pbar is not None:
                    pbar.write(ALERT_MESSAGE)
                else:
                    print(ALERT_MESSAGE)

            if pbar is not None:
                pbar.update(1)
                pbar.set_postfix(fire=result.fire_frames, smoke=result.smoke_frames)

            if window is not None:
                window.show(renderer.render(result))
                if window.poll_quit():
                    stats.quit_requested = True
                    break
    finally:
        if pbar is not None:
            pbar.close()

    return stats
