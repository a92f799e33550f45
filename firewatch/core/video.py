"""
Video capture utilities.

Provides camera/file/stream opening with camera index fallback and a
frame source that yields frames until the end of the stream.
"""

import cv2
import numpy as np
from typing import Generator, Iterable, Optional, Tuple, Union

from .constants import DEFAULT_CAMERA_FALLBACKS

Source = Union[int, str]


def parse_source(source: Source) -> Source:
    """
    Normalize a capture source.

    Digit strings such as "0" or "2" are camera indices; anything else
    is treated as a file path or stream URL.
    """
    if isinstance(source, str) and source.strip().isdigit():
        return int(source.strip())
    return source


def open_capture(
    source: Source,
    fallback_indices: Optional[Iterable[int]] = None
) -> Tuple[cv2.VideoCapture, Source]:
    """
    Open a capture device, video file or stream URL.

    For a camera index the requested index is tried first, then each
    fallback index in order.

    Args:
        source: Camera index, video path, or stream URL
        fallback_indices: Camera indices to try when the requested one
            fails (default: 0..DEFAULT_CAMERA_FALLBACKS-1)

    Returns:
        Tuple of (opened capture, source actually opened)

    Raises:
        ValueError: If nothing could be opened
    """
    source = parse_source(source)

    if isinstance(source, int):
        if fallback_indices is None:
            fallback_indices = range(DEFAULT_CAMERA_FALLBACKS)
        candidates = [source] + [i for i in fallback_indices if i != source]

        for index in candidates:
            cap = cv2.VideoCapture(index)
            if cap.isOpened():
                return cap, index
            cap.release()

        raise ValueError(f"Cannot open camera (tried indices {candidates})")

    cap = cv2.VideoCapture(str(source))
    if not cap.isOpened():
        cap.release()
        raise ValueError(f"Cannot open video: {source}")
    return cap, source


class FrameSource:
    """
    Context manager for reading frames from a camera, file or stream.

    Example:
        with FrameSource(0) as source:
            for frame_idx, frame in source:
                process(frame)
    """

    def __init__(
        self,
        source: Source = 0,
        fallback_indices: Optional[Iterable[int]] = None,
        target_size: Optional[Tuple[int, int]] = None
    ):
        """
        Args:
            source: Camera index, video path, or stream URL
            fallback_indices: Camera indices tried when the requested one fails
            target_size: Optional target size for frames (width, height)
        """
        self.source = parse_source(source)
        self.fallback_indices = fallback_indices
        self.target_size = target_size
        self.opened_source: Optional[Source] = None
        self.cap = None
        self._total_frames = 0
        self._fps = 0.0

    def open(self) -> 'FrameSource':
        """
        Open the capture.

        Raises:
            ValueError: If the source (and every fallback camera) fails
        """
        self.cap, self.opened_source = open_capture(self.source, self.fallback_indices)
        self._total_frames = max(int(self.cap.get(cv2.CAP_PROP_FRAME_COUNT)), 0)
        self._fps = self.cap.get(cv2.CAP_PROP_FPS)
        return self

    def __enter__(self) -> 'FrameSource':
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()

    def __iter__(self) -> Generator[Tuple[int, np.ndarray], None, None]:
        """Iterate over frames until the end of the stream."""
        frame_idx = 0
        while True:
            ret, frame = self.read()
            if not ret:
                break
            yield frame_idx, frame
            frame_idx += 1

    @property
    def is_camera(self) -> bool:
        """True when reading from a camera index."""
        return isinstance(self.opened_source, int)

    @property
    def total_frames(self) -> int:
        """Total number of frames (0 for live sources)."""
        return self._total_frames

    @property
    def fps(self) -> float:
        """Reported frame rate."""
        return self._fps

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        """
        Read next frame.

        An empty frame counts as end of stream.

        Returns:
            Tuple of (success, frame)
        """
        if self.cap is None:
            return False, None
        ret, frame = self.cap.read()
        if not ret or frame is None or frame.size == 0:
            return False, None
        if self.target_size is not None and frame.shape[:2][::-1] != tuple(self.target_size):
            frame = cv2.resize(frame, tuple(self.target_size), interpolation=cv2.INTER_LINEAR)
        return True, frame

    def release(self):
        """Release the underlying capture."""
        if self.cap is not None:
            self.cap.release()
            self.cap = None

    def describe(self) -> str:
        """Human-readable description of the opened source."""
        if self.opened_source is None:
            return f"{self.source} (not opened)"
        kind = "camera" if self.is_camera else "video"
        return f"{kind} {self.opened_source}"
