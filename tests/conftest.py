"""
Shared pytest fixtures: synthetic BGR frames for the fire and smoke pipeline.

Color choices (OpenCV HSV):
    FIRE_BGR  (150, 220, 255) -> H=20, S=105, V=255, gray=222  (fire band, bright)
    GRAY_LOW  (120, 120, 120) -> S=0, V=120                     (smoke band)
    GRAY_HIGH (170, 170, 170) -> S=0, V=170                     (smoke band)
"""
import numpy as np
import pytest

HEIGHT = 120
WIDTH = 160
SPLIT = WIDTH // 2

FIRE_BGR = (150, 220, 255)
GRAY_LOW = (120, 120, 120)
GRAY_HIGH = (170, 170, 170)


class FakeSource:
    """Minimal stand-in for FrameSource backed by a list of frames."""

    def __init__(self, frames, total_frames=None):
        self._frames = list(frames)
        self.total_frames = len(self._frames) if total_frames is None else total_frames
        self.fps = 30.0
        self.released = False

    def open(self):
        return self

    def read(self):
        if not self._frames:
            return False, None
        return True, self._frames.pop(0)

    def describe(self):
        return "fake"

    def release(self):
        self.released = True


def _make_frame(left=None, right=None, height=HEIGHT, width=WIDTH):
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    if left is not None:
        frame[:, :width // 2] = left
    if right is not None:
        frame[:, width // 2:] = right
    return frame


@pytest.fixture
def make_frame():
    """Factory: frame with optional solid left/right halves on black."""
    return _make_frame


@pytest.fixture
def black_frame():
    return _make_frame()


@pytest.fixture
def fire_frame():
    """Frame uniformly inside the fire color and intensity band."""
    frame = np.zeros((HEIGHT, WIDTH, 3), dtype=np.uint8)
    frame[:] = FIRE_BGR
    return frame


@pytest.fixture
def scenario_frames():
    """
    Priming frame followed by three frames with a fire region on the left
    and a gray region on the right whose brightness alternates.
    """
    return [
        _make_frame(left=None, right=GRAY_LOW),
        _make_frame(left=FIRE_BGR, right=GRAY_HIGH),
        _make_frame(left=FIRE_BGR, right=GRAY_LOW),
        _make_frame(left=FIRE_BGR, right=GRAY_HIGH),
    ]


@pytest.fixture
def fake_source_factory():
    return FakeSource
