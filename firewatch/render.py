"""
On-screen visualization of pipeline results.

OverlayRenderer produces an annotated copy of the frame; DisplayWindow
shows it and polls the keyboard for a quit request.
"""

import cv2
import numpy as np
from typing import Iterable, Sequence, Tuple

from .core.constants import (
    WINDOW_NAME,
    DEFAULT_WAIT_MS,
    FRAME_BLEND_WEIGHT,
    MASK_BLEND_WEIGHT,
    FIRE_MASK_COLOR,
    SMOKE_OUTLINE_COLOR,
    SMOKE_OUTLINE_THICKNESS,
    ALERT_TEXT,
    ALERT_TEXT_ORIGIN,
    ALERT_TEXT_COLOR,
    ALERT_TEXT_SCALE,
    ALERT_TEXT_THICKNESS,
    QUIT_KEYS,
)
from .pipeline import FrameResult


def colorize_mask(mask: np.ndarray, color: Tuple[int, int, int] = FIRE_MASK_COLOR) -> np.ndarray:
    """
    Paint mask pixels with a solid color.

    Args:
        mask: Binary mask (H, W)
        color: BGR color for true pixels

    Returns:
        BGR image (H, W, 3), black where the mask is false
    """
    colored = np.zeros(mask.shape + (3,), dtype=np.uint8)
    colored[mask > 0] = color
    return colored


class OverlayRenderer:
    """
    Draws smoke outlines, the alert banner and the fire mask overlay.

    Args:
        mask_color: BGR color of the fire mask overlay
        frame_weight: Blend weight of the original frame
        mask_weight: Blend weight of the colored mask
    """

    def __init__(
        self,
        mask_color: Tuple[int, int, int] = FIRE_MASK_COLOR,
        frame_weight: float = FRAME_BLEND_WEIGHT,
        mask_weight: float = MASK_BLEND_WEIGHT
    ):
        self.mask_color = mask_color
        self.frame_weight = frame_weight
        self.mask_weight = mask_weight

    def draw_outlines(self, image: np.ndarray, contours: Sequence[np.ndarray]) -> None:
        if contours:
            cv2.drawContours(image, list(contours), -1, SMOKE_OUTLINE_COLOR, SMOKE_OUTLINE_THICKNESS)

    def draw_alert(self, image: np.ndarray) -> None:
        cv2.putText(image, ALERT_TEXT, ALERT_TEXT_ORIGIN, cv2.FONT_HERSHEY_SIMPLEX,
                    ALERT_TEXT_SCALE, ALERT_TEXT_COLOR, ALERT_TEXT_THICKNESS)

    def blend(self, image: np.ndarray, mask: np.ndarray) -> np.ndarray:
        overlay = colorize_mask(mask, self.mask_color)
        return cv2.addWeighted(image, self.frame_weight, overlay, self.mask_weight, 0)

    def render(self, result: FrameResult) -> np.ndarray:
        """
        Annotate a copy of the result's frame.

        Returns:
            Annotated BGR frame, same shape as the input frame
        """
        image = result.frame.copy()
        self.draw_outlines(image, [region.contour for region in result.smoke_regions])
        if result.alert:
            self.draw_alert(image)
        return self.blend(image, result.fire_mask)


class DisplayWindow:
    """
    OpenCV window with keyboard quit polling.

    Controls:
        'q' or ESC: Stop monitoring

    Example:
        with DisplayWindow() as window:
            window.show(image)
            if window.poll_quit():
                ...
    """

    def __init__(
        self,
        name: str = WINDOW_NAME,
        wait_ms: int = DEFAULT_WAIT_MS,
        quit_keys: Iterable[int] = QUIT_KEYS
    ):
        self.name = name
        self.wait_ms = max(int(wait_ms), 1)
        self.quit_keys = set(quit_keys)
        self._opened = False

    def __enter__(self) -> 'DisplayWindow':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def show(self, image: np.ndarray) -> None:
        cv2.imshow(self.name, image)
        self._opened = True

    def poll_quit(self) -> bool:
        """Wait up to wait_ms for a key; True if it requests quitting."""
        key = cv2.waitKey(self.wait_ms) & 0xFF
        return key in self.quit_keys

    def close(self) -> None:
        if self._opened:
            cv2.destroyWindow(self.name)
            self._opened = False
