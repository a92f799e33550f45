"""
Unit tests for the fire and smoke detectors (synthetic frames, no mocks).
"""
import numpy as np
import pytest

from firewatch.detectors import FireDetector, SmokeDetector, detect_fire_mask, detect_smoke_mask
from firewatch.utils.config import DetectionConfig

from conftest import FIRE_BGR, GRAY_HIGH, GRAY_LOW, HEIGHT, WIDTH


class TestFireDetector:
    """Tests for FireDetector - warm band AND high intensity"""

    def test_mask_matches_frame_size(self):
        rng = np.random.default_rng(0)
        frame = rng.integers(0, 256, size=(37, 53, 3), dtype=np.uint8)
        detection = FireDetector().detect(frame)
        assert detection.mask.shape == (37, 53)
        assert detection.mask.dtype == np.uint8

    def test_black_frame_is_empty(self, black_frame):
        detection = FireDetector().detect(black_frame)
        assert detection.area == 0

    def test_uniform_fire_frame_is_full(self, fire_frame):
        detection = FireDetector().detect(fire_frame)
        assert detection.area == HEIGHT * WIDTH

    def test_white_is_rejected(self):
        # Bright but unsaturated
        frame = np.full((40, 40, 3), 255, dtype=np.uint8)
        assert FireDetector().detect(frame).area == 0

    def test_dim_warm_is_rejected(self):
        # Warm hue, V=200, but grayscale ~118
        frame = np.zeros((40, 40, 3), dtype=np.uint8)
        frame[:] = (0, 100, 200)
        assert FireDetector().detect(frame).area == 0

    def test_speckle_is_removed(self, black_frame):
        black_frame[10:12, 10:12] = FIRE_BGR
        assert FireDetector().detect(black_frame).area == 0

    def test_region_area(self, make_frame):
        frame = make_frame(left=FIRE_BGR)
        area = FireDetector().detect(frame).area
        assert area == pytest.approx(HEIGHT * WIDTH // 2, rel=0.02)

    def test_custom_intensity_threshold(self, fire_frame):
        # Gray level of FIRE_BGR is 222
        config = DetectionConfig(fire_intensity_threshold=230)
        assert FireDetector(config).detect(fire_frame).area == 0

    def test_function_form_matches_detector(self, make_frame):
        frame = make_frame(left=FIRE_BGR)
        np.testing.assert_array_equal(detect_fire_mask(frame), FireDetector().detect(frame).mask)

    def test_input_frame_untouched(self, fire_frame):
        before = fire_frame.copy()
        FireDetector().detect(fire_frame)
        np.testing.assert_array_equal(fire_frame, before)


class TestSmokeDetector:
    """Tests for SmokeDetector - motion AND gray band, area-qualified regions"""

    def test_no_previous_frame(self, make_frame):
        frame = make_frame(right=GRAY_HIGH)
        detection = SmokeDetector().detect(frame, None)
        assert detection.mask.shape == (HEIGHT, WIDTH)
        assert not detection.mask.any()
        assert detection.present is False
        assert detection.regions == []

    def test_empty_previous_frame(self, make_frame):
        frame = make_frame(right=GRAY_HIGH)
        detection = SmokeDetector().detect(frame, np.zeros((0, 0, 3), dtype=np.uint8))
        assert detection.present is False
        assert detection.mask.shape == (HEIGHT, WIDTH)

    def test_missing_current_frame(self):
        detection = SmokeDetector().detect(None, None)
        assert detection.present is False
        assert detection.mask.size == 0

    def test_static_scene_has_no_smoke(self, make_frame):
        frame = make_frame(right=GRAY_HIGH)
        detection = SmokeDetector().detect(frame, frame.copy())
        assert not detection.mask.any()
        assert detection.present is False

    def test_moving_gray_region(self, make_frame):
        prev = make_frame(right=GRAY_LOW)
        frame = make_frame(right=GRAY_HIGH)
        detection = SmokeDetector().detect(frame, prev)
        assert detection.mask.shape == (HEIGHT, WIDTH)
        assert detection.present is True
        assert len(detection.regions) == 1
        assert detection.regions[0].area > 1000

    def test_small_region_does_not_qualify(self, black_frame):
        prev = black_frame.copy()
        prev[40:60, 40:60] = GRAY_LOW
        frame = black_frame.copy()
        frame[40:60, 40:60] = GRAY_HIGH
        detection = SmokeDetector().detect(frame, prev)
        assert detection.mask.any()
        assert detection.present is False
        assert detection.regions == []

    def test_lower_area_threshold_qualifies_small_region(self, black_frame):
        prev = black_frame.copy()
        prev[40:60, 40:60] = GRAY_LOW
        frame = black_frame.copy()
        frame[40:60, 40:60] = GRAY_HIGH
        detection = SmokeDetector(DetectionConfig(smoke_area_threshold=100)).detect(frame, prev)
        assert detection.present is True

    def test_saturated_motion_is_not_smoke(self, make_frame):
        # Gray levels 30 -> 76, but fully saturated red
        prev = make_frame(right=(0, 0, 100))
        frame = make_frame(right=(0, 0, 255))
        assert SmokeDetector().detect(frame, prev).present is False

    def test_subthreshold_motion_is_ignored(self, make_frame):
        prev = make_frame(right=(150, 150, 150))
        frame = make_frame(right=(160, 160, 160))
        assert not SmokeDetector().detect(frame, prev).mask.any()

    def test_shape_mismatch(self, make_frame):
        frame = make_frame(right=GRAY_HIGH)
        prev = np.zeros((10, 10, 3), dtype=np.uint8)
        with pytest.raises(ValueError):
            SmokeDetector().detect(frame, prev)

    def test_function_form_without_previous(self, make_frame):
        mask = detect_smoke_mask(make_frame(right=GRAY_HIGH), None)
        assert mask.shape == (HEIGHT, WIDTH)
        assert not mask.any()
