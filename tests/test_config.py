"""
Unit tests for DetectionConfig.
"""
from pathlib import Path

import pytest

from firewatch.utils.config import DetectionConfig

_DEFAULT_YAML = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"


class TestDetectionConfig:
    """Tests for defaults, validation and (de)serialization"""

    def test_defaults(self):
        config = DetectionConfig()
        assert config.history_size == 10
        assert config.fire_area_threshold == 100
        assert config.smoke_area_threshold == 1000
        assert config.fire_growth_threshold == 50
        assert config.alert_run_length == 3
        assert config.motion_threshold == 15
        assert config.fire_hsv_lower == (0, 50, 200)
        assert config.smoke_hsv_upper == (179, 30, 200)
        assert (config.fire_kernel_size, config.smoke_kernel_size) == (5, 10)

    def test_lists_become_tuples(self):
        config = DetectionConfig(fire_hsv_lower=[1, 60, 210])
        assert config.fire_hsv_lower == (1, 60, 210)

    @pytest.mark.parametrize("overrides", [
        {"history_size": 0},
        {"alert_run_length": 0},
        {"smoke_kernel_size": 0},
        {"fire_area_threshold": -1},
        {"motion_threshold": 300},
        {"fire_hsv_lower": (0, 50)},
        {"smoke_hsv_upper": (180, 30, 200)},
        {"fire_hsv_lower": (30, 50, 200)},
        {"fire_area_threshold": "high"},
        {"fire_kernel_size": 5.5},
        {"history_size": True},
        {"motion_threshold": None},
        {"smoke_hsv_lower": 5},
        {"fire_hsv_upper": [25, "max", 255]},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            DetectionConfig(**overrides)

    def test_whole_floats_become_ints(self):
        config = DetectionConfig(fire_kernel_size=7.0, smoke_area_threshold=1500.0)
        assert config.fire_kernel_size == 7
        assert isinstance(config.fire_kernel_size, int)
        assert config.smoke_area_threshold == 1500

    def test_from_dict_ignores_unknown_and_none(self):
        config = DetectionConfig.from_dict({"history_size": 4, "source": "0", "motion_threshold": None})
        assert config.history_size == 4
        assert config.motion_threshold == 15

    def test_to_dict_round_trip(self):
        config = DetectionConfig(smoke_area_threshold=2500)
        data = config.to_dict()
        assert data["fire_hsv_upper"] == [25, 255, 255]
        assert DetectionConfig.from_dict(data) == config

    def test_replace(self):
        config = DetectionConfig().replace(alert_run_length=5)
        assert config.alert_run_length == 5

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DetectionConfig().history_size = 3

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "monitor.yaml"
        path.write_text("smoke_area_threshold: 1500\nfire_hsv_upper: [20, 255, 255]\n")
        config = DetectionConfig.from_yaml(path)
        assert config.smoke_area_threshold == 1500
        assert config.fire_hsv_upper == (20, 255, 255)

    def test_from_yaml_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            DetectionConfig.from_yaml(path)

    def test_shipped_defaults_file_matches(self):
        assert DetectionConfig.from_yaml(_DEFAULT_YAML) == DetectionConfig()
