"""
Tests for the command line entry point (capture and GUI mocked).
"""
from unittest.mock import patch

import pytest

from firewatch import cli


class TestParseArgs:
    """Tests for argument parsing and config file overrides"""

    def test_defaults(self):
        args = cli.parse_args([])
        assert args.source == "0"
        assert args.fallback_cameras == 10
        assert args.no_display is False
        assert cli.build_config(args) == cli.DetectionConfig()

    def test_threshold_flags(self):
        args = cli.parse_args(["--smoke_area_threshold", "2000", "--fire_hsv_upper", "20", "255", "255"])
        config = cli.build_config(args)
        assert config.smoke_area_threshold == 2000
        assert config.fire_hsv_upper == (20, 255, 255)

    def test_config_file_overrides(self, tmp_path):
        path = tmp_path / "monitor.yaml"
        path.write_text("history_size: 5\nsource: clip.mp4\nunknown_key: 1\n")
        args = cli.apply_config_file(cli.parse_args(["--config", str(path), "--history_size", "8"]))
        assert args.history_size == 5
        assert args.source == "clip.mp4"
        assert not hasattr(args, "unknown_key")


class TestMain:
    """Tests for main exit codes"""

    def test_invalid_config_exits_1(self, capsys):
        assert cli.main(["--history_size", "0", "--no_display"]) == 1
        assert "history_size" in capsys.readouterr().err

    @pytest.mark.parametrize("line", [
        "fire_area_threshold: high",
        "fire_kernel_size: 5.5",
        "smoke_hsv_upper: gray",
    ])
    def test_bad_config_value_exits_1(self, tmp_path, capsys, line):
        path = tmp_path / "bad.yaml"
        path.write_text(line + "\n")
        assert cli.main(["--config", str(path), "--no_display"]) == 1
        assert line.split(":")[0] in capsys.readouterr().err

    def test_missing_config_file_exits_1(self, tmp_path):
        assert cli.main(["--config", str(tmp_path / "nope.yaml"), "--no_display"]) == 1

    def test_unopenable_source_exits_1(self, capsys):
        with patch.object(cli.FrameSource, "open", side_effect=ValueError("Cannot open camera (tried indices [0])")):
            assert cli.main(["--no_display"]) == 1
        assert "Cannot open camera" in capsys.readouterr().err

    def test_headless_run(self, scenario_frames, fake_source_factory, capsys):
        source = fake_source_factory(scenario_frames)
        with patch("firewatch.cli.FrameSource", return_value=source) as factory:
            assert cli.main(["--source", "clip.mp4", "--no_display"]) == 0
        assert factory.call_args[0][0] == "clip.mp4"
        assert source.released is True
        out = capsys.readouterr().out
        assert "Alert: Fire and smoke detected!" in out
        assert "Alert frames: 1" in out

    def test_display_run_closes_window(self, scenario_frames, fake_source_factory):
        source = fake_source_factory(scenario_frames)
        with patch("firewatch.cli.FrameSource", return_value=source), \
                patch("firewatch.cli.DisplayWindow") as window_cls:
            window_cls.return_value.poll_quit.return_value = True
            assert cli.main(["--quiet"]) == 0
        window_cls.return_value.close.assert_called_once()
