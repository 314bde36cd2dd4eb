"""Tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from shotsegments.cli import main
from shotsegments.videoio import VideoOpenError


def _exit_code(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


class TestUsage:
    def test_no_arguments(self, capsys):
        assert _exit_code([]) == 0
        assert "usage: shotsegments --in <video-file>" in capsys.readouterr().out

    def test_help(self, capsys):
        assert _exit_code(["--help"]) == 0
        assert "--min-duration" in capsys.readouterr().out

    def test_missing_input(self, capsys):
        assert _exit_code(["--ffmpeg"]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_in_without_value(self, capsys):
        assert _exit_code(["--in"]) == 0
        captured = capsys.readouterr()
        assert "usage:" in captured.out
        assert "error" not in captured.err


class TestRun:
    @patch("shotsegments.engine.videoio.open_video")
    def test_listing(self, mock_open, fake_source, scenario_frames, capsys):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "movie.mp4", "--min-duration", "60"])

        assert capsys.readouterr().out == "1: 30 - 119\n"
        mock_open.assert_called_once_with("movie.mp4")

    @patch("shotsegments.engine.videoio.open_video")
    def test_ffmpeg_short_options(self, mock_open, fake_source, scenario_frames, capsys):
        mock_open.return_value = fake_source(scenario_frames)

        main(["-i", "movie.mp4", "-m", "60", "-t", "50", "-f"])

        assert capsys.readouterr().out == (
            'ffmpeg -ss 00:00:00 -i "movie.mp4" -ss 00:00:01 -t 00:00:03 -c copy -y movie-1.mp4\n'
        )

    @patch("shotsegments.engine.videoio.open_video")
    def test_bad_numbers_fall_back_to_defaults(
        self, mock_open, fake_source, scenario_frames, capsys
    ):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "movie.mp4", "--threshold", "abc", "--min-duration", "0"])

        # min-duration 1000 drops every segment of a 120-frame stream
        assert capsys.readouterr().out == ""

    @patch("shotsegments.engine.videoio.open_video")
    def test_threshold_applies(self, mock_open, fake_source, scenario_frames, capsys):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "movie.mp4", "--threshold", "100", "--min-duration", "60"])

        assert capsys.readouterr().out == "1: 0 - 119\n"

    @patch("shotsegments.engine.videoio.open_video")
    def test_unknown_option_ignored(self, mock_open, fake_source, scenario_frames, capsys):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "movie.mp4", "--bogus", "-m", "60"])

        captured = capsys.readouterr()
        assert captured.out == "1: 30 - 119\n"
        assert "--bogus" in captured.err

    @patch("shotsegments.engine.videoio.open_video")
    def test_numeric_flag_without_value_keeps_default(
        self, mock_open, fake_source, scenario_frames, capsys
    ):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "movie.mp4", "-m", "60", "--threshold"])

        assert capsys.readouterr().out == "1: 30 - 119\n"

    @patch("shotsegments.engine.videoio.open_video")
    def test_min_duration_without_value_keeps_default(
        self, mock_open, fake_source, scenario_frames, capsys
    ):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "movie.mp4", "--min-duration", "--ffmpeg"])

        # default 1000 frames drops every segment of a 120-frame stream
        assert capsys.readouterr().out == ""

    @patch("shotsegments.engine.videoio.open_video")
    def test_url_input_passed_through(self, mock_open, fake_source, scenario_frames, capsys):
        mock_open.return_value = fake_source(scenario_frames)

        main(["--in", "http://example.com/movie.mp4", "-m", "60", "-f"])

        mock_open.assert_called_once_with("http://example.com/movie.mp4")
        assert capsys.readouterr().out == (
            'ffmpeg -ss 00:00:00 -i "http://example.com/movie.mp4" -ss 00:00:01'
            " -t 00:00:03 -c copy -y http://example.com/movie-1.mp4\n"
        )


class TestVerbose:
    @patch("shotsegments.engine.videoio.open_video")
    def test_level_one_reports_every_thousandth(
        self, mock_open, fake_source, frames_from_scores, capsys
    ):
        mock_open.return_value = fake_source(frames_from_scores([0] * 2100))

        main(["--in", "v.mp4", "--verbose", "-m", "5000"])

        assert capsys.readouterr().out.splitlines() == [
            "FPS=30",
            "Frame=1000 Score=0 Diff=0",
            "Frame=2000 Score=0 Diff=0",
        ]

    @patch("shotsegments.engine.videoio.open_video")
    def test_level_two_reports_every_frame(
        self, mock_open, fake_source, frames_from_scores, capsys
    ):
        mock_open.return_value = fake_source(frames_from_scores([0, 90]), fps=29.97)

        main(["--in", "v.mp4", "--verbose=2", "-m", "1"])

        assert capsys.readouterr().out.splitlines() == [
            "FPS=29.97",
            "Frame=1 Score=0 Diff=0",
            "Frame=2 Score=90 Diff=90",
            "1: 0 - 2",
        ]


class TestStreamErrors:
    @patch("shotsegments.engine.videoio.open_video")
    def test_cannot_open(self, mock_open, capsys):
        mock_open.side_effect = VideoOpenError("can't open video")

        assert _exit_code(["--in", "missing.mp4"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "missing.mp4: can't open video" in captured.err

    @patch("shotsegments.engine.videoio.open_video")
    def test_no_frames(self, mock_open, fake_source, capsys):
        mock_open.return_value = fake_source([])

        assert _exit_code(["--in", "empty.mp4", "--verbose"]) == 1

        captured = capsys.readouterr()
        assert "empty.mp4: need some frames" in captured.err
        assert "1:" not in captured.out
