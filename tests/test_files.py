"""Tests for output path resolution and writes."""

import os
import re
from datetime import datetime, timezone

import pytest

from quickchart_mcp.config import Settings
from quickchart_mcp.files import default_output_dir, generate_filename, resolve_output_path, write_output


@pytest.fixture
def home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


class TestOutputDirectory:
    def test_configured_directory(self, tmp_path):
        assert default_output_dir(Settings(output_dir=str(tmp_path))) == str(tmp_path)

    def test_desktop_when_unconfigured(self, home):
        (home / "Desktop").mkdir()
        assert default_output_dir(Settings()) == str(home / "Desktop")

    def test_home_without_desktop(self, home):
        assert default_output_dir(Settings()) == str(home)

    def test_missing_or_relative_configured_directory_is_ignored(self, home):
        assert default_output_dir(Settings(output_dir=str(home / "nope"))) == str(home)
        assert default_output_dir(Settings(output_dir="charts")) == str(home)


class TestResolve:
    def test_absolute_passes_through(self, tmp_path):
        target = str(tmp_path / "out" / "chart.png")
        assert resolve_output_path(target, "png", Settings()) == target

    def test_relative_joined_under_output_dir(self, tmp_path):
        resolved = resolve_output_path("reports/q1.svg", "svg", Settings(output_dir=str(tmp_path)))
        assert resolved == os.path.join(str(tmp_path), "reports/q1.svg")

    def test_synthesized_name(self, tmp_path):
        resolved = resolve_output_path(None, "webp", Settings(output_dir=str(tmp_path)))
        assert os.path.dirname(resolved) == str(tmp_path)
        assert re.fullmatch(r"chart_\d{14}\.webp", os.path.basename(resolved))

    def test_generate_filename(self):
        now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert generate_filename("png", now) == "chart_20240102030405.png"
        assert generate_filename(".svg", now) == "chart_20240102030405.svg"


class TestWrite:
    def test_creates_directories_for_binary(self, tmp_path):
        target = tmp_path / "a" / "b" / "chart.png"
        write_output(str(target), b"\x00\x01\x02")
        assert target.read_bytes() == b"\x00\x01\x02"

    def test_text_is_utf8(self, tmp_path):
        target = tmp_path / "diagram.svg"
        write_output(str(target), "<svg>größe</svg>")
        assert target.read_bytes().decode("utf-8") == "<svg>größe</svg>"
