"""
Unit tests for application settings.
"""

from pathlib import Path

import pytest

from captioner.errors import InvalidArgument
from captioner.models.domain import ViewerSpec
from config.settings import DEFAULT_IMAGE_EXTENSIONS, AppSettings, ViewerSettings


class TestAppSettings:
    """Tests for AppSettings helpers."""

    def test_defaults(self):
        settings = AppSettings()

        assert settings.gallery_dir == Path.cwd()
        assert settings.output_type == "csv"
        assert settings.edit is False
        assert settings.supported_extensions == DEFAULT_IMAGE_EXTENSIONS

    def test_default_output_path(self, tmp_path):
        assert AppSettings(gallery_dir=tmp_path).output_path() == tmp_path / "captions.csv"

    def test_default_output_path_follows_serializer_extension(self, tmp_path):
        settings = AppSettings(gallery_dir=tmp_path)

        assert settings.output_path("tsv") == tmp_path / "captions.tsv"

    def test_default_output_path_unknown_type(self, tmp_path):
        with pytest.raises(InvalidArgument):
            AppSettings(gallery_dir=tmp_path, output_type="xml").output_path()

    def test_output_name_override(self, tmp_path):
        settings = AppSettings(gallery_dir=tmp_path, output_name="mine.csv")

        assert settings.output_path() == tmp_path / "mine.csv"

    def test_no_viewer(self):
        assert AppSettings().viewer_spec() is None

    def test_viewer_args_are_unescaped(self):
        settings = AppSettings(viewer=ViewerSettings(command="feh", args=["\\-\\-scale-down", "\\-B", "black"]))

        assert settings.viewer_spec() == ViewerSpec("feh", ("--scale-down", "-B", "black"))

    def test_viewer_args_without_command(self):
        settings = AppSettings(viewer=ViewerSettings(args=["\\-f"]))

        with pytest.raises(InvalidArgument):
            settings.viewer_spec()
