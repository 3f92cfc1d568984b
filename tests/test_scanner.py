"""
Unit tests for the gallery image scanner.
"""

import os
import sys

import pytest

from captioner.errors import DirectoryNotFound, PermissionDenied
from captioner.indexing.scanner import ImageScanner
from conftest import write_image


class TestListImages:
    """Tests for ImageScanner.list_images."""

    def test_lists_only_images(self, gallery):
        (gallery / "notes.txt").write_text("not an image")
        (gallery / "captions.csv").write_text("Image,Caption\n")
        write_image(gallery, "UPPER.PNG")

        assert ImageScanner(gallery).list_images() == {"a.jpg", "b.jpg", "UPPER.PNG"}

    def test_is_not_recursive(self, gallery):
        nested = gallery / "nested"
        nested.mkdir()
        write_image(nested, "c.jpg")

        assert ImageScanner(gallery).list_images() == {"a.jpg", "b.jpg"}

    def test_custom_extensions(self, gallery):
        write_image(gallery, "c.png")

        assert ImageScanner(gallery, extensions={".PNG"}).list_images() == {"c.png"}

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryNotFound):
            ImageScanner(tmp_path / "nope").list_images()

    def test_file_instead_of_directory(self, tmp_path):
        path = write_image(tmp_path, "a.jpg")

        with pytest.raises(DirectoryNotFound):
            ImageScanner(path).list_images()

    @pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    def test_unreadable_directory(self, tmp_path):
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            with pytest.raises(PermissionDenied):
                ImageScanner(locked).list_images()
        finally:
            locked.chmod(0o755)


class TestDescribe:
    """Tests for ImageScanner.describe."""

    def test_reports_dimensions(self, tmp_path):
        write_image(tmp_path, "wide.png", size=(40, 10))

        assert ImageScanner(tmp_path).describe("wide.png") == "40x10"

    def test_undecodable_file(self, tmp_path):
        (tmp_path / "broken.jpg").write_bytes(b"not really a jpeg")

        assert ImageScanner(tmp_path).describe("broken.jpg") is None

    def test_missing_file(self, tmp_path):
        assert ImageScanner(tmp_path).describe("gone.jpg") is None
