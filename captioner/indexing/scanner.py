# Path: captioner/indexing/scanner.py
# Purpose: List the image files of a gallery directory.
# Layer: captioner/indexing.
# Details: Scans a single directory level; image-ness is decided by file extension.

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional, Set

from PIL import Image

from captioner.errors import DirectoryNotFound, PermissionDenied
from config.settings import DEFAULT_IMAGE_EXTENSIONS


class ImageScanner:
    """Scan a gallery directory for supported image files."""

    def __init__(self, root: Path, extensions: Optional[Iterable[str]] = None) -> None:
        self.root = Path(root)
        self.extensions = {ext.lower() for ext in (extensions or DEFAULT_IMAGE_EXTENSIONS)}

    def list_images(self) -> Set[str]:
        """Return the file names of all images directly inside the gallery."""

        return set(self._iter_image_files())

    def is_image(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def describe(self, filename: str) -> Optional[str]:
        """Return the pixel dimensions of an image as ``WxH``, or None if it cannot be decoded."""

        try:
            with Image.open(self.root / filename) as img:
                width, height = img.size
        except OSError:
            return None
        return f"{width}x{height}"

    def _iter_image_files(self) -> Iterator[str]:
        """Yield image file names in the root directory."""

        if not self.root.is_dir():
            raise DirectoryNotFound(self.root)
        try:
            entries = list(self.root.iterdir())
        except PermissionError as exc:
            raise PermissionDenied(self.root) from exc
        except FileNotFoundError as exc:
            raise DirectoryNotFound(self.root) from exc

        for path in entries:
            if path.is_file() and self.is_image(path):
                yield path.name
