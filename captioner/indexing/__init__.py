# Path: captioner/indexing/__init__.py
# Purpose: Package initializer for gallery scanning utilities.
# Layer: captioner/indexing.
# Details: Exposes the image scanner used to list gallery members.

from .scanner import ImageScanner

__all__ = ["ImageScanner"]
