# Path: captioner/viewer/__init__.py
# Purpose: Package initializer for external image viewer support.
# Layer: captioner/viewer.
# Details: Exposes argument unescaping and the subprocess-backed viewer launcher.

from .args import tokenize_args
from .launcher import PopenLauncher, ViewerLauncher

__all__ = ["tokenize_args", "PopenLauncher", "ViewerLauncher"]
