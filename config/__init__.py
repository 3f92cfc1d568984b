# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models for application-wide configuration.

from .settings import DEFAULT_IMAGE_EXTENSIONS, AppSettings, ViewerSettings

__all__ = ["AppSettings", "ViewerSettings", "DEFAULT_IMAGE_EXTENSIONS"]
