# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes settings for the gallery location, caption output, and the external image viewer.

from pathlib import Path
from typing import List, Optional, Set

from pydantic import BaseModel, Field

from captioner.errors import InvalidArgument
from captioner.models.domain import ViewerSpec
from captioner.store.caption_store import CaptionStore
from captioner.viewer.args import tokenize_args

DEFAULT_IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"}


class ViewerSettings(BaseModel):
    """Settings describing the external program used to preview an image while editing."""

    command: Optional[str] = Field(default=None, description="Executable launched to display the image.")
    args: List[str] = Field(
        default_factory=list,
        description="Arguments passed before the image path; dashes may be escaped as '\\-'.",
    )


class AppSettings(BaseModel):
    """Top-level settings for one captioning run."""

    gallery_dir: Path = Field(default_factory=Path.cwd, description="Directory containing the gallery images.")
    output_type: str = Field(default="csv", description="Format of the caption file.")
    output_name: Optional[str] = Field(
        default=None,
        description="File name of the caption file inside the gallery; 'captions.<type>' when unset.",
    )
    edit: bool = Field(default=False, description="Run the interactive caption editor before saving.")
    supported_extensions: Set[str] = Field(
        default_factory=lambda: set(DEFAULT_IMAGE_EXTENSIONS),
        description="Lower-case file suffixes treated as images.",
    )
    viewer: ViewerSettings = Field(default_factory=ViewerSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    def output_path(self, extension: Optional[str] = None) -> Path:
        """Return the caption file location for this gallery.

        Without an explicit name the file is ``captions.<ext>``; ``ext`` defaults
        to the extension of the serializer registered for ``output_type``.
        """

        if self.output_name:
            return self.gallery_dir / self.output_name
        if extension is None:
            extension = CaptionStore.for_output_type(self.output_type).serializer.extension
        return self.gallery_dir / f"captions.{extension}"

    def viewer_spec(self) -> Optional[ViewerSpec]:
        """Build the immutable viewer spec, or None when no viewer is configured."""

        if not self.viewer.command:
            if self.viewer.args:
                raise InvalidArgument("Viewer arguments were given without a viewer command.")
            return None
        return ViewerSpec(command=self.viewer.command, args=tuple(tokenize_args(self.viewer.args)))


__all__ = ["AppSettings", "ViewerSettings", "DEFAULT_IMAGE_EXTENSIONS"]
