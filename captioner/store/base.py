# Path: captioner/store/base.py
# Purpose: Define the serializer interface used to read and write caption files.
# Layer: captioner/store.
# Details: Serializers only handle raw rows; validation and atomic replacement live in CaptionStore.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Sequence, TextIO, Tuple

HEADER: Tuple[str, str] = ("Image", "Caption")

# First-column names accepted when reading; older caption files used "Image Path".
IMAGE_COLUMN_NAMES = {"image", "image path"}


class CaptionSerializer(ABC):
    """Abstract base class for tabular caption file formats."""

    name: str
    extension: str

    @abstractmethod
    def read_rows(self, stream: TextIO) -> Iterator[Tuple[int, List[str]]]:
        """Yield ``(line_number, fields)`` for every row, header included."""

    @abstractmethod
    def write_rows(self, stream: TextIO, rows: Iterable[Sequence[str]]) -> None:
        """Write the header followed by the given rows."""
