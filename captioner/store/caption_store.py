# Path: captioner/store/caption_store.py
# Purpose: Load and persist the filename -> caption mapping of a gallery.
# Layer: captioner/store.
# Details: Validates the record shape on load and replaces the caption file atomically on save.

from __future__ import annotations

import csv
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Type

from captioner.errors import InvalidArgument, IOFailure, MalformedInput, NotFound
from captioner.models.domain import CaptionRecord, WorkingList

from .base import HEADER, IMAGE_COLUMN_NAMES, CaptionSerializer
from .csv_serializer import CsvCaptionSerializer

logger = logging.getLogger(__name__)

SERIALIZERS: Dict[str, Type[CaptionSerializer]] = {
    CsvCaptionSerializer.name: CsvCaptionSerializer,
}


class CaptionStore:
    """Caption file access for a single output format."""

    def __init__(self, serializer: Optional[CaptionSerializer] = None) -> None:
        self.serializer = serializer or CsvCaptionSerializer()

    @classmethod
    def for_output_type(cls, output_type: str) -> "CaptionStore":
        """Create a store for the named output type, e.g. ``csv``."""

        serializer_cls = SERIALIZERS.get(output_type.lower())
        if serializer_cls is None:
            supported = ", ".join(sorted(SERIALIZERS))
            raise InvalidArgument(f"Unsupported output type '{output_type}' (supported: {supported})")
        return cls(serializer_cls())

    def load(self, path: Path, required: bool = False) -> Dict[str, str]:
        """Return the stored captions keyed by image file name.

        A missing file is an empty mapping unless ``required`` is set. When a
        file name appears more than once the last row wins.
        """

        mapping: Dict[str, str] = {}
        for record in self.load_records(path, required=required):
            if record.filename in mapping:
                logger.warning("Duplicate caption entry for %s in %s; keeping the last one.", record.filename, path)
            mapping[record.filename] = record.caption
        return mapping

    def load_records(self, path: Path, required: bool = False) -> WorkingList:
        """Return the stored captions as records in file order."""

        path = Path(path)
        if not path.exists():
            if required:
                raise NotFound(path)
            return []

        records: WorkingList = []
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as stream:
                rows = self.serializer.read_rows(stream)
                header = next(rows, None)
                if header is None:
                    return []
                line, fields = header
                if not self._is_header(fields):
                    raise MalformedInput(path, "missing Image,Caption header", line)
                for line, fields in rows:
                    if len(fields) != len(HEADER):
                        raise MalformedInput(path, f"expected 2 fields, found {len(fields)}", line)
                    filename, caption = fields
                    if not filename:
                        raise MalformedInput(path, "missing image file name", line)
                    records.append(CaptionRecord(filename=filename, caption=caption))
        except csv.Error as exc:
            raise MalformedInput(path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise MalformedInput(path, "file is not valid UTF-8") from exc
        return records

    def save(self, path: Path, records: Iterable[CaptionRecord]) -> None:
        """Write ``records`` to ``path`` without ever leaving a truncated file behind."""

        path = Path(path)
        logger.info('Writing captions to "%s".', path)
        tmp_name: Optional[str] = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as stream:
                self.serializer.write_rows(stream, ((r.filename, r.caption) for r in records))
                stream.flush()
                os.fsync(stream.fileno())
            if path.exists():
                shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise IOFailure(path, exc.strerror or str(exc)) from exc
        except csv.Error as exc:
            raise IOFailure(path, str(exc)) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    @staticmethod
    def _is_header(fields: Sequence[str]) -> bool:
        if len(fields) != len(HEADER):
            return False
        image_column, caption_column = (field.strip().lower() for field in fields)
        return image_column in IMAGE_COLUMN_NAMES and caption_column == HEADER[1].lower()
