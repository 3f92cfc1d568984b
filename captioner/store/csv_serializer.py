# Path: captioner/store/csv_serializer.py
# Purpose: Read and write caption files in CSV format.
# Layer: captioner/store.
# Details: Uses standard CSV quoting so captions may contain commas, quotes, and newlines.

from __future__ import annotations

import csv
from typing import Iterable, Iterator, List, Sequence, TextIO, Tuple

from .base import HEADER, CaptionSerializer


class CsvCaptionSerializer(CaptionSerializer):
    """CaptionSerializer for comma separated files with an ``Image,Caption`` header."""

    name = "csv"
    extension = "csv"

    def read_rows(self, stream: TextIO) -> Iterator[Tuple[int, List[str]]]:
        reader = csv.reader(stream)
        for row in reader:
            if not row:
                continue
            yield reader.line_num, row

    def write_rows(self, stream: TextIO, rows: Iterable[Sequence[str]]) -> None:
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(HEADER)
        for row in rows:
            writer.writerow(row)
