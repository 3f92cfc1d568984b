# Path: captioner/store/__init__.py
# Purpose: Package initializer for caption persistence.
# Layer: captioner/store.
# Details: Exposes the caption store and the tabular serializers it writes through.

from .base import CaptionSerializer
from .caption_store import SERIALIZERS, CaptionStore
from .csv_serializer import CsvCaptionSerializer

__all__ = ["CaptionSerializer", "CaptionStore", "CsvCaptionSerializer", "SERIALIZERS"]
