# Path: captioner/sync/reconcile.py
# Purpose: Merge the gallery's image set with previously stored captions.
# Layer: captioner/sync.
# Details: The directory decides which images exist; the caption file decides their caption text.

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Tuple

from captioner.models.domain import CaptionRecord, SyncReport, WorkingList


def reconcile(listing: Iterable[str], previous: Mapping[str, str]) -> WorkingList:
    """Build the working list for ``listing`` in lexicographic order.

    Images with a stored caption keep it unchanged, new images start with an
    empty caption, and stored captions of images no longer present are dropped.
    """

    records, _ = reconcile_with_report(listing, previous)
    return records


def reconcile_with_report(listing: Iterable[str], previous: Mapping[str, str]) -> Tuple[WorkingList, SyncReport]:
    """Same as :func:`reconcile`, also reporting added and removed images."""

    present = sorted(set(listing))
    report = SyncReport()
    records: WorkingList = []
    for filename in present:
        if filename in previous:
            records.append(CaptionRecord(filename=filename, caption=previous[filename]))
        else:
            records.append(CaptionRecord(filename=filename))
            report.added.append(filename)

    present_names = set(present)
    for filename in sorted(previous):
        if filename in present_names:
            continue
        report.removed.append(filename)
        if previous[filename]:
            report.orphaned_captions[filename] = previous[filename]
    return records, report


def as_mapping(records: Iterable[CaptionRecord]) -> Dict[str, str]:
    """Return the captions of ``records`` keyed by file name."""

    return {record.filename: record.caption for record in records}
