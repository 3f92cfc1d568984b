# Path: scripts/caption_gallery.py
# Purpose: CLI tool to synchronize and edit the captions of an image gallery.
# Layer: scripts.
# Details: Thin wrapper around captioner.cli so the tool can run from a source checkout.

from __future__ import annotations

from captioner.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
