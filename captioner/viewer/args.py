# Path: captioner/viewer/args.py
# Purpose: Decode escaped viewer arguments supplied on the command line.
# Layer: captioner/viewer.
# Details: Dash-prefixed viewer options are escaped as '\-' so the CLI parser does not consume them.

from __future__ import annotations

from typing import Iterable, List, Optional

ESCAPED_DASH = "\\-"


def tokenize_args(tokens: Optional[Iterable[str]]) -> List[str]:
    """Replace every escaped dash with a literal dash.

    A backslash that is not followed by a dash is kept as-is, so Windows paths
    such as ``C:\\Images`` reach the viewer unchanged.
    """

    if tokens is None:
        return []
    return [token.replace(ESCAPED_DASH, "-") for token in tokens]
