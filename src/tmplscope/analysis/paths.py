"""Identifier path parsing.

Dotted and bracketed notations are equivalent: ``a.b.c``, ``a[b][c]`` and
``a.b[c]`` all split to ``["a", "b", "c"]``. Parsing is best-effort and
never raises; malformed input yields whatever segments the split produces.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_SEPARATORS = re.compile(r"[.\[]")


def split_ident(ident: str) -> list[str]:
    """Split a raw identifier path into segments.

    Example:
        >>> split_ident("data.rows[0].name")
        ['data', 'rows', '0', 'name']
    """
    return [segment.rstrip("]") for segment in _SEPARATORS.split(ident)]


def join_path(segments: Sequence[str]) -> str:
    """Join path segments into the canonical dotted form."""
    return ".".join(segments)
