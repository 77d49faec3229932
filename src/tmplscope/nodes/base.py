"""Base node class for the template AST."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Node:
    """Base class for all AST nodes.

    Nodes track their source location when the parser supplies one.
    Nodes are immutable; the introspection pass only ever reads them.

    """

    lineno: int = 0
    col_offset: int = 0
