"""Shared visitor patterns for expression traversal.

Provides visit_children for generic traversal of compound expressions.
Used by the identifier collector to reach identifiers nested inside
filters, calls, operators and literals.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tmplscope.nodes import Expr

# Shared attr lists for generic child traversal
EXPR_ATTRS = ("value", "left", "right", "operand")
SEQUENCE_ATTRS = ("args", "items", "values")


def visit_children(expr: Expr, visit: Callable[[Expr], None]) -> None:
    """Visit all child expressions of an expression node (generic handler).

    Handles single-expression attrs, sequence attrs and kwargs, in that
    order. Leaf expressions (constants, identifiers) have no children.
    """
    # Expression attributes
    for attr in EXPR_ATTRS:
        child = getattr(expr, attr, None)
        if child is not None and hasattr(child, "lineno"):
            visit(child)

    # Sequence attributes
    for attr in SEQUENCE_ATTRS:
        children = getattr(expr, attr, None)
        if children and isinstance(children, (list, tuple)):
            for child in children:
                if hasattr(child, "lineno"):
                    visit(child)

    # Dict attributes (kwargs)
    mapping = getattr(expr, "kwargs", None)
    if mapping:
        for child in mapping.values():
            if hasattr(child, "lineno"):
                visit(child)
