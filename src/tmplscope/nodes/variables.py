"""Variable assignment nodes for the template AST."""

from __future__ import annotations

from dataclasses import dataclass

from tmplscope.nodes.base import Node
from tmplscope.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class Set(Node):
    """Variable assignment: {% set x = expr %}, {% set_global x = expr %}"""

    key: str
    value: Expr
    global_: bool = False
