"""Output and formatting nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tmplscope.nodes.base import Node
from tmplscope.nodes.expressions import Expr, FuncCall


@dataclass(frozen=True, slots=True)
class VariableBlock(Node):
    """Output expression: {{ expr }}"""

    expr: Expr


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Raw text data between template constructs."""

    value: str


@dataclass(frozen=True, slots=True)
class Raw(Node):
    """Raw block (no template processing): {% raw %}...{% endraw %}"""

    value: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Template comment: {# text #}"""

    value: str


@dataclass(frozen=True, slots=True)
class FilterSection(Node):
    """Apply filter to block: {% filter upper %}...{% endfilter %}"""

    filter: FuncCall
    body: Sequence[Node]
