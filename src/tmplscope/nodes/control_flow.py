"""Control flow nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tmplscope.nodes.base import Node
from tmplscope.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class If(Node):
    """Conditional: {% if cond %}...{% elif cond %}...{% else %}...{% endif %}

    ``conditions`` holds the ``if`` branch followed by each ``elif`` branch.
    """

    conditions: Sequence[tuple[Expr, Sequence[Node]]]
    otherwise: Sequence[Node] | None = None


@dataclass(frozen=True, slots=True)
class Forloop(Node):
    """For loop: {% for value in container %}...{% else %}...{% endfor %}

    ``key`` is set for key/value loops: {% for key, value in mapping %}
    """

    value: str
    container: Expr
    body: Sequence[Node]
    key: str | None = None
    empty_body: Sequence[Node] | None = None


@dataclass(frozen=True, slots=True)
class Break(Node):
    """Break out of loop: {% break %}"""


@dataclass(frozen=True, slots=True)
class Continue(Node):
    """Skip to next iteration: {% continue %}"""
