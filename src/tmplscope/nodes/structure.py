"""Template structure nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tmplscope.nodes.base import Node
from tmplscope.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class Extends(Node):
    """Template inheritance: {% extends "base.html" %}"""

    name: str


@dataclass(frozen=True, slots=True)
class Include(Node):
    """Include another template: {% include "partial.html" %}

    ``templates`` holds the name as the parser split it; the parts are
    joined without a separator when recorded.
    """

    templates: Sequence[str]
    ignore_missing: bool = False


@dataclass(frozen=True, slots=True)
class ImportMacro(Node):
    """Import a macro file: {% import "macros.html" as macros %}"""

    name: str
    namespace: str = ""


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Named block for inheritance: {% block name %}...{% endblock %}"""

    name: str
    body: Sequence[Node]


@dataclass(frozen=True, slots=True)
class MacroDefinition(Node):
    """Macro definition: {% macro name(args) %}...{% endmacro %}"""

    name: str
    args: dict[str, Expr | None]
    body: Sequence[Node]


@dataclass(frozen=True, slots=True)
class Super(Node):
    """Parent block content: {{ super() }}"""
