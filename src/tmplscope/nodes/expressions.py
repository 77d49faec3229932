"""Expression nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tmplscope.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Expr(Node):
    """Base class for expressions."""


@dataclass(frozen=True, slots=True)
class Const(Expr):
    """Literal value: string, number, boolean, None."""

    value: str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class Ident(Expr):
    """Identifier path as written in source: {{ user.name }}, {{ rows[0] }}"""

    name: str


@dataclass(frozen=True, slots=True)
class Filter(Expr):
    """Filter application: expr | filter(args)"""

    value: Expr
    name: str
    kwargs: dict[str, Expr] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FuncCall(Expr):
    """Global function call: range(end=5)"""

    name: str
    kwargs: dict[str, Expr] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class MacroCall(Expr):
    """Macro invocation: macros::button(label=page.title)"""

    namespace: str
    name: str
    kwargs: dict[str, Expr] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class BinOp(Expr):
    """Math or logic operation: a + b, a and b, a == b"""

    left: Expr
    op: str
    right: Expr


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Negation: not expr"""

    operand: Expr


@dataclass(frozen=True, slots=True)
class In(Expr):
    """Containment check: a in b, a not in b"""

    left: Expr
    right: Expr
    negated: bool = False


@dataclass(frozen=True, slots=True)
class Test(Expr):
    """Test expression: x is defined, x is divisibleby(3)"""

    value: Expr
    name: str
    args: Sequence[Expr] = ()
    negated: bool = False


@dataclass(frozen=True, slots=True)
class Array(Expr):
    """Array literal: [a, b, c]"""

    items: Sequence[Expr]


@dataclass(frozen=True, slots=True)
class StringConcat(Expr):
    """String concatenation: a ~ b ~ c"""

    values: Sequence[Expr]
