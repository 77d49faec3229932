"""Entry points for introspecting templates."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from tmplscope.analysis import (
    AliasTable,
    AnalysisConfig,
    IntrospectionWalker,
    TemplateIntrospection,
)
from tmplscope.nodes import Node


class TemplateParser(Protocol):
    """Anything that turns template source into a node sequence.

    Parse failures are the parser's to report; they propagate unchanged
    through introspect_source().
    """

    def __call__(self, source: str) -> Sequence[Node]: ...


def introspect(
    nodes: Sequence[Node],
    aliases: AliasTable | None = None,
    *,
    config: AnalysisConfig | None = None,
) -> TemplateIntrospection:
    """Introspect a parsed template.

    Args:
        nodes: Top-level nodes produced by the parser.
        aliases: Alias table to thread through the walk. A fresh one is
            created when omitted.
        config: Analysis configuration. Ignored for alias behavior when
            ``aliases`` is given, since the table carries its own.

    Returns:
        TemplateIntrospection for the whole template.

    Raises:
        AliasCycleError: An alias expands into itself (strict mode only).

    Example:
        >>> result = introspect([Extends("base"), VariableBlock(Ident("user.name"))])
        >>> result.to_dict()
        {'extends': ['base'], 'includes': [], 'macros': [], 'idents': ['user.name']}
    """
    return IntrospectionWalker(config).introspect(nodes, aliases)


def introspect_source(
    source: str,
    parser: TemplateParser,
    *,
    config: AnalysisConfig | None = None,
) -> TemplateIntrospection:
    """Parse ``source`` with ``parser`` and introspect the result."""
    return introspect(parser(source), config=config)
