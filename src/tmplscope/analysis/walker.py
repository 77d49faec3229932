"""Introspection walker.

Walks a parsed template and collects what it depends on: parent and
included templates, imported macro files, and the identifier paths it
reads. Identifiers are recorded after alias expansion, so a loop variable
or ``set`` target is replaced by the data path it stands for.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from tmplscope.analysis.aliases import AliasTable
from tmplscope.analysis.config import DEFAULT_CONFIG, AnalysisConfig
from tmplscope.analysis.introspection import TemplateIntrospection
from tmplscope.analysis.visitor import visit_children
from tmplscope.nodes import Ident

if TYPE_CHECKING:
    from tmplscope.nodes import (
        Block,
        Break,
        Comment,
        Continue,
        Expr,
        Extends,
        FilterSection,
        Forloop,
        If,
        ImportMacro,
        Include,
        MacroDefinition,
        Node,
        Raw,
        Set,
        Super,
        Text,
        VariableBlock,
    )

logger = logging.getLogger(__name__)


class IntrospectionWalker:
    """Collect dependencies and de-aliased identifiers from an AST.

    Each node sequence (the template body, a block body, a loop body, an
    if branch) is walked into its own TemplateIntrospection, which is
    merged into the enclosing one when the sequence is done.

    The alias table is NOT scoped per sequence. One table is threaded
    through the whole walk, so a loop variable bound in an earlier
    sibling is still expanded in later siblings.

    Thread-safe: Holds only configuration; per-walk state lives in the
    alias table and result objects passed through the recursion.

    Example:
        >>> walker = IntrospectionWalker()
        >>> result = walker.introspect(nodes)
        >>> sorted(result.idents)
        ['data.rows', 'data.rows().name']

    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._dispatch: dict[str, Callable[..., None]] = {}
        for name in dir(self):
            if name.startswith("_visit_"):
                method = getattr(self, name)
                if callable(method):
                    self._dispatch[name[7:]] = method

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def introspect(
        self, nodes: Sequence[Node], aliases: AliasTable | None = None
    ) -> TemplateIntrospection:
        """Introspect a top-level node sequence.

        Args:
            nodes: Parsed template body.
            aliases: Alias table to start from. A fresh one is created when
                omitted; pass one in to inspect bindings afterwards.

        Returns:
            The merged TemplateIntrospection for the whole template.
        """
        if aliases is None:
            aliases = AliasTable(config=self._config)
        result = self.walk(nodes, aliases)
        logger.debug(
            "Introspected %d nodes: %d extends, %d includes, %d macros, %d idents",
            len(nodes),
            len(result.extends),
            len(result.includes),
            len(result.macros),
            len(result.idents),
        )
        return result

    def walk(self, nodes: Sequence[Node], aliases: AliasTable) -> TemplateIntrospection:
        """Walk one node sequence into a new TemplateIntrospection."""
        result = TemplateIntrospection(call_marker=self._config.call_marker)
        for node in nodes:
            handler = self._dispatch.get(type(node).__name__.lower())
            if handler:
                handler(node, result, aliases)
            else:
                logger.debug("Skipping node: %s", type(node).__name__)
        return result

    def collect(
        self, expr: Expr | None, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        """Record every identifier read by ``expr`` into ``result.idents``."""
        if expr is None:
            return
        if isinstance(expr, Ident):
            result.idents.add(aliases.resolve(expr.name))
        else:
            visit_children(expr, lambda child: self.collect(child, result, aliases))

    def _walk_into(
        self, body: Sequence[Node] | None, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        if body:
            result.merge(self.walk(body, aliases))

    def _visit_extends(
        self, node: Extends, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        result.extends.add(node.name)

    def _visit_include(
        self, node: Include, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        result.includes.add("".join(node.templates))

    def _visit_importmacro(
        self, node: ImportMacro, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        result.macros.add(node.name)

    def _visit_block(self, node: Block, result: TemplateIntrospection, aliases: AliasTable) -> None:
        self._walk_into(node.body, result, aliases)

    def _visit_forloop(
        self, node: Forloop, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        """Handle for loop: bind the loop variable to its container.

        The container is recorded before the binding so that a loop
        variable shadowing its own container name does not expand the
        container through itself.
        """
        self.collect(node.container, result, aliases)
        aliases.bind(node.value, node.container, loop=True)
        self._walk_into(node.body, result, aliases)
        self._walk_into(node.empty_body, result, aliases)

    def _visit_if(self, node: If, result: TemplateIntrospection, aliases: AliasTable) -> None:
        for test, body in node.conditions:
            self.collect(test, result, aliases)
            self._walk_into(body, result, aliases)
        self._walk_into(node.otherwise, result, aliases)

    def _visit_variableblock(
        self, node: VariableBlock, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        self.collect(node.expr, result, aliases)

    def _visit_set(self, node: Set, result: TemplateIntrospection, aliases: AliasTable) -> None:
        """Handle set: the value is read, then the key aliases it."""
        self.collect(node.value, result, aliases)
        if self._config.bind_set_aliases:
            aliases.bind(node.key, node.value)

    def _visit_filtersection(
        self, node: FilterSection, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        self.collect(node.filter, result, aliases)
        self._walk_into(node.body, result, aliases)

    # Nodes with nothing to introspect
    def _visit_text(self, node: Text, result: TemplateIntrospection, aliases: AliasTable) -> None:
        """Static text has no dependencies."""

    def _visit_raw(self, node: Raw, result: TemplateIntrospection, aliases: AliasTable) -> None:
        """Raw blocks have no dependencies."""

    def _visit_comment(
        self, node: Comment, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        """Comments have no dependencies."""

    def _visit_super(self, node: Super, result: TemplateIntrospection, aliases: AliasTable) -> None:
        """Super has no dependencies."""

    def _visit_break(self, node: Break, result: TemplateIntrospection, aliases: AliasTable) -> None:
        """Break has no dependencies."""

    def _visit_continue(
        self, node: Continue, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        """Continue has no dependencies."""

    def _visit_macrodefinition(
        self, node: MacroDefinition, result: TemplateIntrospection, aliases: AliasTable
    ) -> None:
        """Macro bodies read their parameters, which are not resolved."""
