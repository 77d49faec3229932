"""Alias table for template-local names.

Loop variables and ``set`` targets are names that stand for a data path.
The table records those bindings and expands paths that start with a
bound name back to the underlying data path.

One table is threaded through an entire walk. It is not scoped per
block: a binding stays visible to every node visited after it, and a
later binding for the same name replaces the earlier one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence

from tmplscope.analysis.config import DEFAULT_CONFIG, AnalysisConfig
from tmplscope.analysis.paths import join_path, split_ident
from tmplscope.errors import AliasCycleError
from tmplscope.nodes import Expr, Filter, Ident

logger = logging.getLogger(__name__)


def bindable_ident(expr: Expr | None) -> Ident | None:
    """Return the identifier an expression refers to, if any.

    Filters do not change which data a name points at, so a filtered
    identifier (``rows | reverse``) is still bindable.
    """
    while isinstance(expr, Filter):
        expr = expr.value
    if isinstance(expr, Ident):
        return expr
    return None


class AliasTable(Mapping[str, tuple[str, ...]]):
    """Mapping of alias name -> path segments it expands to.

    Example:
        >>> table = AliasTable()
        >>> table.bind("row", Ident("data.rows"), loop=True)
        True
        >>> table.expand(["row", "name"])
        ['data', 'rows()', 'name']

    """

    __slots__ = ("_bindings", "_config")

    def __init__(
        self,
        bindings: Mapping[str, Sequence[str]] | None = None,
        *,
        config: AnalysisConfig | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._bindings: dict[str, tuple[str, ...]] = {}
        if bindings:
            for name, segments in bindings.items():
                self.insert(name, segments)

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"AliasTable({self._bindings!r})"

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def insert(self, name: str, segments: Sequence[str]) -> None:
        """Bind ``name`` to raw path segments, replacing any prior binding."""
        self._bindings[name] = tuple(segments)

    def bind(self, name: str, expr: Expr, *, loop: bool = False) -> bool:
        """Record ``name`` as an alias for the path ``expr`` reads.

        Args:
            name: Local name being introduced (loop variable, set target).
            expr: Expression the name stands for. Only identifier-valued
                expressions bind; literals, ranges and calls are ignored.
            loop: Mark the last segment with the call marker, modelling a
                container being iterated.

        Returns:
            True if a binding was recorded.
        """
        ident = bindable_ident(expr)
        if ident is None:
            return False

        segments = split_ident(ident.name)
        if loop:
            segments[-1] += self._config.call_marker

        self.insert(name, segments)
        logger.debug("Bound alias %r -> %s", name, join_path(segments))
        return True

    def expand(self, path: Sequence[str]) -> list[str]:
        """Expand leading aliases until the path is canonical.

        The first segment is substituted by its binding and the result is
        expanded again, so chained aliases resolve fully. A path whose
        first segment is unbound is returned unchanged.

        Raises:
            AliasCycleError: The expansion substituted the same alias twice
                and ``strict_aliases`` is enabled.
        """
        segments = list(path)
        seen: list[str] = []

        while segments and segments[0] in self._bindings:
            head = segments[0]
            if head in seen:
                chain = [*seen, head]
                if self._config.strict_aliases:
                    raise AliasCycleError(chain)
                logger.warning(
                    "Alias cycle %s; keeping %s unexpanded",
                    " -> ".join(chain),
                    join_path(segments),
                )
                return segments
            seen.append(head)
            segments = [*self._bindings[head], *segments[1:]]

        return segments

    def resolve(self, ident: str) -> str:
        """Parse, expand and join a raw identifier path."""
        return join_path(self.expand(split_ident(ident)))
