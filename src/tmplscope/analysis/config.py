"""Configuration for the introspection pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Tunable behavior for alias binding and expansion.

    Attributes:
        call_marker: Suffix appended to the last segment of a loop
            container, so ``item.field`` over ``data.items`` records as
            ``data.items().field``.
        strict_aliases: Raise AliasCycleError when an alias expands into
            itself. When False, a warning is logged and the path is
            returned as expanded so far.
        bind_set_aliases: Treat ``{% set x = path %}`` as an alias for
            ``path``. When False, set targets are recorded literally.
    """

    call_marker: str = "()"
    strict_aliases: bool = True
    bind_set_aliases: bool = True


DEFAULT_CONFIG = AnalysisConfig()
