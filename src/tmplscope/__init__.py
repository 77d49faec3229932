"""tmplscope: static introspection of parsed templates.

Given the AST of a template, tmplscope reports what the template depends
on: the template it extends, the templates it includes, the macro files
it imports, and every data path it reads. Loop variables and ``set``
targets are expanded back to the data they stand for.

Quickstart:
    >>> from tmplscope import introspect
    >>> from tmplscope.nodes import Extends, Forloop, Ident, Include, VariableBlock
    >>> result = introspect([
    ...     Extends("base"),
    ...     Forloop("row", Ident("data.rows"), [VariableBlock(Ident("row.name"))]),
    ...     Include(["partial"]),
    ... ])
    >>> sorted(result.idents)
    ['data.rows', 'data.rows().name']

Architecture:
Template Source → Parser (external) → AST → IntrospectionWalker → TemplateIntrospection

Aliasing:
One alias table is threaded through the whole walk. A loop variable is
bound to its container with a call marker on the last segment
(``data.rows`` iterated becomes ``data.rows()``), and later paths that
start with the variable are expanded through it, recursively.

"""

from tmplscope.analysis import (
    DEFAULT_CONFIG,
    AliasTable,
    AnalysisConfig,
    IntrospectionWalker,
    TemplateIntrospection,
    join_path,
    split_ident,
)
from tmplscope.core import TemplateParser, introspect, introspect_source
from tmplscope.errors import AliasCycleError, ErrorKind, IntrospectionError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "AliasCycleError",
    "AliasTable",
    "AnalysisConfig",
    "ErrorKind",
    "IntrospectionError",
    "IntrospectionWalker",
    "TemplateIntrospection",
    "TemplateParser",
    "__version__",
    "introspect",
    "introspect_source",
    "join_path",
    "split_ident",
]
