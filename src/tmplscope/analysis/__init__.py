"""Static analysis of template ASTs.

Public API:
    IntrospectionWalker: Walks an AST into a TemplateIntrospection
    TemplateIntrospection: Extends/includes/macros/idents record
    AliasTable: Local name -> data path bindings
    AnalysisConfig: Tunable alias behavior
"""

from tmplscope.analysis.aliases import AliasTable, bindable_ident
from tmplscope.analysis.config import DEFAULT_CONFIG, AnalysisConfig
from tmplscope.analysis.introspection import TemplateIntrospection
from tmplscope.analysis.paths import join_path, split_ident
from tmplscope.analysis.walker import IntrospectionWalker

__all__ = [
    "DEFAULT_CONFIG",
    "AliasTable",
    "AnalysisConfig",
    "IntrospectionWalker",
    "TemplateIntrospection",
    "bindable_ident",
    "join_path",
    "split_ident",
]
