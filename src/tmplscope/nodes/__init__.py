"""AST node classes consumed by the introspection pass.

The parser that produces these nodes lives outside this package; any
parser that emits them can feed :func:`tmplscope.introspect`.
"""

from tmplscope.nodes.base import Node
from tmplscope.nodes.control_flow import Break, Continue, Forloop, If
from tmplscope.nodes.expressions import (
    Array,
    BinOp,
    Const,
    Expr,
    Filter,
    FuncCall,
    Ident,
    In,
    MacroCall,
    Not,
    StringConcat,
    Test,
)
from tmplscope.nodes.output import Comment, FilterSection, Raw, Text, VariableBlock
from tmplscope.nodes.structure import Block, Extends, ImportMacro, Include, MacroDefinition, Super
from tmplscope.nodes.variables import Set

__all__ = [
    "Array",
    "BinOp",
    "Block",
    "Break",
    "Comment",
    "Const",
    "Continue",
    "Expr",
    "Extends",
    "Filter",
    "FilterSection",
    "Forloop",
    "FuncCall",
    "Ident",
    "If",
    "ImportMacro",
    "In",
    "Include",
    "MacroCall",
    "MacroDefinition",
    "Node",
    "Not",
    "Raw",
    "Set",
    "StringConcat",
    "Super",
    "Test",
    "Text",
    "VariableBlock",
]
