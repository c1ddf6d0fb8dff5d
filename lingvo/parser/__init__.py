"""
Lingvo Parser Package

Implements a single-pass recursive descent parser for the Lingvo language.
Binary operators are parsed by precedence climbing; the result is an AST
rooted at a Program node.

Key Features:
- One token of lookahead, no backtracking
- Tagged AST node set with structural equality
- Diagnostics with line, token index and suggestions
"""

from .ast_nodes import *
from .parser import Parser, ParseResult, try_parse, parse_string, parse_file, parse_integer
from .errors import ParseError, ParseErrorKind

__all__ = [
    # Core parser
    "Parser", "ParseResult", "try_parse", "parse_string", "parse_file", "parse_integer",

    # AST nodes
    "AST", "ASTNode", "ASTNodeType", "ASTVisitor",
    "Program", "Statement", "Expression", "StatementNode",
    "NumberLiteral", "StringLiteral", "BoolLiteral", "VarRef", "BinaryOp",
    "Call", "InlineFunction", "MemberAccess",
    "VarDecl", "Assignment", "FunctionDecl", "ReturnStatement",
    "IfStatement", "WhileLoop", "ClassDecl",
    "BinaryOperator", "Type", "TypeKind",

    # Error handling
    "ParseError", "ParseErrorKind",
]
