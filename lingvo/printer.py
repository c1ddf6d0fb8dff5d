"""
AST dumper for Lingvo.

Renders a tree as indented nested blocks, two spaces per level. Each node is
one header line (`BinaryOp(+)`, `VarDecl(entjera x)`, ...) followed by its
children one level deeper; compound nodes label their sections (`condition:`,
`then:`, `body:`, ...).
"""

from typing import Callable, Dict, List

from .parser.ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Assignment, BinaryOp, BoolLiteral,
    Call, ClassDecl, FunctionDecl, IfStatement, InlineFunction, MemberAccess,
    NumberLiteral, Program, ReturnStatement, StringLiteral, VarDecl, VarRef,
    WhileLoop
)

INDENT = "  "


class ASTPrinter(ASTVisitor):
    """Collects the dump of a tree line by line."""

    def __init__(self):
        self.lines: List[str] = []
        self.depth = 0
        self._handlers: Dict[ASTNodeType, Callable] = {
            ASTNodeType.PROGRAM: self._print_program,
            ASTNodeType.NUMBER_LITERAL: self._print_number_literal,
            ASTNodeType.STRING_LITERAL: self._print_string_literal,
            ASTNodeType.BOOL_LITERAL: self._print_bool_literal,
            ASTNodeType.VAR_REF: self._print_var_ref,
            ASTNodeType.BINARY_OP: self._print_binary_op,
            ASTNodeType.CALL: self._print_call,
            ASTNodeType.INLINE_FUNCTION: self._print_inline_function,
            ASTNodeType.MEMBER_ACCESS: self._print_member_access,
            ASTNodeType.VAR_DECL: self._print_var_decl,
            ASTNodeType.ASSIGNMENT: self._print_assignment,
            ASTNodeType.FUNCTION_DECL: self._print_function_decl,
            ASTNodeType.RETURN_STATEMENT: self._print_return,
            ASTNodeType.IF_STATEMENT: self._print_if,
            ASTNodeType.WHILE_LOOP: self._print_while,
            ASTNodeType.CLASS_DECL: self._print_class_decl,
        }

    def print(self, node: ASTNode) -> str:
        """Render `node` and everything below it."""
        self.lines = []
        self.depth = 0
        node.accept(self)
        return "\n".join(self.lines)

    def visit(self, node: ASTNode):
        node_type = getattr(node, "node_type", None)
        handler = self._handlers.get(node_type)
        if handler is None:
            raise TypeError(f"Cannot print node of type {type(node).__name__}")
        handler(node)

    def _emit(self, text: str):
        self.lines.append(INDENT * self.depth + text)

    def _nested(self, nodes: List[ASTNode], label: str = None):
        """Emit an optional section label, then `nodes` one level deeper."""
        if label is not None:
            self._emit(label)
        self.depth += 1
        for node in nodes:
            node.accept(self)
        self.depth -= 1

    # Expressions

    def _print_program(self, node: Program):
        self._emit("Program")
        self._nested(node.statements)

    def _print_number_literal(self, node: NumberLiteral):
        self._emit(f"NumberLiteral({node.value})")

    def _print_string_literal(self, node: StringLiteral):
        self._emit(f'StringLiteral("{node.value}")')

    def _print_bool_literal(self, node: BoolLiteral):
        self._emit(f"BoolLiteral({'vero' if node.value else 'malvero'})")

    def _print_var_ref(self, node: VarRef):
        self._emit(f"VarRef({node.name})")

    def _print_binary_op(self, node: BinaryOp):
        self._emit(f"BinaryOp({node.operator.value})")
        self._nested([node.left, node.right])

    def _print_call(self, node: Call):
        self._emit("Call")
        self.depth += 1
        self._nested([node.function], "function:")
        self._nested([node.argument], "argument:")
        self.depth -= 1

    def _print_inline_function(self, node: InlineFunction):
        self._emit(f"InlineFunction(@({node.param_type} {node.param_name}) {node.return_type})")
        self.depth += 1
        self._nested(node.body, "body:")
        self.depth -= 1

    def _print_member_access(self, node: MemberAccess):
        self._emit(f"MemberAccess(.{node.member})")
        self._nested([node.object])

    # Statements

    def _print_var_decl(self, node: VarDecl):
        self._emit(f"VarDecl({node.var_type} {node.name})")
        if node.initializer is not None:
            self.depth += 1
            self._nested([node.initializer], "initializer:")
            self.depth -= 1

    def _print_assignment(self, node: Assignment):
        self._emit(f"Assign({node.name})")
        self._nested([node.value])

    def _print_function_decl(self, node: FunctionDecl):
        self._emit(f"FunctionDecl({node.name}({node.param_type} {node.param_name}) {node.return_type})")
        self.depth += 1
        self._nested(node.body, "body:")
        self.depth -= 1

    def _print_return(self, node: ReturnStatement):
        self._emit("Return")
        self._nested([node.value])

    def _print_if(self, node: IfStatement):
        self._emit("If")
        self.depth += 1
        self._nested([node.condition], "condition:")
        self._nested(node.then_body, "then:")
        if node.else_body:
            self._nested(node.else_body, "else:")
        self.depth -= 1

    def _print_while(self, node: WhileLoop):
        self._emit("While")
        self.depth += 1
        self._nested([node.condition], "condition:")
        self._nested(node.body, "body:")
        self.depth -= 1

    def _print_class_decl(self, node: ClassDecl):
        self._emit(f"ClassDecl({node.name})")
        self.depth += 1
        if node.fields:
            self._nested(node.fields, "fields:")
        if node.methods:
            self._nested(node.methods, "methods:")
        self.depth -= 1


def dump(node: ASTNode) -> str:
    """Render any AST node as an indented multi-line string."""
    return ASTPrinter().print(node)
