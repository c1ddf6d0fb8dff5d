"""
Abstract Syntax Tree node definitions for Lingvo.

The node set is closed: every concrete node class carries a `node_type` tag
from ASTNodeType, and consumers (the printer, later semantic stages) dispatch
on that tag instead of on class checks. Nodes own their children exclusively,
so the tree has no shared nodes and no parent links.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional, Union


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Expressions
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    BOOL_LITERAL = "BoolLiteral"
    VAR_REF = "VarRef"
    BINARY_OP = "BinaryOp"
    CALL = "Call"
    INLINE_FUNCTION = "InlineFunction"
    MEMBER_ACCESS = "MemberAccess"

    # Statements
    VAR_DECL = "VarDecl"
    ASSIGNMENT = "Assign"
    FUNCTION_DECL = "FunctionDecl"
    RETURN_STATEMENT = "Return"
    IF_STATEMENT = "If"
    WHILE_LOOP = "While"
    CLASS_DECL = "ClassDecl"


class BinaryOperator(Enum):
    """Binary operators, valued by their source spelling."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NEQ = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="


# ============================================================================
# Type system
# ============================================================================

class TypeKind(Enum):
    """Kinds of language-level types, valued by their source spelling."""
    ENTJERA = "entjera"
    REALA = "reala"
    TEKSTA = "teksta"
    BULEA = "bulea"
    FUNKCIA = "funkcia"
    KLASO = "klaso"
    VOID = "void"


@dataclass(frozen=True)
class Type:
    """
    Type descriptor.

    Immutable with structural equality: two function types are equal iff
    their parameter and return types are equal.
    """
    kind: TypeKind
    param_type: Optional['Type'] = None
    return_type: Optional['Type'] = None
    class_name: Optional[str] = None

    @staticmethod
    def function(param_type: 'Type', return_type: 'Type') -> 'Type':
        """Build a function type from its parameter and return types."""
        return Type(TypeKind.FUNKCIA, param_type=param_type, return_type=return_type)

    @staticmethod
    def class_type(name: str) -> 'Type':
        """Build a named class type."""
        return Type(TypeKind.KLASO, class_name=name)

    @property
    def is_function(self) -> bool:
        return self.kind == TypeKind.FUNKCIA

    def __str__(self) -> str:
        if self.kind == TypeKind.FUNKCIA and self.param_type and self.return_type:
            return f"({self.param_type} -> {self.return_type})"
        if self.kind == TypeKind.KLASO and self.class_name:
            return self.class_name
        return self.kind.value


# ============================================================================
# Base classes
# ============================================================================

class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes in source order."""
        pass

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass
class Expression(ASTNode):
    """
    Base class for expressions.

    `inferred_type` is filled in by a later semantic stage; the parser
    leaves it empty and it takes no part in equality.
    """
    inferred_type: Optional[Type] = field(default=None, init=False, compare=False, repr=False)


class Statement(ASTNode):
    """Base class for statements."""
    pass


# A statement position holds either a statement or a bare expression
StatementNode = Union[Statement, Expression]


# ============================================================================
# Expressions
# ============================================================================

@dataclass
class NumberLiteral(Expression):
    """Number literal. `value` is an int when `is_integer` is set, else a float."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.NUMBER_LITERAL
    value: Union[int, float]
    is_integer: bool

    def children(self) -> List[ASTNode]:
        return []


@dataclass
class StringLiteral(Expression):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.STRING_LITERAL
    value: str

    def children(self) -> List[ASTNode]:
        return []


@dataclass
class BoolLiteral(Expression):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BOOL_LITERAL
    value: bool

    def children(self) -> List[ASTNode]:
        return []


@dataclass
class VarRef(Expression):
    """Variable reference, including the self reference `tiu`."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.VAR_REF
    name: str

    def children(self) -> List[ASTNode]:
        return []


@dataclass
class BinaryOp(Expression):
    """Binary operation expression."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_OP
    operator: BinaryOperator
    left: Expression
    right: Expression

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


@dataclass
class Call(Expression):
    """Function call. The language passes exactly one argument."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.CALL
    function: Expression
    argument: Expression

    def children(self) -> List[ASTNode]:
        return [self.function, self.argument]


@dataclass
class InlineFunction(Expression):
    """Inline function literal: @(type name) return_type { body }."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.INLINE_FUNCTION
    param_name: str
    param_type: Type
    return_type: Type
    body: List[StatementNode] = field(default_factory=list)

    def children(self) -> List[ASTNode]:
        return list(self.body)


@dataclass
class MemberAccess(Expression):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.MEMBER_ACCESS
    object: Expression
    member: str

    def children(self) -> List[ASTNode]:
        return [self.object]


# ============================================================================
# Statements
# ============================================================================

@dataclass
class VarDecl(Statement):
    """Variable declaration statement."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.VAR_DECL
    name: str
    var_type: Type
    initializer: Optional[Expression] = None

    def children(self) -> List[ASTNode]:
        return [self.initializer] if self.initializer else []


@dataclass
class Assignment(Statement):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGNMENT
    name: str
    value: Expression

    def children(self) -> List[ASTNode]:
        return [self.value]


@dataclass
class FunctionDecl(Statement):
    """Function declaration with a single typed parameter."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_DECL
    name: str
    param_name: str
    param_type: Type
    return_type: Type
    body: List[StatementNode] = field(default_factory=list)

    def children(self) -> List[ASTNode]:
        return list(self.body)


@dataclass
class ReturnStatement(Statement):
    """Return statement. The value is mandatory."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.RETURN_STATEMENT
    value: Expression

    def children(self) -> List[ASTNode]:
        return [self.value]


@dataclass
class IfStatement(Statement):
    """If statement; `else_body` is empty when there is no else branch."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.IF_STATEMENT
    condition: Expression
    then_body: List[StatementNode] = field(default_factory=list)
    else_body: List[StatementNode] = field(default_factory=list)

    def children(self) -> List[ASTNode]:
        return [self.condition] + self.then_body + self.else_body


@dataclass
class WhileLoop(Statement):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.WHILE_LOOP
    condition: Expression
    body: List[StatementNode] = field(default_factory=list)

    def children(self) -> List[ASTNode]:
        return [self.condition] + self.body


@dataclass
class ClassDecl(Statement):
    """Class declaration holding field declarations and method declarations."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.CLASS_DECL
    name: str
    fields: List[VarDecl] = field(default_factory=list)
    methods: List[FunctionDecl] = field(default_factory=list)

    def children(self) -> List[ASTNode]:
        return list(self.fields) + list(self.methods)


# ============================================================================
# Top-level
# ============================================================================

@dataclass
class Program(ASTNode):
    """Root AST node representing a complete program."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM
    statements: List[StatementNode] = field(default_factory=list)

    def children(self) -> List[ASTNode]:
        return list(self.statements)


# Alias for the main AST type
AST = Program
