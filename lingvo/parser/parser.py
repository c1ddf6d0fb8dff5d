"""
Lingvo Recursive Descent Parser

Single pass, no backtracking, one token of lookahead. Binary operators are
parsed by precedence climbing over a fixed table: comparison binds loosest,
then additive, then multiplicative; calls and member access bind tightest.
All binary levels are left associative.

The parser stops at the first syntax error.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional

from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    ASTNodeType, Assignment, BinaryOp, BinaryOperator, BoolLiteral, Call,
    ClassDecl, Expression, FunctionDecl, IfStatement, InlineFunction,
    MemberAccess, NumberLiteral, Program, ReturnStatement, StatementNode,
    StringLiteral, Type, TypeKind, VarDecl, VarRef, WhileLoop
)
from .errors import (
    ParseError, create_expected_token_error, create_nesting_error,
    create_unexpected_token_error, create_unknown_type_error
)

logger = logging.getLogger(__name__)

# Digits converted per step; below the smallest int/str conversion limit
INTEGER_CHUNK_DIGITS = 600


def parse_integer(digits: str) -> int:
    """Convert a run of decimal digits to an int of any length."""
    value = 0
    for start in range(0, len(digits), INTEGER_CHUNK_DIGITS):
        chunk = digits[start:start + INTEGER_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


class Precedence(IntEnum):
    """Binding strength of binary operators."""
    NONE = 0
    COMPARISON = 1      # ==, !=, <, >, <=, >=
    TERM = 2            # +, -
    FACTOR = 3          # *, /
    POSTFIX = 4         # calls, member access


TYPE_TOKENS: Dict[TokenType, TypeKind] = {
    TokenType.ENTJERA: TypeKind.ENTJERA,
    TokenType.REALA: TypeKind.REALA,
    TokenType.TEKSTA: TypeKind.TEKSTA,
    TokenType.BULEA: TypeKind.BULEA,
    TokenType.FUNKCIA: TypeKind.FUNKCIA,
}

BINARY_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.EQUAL: BinaryOperator.EQ,
    TokenType.NOT_EQUAL: BinaryOperator.NEQ,
    TokenType.LESS_THAN: BinaryOperator.LT,
    TokenType.GREATER_THAN: BinaryOperator.GT,
    TokenType.LESS_EQUAL: BinaryOperator.LE,
    TokenType.GREATER_EQUAL: BinaryOperator.GE,
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.MULTIPLY: BinaryOperator.MUL,
    TokenType.DIVIDE: BinaryOperator.DIV,
}

PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQUAL: Precedence.COMPARISON,
    TokenType.NOT_EQUAL: Precedence.COMPARISON,
    TokenType.LESS_THAN: Precedence.COMPARISON,
    TokenType.GREATER_THAN: Precedence.COMPARISON,
    TokenType.LESS_EQUAL: Precedence.COMPARISON,
    TokenType.GREATER_EQUAL: Precedence.COMPARISON,
    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,
    TokenType.MULTIPLY: Precedence.FACTOR,
    TokenType.DIVIDE: Precedence.FACTOR,
}


class Parser:
    """
    Lingvo recursive descent parser.

    Consumes a token list ending in EOF and produces a Program. The cursor
    never moves past the EOF token, so looking beyond the end keeps
    returning EOF.
    """

    def __init__(self, tokens: List[Token], filename: str = "<string>"):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, ending in EOF
            filename: Source name used in diagnostics
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.filename = filename
        self.current = 0

    @property
    def position(self) -> int:
        """Index of the token under the cursor."""
        return self.current

    @property
    def current_token(self) -> Token:
        return self._peek()

    def parse(self) -> Program:
        """
        Parse the token stream into an AST.

        Returns:
            Program AST node representing the entire program

        Raises:
            ParseError: On the first syntax error, or when nesting is too
                deep for the interpreter stack
        """
        program = Program()

        try:
            while not self._check(TokenType.EOF):
                program.statements.append(self._parse_statement())
        except RecursionError:
            raise create_nesting_error(self._peek(), self.current, self.filename) from None

        logger.debug("Parsed %s: %d top-level statements",
                     self.filename, len(program.statements))
        return program

    def parse_expression(self) -> Expression:
        """Parse a single expression at the cursor."""
        try:
            return self._parse_expression()
        except RecursionError:
            raise create_nesting_error(self._peek(), self.current, self.filename) from None

    # Statements

    def _parse_statement(self) -> StatementNode:
        """Parse one statement, dispatching on its first token."""
        if self._peek().type in TYPE_TOKENS:
            return self._parse_variable_declaration()
        if self._check(TokenType.FUNKCIO):
            return self._parse_function_declaration()
        if self._check(TokenType.KLASO):
            return self._parse_class_declaration()
        if self._match(TokenType.REVENI):
            return self._parse_return_statement()
        if self._match(TokenType.SE):
            return self._parse_if_statement()
        if self._match(TokenType.DUM):
            return self._parse_while_statement()

        expr = self._parse_expression()

        # Only a bare variable reference can be assigned to
        if expr.node_type is ASTNodeType.VAR_REF and self._match(TokenType.ASSIGN):
            value = self._parse_expression()
            self._consume(TokenType.SEMICOLON, "Expected ';'")
            return Assignment(expr.name, value)

        self._consume(TokenType.SEMICOLON, "Expected ';'")
        return expr

    def _parse_variable_declaration(self) -> VarDecl:
        """Parse `type name (= expression)? ;`."""
        var_type = self._parse_type()
        name = self._consume(TokenType.IDENTIFIER, "Expected variable name").text

        initializer = None
        if self._match(TokenType.ASSIGN):
            initializer = self._parse_expression()

        self._consume(TokenType.SEMICOLON, "Expected ';'")
        return VarDecl(name, var_type, initializer)

    def _parse_function_declaration(self) -> FunctionDecl:
        """Parse `funkcio name(type param) return_type { body }`."""
        self._consume(TokenType.FUNKCIO, "Expected 'funkcio'")
        name = self._consume(TokenType.IDENTIFIER, "Expected function name").text

        self._consume(TokenType.LEFT_PAREN, "Expected '('")
        param_type = self._parse_type()
        param_name = self._consume(TokenType.IDENTIFIER, "Expected parameter name").text
        self._consume(TokenType.RIGHT_PAREN, "Expected ')'")

        return_type = self._parse_type()
        body = self._parse_block()

        return FunctionDecl(name, param_name, param_type, return_type, body)

    def _parse_class_declaration(self) -> ClassDecl:
        """Parse `klaso Name { (field | method)* }`."""
        self._consume(TokenType.KLASO, "Expected 'klaso'")
        name = self._consume(TokenType.IDENTIFIER, "Expected class name").text
        class_decl = ClassDecl(name)

        self._consume(TokenType.LEFT_BRACE, "Expected '{'")
        while not self._match(TokenType.RIGHT_BRACE):
            if self._peek().type in TYPE_TOKENS:
                class_decl.fields.append(self._parse_variable_declaration())
            elif self._check(TokenType.FUNKCIO):
                class_decl.methods.append(self._parse_function_declaration())
            elif self._check(TokenType.EOF):
                raise self._error(TokenType.RIGHT_BRACE, "Expected '}'")
            else:
                raise self._error(TokenType.FUNKCIO, "Expected field or method declaration")

        return class_decl

    def _parse_return_statement(self) -> ReturnStatement:
        value = self._parse_expression()
        self._consume(TokenType.SEMICOLON, "Expected ';'")
        return ReturnStatement(value)

    def _parse_if_statement(self) -> IfStatement:
        """Parse `( condition ) { then } (alie { else })?` after 'se'."""
        condition = self._parse_condition()
        if_statement = IfStatement(condition)
        if_statement.then_body = self._parse_block()

        if self._match(TokenType.ALIE):
            if_statement.else_body = self._parse_block()

        return if_statement

    def _parse_while_statement(self) -> WhileLoop:
        condition = self._parse_condition()
        return WhileLoop(condition, self._parse_block())

    def _parse_condition(self) -> Expression:
        self._consume(TokenType.LEFT_PAREN, "Expected '('")
        condition = self._parse_expression()
        self._consume(TokenType.RIGHT_PAREN, "Expected ')'")
        return condition

    def _parse_block(self) -> List[StatementNode]:
        """Parse `{ statement* }`."""
        self._consume(TokenType.LEFT_BRACE, "Expected '{'")
        statements: List[StatementNode] = []

        while not self._match(TokenType.RIGHT_BRACE):
            if self._check(TokenType.EOF):
                raise self._error(TokenType.RIGHT_BRACE, "Expected '}'")
            statements.append(self._parse_statement())

        return statements

    def _parse_type(self) -> Type:
        """Parse a built-in type keyword."""
        token = self._peek()
        kind = TYPE_TOKENS.get(token.type)
        if kind is None:
            raise create_unknown_type_error(token, self.current, self.filename)

        self._advance()
        return Type(kind)

    # Expressions

    def _parse_expression(self) -> Expression:
        return self._parse_precedence(Precedence.COMPARISON)

    def _parse_precedence(self, precedence: Precedence) -> Expression:
        """Parse operands joined by operators binding at least as tight as `precedence`."""
        left = self._parse_postfix()

        while precedence <= self._get_precedence(self._peek().type):
            operator_token = self._advance()
            operator_precedence = self._get_precedence(operator_token.type)

            # Left associative: the right operand must bind strictly tighter
            right = self._parse_precedence(Precedence(operator_precedence + 1))
            left = BinaryOp(BINARY_OPERATORS[operator_token.type], left, right)

        return left

    def _get_precedence(self, token_type: TokenType) -> Precedence:
        return PRECEDENCES.get(token_type, Precedence.NONE)

    def _parse_postfix(self) -> Expression:
        """Parse a primary followed by any number of calls and member accesses."""
        expr = self._parse_primary()

        while True:
            if self._match(TokenType.LEFT_PAREN):
                argument = self._parse_expression()
                self._consume(TokenType.RIGHT_PAREN, "Expected ')'")
                expr = Call(expr, argument)
            elif self._match(TokenType.DOT):
                member = self._consume(TokenType.IDENTIFIER, "Expected member name").text
                expr = MemberAccess(expr, member)
            else:
                break

        return expr

    def _parse_primary(self) -> Expression:
        token = self._peek()

        if token.type == TokenType.NUMBER:
            self._advance()
            # The flag follows the spelling: "3.0" and "3." are not integers
            if '.' in token.text:
                return NumberLiteral(float(token.text), False)
            return NumberLiteral(parse_integer(token.text), True)

        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(token.text)

        if self._match(TokenType.VERO):
            return BoolLiteral(True)
        if self._match(TokenType.MALVERO):
            return BoolLiteral(False)

        if self._match(TokenType.AT):
            return self._parse_inline_function()

        if self._match(TokenType.LEFT_PAREN):
            expr = self._parse_expression()
            self._consume(TokenType.RIGHT_PAREN, "Expected ')'")
            return expr

        if token.type in (TokenType.IDENTIFIER, TokenType.TIU):
            self._advance()
            return VarRef(token.text)

        raise create_unexpected_token_error(token, self.current, self.filename)

    def _parse_inline_function(self) -> InlineFunction:
        """Parse `( type name ) return_type { body }` after '@'."""
        self._consume(TokenType.LEFT_PAREN, "Expected '(' after '@'")
        param_type = self._parse_type()
        param_name = self._consume(TokenType.IDENTIFIER, "Expected parameter name").text
        self._consume(TokenType.RIGHT_PAREN, "Expected ')'")

        return_type = self._parse_type()
        body = self._parse_block()

        return InlineFunction(param_name, param_type, return_type, body)

    # Utility methods

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token. Stays put on the final EOF."""
        token = self._peek()
        if self.current < len(self.tokens) - 1:
            self.current += 1
        return token

    def _peek(self, offset: int = 0) -> Token:
        """Return a token ahead of the cursor; past the end this is EOF."""
        peek_pos = self.current + offset
        if peek_pos < len(self.tokens):
            return self.tokens[peek_pos]
        return self.tokens[-1]

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()
        raise self._error(token_type, message)

    def _error(self, expected: TokenType, message: str) -> ParseError:
        return create_expected_token_error(
            expected, message, self._peek(), self.current, self.filename
        )


@dataclass
class ParseResult:
    """Outcome of a parse: either a program or the error that stopped it."""
    program: Optional[Program] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Program:
        """Return the program, re-raising the parse error if there is one."""
        if self.error is not None:
            raise self.error
        return self.program


def try_parse(tokens: List[Token], filename: str = "<string>") -> ParseResult:
    """
    Parse a token list without raising on syntax errors.

    Returns:
        ParseResult holding the Program, or the ParseError and no program
    """
    parser = Parser(tokens, filename)
    try:
        return ParseResult(program=parser.parse())
    except ParseError as e:
        logger.debug("Parse of %s failed at token %d: %s",
                     filename, e.position, e.message)
        return ParseResult(error=e)


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Program AST

    Raises:
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    parser = Parser(tokens, filename)
    return parser.parse()


def parse_file(filepath: str) -> Program:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        Program AST

    Raises:
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath)
    parser = Parser(tokens, filepath)
    return parser.parse()
