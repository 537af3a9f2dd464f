from dataclasses import dataclass
from typing import Iterable

from arithparse.symbols import SymbolTable
from arithparse.tokenizer import END_OF_INPUT_TEXT, Token, TokenKind


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        return self.errmsg


class UndeclaredVariableError(ParserError):
    pass


class UnmatchedParenthesisError(ParserError):
    pass


class UnexpectedTokenError(ParserError):
    pass


@dataclass(frozen=True)
class Number:
    text: str


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryOperation:
    # not restricted to the grammar's operators, see runtime.evaluate
    operator: str
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Parenthesized:
    expression: "Expression"


Expression = Number | Identifier | BinaryOperation | Parenthesized

ADDITIVE_OPERATORS = ("+", "-")
MULTIPLICATIVE_OPERATORS = ("*", "/")

_END_OF_INPUT = Token(kind=TokenKind.END_OF_INPUT, text=END_OF_INPUT_TEXT)


class Parser:
    """Recursive descent over a token list, one instance per parse.

    Grammar, lowest precedence first:
        expression := term (("+" | "-") term)*
        term       := factor (("*" | "/") factor)*
        factor     := INTEGER | FLOAT | IDENTIFIER | "(" expression ")"

    Identifiers must be declared with declare_variable() before parsing.
    Tokens left over after parse_expression() are not an error; use at_end()
    to check for them.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._symbols = SymbolTable()

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def current(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return _END_OF_INPUT

    def at_end(self) -> bool:
        return self.current.kind is TokenKind.END_OF_INPUT

    def declare_variable(self, name: str) -> None:
        self._symbols.declare(name)

    def is_declared(self, name: str) -> bool:
        return self._symbols.is_declared(name)

    def parse_expression(self) -> Expression:
        left = self.parse_term()
        while self._current_is_operator(ADDITIVE_OPERATORS):
            operator = self.current.text
            self._pos += 1
            right = self.parse_term()
            left = BinaryOperation(operator=operator, left=left, right=right)
        return left

    def parse_term(self) -> Expression:
        left = self.parse_factor()
        while self._current_is_operator(MULTIPLICATIVE_OPERATORS):
            operator = self.current.text
            self._pos += 1
            right = self.parse_factor()
            left = BinaryOperation(operator=operator, left=left, right=right)
        return left

    def parse_factor(self) -> Expression:
        token = self.current
        if token.kind in (TokenKind.INTEGER, TokenKind.FLOAT):
            self._pos += 1
            return Number(token.text)
        elif token.kind is TokenKind.IDENTIFIER:
            if not self._symbols.is_declared(token.text):
                raise UndeclaredVariableError(
                    f"Variable {token.text!r} is undeclared.", tokens=self._tokens, error_token_idx=self._pos
                )
            self._pos += 1
            return Identifier(token.text)
        elif token.kind is TokenKind.PARENTHESIS and token.text == "(":
            open_idx = self._pos
            self._pos += 1
            expression = self.parse_expression()
            if not (self.current.kind is TokenKind.PARENTHESIS and self.current.text == ")"):
                raise UnmatchedParenthesisError(
                    "Expected closing parenthesis", tokens=self._tokens, error_token_idx=open_idx
                )
            self._pos += 1
            return Parenthesized(expression)
        else:
            raise UnexpectedTokenError(
                f"Unexpected token: {token.text}", tokens=self._tokens, error_token_idx=self._pos
            )

    def _current_is_operator(self, operators: tuple[str, ...]) -> bool:
        return self.current.kind is TokenKind.OPERATOR and self.current.text in operators


def parse(tokens: list[Token], declared: Iterable[str] = ()) -> Expression:
    parser = Parser(tokens)
    for name in declared:
        parser.declare_variable(name)
    return parser.parse_expression()
