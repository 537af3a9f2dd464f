import enum
from dataclasses import dataclass
from typing import Callable

from arithparse.utils import PrintableEnum


class TokenKind(PrintableEnum):
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    IDENTIFIER = enum.auto()
    OPERATOR = enum.auto()
    PARENTHESIS = enum.auto()
    END_OF_INPUT = enum.auto()
    INVALID = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.text}"


END_OF_INPUT_TEXT = "EOF"

# recognized regardless of what the grammar accepts
OPERATOR_CHARS = frozenset("+-*/=<>!")
PARENTHESIS_CHARS = frozenset("()")


def _is_digit(s: str) -> bool:
    return s.isdecimal()


def _is_identifier_start(s: str) -> bool:
    return s.isalpha() or s == "_"


def _is_valid_in_identifier(s: str) -> bool:
    return s.isalpha() or s.isdecimal() or s == "_"


def _consume_while(code: str, i: int, predicate: Callable[[str], bool]) -> int:
    while i < len(code) and predicate(code[i]):
        i += 1
    return i


def tokenize(code: str) -> list[Token]:
    """Never fails: unknown characters become INVALID tokens. Always ends with END_OF_INPUT."""
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if char.isspace():
            i += 1
        elif _is_digit(char):
            number_end_idx = _consume_while(code, i, _is_digit)
            kind = TokenKind.INTEGER
            if number_end_idx < len(code) and code[number_end_idx] == ".":
                # "12." is still a float
                number_end_idx = _consume_while(code, number_end_idx + 1, _is_digit)
                kind = TokenKind.FLOAT
            tokens.append(Token(kind=kind, text=code[i:number_end_idx]))
            i = number_end_idx
        elif _is_identifier_start(char):
            ident_end_idx = _consume_while(code, i, _is_valid_in_identifier)
            tokens.append(Token(kind=TokenKind.IDENTIFIER, text=code[i:ident_end_idx]))
            i = ident_end_idx
        else:
            if char in OPERATOR_CHARS:
                kind = TokenKind.OPERATOR
            elif char in PARENTHESIS_CHARS:
                kind = TokenKind.PARENTHESIS
            else:
                kind = TokenKind.INVALID
            tokens.append(Token(kind=kind, text=char))
            i += 1

    tokens.append(Token(kind=TokenKind.END_OF_INPUT, text=END_OF_INPUT_TEXT))
    return tokens


def format_tokens(tokens: list[Token]) -> list[str]:
    return [str(t) for t in tokens]
