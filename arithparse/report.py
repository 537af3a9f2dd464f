"""Runs the whole pipeline on one line of text and renders the textual report."""
from typing import Iterable

from arithparse.parser import ParserError, parse
from arithparse.printer import format_ast
from arithparse.runtime import CalcRuntimeError, evaluate, format_number
from arithparse.symbols import AlreadyDeclaredError
from arithparse.tokenizer import format_tokens, tokenize

PROMPT = "Enter values:"
RESULT_PREFIX = "Final Output: User, your final output is: "


def run(code: str, declared: Iterable[str] = ()) -> str:
    """Never raises for bad input: the first failure becomes the report's "Error:" line.

    Tokens are always listed, even when parsing fails afterwards. Names in
    ``declared`` are declared on the parser before parsing starts.
    """
    tokens = tokenize(code)
    lines = ["Tokens:", *format_tokens(tokens), ""]

    try:
        ast = parse(tokens, declared=declared)

        lines += ["Abstract Syntax Tree (AST):", *format_ast(ast), ""]

        result = evaluate(ast)
        lines.append(RESULT_PREFIX + format_number(result))
    except (ParserError, CalcRuntimeError, AlreadyDeclaredError) as e:
        lines.append(f"Error: {e}")
    except RecursionError:
        lines.append("Error: Expression is nested too deeply")

    return "\n".join(lines)


def main() -> None:
    print(PROMPT)
    try:
        code = input()
    except EOFError:
        code = ""
    print(run(code))
