import math
import re
from dataclasses import dataclass
from typing import Callable

from arithparse.parser import BinaryOperation, Expression, Identifier, Number, Parenthesized


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


class MalformedNumberError(CalcRuntimeError):
    pass


class DivisionByZeroError(CalcRuntimeError):
    pass


class UnknownOperatorError(CalcRuntimeError):
    pass


class UnsupportedOperationError(CalcRuntimeError):
    pass


# the shape tokenize() produces for INTEGER and FLOAT tokens, "12." included
NUMERAL_RE = re.compile(r"\d+(\.\d*)?")


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError("Division by zero.")
    return a / b


BINARY_OPERATION_IMPLS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def evaluate(expression: Expression) -> float:
    """Post-order walk with an explicit stack, left operand before right.

    Long operator chains build trees as deep as the chain, so this does not recurse.
    """
    results: list[float] = []
    stack: list[tuple[Expression, bool]] = [(expression, False)]
    while stack:
        node, operands_ready = stack.pop()
        if isinstance(node, Number):
            if not NUMERAL_RE.fullmatch(node.text):
                raise MalformedNumberError(f"Malformed number: {node.text!r}")
            results.append(float(node.text))
        elif isinstance(node, Identifier):
            raise UnsupportedOperationError("Identifier evaluation not implemented.")
        elif isinstance(node, BinaryOperation):
            if not operands_ready:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue
            right_res = results.pop()
            left_res = results.pop()
            impl = BINARY_OPERATION_IMPLS.get(node.operator)
            if impl is None:
                raise UnknownOperatorError(f"Unknown operator: {node.operator}")
            results.append(impl(left_res, right_res))
        elif isinstance(node, Parenthesized):
            stack.append((node.expression, False))
        else:
            raise TypeError(f"Unexpected expression type: {node}")
    return results.pop()


def format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
