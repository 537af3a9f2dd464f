from arithparse.parser import BinaryOperation, Expression, Identifier, Number, Parenthesized

INDENT = "  "


def format_ast(expression: Expression) -> list[str]:
    """One line per node, pre-order, children indented one level deeper than their parent."""
    lines: list[str] = []
    stack: list[tuple[Expression, int]] = [(expression, 0)]
    while stack:
        node, depth = stack.pop()
        prefix = INDENT * depth
        if isinstance(node, Number):
            lines.append(f"{prefix}Number: {node.text}")
        elif isinstance(node, Identifier):
            lines.append(f"{prefix}Identifier: {node.name}")
        elif isinstance(node, BinaryOperation):
            lines.append(f"{prefix}Operator: {node.operator}")
            # right first so the left subtree is emitted first
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
        elif isinstance(node, Parenthesized):
            lines.append(f"{prefix}Parentheses:")
            stack.append((node.expression, depth + 1))
        else:
            raise TypeError(f"Unexpected expression type: {node}")
    return lines
