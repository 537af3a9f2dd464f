import pytest

from arithparse import report
from arithparse.report import run


def test_successful_report() -> None:
    assert run("2+3*4") == "\n".join(
        [
            "Tokens:",
            "Integer: 2",
            "Operator: +",
            "Integer: 3",
            "Operator: *",
            "Integer: 4",
            "EndOfInput: EOF",
            "",
            "Abstract Syntax Tree (AST):",
            "Operator: +",
            "  Number: 2",
            "  Operator: *",
            "    Number: 3",
            "    Number: 4",
            "",
            "Final Output: User, your final output is: 14",
        ]
    )


def test_parse_error_still_lists_tokens() -> None:
    assert run("x+1") == "\n".join(
        [
            "Tokens:",
            "Identifier: x",
            "Operator: +",
            "Integer: 1",
            "EndOfInput: EOF",
            "",
            "Error: Variable 'x' is undeclared.",
        ]
    )


def test_evaluation_error_keeps_tree() -> None:
    assert run("5/0") == "\n".join(
        [
            "Tokens:",
            "Integer: 5",
            "Operator: /",
            "Integer: 0",
            "EndOfInput: EOF",
            "",
            "Abstract Syntax Tree (AST):",
            "Operator: /",
            "  Number: 5",
            "  Number: 0",
            "",
            "Error: Division by zero.",
        ]
    )


@pytest.mark.parametrize(
    "code, declared, last_line",
    [
        pytest.param("(2+3)*4", (), "Final Output: User, your final output is: 20"),
        pytest.param("1/4", (), "Final Output: User, your final output is: 0.25"),
        pytest.param("(1+2", (), "Error: Expected closing parenthesis"),
        pytest.param(")", (), "Error: Unexpected token: )"),
        pytest.param("", (), "Error: Unexpected token: EOF"),
        pytest.param("x+1", ("x",), "Error: Identifier evaluation not implemented."),
        pytest.param("1", ("x", "x"), "Error: Variable 'x' already declared."),
        pytest.param("1 2", (), "Final Output: User, your final output is: 1"),
        pytest.param("(" * 5000 + "1" + ")" * 5000, (), "Error: Expression is nested too deeply"),
    ],
)
def test_report_last_line(code: str, declared: tuple[str, ...], last_line: str) -> None:
    assert run(code, declared=declared).splitlines()[-1] == last_line


def test_main_reads_one_line(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("builtins.input", lambda: "(1 + 1) * 2.5")
    report.main()
    out = capsys.readouterr().out
    assert out.startswith("Enter values:\n")
    assert out.rstrip().endswith("Final Output: User, your final output is: 5")


def test_main_without_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def no_input() -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    report.main()
    assert capsys.readouterr().out.rstrip().endswith("Error: Unexpected token: EOF")


def test_long_operator_chain() -> None:
    code = "+".join(["1"] * 5000)
    report_lines = run(code).splitlines()
    assert report_lines[-1] == "Final Output: User, your final output is: 5000"
    assert "  " * 4999 + "Number: 1" in report_lines
    assert report_lines[-3] == "  Number: 1"
