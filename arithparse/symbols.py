from dataclasses import dataclass


@dataclass
class AlreadyDeclaredError(Exception):
    name: str

    def __str__(self) -> str:
        return f"Variable {self.name!r} already declared."


class SymbolTable:
    """Names declared for a single parse. Declarations are permanent, there is no removal."""

    def __init__(self) -> None:
        self._declared: set[str] = set()

    def declare(self, name: str) -> None:
        if name in self._declared:
            raise AlreadyDeclaredError(name)
        self._declared.add(name)

    def is_declared(self, name: str) -> bool:
        return name in self._declared
