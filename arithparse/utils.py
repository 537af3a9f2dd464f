import enum


class PrintableEnum(enum.Enum):
    """Enum whose value is its display label: END_OF_INPUT -> "EndOfInput"."""

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list) -> str:
        return "".join(part.capitalize() for part in name.split("_"))

    def __str__(self) -> str:
        return self.value

    __repr__ = __str__
