"""Exceptions raised by the casino math engine."""


class InvalidParameterError(ValueError):
    """A numeric input is outside the range the formulas accept."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")


class UnknownGameError(KeyError):
    """Lookup of a variant, strategy or profile key that is not in a table."""

    def __init__(self, table: str, key: str) -> None:
        self.table = table
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown {self.table}: {self.key!r}"
