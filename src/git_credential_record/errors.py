"""Errors raised while reading or editing credential records.

New error kinds may be added later; catch ``ParseError`` or
``CredentialError`` as a fallback rather than branching on every subclass.
"""


class CredentialError(Exception):
    """Base error for this package."""


class ParseError(CredentialError):
    """Raised when a credential record cannot be read from its line form."""


class ReadError(ParseError):
    """Raised when the next line cannot be fetched from the input stream.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, message: str = "failed to read line from input stream") -> None:
        super().__init__(message)


class LineTooLongError(ParseError):
    """Raised when a line is longer than the protocol allows."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"line exceeds {limit} bytes limit")
        self.limit = limit


class InvalidLineError(ParseError):
    """Raised when a non-empty line has no ``=`` separator."""

    def __init__(self, line: str) -> None:
        super().__init__(f"expected a key=value pair, got: {line!r}")
        self.line = line


class InvalidUrlError(ParseError):
    """Raised when a ``url`` value is not an absolute URL."""

    def __init__(self, input: str, reason: str = "") -> None:
        msg = f"failed to parse URL: {input!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.input = input


class FieldError(CredentialError, KeyError):
    """Raised when a field name is not one of the record's fields."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
