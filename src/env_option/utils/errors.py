"""Error types raised when an environment variable is missing or malformed."""

from __future__ import annotations

from typing import Optional


class EnvOptionError(Exception):
    """Base class for every error raised while reading an environment variable."""

    def __init__(self, name: str, cause: Optional[BaseException] = None):
        self.name = name
        self.cause = cause
        super().__init__(str(self))

    def __reduce__(self):
        return type(self), (self.name, self.cause)

    @property
    def description(self) -> str:
        return "environment error"


class NotPresent(EnvOptionError, LookupError):
    """The variable is not set at all (an empty string counts as set)."""

    def __init__(self, name: str):
        super().__init__(name)

    def __reduce__(self):
        return type(self), (self.name,)

    def __str__(self) -> str:
        return f"{self.name} not found"

    @property
    def description(self) -> str:
        return "variable is required"


class ParseFailed(EnvOptionError, ValueError):
    """The variable is set but the parser rejected its value.

    ``cause`` holds the exception the parser raised; it is also chained as
    ``__cause__`` by the reader.
    """

    def __init__(self, name: str, cause: BaseException):
        super().__init__(name, cause)

    def __str__(self) -> str:
        return f"parsing {self.name}: {self.cause}"

    @property
    def description(self) -> str:
        return "parse error"
