"""Error codes and exceptions for XDG base directory resolution.

Resolution has exactly two failure kinds, both terminal for the call that
raised them:

- ``HomeNotSet``: ``$HOME`` is missing or the empty string.
- ``NotAbsolutePath``: ``$HOME`` or an ``XDG_*`` variable holds a relative path.

``UNKNOWN_ERROR`` is reserved for the CLI, which uses it to report unexpected
internal failures.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class ErrorCode(str, Enum):
    """Error code enumeration shared by the library and the CLI."""

    HOME_NOT_SET = "HOME_NOT_SET"
    NOT_ABSOLUTE_PATH = "NOT_ABSOLUTE_PATH"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class XdgdirError(Exception):
    """Base exception for xdgdir errors.

    Wraps an ErrorCode with a human-readable message and optional structured
    details for machine-parseable error responses.

    Attributes:
        code: The ErrorCode enum value for this error.
        message: Human-readable error description.
        details: Optional dictionary of additional structured context.

    Errors compare by value, so a caught error can be checked against an
    expected one:

        >>> NotAbsolutePath("HOME", "some/dir") == NotAbsolutePath("HOME", "some/dir")
        True
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XdgdirError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.message == other.message
            and self.details == other.details
        )

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def __repr__(self) -> str:
        """Return a developer-friendly representation of the error."""
        return f"XdgdirError(code={self.code.value!r}, message={self.message!r}, details={self.details!r})"


class HomeNotSet(XdgdirError):
    """Raised if ``$HOME`` is not set or is the empty string."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.HOME_NOT_SET, "$HOME is not set or empty")

    def __repr__(self) -> str:
        return "HomeNotSet()"


class NotAbsolutePath(XdgdirError):
    """Raised if ``$HOME`` or an ``XDG_*`` variable contains a relative path.

    Attributes:
        variable: Name of the offending environment variable.
        path: The relative path, as a Path.
        raw: The value exactly as it was set; used in the message.
    """

    def __init__(self, variable: str, path: Union[str, Path]) -> None:
        self.variable = variable
        self.raw = str(path)
        self.path = Path(path)
        super().__init__(
            ErrorCode.NOT_ABSOLUTE_PATH,
            f'{variable}="{self.raw}" is not absolute path',
            details={"variable": variable, "path": self.raw},
        )

    def __repr__(self) -> str:
        return f"NotAbsolutePath({self.variable!r}, {self.raw!r})"
