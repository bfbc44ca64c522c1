"""
Exceptions raised by the verrange package.
"""

from typing import Optional


class VersionError(Exception):
    """Base class for every error raised on purpose by verrange."""

    pass


class _SyntaxError(VersionError, ValueError):
    """Shared shape of the parse errors: a message, the input and a position."""

    def __init__(self, message: str, text: str = "", position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position


class MalformedVersion(_SyntaxError):
    """Raised when a version string does not follow the version grammar."""

    pass


class MalformedRange(_SyntaxError):
    """Raised when a range expression does not follow the range grammar."""

    pass


class MalformedRangeVersion(MalformedRange, MalformedVersion):
    """Raised when a version token inside a range expression is malformed."""

    pass


class InvalidOperation(VersionError):
    """Raised when a version is asked to do something its components forbid."""

    pass
