# SPDX-License-Identifier: MIT
"""Exception classes raised by the version and range parsers."""

from __future__ import annotations

from typing import Optional


class ParseErrorKind:
    """Kinds of parse failure."""

    MALFORMED_CORE = "MALFORMED_CORE"
    MALFORMED_IDENTIFIER = "MALFORMED_IDENTIFIER"
    LEADING_ZERO = "LEADING_ZERO"
    UNKNOWN_OPERATOR = "UNKNOWN_OPERATOR"
    EMPTY_RANGE = "EMPTY_RANGE"
    EMPTY_GROUP = "EMPTY_GROUP"


class SemverError(Exception):
    """Base class for all errors raised by semver_engine."""

    pass


class ParseError(SemverError):
    """Raised when text cannot be parsed.

    Attributes:
        kind: One of the ParseErrorKind constants
        message: Human-readable description of the failure
        text: The complete input that was being parsed
        offset: 0-based position of the offending character in ``text``
        fragment: The offending substring, when one can be isolated
    """

    def __init__(
        self,
        kind: str,
        message: str,
        text: str,
        offset: int = 0,
        fragment: Optional[str] = None,
    ):
        self.kind = kind
        self.message = message
        self.text = text
        self.offset = offset
        self.fragment = fragment
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.offset} in {self.text!r})"


class InvalidVersionError(ParseError):
    """Raised when a version string does not follow semantic versioning."""

    pass


class InvalidRangeError(ParseError):
    """Raised when a range expression cannot be parsed."""

    pass


class VersionBuildError(SemverError, ValueError):
    """Raised when a Version is constructed from invalid components."""

    pass


class ConfigError(SemverError):
    """Raised when configuration loading fails."""

    pass
