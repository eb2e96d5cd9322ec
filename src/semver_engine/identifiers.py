# SPDX-License-Identifier: MIT
"""Pre-release identifier variants.

A pre-release identifier is classified exactly once, when it is parsed or
constructed, as either numeric or alphanumeric. Comparison code dispatches on
the variant and never looks at the raw text again.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union

from .errors import VersionBuildError

DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")


def is_identifier(token: str) -> bool:
    """Return True if ``token`` is a non-empty ``[0-9A-Za-z-]+`` string."""
    return bool(token) and all(c in IDENTIFIER_CHARS for c in token)


def is_numeric(token: str) -> bool:
    """Return True if ``token`` consists only of ASCII digits."""
    return bool(token) and all(c in DIGITS for c in token)


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A pre-release identifier made only of digits, compared as an integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise VersionBuildError(
                f"Numeric identifier must be an int, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise VersionBuildError(f"Numeric identifier {self.value} can't be less than 0")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """A pre-release identifier containing at least one non-digit character."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_identifier(self.value):
            raise VersionBuildError(f"Invalid pre-release identifier: {self.value!r}")
        if is_numeric(self.value):
            raise VersionBuildError(
                f"Identifier {self.value!r} is numeric; use NumericIdentifier instead"
            )

    def __str__(self) -> str:
        return self.value


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


def make_identifier(token: str) -> Identifier:
    """Classify a pre-release token, enforcing the no-leading-zero rule.

    Raises:
        VersionBuildError: If the token is empty, contains an illegal
            character, or is numeric with a leading zero

    Examples:
        >>> make_identifier("11")
        NumericIdentifier(value=11)
        >>> make_identifier("beta")
        AlphanumericIdentifier(value='beta')
    """
    if is_numeric(token):
        if len(token) > 1 and token[0] == "0":
            raise VersionBuildError(
                f"Numeric identifier {token!r} must not have leading zeros"
            )
        return NumericIdentifier(int(token))
    return AlphanumericIdentifier(token)
