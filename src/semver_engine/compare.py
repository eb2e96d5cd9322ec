# SPDX-License-Identifier: MIT
"""Version comparison following Semantic Versioning 2.0.0 precedence.

Precedence is decided by major, minor and patch compared numerically, then by
pre-release identifiers. A release has higher precedence than any of its
pre-releases. Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Iterable, Union

from .identifiers import Identifier, NumericIdentifier
from .semver import Version, parse_version


class Ordering:
    """Comparison results returned by compare_versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(difference: int) -> int:
    if difference == 0:
        return Ordering.EQUAL
    return Ordering.LESS if difference < 0 else Ordering.GREATER


def compare_identifiers(id1: Identifier, id2: Identifier) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare as integers, alphanumeric identifiers compare
    in ASCII order, and a numeric identifier always has lower precedence than
    an alphanumeric one.
    """
    is_num1 = isinstance(id1, NumericIdentifier)
    is_num2 = isinstance(id2, NumericIdentifier)

    if is_num1 and is_num2:
        return _sign(id1.value - id2.value)
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return Ordering.LESS
    if is_num2:
        return Ordering.GREATER
    if id1.value == id2.value:
        return Ordering.EQUAL
    return Ordering.LESS if id1.value < id2.value else Ordering.GREATER


def _compare_prerelease(
    pre1: tuple[Identifier, ...], pre2: tuple[Identifier, ...]
) -> int:
    """Compare two pre-release identifier sequences.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return Ordering.EQUAL
    if not pre1:
        return Ordering.GREATER  # Release > pre-release
    if not pre2:
        return Ordering.LESS  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        result = compare_identifiers(p1, p2)
        if result != Ordering.EQUAL:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(pre1) - len(pre2))


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-alpha.1")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    # Compare major.minor.patch
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return _sign(val1 - val2)

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def is_equal(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    return compare_versions(version1, version2) == Ordering.EQUAL


def is_newer(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 has higher precedence than version2."""
    return compare_versions(version1, version2) == Ordering.GREATER


def is_older(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 has lower precedence than version2."""
    return compare_versions(version1, version2) == Ordering.LESS


def is_newer_or_equal(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    return compare_versions(version1, version2) != Ordering.LESS


def is_older_or_equal(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    return compare_versions(version1, version2) != Ordering.GREATER


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    The key orders exactly like compare_versions.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Releases get (1,) so they sort after every pre-release (0, ...).
    # Numeric identifiers get (0, n) so they sort before alphanumeric (1, s).
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease:
            if isinstance(identifier, NumericIdentifier):
                parts.append((0, identifier.value, ""))
            else:
                parts.append((1, 0, identifier.value))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)
