# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Two versions are equal when they have the same precedence; build metadata is
kept for round-tripping but ignored by ``==``, ``hash()`` and ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from ._scanner import Scanner, scan_version
from .errors import InvalidVersionError, VersionBuildError
from .identifiers import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    is_identifier,
    make_identifier,
)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z",
    re.ASCII,
)


def _check_core(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionBuildError(
            f"{name.capitalize()} version must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise VersionBuildError(f"{name.capitalize()} version {value} can't be less than 0")


def _split_dotted(value: Union[str, Iterable[str]]) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split(".")) if value else ()
    return tuple(value)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, empty for a release
        build: Build metadata identifiers, empty if absent
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_core("major", self.major)
        _check_core("minor", self.minor)
        _check_core("patch", self.patch)

        # Accept any iterable but always store tuples.
        if not isinstance(self.prerelease, tuple):
            object.__setattr__(self, "prerelease", tuple(self.prerelease))
        if not isinstance(self.build, tuple):
            object.__setattr__(self, "build", tuple(self.build))

        for identifier in self.prerelease:
            if not isinstance(identifier, (NumericIdentifier, AlphanumericIdentifier)):
                raise VersionBuildError(
                    f"Pre-release identifiers must be NumericIdentifier or "
                    f"AlphanumericIdentifier, got {identifier!r}"
                )
        for identifier in self.build:
            if not isinstance(identifier, str) or not is_identifier(identifier):
                raise VersionBuildError(f"Invalid build identifier: {identifier!r}")

    @classmethod
    def of(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: Union[str, Iterable[str]] = "",
        build: Union[str, Iterable[str]] = "",
    ) -> "Version":
        """Create a Version from its components.

        Pre-release and build metadata may be given as dotted strings or as
        sequences of identifier strings.

        Raises:
            VersionBuildError: If any component is invalid

        Examples:
            >>> str(Version.of(1, 2, 3, "rc.1", "build.5"))
            '1.2.3-rc.1+build.5'
        """
        return cls(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=tuple(make_identifier(t) for t in _split_dotted(prerelease)),
            build=_split_dotted(build),
        )

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string; see :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease_str}"
        if self.build:
            version += f"+{self.build_str}"
        return version

    def to_canonical_string(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.prerelease == other.prerelease
        )

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) >= 0

    def identical(self, other: "Version") -> bool:
        """Return True if both versions match including build metadata."""
        return self == other and self.build == other.build

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def has_build(self) -> bool:
        return bool(self.build)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_str(self) -> str:
        return ".".join(str(identifier) for identifier in self.prerelease)

    @property
    def build_str(self) -> str:
        return ".".join(self.build)

    # Loose pre-release channel checks, substring matches on the
    # lowercased pre-release text.

    @property
    def is_alpha(self) -> bool:
        return "alpha" in self.prerelease_str.lower()

    @property
    def is_beta(self) -> bool:
        return "beta" in self.prerelease_str.lower()

    @property
    def is_dev(self) -> bool:
        return "dev" in self.prerelease_str.lower()

    @property
    def is_rc(self) -> bool:
        return "rc" in self.prerelease_str.lower()

    @property
    def is_snapshot(self) -> bool:
        return "snapshot" in self.prerelease_str.lower()

    def next_major(self) -> "Version":
        return Version(self.major + 1, 0, 0)

    def next_minor(self) -> "Version":
        return Version(self.major, self.minor + 1, 0)

    def next_patch(self) -> "Version":
        return Version(self.major, self.minor, self.patch + 1)

    def finalize(self) -> "Version":
        """Return the release version with pre-release and build dropped."""
        return Version(self.major, self.minor, self.patch)

    def with_build(self, build: Union[str, Iterable[str]]) -> "Version":
        return replace(self, build=_split_dotted(build))


def _compare(a: Version, b: Version) -> int:
    from .compare import compare_versions

    return compare_versions(a, b)


def parse_version(version_string: str, *, allow_prefix: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    The input must be exactly ``MAJOR.MINOR.PATCH[-prerelease][+build]``;
    whitespace is never stripped. With ``allow_prefix=True`` a single leading
    ``v`` or ``V`` (as in git tags) is accepted.

    Args:
        version_string: A string following semantic versioning format
        allow_prefix: Accept a leading ``v``/``V``

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic
            versioning. The error carries ``kind`` and ``offset``.

    Examples:
        >>> str(parse_version("1.0.0-alpha.1"))
        '1.0.0-alpha.1'

        >>> parse_version("2.0.0-rc.1+build.456").build
        ('build', '456')
    """
    if not isinstance(version_string, str):
        raise TypeError(
            f"Version must be a string, got {type(version_string).__name__}"
        )

    major, minor, patch, prerelease, build = scan_version(
        Scanner(version_string), allow_prefix=allow_prefix
    )
    return Version(major, minor, patch, prerelease, build)


def try_parse_version(version_string: str, *, allow_prefix: bool = False) -> Optional[Version]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> try_parse_version("1.0") is None
        True
    """
    try:
        return parse_version(version_string, allow_prefix=allow_prefix)
    except (InvalidVersionError, TypeError):
        return None


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    return try_parse_version(version_string) is not None
