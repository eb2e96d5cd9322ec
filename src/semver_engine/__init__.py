# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and range matching.

This package parses versions following the SemVer 2.0.0 specification,
orders them by SemVer precedence, and evaluates range expressions such as
``^1.2.3``, ``~1.4``, ``1.x || >=2.5.0 <3.0.0`` and ``1.0.0 - 1.9.x``.

Example:
    >>> from semver_engine import parse_version, parse_range, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_str
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
    >>>
    >>> parse_range("^1.2.3").satisfied_by(parse_version("1.9.0"))
    True
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    InvalidRangeError,
    InvalidVersionError,
    ParseError,
    ParseErrorKind,
    SemverError,
    VersionBuildError,
)
from .identifiers import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
)
from .semver import (
    Version,
    parse_version,
    try_parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    Ordering,
    compare_versions,
    compare_identifiers,
    version_key,
    sort_versions,
    is_equal,
    is_newer,
    is_older,
    is_newer_or_equal,
    is_older_or_equal,
)
from .config import (
    Operator,
    RangeSyntax,
    load_syntax,
)
from .ranges import (
    Bound,
    Comparator,
    ConstraintSet,
    Interval,
    PartialVersion,
    parse_range,
    satisfies,
    filter_satisfying,
    max_satisfying,
    min_satisfying,
)

__all__ = [
    # Errors
    "SemverError",
    "ParseError",
    "ParseErrorKind",
    "InvalidVersionError",
    "InvalidRangeError",
    "VersionBuildError",
    "ConfigError",
    # Version parsing
    "Version",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "Identifier",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "Ordering",
    "compare_versions",
    "compare_identifiers",
    "version_key",
    "sort_versions",
    "is_equal",
    "is_newer",
    "is_older",
    "is_newer_or_equal",
    "is_older_or_equal",
    # Ranges
    "Operator",
    "RangeSyntax",
    "load_syntax",
    "Bound",
    "Comparator",
    "ConstraintSet",
    "Interval",
    "PartialVersion",
    "parse_range",
    "satisfies",
    "filter_satisfying",
    "max_satisfying",
    "min_satisfying",
]
