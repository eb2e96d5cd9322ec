# SPDX-License-Identifier: MIT
"""Version ranges: comparators, constraint sets and the range parser.

A range expression is an OR of AND-groups of comparators::

    >=1.2.7 <1.3.0 || ^2.0.0 || 3.1.x || 4.0.0 - 4.2.0

Supported comparator forms:
- exact versions (``1.2.3``, ``=1.2.3``)
- ``>``, ``>=``, ``<``, ``<=`` against a full or partial version
- caret ranges ``^x.y.z`` (changes that keep the leftmost non-zero component)
- tilde ranges ``~x.y.z`` (patch-level changes, minor-level if minor is omitted)
- wildcards ``1.2.x``, ``1.x``, ``1``, ``*``
- hyphen ranges ``A - B`` meaning ``>=A <=B``

Every comparator lowers to an Interval of versions. A version with a
pre-release tag only satisfies a group when a comparator in that group names
a pre-release of the same major.minor.patch, so ``>=1.2.3`` does not match
``1.3.0-beta`` but ``>=1.3.0-alpha`` does.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from ._scanner import Scanner, scan_partial
from .compare import compare_versions, version_key
from .config import OPERATOR_CHARS, Operator, RangeSyntax
from .errors import InvalidRangeError, ParseErrorKind, VersionBuildError
from .identifiers import AlphanumericIdentifier, Identifier, NumericIdentifier
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\S+")


@dataclass(frozen=True, slots=True)
class PartialVersion:
    """A version in which trailing components may be wildcards.

    ``None`` in ``major``, ``minor`` or ``patch`` stands for a wildcard
    (``x``, ``X``, ``*``) or an omitted component.
    """

    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value < 0
            ):
                raise VersionBuildError(f"Invalid {name} version: {value!r}")
        if self.major is None and self.minor is not None:
            raise VersionBuildError("Minor version requires a major version")
        if self.minor is None and self.patch is not None:
            raise VersionBuildError("Patch version requires a minor version")
        if (self.prerelease or self.build) and self.patch is None:
            raise VersionBuildError(
                "Pre-release and build metadata require a full MAJOR.MINOR.PATCH version"
            )
        for identifier in self.prerelease:
            if not isinstance(identifier, (NumericIdentifier, AlphanumericIdentifier)):
                raise VersionBuildError(f"Invalid pre-release identifier: {identifier!r}")

    @classmethod
    def from_version(cls, version: Version) -> "PartialVersion":
        return cls(
            version.major, version.minor, version.patch, version.prerelease, version.build
        )

    @property
    def is_any(self) -> bool:
        return self.major is None

    @property
    def is_full(self) -> bool:
        return self.patch is not None

    def floor(self) -> Version:
        """Lowest version matched by the wildcards (pre-release kept, build dropped)."""
        return Version(
            self.major or 0,
            self.minor or 0,
            self.patch or 0,
            self.prerelease,
        )

    def ceiling(self) -> Version:
        """First version past the wildcards (exclusive) of a partial version."""
        if self.major is None:
            raise ValueError("A '*' version has no ceiling")
        if self.minor is None:
            return Version(self.major + 1, 0, 0)
        if self.patch is None:
            return Version(self.major, self.minor + 1, 0)
        raise ValueError(f"{self} is not a partial version")

    def __str__(self) -> str:
        if self.major is None:
            return "*"
        if self.minor is None:
            return f"{self.major}.x"
        if self.patch is None:
            return f"{self.major}.{self.minor}.x"
        return str(Version(self.major, self.minor, self.patch, self.prerelease, self.build))


@dataclass(frozen=True, slots=True)
class Bound:
    """One end of an Interval."""

    version: Version
    inclusive: bool


@dataclass(frozen=True, slots=True)
class Interval:
    """A contiguous set of versions; a missing bound is unbounded."""

    lower: Optional[Bound] = None
    upper: Optional[Bound] = None

    def contains(self, version: Version) -> bool:
        if self.lower is not None:
            result = compare_versions(version, self.lower.version)
            if result < 0 or (result == 0 and not self.lower.inclusive):
                return False
        if self.upper is not None:
            result = compare_versions(version, self.upper.version)
            if result > 0 or (result == 0 and not self.upper.inclusive):
                return False
        return True

    def __str__(self) -> str:
        parts = []
        if self.lower is not None:
            parts.append(f"{'>=' if self.lower.inclusive else '>'}{self.lower.version}")
        if self.upper is not None:
            parts.append(f"{'<=' if self.upper.inclusive else '<'}{self.upper.version}")
        return " ".join(parts) or "*"


def _lower(operator: str, partial: PartialVersion) -> Optional[Interval]:
    """Lower a comparator to the interval it matches, or None if it matches nothing."""
    if partial.is_any:
        # >* and <* exclude everything; every other operator on * allows anything
        return None if operator in (Operator.GT, Operator.LT) else Interval()

    floor = partial.floor()
    major, minor, patch = partial.major, partial.minor, partial.patch

    if operator == Operator.EQ:
        if partial.is_full:
            return Interval(Bound(floor, True), Bound(floor, True))
        return Interval(Bound(floor, True), Bound(partial.ceiling(), False))

    if operator == Operator.GT:
        if partial.is_full:
            return Interval(lower=Bound(floor, False))
        return Interval(lower=Bound(partial.ceiling(), True))

    if operator == Operator.GE:
        return Interval(lower=Bound(floor, True))

    if operator == Operator.LT:
        return Interval(upper=Bound(floor, False))

    if operator == Operator.LE:
        if partial.is_full:
            return Interval(upper=Bound(floor, True))
        return Interval(upper=Bound(partial.ceiling(), False))

    if operator == Operator.TILDE:
        if minor is None:
            ceiling = Version(major + 1, 0, 0)
        else:
            ceiling = Version(major, minor + 1, 0)
        return Interval(Bound(floor, True), Bound(ceiling, False))

    if operator == Operator.CARET:
        if major > 0 or minor is None:
            ceiling = Version(major + 1, 0, 0)
        elif minor > 0 or patch is None:
            ceiling = Version(0, minor + 1, 0)
        else:
            ceiling = Version(0, 0, patch + 1)
        return Interval(Bound(floor, True), Bound(ceiling, False))

    raise ValueError(f"Unknown operator: {operator!r}")


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _prerelease_allowed(version: Version, comparators: Iterable["Comparator"]) -> bool:
    """Check the pre-release rule for a version against an AND-group."""
    if not version.prerelease:
        return True
    triple = (version.major, version.minor, version.patch)
    for comparator in comparators:
        partial = comparator.version
        if partial.prerelease and (partial.major, partial.minor, partial.patch) == triple:
            return True
    return False


@dataclass(frozen=True, slots=True)
class Comparator:
    """A single constraint: an operator applied to a (partial) version."""

    operator: str
    version: PartialVersion
    interval: Optional[Interval] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.operator not in Operator.ALL:
            raise InvalidRangeError(
                ParseErrorKind.UNKNOWN_OPERATOR,
                f"Unknown operator {self.operator!r}",
                str(self.operator),
                0,
                str(self.operator),
            )
        interval = _lower(self.operator, self.version)
        object.__setattr__(self, "interval", interval)
        logger.debug("Comparator %s lowers to %s", self, interval or "<nothing>")

    def test(self, version: Version) -> bool:
        """Check the interval only, without the pre-release rule."""
        return self.interval is not None and self.interval.contains(version)

    def satisfied_by(self, version: Union[str, Version]) -> bool:
        """Return True if ``version`` satisfies this comparator on its own."""
        v = _coerce(version)
        return self.test(v) and _prerelease_allowed(v, (self,))

    def __str__(self) -> str:
        if self.operator == Operator.EQ:
            return str(self.version)
        return f"{Operator.SYMBOLS[self.operator]}{self.version}"


@dataclass(frozen=True, slots=True)
class ConstraintSet:
    """A parsed range: OR of AND-groups of comparators.

    Attributes:
        groups: Non-empty tuple of non-empty comparator tuples
    """

    groups: tuple[tuple[Comparator, ...], ...]

    def __post_init__(self) -> None:
        groups = tuple(tuple(group) for group in self.groups)
        if not groups:
            raise InvalidRangeError(
                ParseErrorKind.EMPTY_RANGE, "Range has no comparator groups", "", 0
            )
        for index, group in enumerate(groups):
            if not group:
                raise InvalidRangeError(
                    ParseErrorKind.EMPTY_GROUP, f"Range group {index} is empty", "", 0
                )
        object.__setattr__(self, "groups", groups)

    @classmethod
    def parse(cls, text: str, syntax: Optional[RangeSyntax] = None) -> "ConstraintSet":
        return parse_range(text, syntax)

    def satisfied_by(self, version: Union[str, Version]) -> bool:
        """Return True if at least one group is satisfied by ``version``.

        A group is satisfied when every comparator in it matches and the
        version passes the pre-release rule for that group.

        Raises:
            InvalidVersionError: If ``version`` is a string that can't be parsed
        """
        v = _coerce(version)
        for group in self.groups:
            if all(comparator.test(v) for comparator in group) and _prerelease_allowed(
                v, group
            ):
                return True
        return False

    satisfies = satisfied_by

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.satisfied_by(version)

    def __iter__(self) -> Iterator[tuple[Comparator, ...]]:
        return iter(self.groups)

    def __str__(self) -> str:
        return " || ".join(
            " ".join(str(comparator) for comparator in group) for group in self.groups
        )


def _split_groups(text: str, separator: str) -> Iterator[tuple[int, int]]:
    start = 0
    while True:
        index = text.find(separator, start)
        if index < 0:
            yield start, len(text)
            return
        yield start, index
        start = index + len(separator)


def _parse_partial(
    text: str, start: int, end: int, syntax: RangeSyntax
) -> PartialVersion:
    scanner = Scanner(text, start, end, error_class=InvalidRangeError)
    major, minor, patch, prerelease, build = scan_partial(
        scanner, allow_prefix=syntax.allow_prefix
    )
    return PartialVersion(major, minor, patch, prerelease, build)


def _parse_group(
    text: str, start: int, end: int, syntax: RangeSyntax
) -> tuple[Comparator, ...]:
    tokens = [(m.start(), m.end()) for m in _TOKEN.finditer(text, start, end)]
    if not tokens:
        raise InvalidRangeError(
            ParseErrorKind.EMPTY_GROUP,
            f"Empty group in range (groups are separated by {syntax.or_separator!r})",
            text,
            start,
        )

    comparators: list[Comparator] = []
    i = 0
    while i < len(tokens):
        tok_start, tok_end = tokens[i]

        if (
            syntax.hyphen_ranges
            and i + 1 < len(tokens)
            and text[tokens[i + 1][0] : tokens[i + 1][1]] == "-"
        ):
            if i + 2 >= len(tokens):
                raise InvalidRangeError(
                    ParseErrorKind.MALFORMED_CORE,
                    "Hyphen range is missing its upper bound",
                    text,
                    tokens[i + 1][0],
                    "-",
                )
            lower = _parse_partial(text, tok_start, tok_end, syntax)
            upper = _parse_partial(text, tokens[i + 2][0], tokens[i + 2][1], syntax)
            comparators.append(Comparator(Operator.GE, lower))
            comparators.append(Comparator(Operator.LE, upper))
            i += 3
            continue

        op_end = tok_start
        while op_end < tok_end and text[op_end] in OPERATOR_CHARS:
            op_end += 1
        op_token = text[tok_start:op_end]

        if op_token:
            operator = syntax.lookup(op_token)
            if operator is None:
                raise InvalidRangeError(
                    ParseErrorKind.UNKNOWN_OPERATOR,
                    f"Unknown operator {op_token!r}",
                    text,
                    tok_start,
                    op_token,
                )
        else:
            operator = Operator.EQ

        if op_end == tok_end:
            # Operator separated from its version by whitespace: ">= 1.2.3"
            if i + 1 >= len(tokens):
                raise InvalidRangeError(
                    ParseErrorKind.MALFORMED_CORE,
                    f"Operator {op_token!r} is missing a version",
                    text,
                    tok_end,
                    op_token,
                )
            i += 1
            ver_start, ver_end = tokens[i]
        else:
            ver_start, ver_end = op_end, tok_end

        comparators.append(
            Comparator(operator, _parse_partial(text, ver_start, ver_end, syntax))
        )
        i += 1

    return tuple(comparators)


def parse_range(text: str, syntax: Optional[RangeSyntax] = None) -> ConstraintSet:
    """Parse a range expression into a ConstraintSet.

    Args:
        text: Range expression, e.g. ``">=1.0.0 <2.0.0 || ^3.1"``
        syntax: Token vocabulary to use (defaults to RangeSyntax.default())

    Returns:
        The parsed ConstraintSet

    Raises:
        InvalidRangeError: If the expression is empty, has an empty group,
            uses an unknown operator or embeds an invalid version. The
            error's ``offset`` and ``fragment`` locate the offending text.

    Examples:
        >>> str(parse_range("1.2 - 2"))
        '>=1.2.x <=2.x'
        >>> parse_range("^1.2.3").satisfied_by("1.9.0")
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"Range must be a string, got {type(text).__name__}")
    syntax = syntax or RangeSyntax.default()

    if not text.strip():
        raise InvalidRangeError(
            ParseErrorKind.EMPTY_RANGE, "Range expression cannot be empty", text, 0
        )

    groups = tuple(
        _parse_group(text, start, end, syntax)
        for start, end in _split_groups(text, syntax.or_separator)
    )
    constraint_set = ConstraintSet(groups)
    logger.debug("Parsed range %r as %s", text, constraint_set)
    return constraint_set


def _coerce_range(
    range_: Union[str, ConstraintSet], syntax: Optional[RangeSyntax]
) -> ConstraintSet:
    return parse_range(range_, syntax) if isinstance(range_, str) else range_


def satisfies(
    version: Union[str, Version],
    range_: Union[str, ConstraintSet],
    syntax: Optional[RangeSyntax] = None,
) -> bool:
    """Return True if ``version`` satisfies ``range_``.

    Invalid input raises rather than counting as "no match".

    Examples:
        >>> satisfies("2.5.0", "1.x || 2.x")
        True
        >>> satisfies("1.2.3-beta", ">=1.2.3")
        False
    """
    return _coerce_range(range_, syntax).satisfied_by(version)


def filter_satisfying(
    versions: Iterable[Union[str, Version]],
    range_: Union[str, ConstraintSet],
    syntax: Optional[RangeSyntax] = None,
) -> list[Version]:
    """Return the versions that satisfy ``range_``, in input order."""
    constraint_set = _coerce_range(range_, syntax)
    parsed = (_coerce(v) for v in versions)
    return [v for v in parsed if constraint_set.satisfied_by(v)]


def max_satisfying(
    versions: Iterable[Union[str, Version]],
    range_: Union[str, ConstraintSet],
    syntax: Optional[RangeSyntax] = None,
) -> Optional[Version]:
    """Return the highest version satisfying ``range_``, or None."""
    matches = filter_satisfying(versions, range_, syntax)
    return max(matches, key=version_key) if matches else None


def min_satisfying(
    versions: Iterable[Union[str, Version]],
    range_: Union[str, ConstraintSet],
    syntax: Optional[RangeSyntax] = None,
) -> Optional[Version]:
    """Return the lowest version satisfying ``range_``, or None."""
    matches = filter_satisfying(versions, range_, syntax)
    return min(matches, key=version_key) if matches else None
