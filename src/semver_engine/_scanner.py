# SPDX-License-Identifier: MIT
"""Hand-written scanner shared by the version and range parsers.

The scanner walks a slice of the input text and raises errors whose offsets
point into the full text, so a bad version embedded in a range expression is
reported at its position within the range.
"""

from __future__ import annotations

from typing import NoReturn, Optional, Type

from .errors import InvalidVersionError, ParseError, ParseErrorKind
from .identifiers import (
    DIGITS,
    IDENTIFIER_CHARS,
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    is_numeric,
)

WILDCARDS = frozenset("xX*")
PREFIXES = frozenset("vV")

# (major, minor, patch, prerelease, build); None marks a wildcard component
Components = tuple[
    Optional[int],
    Optional[int],
    Optional[int],
    tuple[Identifier, ...],
    tuple[str, ...],
]


def _describe(char: str) -> str:
    return repr(char) if char else "end of input"


class Scanner:
    """Cursor over ``text[pos:end]``."""

    def __init__(
        self,
        text: str,
        pos: int = 0,
        end: Optional[int] = None,
        error_class: Type[ParseError] = InvalidVersionError,
    ) -> None:
        self.text = text
        self.pos = pos
        self.end = len(text) if end is None else end
        self.error_class = error_class

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < self.end else ""

    def at_end(self) -> bool:
        return self.pos >= self.end

    def fail(
        self,
        kind: str,
        message: str,
        offset: Optional[int] = None,
        fragment: Optional[str] = None,
    ) -> NoReturn:
        raise self.error_class(
            kind,
            message,
            self.text,
            self.pos if offset is None else offset,
            fragment if fragment is not None else self.peek() or None,
        )

    def _run(self, charset: frozenset[str]) -> str:
        start = self.pos
        while self.pos < self.end and self.text[self.pos] in charset:
            self.pos += 1
        return self.text[start : self.pos]

    def skip_prefix(self) -> None:
        if self.peek() in PREFIXES:
            self.pos += 1

    def expect_dot(self, component: str) -> None:
        if self.peek() != ".":
            self.fail(
                ParseErrorKind.MALFORMED_CORE,
                f"Expected '.' before {component} version, found {_describe(self.peek())}",
            )
        self.pos += 1

    def numeric(self, component: str) -> int:
        """Scan a core component: ``0`` or a number without leading zeros."""
        start = self.pos
        digits = self._run(DIGITS)
        if not digits:
            self.fail(
                ParseErrorKind.MALFORMED_CORE,
                f"Invalid {component} version: expected a number, "
                f"found {_describe(self.peek())}",
            )
        if len(digits) > 1 and digits[0] == "0":
            self.fail(
                ParseErrorKind.LEADING_ZERO,
                f"Invalid {component} version {digits!r}: leading zeros are not allowed",
                offset=start,
                fragment=digits,
            )
        try:
            return int(digits)
        except ValueError:
            # int() refuses strings past sys.get_int_max_str_digits()
            self.fail(
                ParseErrorKind.MALFORMED_CORE,
                f"Invalid {component} version: number has too many digits ({len(digits)})",
                offset=start,
                fragment=digits,
            )

    def component(self, component: str) -> Optional[int]:
        """Scan a core component that may also be a wildcard (``x``, ``X``, ``*``)."""
        if self.peek() and self.peek() in WILDCARDS:
            self.pos += 1
            return None
        return self.numeric(component)

    def _identifiers(self, section: str, terminator: str) -> list[tuple[int, str]]:
        tokens: list[tuple[int, str]] = []
        while True:
            start = self.pos
            token = self._run(IDENTIFIER_CHARS)
            if not token:
                char = self.peek()
                if char in ("", ".", terminator):
                    self.fail(
                        ParseErrorKind.MALFORMED_IDENTIFIER,
                        f"Empty identifier in {section}",
                    )
                self.fail(
                    ParseErrorKind.MALFORMED_IDENTIFIER,
                    f"Invalid character {char!r} in {section}",
                )
            tokens.append((start, token))
            char = self.peek()
            if char == ".":
                self.pos += 1
                continue
            if char == "" or char == terminator:
                return tokens
            self.fail(
                ParseErrorKind.MALFORMED_IDENTIFIER,
                f"Invalid character {char!r} in {section}",
            )

    def prerelease(self) -> tuple[Identifier, ...]:
        """Scan dot-separated pre-release identifiers, classifying each one."""
        identifiers: list[Identifier] = []
        for start, token in self._identifiers("pre-release", "+"):
            if is_numeric(token):
                if len(token) > 1 and token[0] == "0":
                    self.fail(
                        ParseErrorKind.LEADING_ZERO,
                        f"Numeric pre-release identifier {token!r} "
                        "must not have leading zeros",
                        offset=start,
                        fragment=token,
                    )
                try:
                    value = int(token)
                except ValueError:
                    self.fail(
                        ParseErrorKind.MALFORMED_IDENTIFIER,
                        f"Numeric pre-release identifier has too many digits ({len(token)})",
                        offset=start,
                        fragment=token,
                    )
                identifiers.append(NumericIdentifier(value))
            else:
                identifiers.append(AlphanumericIdentifier(token))
        return tuple(identifiers)

    def build(self) -> tuple[str, ...]:
        """Scan dot-separated build identifiers; numeric rules do not apply."""
        return tuple(token for _, token in self._identifiers("build metadata", ""))

    def suffixes(self) -> tuple[tuple[Identifier, ...], tuple[str, ...]]:
        prerelease: tuple[Identifier, ...] = ()
        build: tuple[str, ...] = ()
        if self.peek() == "-":
            self.pos += 1
            prerelease = self.prerelease()
        if self.peek() == "+":
            self.pos += 1
            build = self.build()
        return prerelease, build

    def finish(self, what: str) -> None:
        if not self.at_end():
            self.fail(
                ParseErrorKind.MALFORMED_CORE,
                f"Unexpected character {self.peek()!r} after {what}",
            )


def scan_version(scanner: Scanner, allow_prefix: bool = False) -> Components:
    """Scan a complete ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` version."""
    if scanner.at_end():
        scanner.fail(ParseErrorKind.MALFORMED_CORE, "Version string cannot be empty")
    if allow_prefix:
        scanner.skip_prefix()

    major = scanner.numeric("major")
    scanner.expect_dot("minor")
    minor = scanner.numeric("minor")
    scanner.expect_dot("patch")
    patch = scanner.numeric("patch")
    prerelease, build = scanner.suffixes()
    scanner.finish("version")
    return major, minor, patch, prerelease, build


def scan_partial(scanner: Scanner, allow_prefix: bool = False) -> Components:
    """Scan a possibly partial version such as ``1``, ``1.2``, ``1.x`` or ``*``.

    Components after the first wildcard (or omitted component) must also be
    wildcards; pre-release and build suffixes need a full numeric triple.
    """
    if scanner.at_end():
        scanner.fail(ParseErrorKind.MALFORMED_CORE, "Expected a version")
    if allow_prefix:
        scanner.skip_prefix()

    major = scanner.component("major")
    minor: Optional[int] = None
    patch: Optional[int] = None

    if scanner.peek() == ".":
        scanner.pos += 1
        start = scanner.pos
        minor = scanner.component("minor")
        if major is None and minor is not None:
            scanner.fail(
                ParseErrorKind.MALFORMED_CORE,
                "Minor version can't be a number when major version is a wildcard",
                offset=start,
            )
        if scanner.peek() == ".":
            scanner.pos += 1
            start = scanner.pos
            patch = scanner.component("patch")
            if minor is None and patch is not None:
                scanner.fail(
                    ParseErrorKind.MALFORMED_CORE,
                    "Patch version can't be a number when minor version is a wildcard",
                    offset=start,
                )

    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()
    if scanner.peek() in ("-", "+"):
        if patch is None:
            scanner.fail(
                ParseErrorKind.MALFORMED_CORE,
                "Pre-release and build metadata require a full MAJOR.MINOR.PATCH version",
            )
        prerelease, build = scanner.suffixes()
    scanner.finish("version")
    return major, minor, patch, prerelease, build
