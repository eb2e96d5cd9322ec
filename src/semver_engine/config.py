# SPDX-License-Identifier: MIT
"""Range syntax configuration, loadable from pyproject.toml.

The range grammar's token vocabulary is not hard-coded in the parser. A
RangeSyntax names which operator tokens exist, the OR separator, and whether
hyphen ranges and ``v``-prefixed versions are accepted. Projects can extend
the defaults under ``[tool.semver-engine]``::

    [tool.semver-engine]
    or-separator = "||"
    hyphen-ranges = true
    allow-prefix = false

    [tool.semver-engine.operators]
    "==" = "EQ"
    "~=" = "TILDE"
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError
from .identifiers import IDENTIFIER_CHARS

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-engine"

# Characters that may make up an operator token
OPERATOR_CHARS = frozenset("<>=~^!")

# Characters an OR separator may not use, so splitting never cuts a version
_RESERVED = IDENTIFIER_CHARS | OPERATOR_CHARS | frozenset(".+*")


class Operator:
    """Range operator kinds."""

    EQ = "EQ"
    GT = "GT"
    GE = "GE"
    LT = "LT"
    LE = "LE"
    CARET = "CARET"
    TILDE = "TILDE"

    ALL = frozenset({EQ, GT, GE, LT, LE, CARET, TILDE})

    SYMBOLS = {
        EQ: "=",
        GT: ">",
        GE: ">=",
        LT: "<",
        LE: "<=",
        CARET: "^",
        TILDE: "~",
    }


DEFAULT_OPERATORS: Mapping[str, str] = MappingProxyType(
    {
        "=": Operator.EQ,
        ">": Operator.GT,
        ">=": Operator.GE,
        "<": Operator.LT,
        "<=": Operator.LE,
        "^": Operator.CARET,
        "~": Operator.TILDE,
        "~>": Operator.TILDE,
    }
)


def _validate_operators(operators: Mapping[str, str]) -> None:
    for token, kind in operators.items():
        if not token or not all(c in OPERATOR_CHARS for c in token):
            raise ConfigError(
                f"Invalid operator token {token!r}: must be made of {''.join(sorted(OPERATOR_CHARS))}"
            )
        if kind not in Operator.ALL:
            raise ConfigError(
                f"Unknown operator {kind!r} for token {token!r}. "
                f"Expected one of: {', '.join(sorted(Operator.ALL))}"
            )


@dataclass(frozen=True)
class RangeSyntax:
    """Token vocabulary of the range grammar.

    Attributes:
        operators: Mapping of operator token to Operator kind
        or_separator: Token separating OR-groups
        hyphen_ranges: Whether ``A - B`` is accepted
        allow_prefix: Whether versions may carry a leading ``v``/``V``
    """

    operators: Mapping[str, str] = field(default_factory=lambda: DEFAULT_OPERATORS)
    or_separator: str = "||"
    hyphen_ranges: bool = True
    allow_prefix: bool = False

    def __post_init__(self) -> None:
        _validate_operators(self.operators)
        if not self.or_separator or any(c in _RESERVED or c.isspace() for c in self.or_separator):
            raise ConfigError(
                f"Invalid OR separator {self.or_separator!r}: must be non-empty and "
                "use no whitespace, version, wildcard or operator characters"
            )
        object.__setattr__(self, "operators", MappingProxyType(dict(self.operators)))

    def __hash__(self) -> int:
        # mappingproxy is unhashable; hash its items instead
        return hash(
            (
                frozenset(self.operators.items()),
                self.or_separator,
                self.hyphen_ranges,
                self.allow_prefix,
            )
        )

    @classmethod
    def default(cls) -> "RangeSyntax":
        return cls()

    def with_operators(self, extra: Mapping[str, str]) -> "RangeSyntax":
        """Return a copy that also accepts the given operator tokens."""
        merged = dict(self.operators)
        merged.update(extra)
        return replace(self, operators=merged)

    def lookup(self, token: str) -> Optional[str]:
        return self.operators.get(token)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RangeSyntax":
        """Build a RangeSyntax from a ``[tool.semver-engine]`` table.

        Raises:
            ConfigError: If a key has the wrong type or an unknown operator
        """
        syntax = cls()
        kwargs: dict[str, Any] = {}

        if "or-separator" in data:
            if not isinstance(data["or-separator"], str):
                raise ConfigError("tool.semver-engine.or-separator must be a string")
            kwargs["or_separator"] = data["or-separator"]

        for key, attr in (("hyphen-ranges", "hyphen_ranges"), ("allow-prefix", "allow_prefix")):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"tool.semver-engine.{key} must be a boolean")
                kwargs[attr] = data[key]

        if "operators" in data:
            operators = data["operators"]
            if not isinstance(operators, dict):
                raise ConfigError("tool.semver-engine.operators must be a table")
            kwargs["operators"] = {**syntax.operators, **operators}

        return cls(**kwargs)


def load_syntax(project_dir: Optional[str | Path] = None) -> RangeSyntax:
    """Load the range syntax for a project.

    Reads ``[tool.semver-engine]`` from ``pyproject.toml`` in ``project_dir``
    (default: current directory). A missing file or table yields the default
    syntax.

    Raises:
        ConfigError: If pyproject.toml is not valid TOML or the table is invalid
    """
    project_path = Path(project_dir) if project_dir is not None else Path.cwd()
    pyproject_path = project_path / "pyproject.toml"

    if not pyproject_path.exists():
        logger.debug("No pyproject.toml in %s, using default range syntax", project_path)
        return RangeSyntax.default()

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        logger.debug("No [tool.%s] table in %s", TOOL_TABLE, pyproject_path)
        return RangeSyntax.default()
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {pyproject_path} must be a table")

    syntax = RangeSyntax.from_dict(table)
    logger.debug("Loaded range syntax from %s: %r", pyproject_path, syntax)
    return syntax
