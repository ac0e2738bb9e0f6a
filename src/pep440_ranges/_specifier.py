"""Version specifiers (PEP 440) and their conjunction into specifier sets."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from ._errors import ParseError
from ._ranges import CompareOp, VersionRange
from ._version import _DC_KW, Version

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_SPECIFIER_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    \s*
    (?P<op>~=|==(?!=)|!=|<=|>=|<|>)  # operator, arbitrary equality (===) is not supported
    \s*
    (?P<value>[^\s,<>=!~][^\s,]*)  # right-hand side, validated when compiled
    \s*
    $
    """,
    re.VERBOSE,
)

VersionLike = Union[Version, str]


def _as_version(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else Version.from_string(version)


@dataclass(**_DC_KW)
class Specifier:
    """A single comparison such as ``>=1.2`` or ``==1.2.*``."""

    op: CompareOp
    value: str

    @classmethod
    def from_string(cls, spec_str: str) -> Specifier:
        if not (match := _SPECIFIER_RE.match(spec_str)):
            msg = f"Invalid specifier: {spec_str!r}"
            raise ParseError(msg, spec_str)
        return cls(op=CompareOp.from_symbol(match.group("op")), value=match.group("value"))

    def to_ranges(self) -> tuple[VersionRange, ...]:
        return self.op.to_ranges(self.value)

    def satisfied_by(self, version: VersionLike) -> bool:
        """
        Check if a version satisfies this specifier.

        :param version: the candidate, a :class:`Version` or its text
        :raises SpecifierError: if the candidate or the specifier's right-hand side cannot be compiled
        """
        candidate = _as_version(version)
        return any(candidate in version_range for version_range in self.to_ranges())

    def __contains__(self, version: VersionLike) -> bool:
        return self.satisfied_by(version)

    def __str__(self) -> str:
        return f"{self.op.value}{self.value}"

    def __repr__(self) -> str:
        return f"Specifier('{self}')"


@dataclass(**_DC_KW)
class Specifiers:
    """An ordered set of specifiers that must all be satisfied."""

    specifiers: tuple[Specifier, ...] = ()

    @classmethod
    def from_string(cls, specifiers_str: str = "") -> Specifiers:
        stripped = specifiers_str.strip()
        if not stripped:
            return cls()
        specs: list[Specifier] = []
        for spec_item in stripped.split(","):
            if not spec_item.strip():
                msg = f"Empty specifier in {specifiers_str!r}"
                raise ParseError(msg, specifiers_str)
            specs.append(Specifier.from_string(spec_item))
        return cls(specifiers=tuple(specs))

    def satisfied_by(self, version: VersionLike) -> bool:
        """
        Check if a version satisfies all specifiers in the set.

        Specifiers are evaluated in order and evaluation stops at the first one that is not satisfied, so a broken
        specifier after it is never compiled. An empty set accepts every version.
        """
        candidate = _as_version(version)
        for specifier in self.specifiers:
            if not specifier.satisfied_by(candidate):
                _LOGGER.debug("%s rejected by %s", candidate, specifier)
                return False
        return True

    def filter(self, versions: Iterable[VersionLike]) -> Iterator[Version]:
        """Yield the candidates satisfying every specifier, in their original order."""
        for version in versions:
            candidate = _as_version(version)
            if self.satisfied_by(candidate):
                yield candidate

    def __contains__(self, version: VersionLike) -> bool:
        return self.satisfied_by(version)

    def __iter__(self) -> Iterator[Specifier]:
        return iter(self.specifiers)

    def __len__(self) -> int:
        return len(self.specifiers)

    def __str__(self) -> str:
        return ",".join(str(spec) for spec in self.specifiers)

    def __repr__(self) -> str:
        return f"Specifiers('{self}')"


__all__ = [
    "Specifier",
    "Specifiers",
    "VersionLike",
]
