"""Compile a comparison operator and its right-hand side into half-open version ranges."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ._errors import ParseError, SemanticError
from ._version import _DC_KW, INFINITY, ZERO, Infinity, Version

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_WILDCARD_SUFFIX: Final[str] = ".*"


@dataclass(**_DC_KW)
class VersionRange:
    """The half-open interval ``[low, high)`` over the version order."""

    low: Version
    high: Version

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, Version):
            return False
        return self.low <= version < self.high

    def __str__(self) -> str:
        return f"[{self.low}, {self.high})"


class CompareOp(Enum):
    """The version comparison operators of PEP 440, except arbitrary equality (``===``)."""

    LESS_THAN_EQUAL = "<="
    STRICTLY_LESS_THAN = "<"
    NOT_EQUAL = "!="
    EQUAL = "=="
    GREATER_THAN_EQUAL = ">="
    STRICTLY_GREATER_THAN = ">"
    COMPATIBLE = "~="

    @classmethod
    def from_symbol(cls, symbol: str) -> CompareOp:
        try:
            return cls(symbol)
        except ValueError:
            msg = f"Unknown comparison operator: {symbol!r}"
            raise ParseError(msg, symbol) from None

    def to_ranges(self, rhs: str) -> tuple[VersionRange, ...]:
        """
        Convert a comparison such as ``>= 1.2`` into a union of half-open ranges.

        Takes the raw right-hand side instead of a :class:`Version` because ``==`` and ``!=`` accept wildcards
        (``1.2.*``), which are not valid versions. A version satisfies the comparison if it lies in any returned range.

        :param rhs: the right-hand side text, e.g. ``1.2``, ``1.2.*`` or ``1.0+local``
        :raises ParseError: if ``rhs`` is not a version literal, optionally followed by ``.*``
        :raises SemanticError: if the comparison is well formed but not allowed by PEP 440
        """
        wildcard = rhs.endswith(_WILDCARD_SUFFIX)
        literal = rhs[: -len(_WILDCARD_SUFFIX)] if wildcard else rhs
        try:
            version = Version.from_string(literal)
        except ParseError as exc:
            msg = f"Invalid version {rhs!r} in specifier {self.value}{rhs}"
            raise ParseError(msg, rhs) from exc
        ranges = self._wildcard_ranges(version, rhs) if wildcard else self._ranges(version, rhs)
        _LOGGER.debug("compiled %s%s into %s", self.value, rhs, " | ".join(str(r) for r in ranges))
        return ranges

    def _wildcard_ranges(self, version: Version, rhs: str) -> tuple[VersionRange, ...]:
        if self not in {CompareOp.EQUAL, CompareOp.NOT_EQUAL}:
            msg = f"Operator {self.value} does not support wildcards: {self.value}{rhs}"
            raise SemanticError(msg, self, rhs)
        if version.dev is not None or version.local:
            msg = f"Wildcard cannot have dev or local suffix: {self.value}{rhs}"
            raise SemanticError(msg, self, rhs)
        # X.* is [X.dev0, (X+1).dev0), and the wildcard may follow a .postN or a pre-release as well
        low = version.replace(dev=0)
        if version.post is not None:
            high = version.replace(post=version.post + 1, dev=0)
        elif version.pre is not None:
            high = version.replace(pre=version.pre.bump(), dev=0)
        else:
            high = version.replace(release=(*version.release[:-1], version.release[-1] + 1), dev=0)
        if self is CompareOp.EQUAL:
            return (VersionRange(low=low, high=high),)
        return VersionRange(low=ZERO, high=low), VersionRange(low=high, high=INFINITY)

    def _ranges(self, version: Version, rhs: str) -> tuple[VersionRange, ...]:  # noqa: PLR0911
        if version.local and self not in {CompareOp.EQUAL, CompareOp.NOT_EQUAL}:
            msg = f"Operator {self.value} cannot be used on a version with a local segment: {self.value}{rhs}"
            raise SemanticError(msg, self, rhs)
        if self is CompareOp.LESS_THAN_EQUAL:
            return (VersionRange(low=ZERO, high=version.next()),)
        if self is CompareOp.GREATER_THAN_EQUAL:
            return (VersionRange(low=version, high=INFINITY),)
        if self is CompareOp.EQUAL:
            return (VersionRange(low=version, high=version.next()),)
        if self is CompareOp.NOT_EQUAL:
            return VersionRange(low=ZERO, high=version), VersionRange(low=version.next(), high=INFINITY)
        if self is CompareOp.STRICTLY_GREATER_THAN:
            return (VersionRange(low=_after_post_releases(version), high=INFINITY),)
        if self is CompareOp.STRICTLY_LESS_THAN:
            return (VersionRange(low=ZERO, high=_before_pre_releases(version)),)
        if self is CompareOp.COMPATIBLE:
            return (VersionRange(low=version, high=_compatible_upper(version, rhs)),)
        msg = f"unhandled comparison operator {self!r}"  # pragma: no cover
        raise AssertionError(msg)  # pragma: no cover

    def __str__(self) -> str:
        return self.value


def _after_post_releases(version: Version) -> Version:
    # >V must not match a post-release of V unless V itself is one
    if version.dev is not None:
        return version.replace(dev=version.dev + 1)
    if version.post is not None:
        return version.replace(post=version.post + 1)
    return version.replace(post=Infinity)


def _before_pre_releases(version: Version) -> Version:
    # <V must not match a pre-release of V unless V itself is one
    if version.pre is None and version.dev is None:
        return version.replace(dev=0, post=None, local=())
    return version


def _compatible_upper(version: Version, rhs: str) -> Version:
    # ~=X.Y.suffixes is >=X.Y.suffixes combined with ==X.*
    if len(version.release) < 2:  # noqa: PLR2004
        msg = f"Operator ~= requires at least two release segments: ~={rhs}"
        raise SemanticError(msg, CompareOp.COMPATIBLE, rhs)
    *head, _ = version.release
    return Version(release=(*head[:-1], head[-1] + 1), epoch=version.epoch, dev=0)


__all__ = [
    "CompareOp",
    "VersionRange",
]
