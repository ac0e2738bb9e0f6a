"""PEP 440 version literals and their total order."""

from __future__ import annotations

import dataclasses
import itertools
import re
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Final

from ._errors import ParseError

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}

if TYPE_CHECKING:
    LocalSegment = int | str | NegativeInfinityType
    CmpKey = tuple[Any, ...]

_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    v?
    (?:(?P<epoch>[0-9]+)!)?                         # epoch
    (?P<release>[0-9]+(?:\.[0-9]+)*)                # release segment
    (?P<pre>                                        # pre-release
        [-_.]?
        (?P<pre_l>alpha|a|beta|b|preview|pre|c|rc)
        [-_.]?
        (?P<pre_n>[0-9]+)?
    )?
    (?P<post>                                       # post release
        (?:-(?P<post_n1>[0-9]+))
        |
        (?:
            [-_.]?
            (?P<post_l>post|rev|r)
            [-_.]?
            (?P<post_n2>[0-9]+)?
        )
    )?
    (?P<dev>                                        # dev release
        [-_.]?
        dev
        [-_.]?
        (?P<dev_n>[0-9]+)?
    )?
    (?:\+(?P<local>[a-z0-9]+(?:[-_.][a-z0-9]+)*))?  # local version
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)
_LOCAL_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[-_.]")


class InfinityType:
    """Sorts above every other value; used for bounds no real literal reaches."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Infinity"

    def __hash__(self) -> int:
        return hash(repr(self))

    def __lt__(self, other: object) -> bool:
        return False

    def __le__(self, other: object) -> bool:
        return isinstance(other, InfinityType)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InfinityType)

    def __gt__(self, other: object) -> bool:
        return not isinstance(other, InfinityType)

    def __ge__(self, other: object) -> bool:
        return True


class NegativeInfinityType:
    """Sorts below every other value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "-Infinity"

    def __hash__(self) -> int:
        return hash(repr(self))

    def __lt__(self, other: object) -> bool:
        return not isinstance(other, NegativeInfinityType)

    def __le__(self, other: object) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NegativeInfinityType)

    def __gt__(self, other: object) -> bool:
        return False

    def __ge__(self, other: object) -> bool:
        return isinstance(other, NegativeInfinityType)


Infinity: Final[InfinityType] = InfinityType()
NegativeInfinity: Final[NegativeInfinityType] = NegativeInfinityType()


class PreTag(IntEnum):
    """Pre-release maturity, in ascending order."""

    ALPHA = 0
    BETA = 1
    RC = 2

    def __str__(self) -> str:
        return _PRE_SPELLING[self]


_PRE_SPELLING: Final[dict[PreTag, str]] = {PreTag.ALPHA: "a", PreTag.BETA: "b", PreTag.RC: "rc"}
_PRE_TAGS: Final[dict[str, PreTag]] = {
    "a": PreTag.ALPHA,
    "alpha": PreTag.ALPHA,
    "b": PreTag.BETA,
    "beta": PreTag.BETA,
    "c": PreTag.RC,
    "rc": PreTag.RC,
    "pre": PreTag.RC,
    "preview": PreTag.RC,
}


@dataclass(order=True, **_DC_KW)
class PreRelease:
    """A tagged pre-release number such as ``rc2``."""

    tag: PreTag
    number: int

    def bump(self) -> PreRelease:
        return PreRelease(tag=self.tag, number=self.number + 1)

    def __str__(self) -> str:
        return f"{self.tag!s}{self.number}"


@dataclass(eq=False, **_DC_KW)
class Version:
    """
    An immutable PEP 440 version literal.

    Instances compare by the PEP 440 ordering: epoch, the release padded with trailing zeros, then the maturity of the
    release (``1.0.dev0 < 1.0a0 < 1.0 < 1.0.post0``), and finally the local segment. Equality and hashing follow the
    same key, so ``Version.from_string("1.0") == Version.from_string("1.0.0")``.

    ``release`` keeps the segments as written; operators such as ``~=`` and ``.*`` depend on how many were given.
    """

    release: tuple[int, ...]
    epoch: int | InfinityType = 0
    pre: PreRelease | None = None
    post: int | InfinityType | None = None
    dev: int | None = None
    local: tuple[LocalSegment, ...] = ()
    _key: CmpKey = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_key", _cmpkey(self))

    @classmethod
    def from_string(cls, version_str: str) -> Version:
        stripped = version_str.strip()
        if not (match := _VERSION_RE.match(stripped)):
            msg = f"Invalid version: {version_str!r}"
            raise ParseError(msg, version_str)
        pre = None
        if match.group("pre"):
            pre = PreRelease(tag=_PRE_TAGS[match.group("pre_l").lower()], number=int(match.group("pre_n") or 0))
        post = None
        if match.group("post"):
            post = int(match.group("post_n1") or match.group("post_n2") or 0)
        dev = int(match.group("dev_n") or 0) if match.group("dev") else None
        local: tuple[LocalSegment, ...] = ()
        if raw_local := match.group("local"):
            local = tuple(
                int(part) if part.isdigit() else part.lower() for part in _LOCAL_SEPARATORS.split(raw_local)
            )
        return cls(
            release=tuple(int(part) for part in match.group("release").split(".")),
            epoch=int(match.group("epoch") or 0),
            pre=pre,
            post=post,
            dev=dev,
            local=local,
        )

    def replace(self, **changes: Any) -> Version:
        """Return a copy with the given fields changed; the original is never touched."""
        return dataclasses.replace(self, **changes)

    def next(self) -> Version:
        """
        Return the least version sorting strictly after this one.

        No valid literal lies strictly between ``self`` and the result, with one deliberate exception: a version
        without a local segment is followed by its own local variants (``1.0+abc``) before the result. PEP 440 treats
        those variants as equal to the public version for ``==``, ``!=`` and ``<=``, so they belong to the same slot.

        A version that already has a local segment gets a synthetic trailing local marker that sorts below every real
        local segment, making the result its exact successor.
        """
        if self.local:
            return self.replace(local=(*self.local, NegativeInfinity))
        if self.dev is not None:
            return self.replace(dev=self.dev + 1)
        if self.post is not None:
            # .postN+1.dev0 is the first literal after .postN
            return self.replace(post=self.post + 1, dev=0)
        return self.replace(post=0, dev=0)

    @property
    def is_prerelease(self) -> bool:
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    @property
    def base_version(self) -> str:
        epoch = f"{self.epoch}!" if self.epoch else ""
        return epoch + ".".join(str(part) for part in self.release)

    @property
    def public(self) -> str:
        text = self.base_version
        if self.pre is not None:
            text += str(self.pre)
        if self.post is not None:
            text += f".post{self.post}"
        if self.dev is not None:
            text += f".dev{self.dev}"
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key < other._key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key <= other._key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key > other._key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key >= other._key

    def __str__(self) -> str:
        if not self.local:
            return self.public
        return f"{self.public}+{'.'.join(str(part) for part in self.local)}"

    def __repr__(self) -> str:
        return f"Version('{self}')"


def _cmpkey(version: Version) -> CmpKey:
    release = tuple(reversed(list(itertools.dropwhile(lambda part: part == 0, reversed(version.release)))))
    # a bare dev release (1.0.dev0) sorts before every pre-release of the same release
    if version.pre is None and version.post is None and version.dev is not None:
        pre: Any = NegativeInfinity
    elif version.pre is None:
        pre = Infinity
    else:
        pre = (version.pre.tag, version.pre.number)
    post = NegativeInfinity if version.post is None else version.post
    dev = Infinity if version.dev is None else version.dev
    if not version.local:
        local: Any = NegativeInfinity
    else:
        # alphanumeric segments sort before numeric ones, a shorter local before any longer one it prefixes
        local = tuple(_local_key(part) for part in version.local)
    return version.epoch, release, pre, post, dev, local


def _local_key(part: LocalSegment) -> tuple[Any, ...]:
    if isinstance(part, NegativeInfinityType):
        return (NegativeInfinity, NegativeInfinity)
    if isinstance(part, int):
        return (part, "")
    return (NegativeInfinity, part)


ZERO: Final[Version] = Version(release=(0,), dev=0)
INFINITY: Final[Version] = Version(release=(0,), epoch=Infinity)

__all__ = [
    "INFINITY",
    "ZERO",
    "Infinity",
    "InfinityType",
    "NegativeInfinity",
    "NegativeInfinityType",
    "PreRelease",
    "PreTag",
    "Version",
]
