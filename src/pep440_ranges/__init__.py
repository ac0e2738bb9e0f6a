"""Decide whether a version satisfies a PEP 440 version specifier, via exact half-open version ranges."""

from __future__ import annotations

from importlib.metadata import version

from ._errors import ParseError, SemanticError, SpecifierError
from ._ranges import CompareOp, VersionRange
from ._specifier import Specifier, Specifiers
from ._version import INFINITY, ZERO, PreRelease, PreTag, Version

__version__ = version("pep440-ranges")

__all__ = [
    "INFINITY",
    "ZERO",
    "CompareOp",
    "ParseError",
    "PreRelease",
    "PreTag",
    "SemanticError",
    "Specifier",
    "SpecifierError",
    "Specifiers",
    "Version",
    "VersionRange",
    "__version__",
]
