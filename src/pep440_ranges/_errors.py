"""Exceptions raised while parsing and compiling version specifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._ranges import CompareOp


class SpecifierError(ValueError):
    """Base class for every failure raised by this package."""


class ParseError(SpecifierError):
    """Text is not a well formed version literal or specifier."""

    def __init__(self, msg: str, text: str) -> None:
        super().__init__(msg)
        self.text = text


class SemanticError(SpecifierError):
    """A well formed specifier that breaks a PEP 440 compilation rule."""

    def __init__(self, msg: str, op: CompareOp, value: str) -> None:
        super().__init__(msg)
        self.op = op
        self.value = value


__all__ = [
    "ParseError",
    "SemanticError",
    "SpecifierError",
]
