"""Symbols: names that may carry a quote mark."""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from typing import Any


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Symbol:
    """A named symbol; equality looks at the name only, not the quote flag."""

    sym: str
    quoted: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sym, str):
            object.__setattr__(self, "sym", str(self.sym))
        object.__setattr__(self, "quoted", bool(self.quoted))

    def quote(self) -> Symbol:
        return replace(self, quoted=True)

    def unquote(self) -> Symbol:
        return replace(self, quoted=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.sym == other.sym

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.sym, self.quoted) < (other.sym, other.quoted)

    def __hash__(self) -> int:
        return hash(self.sym)

    def __str__(self) -> str:
        return self.sym


def as_symbol(item: Any) -> Symbol:
    """Convert a string, a Symbol or a symbol-holding value to a Symbol."""
    if isinstance(item, Symbol):
        return item
    if isinstance(item, str):
        return Symbol(item)
    converter = getattr(item, "as_symbol", None)
    if callable(converter):
        return converter()
    raise TypeError(f"cannot convert {item!r} to symbol")