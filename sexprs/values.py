"""Lisp values: atoms, symbols and (quoted) lists built on cells."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .numbers import (
    Float,
    Integer,
    UnsignedInteger,
    as_float,
    as_integer,
    as_unsigned_integer,
)
from .symbol import Symbol, as_symbol


class ValueKind(Enum):
    """The variants a Value can take, in their ordering."""

    NIL = "nil"
    T = "t"
    STRING = "string"
    SYMBOL = "symbol"
    QUOTED_SYMBOL = "quoted-symbol"
    BYTE = "byte"
    UNSIGNED_INTEGER = "unsigned-integer"
    INTEGER = "integer"
    FLOAT = "float"
    LIST = "list"
    QUOTED_LIST = "quoted-list"
    EMPTY_LIST = "empty-list"
    EMPTY_QUOTED_LIST = "empty-quoted-list"


_ORDINALS = {kind: position for position, kind in enumerate(ValueKind)}
_LIST_KINDS = (ValueKind.LIST, ValueKind.QUOTED_LIST)

_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
}


def _debug_string(text: str) -> str:
    """Quote a string, escaping specials and unprintable characters."""
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        else:
            parts.append(f"\\u{{{ord(char):x}}}")
    return '"' + "".join(parts) + '"'


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Value:
    """A lisp value: a kind together with the data it carries.

    List kinds carry a cell, which provides ``values()``, ``is_nil()``,
    ``quote()`` and ``unquote()``.
    """

    kind: ValueKind
    data: Any = None

    # -- constructors -------------------------------------------------

    @staticmethod
    def nil() -> Value:
        return Value(ValueKind.NIL)

    @staticmethod
    def t() -> Value:
        return Value(ValueKind.T)

    @staticmethod
    def symbol(sym: Any) -> Value:
        return Value(ValueKind.SYMBOL, as_symbol(sym).unquote())

    @staticmethod
    def quoted_symbol(sym: Any) -> Value:
        return Value(ValueKind.QUOTED_SYMBOL, as_symbol(sym).quote())

    @staticmethod
    def string(value: Any) -> Value:
        return Value(ValueKind.STRING, str(value))

    @staticmethod
    def byte(value: Any) -> Value:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot convert {value!r} to u8")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"cannot convert from {value} to u8")
        return Value(ValueKind.BYTE, value)

    @staticmethod
    def unsigned_integer(value: Any) -> Value:
        return Value(ValueKind.UNSIGNED_INTEGER, as_unsigned_integer(value))

    @staticmethod
    def integer(value: Any) -> Value:
        return Value(ValueKind.INTEGER, as_integer(value))

    @staticmethod
    def float(value: Any) -> Value:
        return Value(ValueKind.FLOAT, as_float(value))

    @staticmethod
    def empty_list() -> Value:
        return Value(ValueKind.EMPTY_LIST)

    @staticmethod
    def empty_quoted_list() -> Value:
        return Value(ValueKind.EMPTY_QUOTED_LIST)

    # -- predicates ---------------------------------------------------

    def is_nil(self) -> bool:
        return self.kind is ValueKind.NIL

    def is_empty(self) -> bool:
        if self.kind in _LIST_KINDS:
            return self.data.is_nil()
        return self.kind in (
            ValueKind.EMPTY_LIST,
            ValueKind.EMPTY_QUOTED_LIST,
            ValueKind.NIL,
        )

    def is_quoted(self) -> bool:
        return self.kind in (
            ValueKind.QUOTED_SYMBOL,
            ValueKind.QUOTED_LIST,
            ValueKind.EMPTY_QUOTED_LIST,
        )

    def is_integer(self) -> bool:
        return self.kind is ValueKind.INTEGER

    def is_unsigned_integer(self) -> bool:
        return self.kind is ValueKind.UNSIGNED_INTEGER

    def is_float(self) -> bool:
        return self.kind is ValueKind.FLOAT

    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    def is_symbol(self) -> bool:
        return self.kind in (ValueKind.SYMBOL, ValueKind.QUOTED_LIST)

    def is_list(self) -> bool:
        return self.kind in _LIST_KINDS

    # -- quoting ------------------------------------------------------

    def quote(self) -> Value:
        if self.kind is ValueKind.SYMBOL:
            return Value(ValueKind.QUOTED_SYMBOL, self.data.unquote())
        if self.kind is ValueKind.LIST:
            return Value(ValueKind.QUOTED_LIST, self.data.unquote())
        if self.kind is ValueKind.QUOTED_SYMBOL:
            return Value(ValueKind.QUOTED_SYMBOL, self.data.quote())
        if self.kind is ValueKind.QUOTED_LIST:
            return Value(ValueKind.QUOTED_LIST, self.data.quote())
        return self

    def unquote(self) -> Value:
        if self.kind is ValueKind.QUOTED_SYMBOL:
            return Value(ValueKind.SYMBOL, self.data)
        if self.kind is ValueKind.QUOTED_LIST:
            return Value(ValueKind.LIST, self.data)
        return self

    # -- list access --------------------------------------------------

    def values(self) -> list[Value]:
        if self.kind in _LIST_KINDS:
            return list(self.data.values())
        return []

    def head(self) -> Value:
        items = self.values()
        return items[0] if items else Value.nil()

    def unwrap_list(self) -> Value:
        """The single element of a one-element list, otherwise the value itself."""
        if self.kind in _LIST_KINDS:
            items = self.values()
            if len(items) <= 1:
                return items[0] if items else Value.nil()
        return self

    def __len__(self) -> int:
        return len(self.values())

    def __bool__(self) -> bool:
        return not self.is_empty()

    # -- conversions --------------------------------------------------

    def as_symbol(self) -> Symbol:
        if self.kind in (ValueKind.SYMBOL, ValueKind.QUOTED_SYMBOL):
            return self.data
        raise TypeError(f"cannot convert {self} to symbol")

    def as_float(self) -> Float:
        if self.kind is ValueKind.FLOAT:
            return self.data
        raise TypeError(f"cannot convert {self} to float")

    def as_integer(self) -> Integer:
        if self.kind is ValueKind.INTEGER:
            return self.data
        raise TypeError(f"cannot convert {self} to integer")

    def as_unsigned_integer(self) -> UnsignedInteger:
        if self.kind is ValueKind.UNSIGNED_INTEGER:
            return self.data
        raise TypeError(f"cannot convert {self} to unsigned integer")

    # -- comparison ---------------------------------------------------

    def _key(self) -> Any:
        if self.kind in _LIST_KINDS:
            return tuple(self.values())
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind is other.kind and self.data == other.data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self.kind is not other.kind:
            return _ORDINALS[self.kind] < _ORDINALS[other.kind]
        if self.data is None:
            return False
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self.kind, self._key()))

    # -- display ------------------------------------------------------

    def __str__(self) -> str:
        kind = self.kind
        if kind is ValueKind.T:
            return "t"
        if kind is ValueKind.NIL:
            return "nil"
        if kind is ValueKind.BYTE:
            return f"0x{self.data:02x}"
        if kind is ValueKind.STRING:
            return _debug_string(self.data)
        if kind is ValueKind.QUOTED_SYMBOL:
            return f"'{self.data}"
        if kind is ValueKind.LIST:
            return "()" if self.data.is_nil() else f"({self.data})"
        if kind is ValueKind.QUOTED_LIST:
            return "'()" if self.data.is_nil() else f"'({self.data})"
        if kind is ValueKind.EMPTY_LIST:
            return "()"
        if kind is ValueKind.EMPTY_QUOTED_LIST:
            return "'()"
        return str(self.data)

    def __repr__(self) -> str:
        return str(self)