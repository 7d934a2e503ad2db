"""Cons cells: the linked nodes that lisp lists are made of."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .errors import Error, ErrorType
from .numbers import Float, Integer, UnsignedInteger
from .symbol import Symbol
from .values import Value, ValueKind

_EMPTY_KINDS = (ValueKind.EMPTY_LIST, ValueKind.EMPTY_QUOTED_LIST)
_LIST_KINDS = (ValueKind.LIST, ValueKind.QUOTED_LIST)


def _as_value(item: Any) -> Value:
    """Turn a plain Python item into the Value it stands for."""
    if isinstance(item, Value):
        return item
    if isinstance(item, Cell):
        return item.as_value()
    if isinstance(item, Symbol):
        return Value.quoted_symbol(item) if item.quoted else Value.symbol(item)
    if item is None:
        return Value.nil()
    if isinstance(item, bool):
        return Value.t() if item else Value.nil()
    if isinstance(item, str):
        return Value.string(item)
    if isinstance(item, UnsignedInteger):
        return Value.unsigned_integer(item)
    if isinstance(item, (Integer, int)):
        return Value.integer(item)
    if isinstance(item, (Float, float)):
        return Value.float(item)
    converter = getattr(item, "as_value", None)
    if callable(converter):
        return converter()
    raise TypeError(f"cannot convert {item!r} to a value")


@dataclass(eq=False)
class Cell:
    """A node holding one value and a link to the rest of the list.

    A cell with neither head nor tail is nil. A circular chain is walked
    once: iteration stops when a node comes round again.
    """

    head: Value | None = None
    tail: Cell | None = None
    quoted: bool = False

    # -- constructors -------------------------------------------------

    @staticmethod
    def nil() -> Cell:
        return Cell()

    @staticmethod
    def quoted_cell(item: Any, quoted: bool) -> Cell:
        """A single cell holding ``item`` (or nothing, for None) with the given quote flag."""
        cell = Cell(quoted=bool(quoted))
        if item is not None:
            cell.head = _as_value(item)
        return cell

    @staticmethod
    def new(item: Any) -> Cell:
        """A single cell holding ``item``, quoted when the value is."""
        value = _as_value(item)
        return Cell.quoted_cell(value, value.is_quoted())

    @staticmethod
    def from_python(value: Any) -> Cell:
        """A cell from a Python item; plain strings become symbols."""
        if isinstance(value, Cell):
            return value.__copy__()
        if isinstance(value, Value):
            return Cell.quoted_cell(value, value.is_quoted())
        if isinstance(value, str):
            return Cell.new(Value.symbol(value))
        return Cell.new(_as_value(value))

    @staticmethod
    def from_iter(iterable: Iterable[Any]) -> Cell:
        """A chain of cells holding every item of ``iterable`` in order."""
        if isinstance(iterable, Value):
            if iterable.kind in _LIST_KINDS:
                items: Iterable[Any] = iterable.values()
            elif iterable.kind in _EMPTY_KINDS:
                items = ()
            else:
                items = (iterable,)
        else:
            items = iterable
        cell = Cell.nil()
        for item in items:
            cell.push_value(item)
        return cell

    # -- inspection ---------------------------------------------------

    def _nodes(self) -> Iterator[Cell]:
        seen: set[int] = set()
        node: Cell | None = self
        while node is not None and id(node) not in seen:
            seen.add(id(node))
            yield node
            node = node.tail

    def is_nil(self) -> bool:
        return self.head is None and self.tail is None

    def is_empty(self) -> bool:
        return len(self) == 0

    def values(self) -> list[Value]:
        """Every value held along the chain."""
        return [node.head for node in self._nodes() if node.head is not None]

    def to_list(self) -> list[Value]:
        return list(self)

    def __iter__(self) -> Iterator[Value]:
        for node in self._nodes():
            if node.head is None:
                return
            yield node.head

    def __len__(self) -> int:
        return len(self.values())

    # -- mutation -----------------------------------------------------

    def push_value(self, value: Any) -> None:
        """Append one value at the end of the chain."""
        value = _as_value(value)
        is_quoted = value.is_quoted()
        cell = Cell.quoted_cell(value, is_quoted)
        self.add(cell.quote() if is_quoted else cell)

    def add(self, new: Any) -> None:
        """Append copies of the nodes of ``new`` at the end of the chain."""
        if not isinstance(new, Cell):
            new = Cell.from_python(new)
        if new.is_nil():
            return
        copies = [
            Cell(node.head, None, node.quoted)
            for node in new._nodes()
            if node.head is not None
        ]
        if not copies:
            return
        for previous, following in zip(copies, copies[1:]):
            previous.tail = following
        if self.head is None:
            self.head = copies[0].head
            self.tail = copies[0].tail
            return
        last = self
        for last in self._nodes():
            pass
        if last.tail is not None:
            raise Error("cannot add to a circular list", ErrorType.RUNTIME)
        last.tail = copies[0]

    def pop(self) -> bool:
        """Drop the tail, or the head when there is no tail; False when nil."""
        if self.tail is not None:
            self.tail = None
            return True
        if self.head is not None:
            self.head = None
            return True
        return False

    # -- conversion ---------------------------------------------------

    def unwrap_value(self) -> Value:
        """The lone value of a single cell, or the chain as a list value."""
        if self.tail is None:
            return self.head.unwrap_list() if self.head is not None else Value.nil()
        kind = ValueKind.QUOTED_LIST if self.quoted else ValueKind.LIST
        return Value(kind, self.__copy__())

    def as_value(self) -> Value:
        """Like unwrap_value, but a lone quoted value keeps its quote."""
        if self.tail is None:
            if self.head is None:
                return Value.nil()
            value = self.head.unwrap_list()
            return value.quote() if self.head.is_quoted() else value
        kind = ValueKind.QUOTED_LIST if self.quoted else ValueKind.LIST
        return Value(kind, self.__copy__())

    def quote(self) -> Cell:
        return Cell(self.head, self.tail, True)

    def unquote(self) -> Cell:
        return Cell(self.head, self.tail, False)

    # -- protocols ----------------------------------------------------

    def __copy__(self) -> Cell:
        return Cell(self.head, self.tail, self.quoted)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        if self.is_nil() and other.is_nil():
            return True
        return self.values() == other.values()

    def __str__(self) -> str:
        return " ".join(str(value) for value in self.values()).strip()

    def __repr__(self) -> str:
        return f"Cell({self})"