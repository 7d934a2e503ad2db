"""Building, converting and taking apart lisp lists."""

from __future__ import annotations

from itertools import repeat
from typing import Any, Iterable, Iterator

from .cells import Cell
from .numbers import Float, Integer, UnsignedInteger, is_quoted
from .symbol import Symbol
from .values import Value, ValueKind

_LIST_KINDS = (ValueKind.LIST, ValueKind.QUOTED_LIST)
_EMPTY_KINDS = (ValueKind.EMPTY_LIST, ValueKind.EMPTY_QUOTED_LIST)
_U32_MAX = 2**32 - 1


def value_from_python(value: Any) -> Value:
    """Convert a Python object to a Value.

    None and False become nil, True becomes t, strings become string values,
    symbols keep their quote, non-negative ints that fit 32 bits become
    unsigned integers and other ints become integers, floats become floats,
    and cells become the value they hold, keeping their quote.
    """
    if isinstance(value, Value):
        return value
    if value is None:
        return Value.nil()
    if isinstance(value, bool):
        return Value.t() if value else Value.nil()
    if isinstance(value, Symbol):
        return Value.quoted_symbol(value) if value.quoted else Value.symbol(value)
    if isinstance(value, str):
        return Value.string(value)
    if isinstance(value, UnsignedInteger):
        return Value.unsigned_integer(value)
    if isinstance(value, Integer):
        return Value.integer(value)
    if isinstance(value, Float):
        return Value.float(value)
    if isinstance(value, int):
        if 0 <= value <= _U32_MAX:
            return Value.unsigned_integer(value)
        return Value.integer(value)
    if isinstance(value, float):
        return Value.float(value)
    if isinstance(value, Cell):
        result = value.as_value()
        return result.quote() if value.quoted else result
    raise TypeError(f"cannot convert {value!r} to a value")


def iter_value(value: Any) -> Iterator[Value]:
    """Yield the items of a list value; an empty list yields nothing and an atom yields itself."""
    if isinstance(value, Cell):
        yield from value
        return
    value = value_from_python(value)
    if value.kind in _LIST_KINDS:
        yield from value.data
    elif value.kind in _EMPTY_KINDS:
        return
    else:
        yield value


def _items(iterable: Any) -> Iterator[Value]:
    if isinstance(iterable, (Value, Cell)):
        yield from iter_value(iterable)
        return
    for item in iterable:
        yield value_from_python(item)


def as_cell(value: Any) -> Cell:
    """A cell chain standing for ``value``.

    Plain strings become symbols; Python lists and tuples are spliced
    element by element.
    """
    if isinstance(value, Cell):
        return value.__copy__()
    if isinstance(value, str):
        return Cell.new(Value.symbol(value))
    if isinstance(value, (list, tuple)):
        cell = Cell.nil()
        for item in value:
            cell.add(as_cell(item))
        return cell
    value = value_from_python(value)
    if value.kind is ValueKind.SYMBOL:
        return Cell.quoted_cell(Value.symbol(value.data.unquote()), False)
    if value.kind is ValueKind.QUOTED_SYMBOL:
        return Cell.quoted_cell(Value.quoted_symbol(value.data), True)
    if value.kind in _LIST_KINDS:
        cell = Cell.nil()
        for item in value.data:
            cell.add(Cell.new(item))
        return cell.quote() if value.kind is ValueKind.QUOTED_LIST else cell
    return Cell.new(value)


def make_list(item: Any) -> Value:
    """A list value from ``item``, quoted when the item is."""
    if is_quoted(item):
        return Value(ValueKind.QUOTED_LIST, as_cell(item).quote())
    return Value(ValueKind.LIST, as_cell(item).unquote())


def make_quoted_list(item: Any) -> Value:
    """A quoted list value from ``item``."""
    return Value(ValueKind.QUOTED_LIST, as_cell(item).quote())


def value_from_iter(iterable: Any) -> Value:
    """A list value holding every item of ``iterable``."""
    cell = Cell.nil()
    for item in _items(iterable):
        cell.push_value(item)
    return make_list(cell)


def tail(value: Value) -> Cell:
    """The rest of a list after its head, or a nil cell."""
    if value.kind in _LIST_KINDS and value.data.tail is not None:
        return value.data.tail.__copy__()
    return Cell.nil()


def wrap_in_list(value: Value) -> Value:
    """A one-element list holding ``value``, quoted when the value is."""
    kind = ValueKind.QUOTED_LIST if value.is_quoted() else ValueKind.LIST
    return Value(kind, Cell.new(value))


def extend(value: Value, iterable: Any) -> Value:
    """Return ``value`` with the items of ``iterable`` appended.

    Lists keep their items and kind; an empty quoted list becomes a quoted
    list; any other value is replaced by a list of the new items alone.
    """
    if value.kind in _LIST_KINDS:
        cell = Cell.from_iter(value.values())
        cell.quoted = value.data.quoted
        kind = value.kind
    else:
        cell = Cell.nil()
        kind = (
            ValueKind.QUOTED_LIST
            if value.kind is ValueKind.EMPTY_QUOTED_LIST
            else ValueKind.LIST
        )
    for item in _items(iterable):
        cell.push_value(item)
    return Value(kind, cell)


def list_(items: Any) -> Value:
    """An unquoted list value holding each of ``items``."""
    cell = Cell.nil()
    for item in _items(items):
        cell.push_value(item)
    return Value(ValueKind.LIST, cell)


def cons(head: Any, tail: Cell) -> Cell:
    """A chain made of ``head`` followed by the nodes of ``tail``."""
    cell = as_cell(head)
    cell.add(tail)
    return cell


def car(value: Value) -> Value:
    """The first item of a list (quoted if the list is), or nil."""
    quoted = value.is_quoted()
    if value.kind in _LIST_KINDS and value.data.head is not None:
        result = value.data.head
    else:
        result = Value.nil()
    return result.quote() if quoted else result


def cdr(value: Value) -> Value:
    """The list after the first item, or nil."""
    if value.kind in _LIST_KINDS and value.data.tail is not None:
        return make_list(value.data.tail.__copy__())
    return Value.nil()


def append(items: Any) -> Value:
    """Concatenate lists and atoms into one list; empty lists and nil vanish."""
    quoted = is_quoted(items)
    cell = Cell.nil()
    for value in _items(items):
        if value.kind in _LIST_KINDS:
            for item in value.data:
                cell.push_value(item)
        elif value.kind in _EMPTY_KINDS or value.kind is ValueKind.NIL:
            continue
        else:
            cell.push_value(value)
    return make_quoted_list(cell) if quoted else make_list(cell)


def makelist(value: Any, count: int) -> Value:
    """A list holding ``value`` ``count`` times."""
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    return value_from_iter(repeat(value_from_python(value), count))


def setcar(cell: Cell, value: Any) -> None:
    """Replace the value held by ``cell``."""
    cell.head = value_from_python(value)


def setcdr(cell: Cell, new_tail: Cell) -> None:
    """Point ``cell`` at ``new_tail``; the tail is shared, not copied."""
    cell.tail = new_tail