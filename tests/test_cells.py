import copy

import pytest

from sexprs.cells import Cell
from sexprs.errors import Error
from sexprs.values import Value, ValueKind


def _symbols(*names):
    cell = Cell.from_python(names[0])
    for name in names[1:]:
        cell.add(Cell.from_python(name))
    return cell


# -- conversion ------------------------------------------------------


def test_cell_from_byte():
    cell = Cell.new(Value.byte(0xF1))
    assert cell.head == Value.byte(0xF1)


def test_cell_from_str():
    cell = Cell.from_python("head")
    assert cell.head == Value.symbol("head")


def test_cell_from_unsigned_integer():
    cell = Cell.new(Value.unsigned_integer(0xBEEF))
    assert cell.head == Value.unsigned_integer(0xBEEF)


def test_cell_from_int():
    cell = Cell.from_python(47)
    assert cell.head == Value.integer(47)


def test_cell_from_value():
    assert Cell.from_python(Value.nil()).head == Value.nil()
    assert Cell.from_python(Value.string("string")).head == Value.string("string")
    assert Cell.new(Value.byte(0xF1)).head == Value.byte(0xF1)


def test_cell_from_float():
    cell = Cell.from_python(4.12)
    assert cell.head == Value.float(4.12)
    assert str(cell) == "4.12"


def test_cell_new_plain_string_is_string_value():
    assert Cell.new("head").head == Value.string("head")


def test_cell_from_quoted_value_is_quoted():
    cell = Cell.from_python(Value.quoted_symbol("a"))
    assert cell.quoted is True
    assert cell.head == Value.quoted_symbol("a")


def test_cell_from_unsupported_raises():
    with pytest.raises(TypeError):
        Cell.new(object())


# -- iteration -------------------------------------------------------


def test_cell_into_iterator():
    cell = _symbols("a", "b", "c")
    assert [str(value) for value in cell] == ["a", "b", "c"]


def test_cell_from_iterator_list_value():
    list_value = _symbols("a", "b", "c").as_value()
    assert list_value.kind is ValueKind.LIST
    assert Cell.from_iter(list_value) == _symbols("a", "b", "c")


def test_cell_from_iterator_quoted_list_value():
    quoted = Value(ValueKind.QUOTED_LIST, _symbols("a", "b", "c").quote())
    assert Cell.from_iter(quoted) == _symbols("a", "b", "c")


def test_cell_from_iterator_of_values():
    cell = Cell.from_iter([Value.integer(1), Value.string("x")])
    assert cell.values() == [Value.integer(1), Value.string("x")]


def test_cell_is_empty():
    assert Cell.nil().is_empty() is True
    assert _symbols("a", "b", "c").is_empty() is False
    cell = Cell.nil()
    cell.add(Cell.from_python("b"))
    cell.add(Cell.from_python("c"))
    assert cell.is_empty() is False


def test_to_list():
    assert _symbols("x", "y").to_list() == [Value.symbol("x"), Value.symbol("y")]


# -- methods ---------------------------------------------------------


def test_cell_head():
    cell = Cell.new(Value.string("head"))
    assert cell.head == Value.string("head")


def test_clone_null():
    assert copy.copy(Cell.nil()) == Cell.nil()


def test_clone_non_null():
    head = Cell.new(Value.string("head"))
    head.add(Cell.new(Value.string("tail")))
    assert copy.copy(head) == head


def test_add_when_head_is_null():
    head = Cell.nil()
    head.add(Cell.new(Value.string("head")))
    assert head.values() == [Value.string("head")]
    assert len(head) == 1


def test_add_and_pop():
    head = Cell.new(Value.string("head"))
    cell = Cell.new(Value.string("cell"))
    assert len(head) == 1
    assert head.values() == [Value.string("head")]

    head.add(cell)
    assert head.values() == [Value.string("head"), Value.string("cell")]
    assert len(head) == 2

    assert head.pop() is True
    assert head.values() == [Value.string("head")]
    assert len(head) == 1

    assert head.pop() is True
    assert head.values() == []
    assert len(head) == 0

    assert head.pop() is False
    assert head.values() == []
    assert len(head) == 0

    assert head.pop() is False
    assert head.values() == []
    assert len(head) == 0


def test_add_when_tail_is_not_necessarily_null():
    head = Cell.new(Value.string("head"))
    head.add(Cell.new(Value.string("cell")))
    assert head.values() == [Value.string("head"), Value.string("cell")]
    assert len(head) == 2
    head.add(Cell.new(Value.string("tail")))
    assert head.values() == [
        Value.string("head"),
        Value.string("cell"),
        Value.string("tail"),
    ]
    assert len(head) == 3


def test_add_when_tail_is_null():
    head = Cell.new(Value.string("head"))
    cell = Cell.new(Value.string("cell"))
    head.add(cell)
    assert head.values() == [Value.string("head"), Value.string("cell")]

    tail = Cell.new(Value.string("tail"))
    assert len(tail) == 1
    assert cell.values() == [Value.string("cell")]
    head.add(tail)

    assert head.values() == [
        Value.string("head"),
        Value.string("cell"),
        Value.string("tail"),
    ]
    assert len(head) == 3
    assert tail.values() == [Value.string("tail")]
    assert len(tail) == 1


def test_add_does_not_alias_added_chain():
    added = _symbols("b", "c")
    head = _symbols("a")
    head.add(added)
    head.add(Cell.from_python("d"))
    assert added.values() == [Value.symbol("b"), Value.symbol("c")]
    assert [str(v) for v in head] == ["a", "b", "c", "d"]


def test_add_nil_changes_nothing():
    head = _symbols("a")
    head.add(Cell.nil())
    assert head.values() == [Value.symbol("a")]


def test_add_to_circular_chain_raises():
    ring = _symbols("a", "b")
    ring.tail.tail = ring
    with pytest.raises(Error):
        ring.add(Cell.from_python("c"))


def test_circular_chain_is_walked_once():
    ring = _symbols("a", "b")
    ring.tail.tail = ring
    assert ring.values() == [Value.symbol("a"), Value.symbol("b")]


def test_push_value_keeps_order_and_quote():
    cell = Cell.nil()
    cell.push_value(Value.symbol("a"))
    cell.push_value(Value.quoted_symbol("b"))
    assert str(cell) == "a 'b"
    assert cell.tail.quoted is True


# -- traits ----------------------------------------------------------


def test_iterator():
    head = Cell.new(Value.string("head"))
    head.add(Cell.new(Value.integer(10)))
    head.add(Cell.new(Value.symbol("x")))
    assert [str(value) for value in head] == ['"head"', "10", "x"]


def test_display():
    assert str(_symbols("a", "b", "c")) == "a b c"
    assert str(Cell.nil()) == ""


def test_equality_ignores_quote_flag():
    assert _symbols("a", "b").quote() == _symbols("a", "b")
    assert _symbols("a", "b") != _symbols("a", "c")
    assert _symbols("a") != _symbols("a", "b")


# -- values ----------------------------------------------------------


def test_as_value_single_unwraps():
    assert Cell.from_python(5).as_value() == Value.integer(5)
    assert Cell.nil().as_value() == Value.nil()


def test_as_value_single_quoted_keeps_quote():
    cell = Cell.new(Value.quoted_symbol("a"))
    assert cell.as_value() == Value.quoted_symbol("a")


def test_as_value_many_is_list():
    value = _symbols("a", "b").as_value()
    assert value.kind is ValueKind.LIST
    assert str(value) == "(a b)"
    quoted = _symbols("a", "b").quote().as_value()
    assert quoted.kind is ValueKind.QUOTED_LIST
    assert str(quoted) == "'(a b)"


def test_unwrap_value():
    inner = _symbols("x", "y").as_value()
    assert Cell.new(inner).unwrap_value() == inner
    assert Cell.nil().unwrap_value() == Value.nil()
    assert _symbols("a", "b").unwrap_value().kind is ValueKind.LIST


def test_quote_and_unquote():
    cell = _symbols("a", "b")
    quoted = cell.quote()
    assert quoted.quoted is True
    assert cell.quoted is False
    assert quoted.unquote().quoted is False
    assert quoted.values() == cell.values()