"""Fixed-width numbers held by lisp values, and the quoting test for plain items."""

from __future__ import annotations

import math
import struct
from decimal import Decimal
from typing import Any, Callable, ClassVar


def _format_float(number: float) -> str:
    """Render a float in plain decimal notation with the shortest round-trip digits."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Number:
    """A number of fixed width, compared and hashed by its tagged byte form."""

    __slots__ = ("_value",)

    _type_name: ClassVar[str] = ""
    _layout: ClassVar[str] = ""
    _bounds: ClassVar[tuple[int, int]] = (0, 0)

    def __init__(self, value: Any) -> None:
        if isinstance(value, Number):
            if type(value) is not type(self):
                raise TypeError(
                    f"cannot convert {value!r} to {type(self).type_name()}"
                )
            value = value.value
        self._value = self._check(value)

    @classmethod
    def _check(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot convert {value!r} to {cls.type_name()}")
        low, high = cls._bounds
        if not low <= value <= high:
            raise OverflowError(f"cannot convert from {value} to {cls.type_name()}")
        return value

    @classmethod
    def type_name(cls) -> str:
        """Name of the underlying machine type."""
        return cls._type_name

    @property
    def value(self) -> Any:
        return self._value

    def to_bytes(self) -> bytes:
        """Four-byte type tag (right aligned, zero padded) followed by the big-endian value."""
        prefix = self.type_name().encode("ascii").rjust(4, b"\x00")
        return prefix + struct.pack(self._layout, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.to_bytes() < other.to_bytes()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.to_bytes() <= other.to_bytes()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.to_bytes() > other.to_bytes()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.to_bytes() >= other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def _combine(self, other: object, name: str, func: Callable[[Any, Any], Any]):
        if type(other) is not type(self):
            return NotImplemented
        result = func(self._value, other._value)  # type: ignore[attr-defined]
        try:
            return type(self)(result)
        except OverflowError:
            raise OverflowError(f"attempt to {name} with overflow") from None

    def __add__(self, other: object):
        return self._combine(other, "add", lambda a, b: a + b)

    def __sub__(self, other: object):
        return self._combine(other, "subtract", lambda a, b: a - b)

    def __mul__(self, other: object):
        return self._combine(other, "multiply", lambda a, b: a * b)

    def __truediv__(self, other: object):
        return self._combine(other, "divide", self._divide)

    @staticmethod
    def _divide(a: Any, b: Any) -> Any:
        if b == 0:
            raise ZeroDivisionError("attempt to divide by zero")
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient

    def __float__(self) -> float:
        return float(self._value)


class Integer(Number):
    """A signed 64-bit integer."""

    __slots__ = ()
    _type_name = "i64"
    _layout = ">q"
    _bounds = (-(2**63), 2**63 - 1)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value


class UnsignedInteger(Number):
    """An unsigned 32-bit integer."""

    __slots__ = ()
    _type_name = "u32"
    _layout = ">I"
    _bounds = (0, 2**32 - 1)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value


class Float(Number):
    """A 64-bit floating point number."""

    __slots__ = ()
    _type_name = "f64"
    _layout = ">d"

    @classmethod
    def _check(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"cannot convert {value!r} to {cls.type_name()}")
        return float(value)

    @staticmethod
    def _divide(a: float, b: float) -> float:
        if b == 0:
            if a == 0 or math.isnan(a):
                return math.nan
            sign = math.copysign(1.0, a) * math.copysign(1.0, b)
            return math.copysign(math.inf, sign)
        return a / b

    def __str__(self) -> str:
        return _format_float(self._value)


def _convert(value: Any, kind: type[Number], method: str) -> Any:
    if isinstance(value, kind):
        return value
    if not isinstance(value, Number):
        converter = getattr(value, method, None)
        if callable(converter):
            return converter()
    return kind(value)


def as_integer(value: Any) -> Integer:
    """Convert a Python int, an Integer or a value holding one to an Integer."""
    return _convert(value, Integer, "as_integer")


def as_float(value: Any) -> Float:
    """Convert a Python number, a Float or a value holding one to a Float."""
    return _convert(value, Float, "as_float")


def as_unsigned_integer(value: Any) -> UnsignedInteger:
    """Convert a Python int, an UnsignedInteger or a value holding one to an UnsignedInteger."""
    return _convert(value, UnsignedInteger, "as_unsigned_integer")


def is_quoted(item: Any) -> bool:
    """Tell whether an item counts as quoted.

    Strings are quoted when they start with an apostrophe; numbers, booleans
    and None never are; sequences are quoted when any element is; other
    objects answer through their own ``is_quoted`` method or ``quoted`` flag.
    """
    if isinstance(item, str):
        return item.startswith("'")
    if item is None or isinstance(item, (bool, int, float, Number)):
        return False
    check = getattr(item, "is_quoted", None)
    if callable(check):
        return bool(check())
    if hasattr(item, "quoted"):
        return bool(item.quoted)
    if isinstance(item, (list, tuple)):
        return any(is_quoted(element) for element in item)
    return False