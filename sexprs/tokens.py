"""A lexer that splits source text into nested token trees.

Tokens follow the usual rules of curly-brace languages: identifiers,
literals (strings, raw strings, byte strings, characters, numbers),
single-character punctuation and groups delimited by (), [] and {}.
A lifetime such as ``'a`` becomes a joint ``'`` punct followed by an
identifier. Comments are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import Error, ErrorType


class Delimiter(Enum):
    """The brackets around a group; NONE has no visible brackets."""

    PARENTHESIS = ("(", ")")
    BRACE = ("{", "}")
    BRACKET = ("[", "]")
    NONE = ("", "")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Ident:
    """An identifier or keyword."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Punct:
    """One punctuation character; ``joint`` when another one follows directly."""

    char: str
    joint: bool = False

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class Literal:
    """A literal exactly as written in the source."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Group:
    """A delimited sequence of token trees."""

    delimiter: Delimiter
    stream: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "stream", tuple(self.stream))

    def __str__(self) -> str:
        """The group's text with its tokens written next to each other."""
        inner = "".join(str(tree) for tree in self.stream)
        return f"{self.delimiter.open}{inner}{self.delimiter.close}"


TokenTree = Union[Group, Ident, Punct, Literal]


class TokenizeError(Error):
    """Raised when source text cannot be split into token trees."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}", ErrorType.SYNTAX)
        self.position = position


_OPENERS = {
    "(": Delimiter.PARENTHESIS,
    "[": Delimiter.BRACKET,
    "{": Delimiter.BRACE,
}
_CLOSERS = {
    ")": Delimiter.PARENTHESIS,
    "]": Delimiter.BRACKET,
    "}": Delimiter.BRACE,
}
_PUNCT_CHARS = frozenset("~!@#$%^&*-=+|;:,<.>/?'")
_DIGITS = frozenset("0123456789")
_RADIX_MARKS = frozenset("xob")
_EXPONENT_MARKS = frozenset("eE")
_SIGNS = frozenset("+-")


def _is_ident_start(char: str) -> bool:
    return char.isidentifier()


def _is_ident_continue(char: str) -> bool:
    return char != "" and ("_" + char).isidentifier()


class _Lexer:
    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else ""

    def run(self) -> list[TokenTree]:
        stack: list[tuple[Delimiter, list[TokenTree], int]] = []
        current: list[TokenTree] = []
        while True:
            self._skip_trivia()
            if self.pos >= len(self.source):
                break
            char = self._peek()
            if char in _OPENERS:
                stack.append((_OPENERS[char], current, self.pos))
                current = []
                self.pos += 1
            elif char in _CLOSERS:
                if not stack:
                    raise TokenizeError(f"unexpected closing {char!r}", self.pos)
                delimiter, parent, _start = stack.pop()
                if delimiter is not _CLOSERS[char]:
                    raise TokenizeError(
                        f"mismatched closing {char!r} for {delimiter.open!r}", self.pos
                    )
                parent.append(Group(delimiter, tuple(current)))
                current = parent
                self.pos += 1
            else:
                current.append(self._token())
        if stack:
            delimiter, _parent, start = stack[-1]
            raise TokenizeError(f"unclosed {delimiter.open!r}", start)
        return current

    def _skip_trivia(self) -> None:
        source = self.source
        while True:
            char = self._peek()
            if char and char.isspace():
                self.pos += 1
            elif source.startswith("//", self.pos):
                end = source.find("\n", self.pos)
                self.pos = len(source) if end == -1 else end
            elif source.startswith("/*", self.pos):
                start = self.pos
                depth = 1
                self.pos += 2
                while depth:
                    if self.pos >= len(source):
                        raise TokenizeError("unterminated block comment", start)
                    if source.startswith("/*", self.pos):
                        depth += 1
                        self.pos += 2
                    elif source.startswith("*/", self.pos):
                        depth -= 1
                        self.pos += 2
                    else:
                        self.pos += 1
            else:
                return

    def _token(self) -> TokenTree:
        start = self.pos
        char = self._peek()
        following = self._peek(1)
        if char == "r" and self._raw_string_hashes(1) is not None:
            return self._raw_string(start, 1)
        if char == "b" and following == "r" and self._raw_string_hashes(2) is not None:
            return self._raw_string(start, 2)
        if char in ("b", "c") and following == '"':
            self.pos += 1
            return self._string(start)
        if char == "b" and following == "'":
            self.pos += 1
            return self._quote(start, byte=True)
        if char == "r" and following == "#" and _is_ident_start(self._peek(2)):
            self.pos += 2
            self._ident_chars()
            return Ident(self.source[start : self.pos])
        if _is_ident_start(char):
            self._ident_chars()
            return Ident(self.source[start : self.pos])
        if char in _DIGITS:
            return self._number(start)
        if char == '"':
            return self._string(start)
        if char == "'":
            return self._quote(start, byte=False)
        if char in _PUNCT_CHARS:
            self.pos += 1
            return Punct(char, self._peek() in _PUNCT_CHARS)
        raise TokenizeError(f"unexpected character {char!r}", start)

    def _ident_chars(self) -> None:
        self.pos += 1
        while _is_ident_continue(self._peek()):
            self.pos += 1

    def _suffix(self) -> None:
        if _is_ident_start(self._peek()):
            self._ident_chars()

    def _literal(self, start: int) -> Literal:
        self._suffix()
        return Literal(self.source[start : self.pos])

    def _raw_string_hashes(self, offset: int) -> int | None:
        hashes = 0
        while self._peek(offset + hashes) == "#":
            hashes += 1
        return hashes if self._peek(offset + hashes) == '"' else None

    def _raw_string(self, start: int, offset: int) -> Literal:
        hashes = self._raw_string_hashes(offset) or 0
        self.pos = start + offset + hashes + 1
        terminator = '"' + "#" * hashes
        end = self.source.find(terminator, self.pos)
        if end == -1:
            raise TokenizeError("unterminated raw string", start)
        self.pos = end + len(terminator)
        return self._literal(start)

    def _string(self, start: int) -> Literal:
        self.pos += 1
        while True:
            char = self._peek()
            if char == "":
                raise TokenizeError("unterminated string", start)
            if char == "\\":
                self.pos += 2
            elif char == '"':
                self.pos += 1
                break
            else:
                self.pos += 1
        return self._literal(start)

    def _quote(self, start: int, byte: bool) -> TokenTree:
        after = self._peek(1)
        if after == "\\":
            end = self.source.find("'", self.pos + 3)
            if end == -1:
                raise TokenizeError("unterminated character literal", start)
            self.pos = end + 1
            return self._literal(start)
        if after not in ("", "'") and self._peek(2) == "'":
            self.pos += 3
            return self._literal(start)
        if not byte and _is_ident_start(after):
            self.pos += 1
            return Punct("'", True)
        raise TokenizeError("invalid character literal", start)

    def _digits(self) -> None:
        while self._peek() in _DIGITS or self._peek() == "_":
            self.pos += 1

    def _number(self, start: int) -> Literal:
        if self._peek() == "0" and self._peek(1) in _RADIX_MARKS:
            self.pos += 2
            while _is_ident_continue(self._peek()):
                self.pos += 1
            return Literal(self.source[start : self.pos])
        self._digits()
        after_dot = self._peek(1)
        if self._peek() == "." and after_dot != "." and not _is_ident_start(after_dot):
            self.pos += 1
            self._digits()
        if self._peek() in _EXPONENT_MARKS:
            offset = 2 if self._peek(1) in _SIGNS else 1
            if self._peek(offset) in _DIGITS:
                self.pos += offset
                self._digits()
        return self._literal(start)


def tokenize(source: str) -> list[TokenTree]:
    """Split ``source`` into a list of token trees.

    Raises TokenizeError on unbalanced brackets, unterminated strings or
    comments, and characters that start no token.
    """
    return _Lexer(str(source)).run()