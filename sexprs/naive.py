"""A simple layout for token trees: one item per line, groups indented."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Iterator

from .tokens import (
    Delimiter,
    Group,
    Ident,
    Literal,
    Punct,
    TokenizeError,
    TokenTree,
    tokenize,
)

_INDENT_STEP = 4


def _with_siblings(
    trees: Sequence[TokenTree],
) -> Iterator[tuple[TokenTree | None, TokenTree, TokenTree | None]]:
    trees = list(trees)
    previous = [None, *trees[:-1]]
    following = [*trees[1:], None]
    return zip(previous, trees, following)


def format_code_naive(source: Any) -> str:
    """Lay out ``source`` token by token; text that cannot be split yields ``Error(...)``."""
    try:
        trees = tokenize(str(source))
    except TokenizeError as error:
        return f"Error({error})"
    return format_token_stream(trees)


def format_token_stream(trees: Iterable[TokenTree] | str) -> str:
    """Lay out a sequence of token trees (or source text) as one string."""
    if isinstance(trees, str):
        trees = tokenize(trees)
    result: list[str] = []
    for prev_sibling, tree, next_sibling in _with_siblings(list(trees)):
        result.extend(
            format_token_tree(tree, 0, Delimiter.NONE, prev_sibling, next_sibling)
        )
    return "".join(result)


def indent(indent_level: int, string: Any) -> str:
    return " " * indent_level + str(string)


def indent_strings(indent_level: int, strings: Iterable[Any]) -> list[str]:
    return [indent(indent_level, string) for string in strings]


def is_capitalized(string: str) -> bool:
    """True when the first character equals its upper-case form; False for ''."""
    if not string:
        return False
    first = string[0]
    return first == first.upper()


def delimiter_wrappers(delimiter: Delimiter) -> tuple[str, str]:
    return delimiter.open, delimiter.close


def format_ident(
    ident: Ident,
    prev_sibling: TokenTree | None,
    next_sibling: TokenTree | None,
    indent_level: int,
) -> str:
    name = ident.name.strip()
    if isinstance(prev_sibling, Punct) and prev_sibling.char == ":":
        text = name
    elif isinstance(prev_sibling, Punct) and prev_sibling.char == "'":
        text = f"{name} "
    else:
        text = indent(indent_level, name)
    suffix = ""
    if isinstance(next_sibling, Group) and next_sibling.delimiter in (
        Delimiter.BRACE,
        Delimiter.BRACKET,
    ):
        suffix = " "
    return text + suffix if is_capitalized(text) else text


def format_literal(
    literal: Literal,
    prev_sibling: TokenTree | None,
    next_sibling: TokenTree | None,
    indent_level: int,
) -> str:
    text = literal.text.strip()
    if isinstance(prev_sibling, Punct) and prev_sibling.char == ":":
        return text
    return indent(indent_level, text)


def _format_punct(punct: Punct, next_sibling: TokenTree | None) -> str:
    if punct.char == ",":
        return "," if next_sibling is None else ",\n"
    if punct.char == ":":
        return ": "
    return punct.char


def _format_group(group: Group, indent_level: int) -> list[str]:
    trees = group.stream
    line_break = "\n" if trees else ""
    if not trees:
        indent_level = 0
    open_, close = delimiter_wrappers(group.delimiter)
    result: list[str] = []
    if open_:
        result.append(open_ + line_break)
    for prev_sibling, tree, next_sibling in _with_siblings(trees):
        result.extend(
            format_token_tree(tree, indent_level, group.delimiter, prev_sibling, next_sibling)
        )
    if close:
        result.append(line_break + indent(indent_level, close))
    return result


def format_token_tree(
    tree: TokenTree,
    indent_level: int,
    parent: Delimiter,
    prev_sibling: TokenTree | None,
    next_sibling: TokenTree | None,
) -> list[str]:
    """The pieces of text for one tree, nested one step deeper inside a delimited parent."""
    if parent is not Delimiter.NONE:
        indent_level += _INDENT_STEP
    if isinstance(tree, Group):
        return _format_group(tree, indent_level)
    if isinstance(tree, Ident):
        return [format_ident(tree, prev_sibling, next_sibling, indent_level)]
    if isinstance(tree, Punct):
        return [_format_punct(tree, next_sibling)]
    if isinstance(tree, Literal):
        return [format_literal(tree, prev_sibling, next_sibling, indent_level)]
    raise TypeError(f"not a token tree: {tree!r}")