import pytest

from sexprs.errors import Error
from sexprs.tokens import (
    Delimiter,
    Group,
    Ident,
    Literal,
    Punct,
    TokenizeError,
    tokenize,
)


def test_empty_source_has_no_tokens():
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_identifiers():
    assert tokenize("foo _bar r#type Info") == [
        Ident("foo"),
        Ident("_bar"),
        Ident("r#type"),
        Ident("Info"),
    ]


def test_nested_groups():
    assert tokenize("f(x, [y])") == [
        Ident("f"),
        Group(
            Delimiter.PARENTHESIS,
            (
                Ident("x"),
                Punct(",", False),
                Group(Delimiter.BRACKET, (Ident("y"),)),
            ),
        ),
    ]


def test_brace_group():
    trees = tokenize("{a}")
    assert trees == [Group(Delimiter.BRACE, (Ident("a"),))]
    assert trees[0].delimiter.open == "{"
    assert trees[0].delimiter.close == "}"


def test_lifetime_is_joint_quote_and_ident():
    assert tokenize("'a") == [Punct("'", True), Ident("a")]


def test_char_literal_is_not_lifetime():
    assert tokenize("'a'") == [Literal("'a'")]


@pytest.mark.parametrize(
    "source",
    [
        '"a\\"b"',
        'r#"x"y"#',
        'r"plain"',
        'b"bytes"',
        'br"raw"',
        "b'x'",
        "'\\n'",
        "'\\''",
        "'\\u{41}'",
        "1u8",
        "2.5e-3f64",
        "0xFF_u32",
        "1.",
        "1_000",
        "3.14",
    ],
)
def test_single_literals(source):
    assert tokenize(source) == [Literal(source)]


def test_range_is_not_a_float():
    assert tokenize("1..2") == [
        Literal("1"),
        Punct(".", True),
        Punct(".", False),
        Literal("2"),
    ]


def test_field_access_on_integer_is_not_a_float():
    assert tokenize("1.max") == [Literal("1"), Punct(".", False), Ident("max")]


def test_punct_spacing():
    assert tokenize("->") == [Punct("-", True), Punct(">", False)]


def test_comments_are_skipped():
    assert tokenize("a // line\n /* outer /* inner */ */ b") == [Ident("a"), Ident("b")]


@pytest.mark.parametrize("source", ["f(x,[y]){z}", 'Info(Info{id:1,name:"G"})', "&'a str"[:3]])
def test_text_round_trip_without_whitespace(source):
    assert "".join(str(tree) for tree in tokenize(source)) == source


@pytest.mark.parametrize(
    "source",
    ["(a", "a)", "(a]", '"abc', "/* x", 'r#"abc"', "'", "§"],
)
def test_errors(source):
    with pytest.raises(TokenizeError):
        tokenize(source)


def test_error_is_package_error_with_position():
    with pytest.raises(Error) as info:
        tokenize("ok (a")
    assert isinstance(info.value, TokenizeError)
    assert info.value.position == 3
    assert str(info.value).startswith("SyntaxError")