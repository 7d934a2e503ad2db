# sexprs

Building blocks for a minimal lisp dialect, and a small code formatter.

- `sexprs.values`: `Value` and `ValueKind`. A value is nil, `t`, a string,
  a symbol or quoted symbol, a byte, an integer, an unsigned integer, a
  float, a list, a quoted list, or an empty (quoted) list. Each prints the
  way a lisp reader would write it: `nil`, `t`, `"text"`, `'sym`, `0xf1`,
  `(a b c)`, `'(a b c)`.
- `sexprs.numbers`: `Integer` (signed 64-bit), `UnsignedInteger`
  (unsigned 32-bit) and `Float` (64-bit), with range checks, arithmetic
  that raises `OverflowError` on overflow, and the helpers `as_integer`,
  `as_float`, `as_unsigned_integer` and `is_quoted`.
- `sexprs.symbol`: `Symbol`, a name that can carry a quote mark, and
  `as_symbol`.
- `sexprs.cells`: `Cell`, the cons cell lists are built from, with `add`,
  `push_value`, `pop`, `values`, iteration and conversion to a `Value`.
- `sexprs.lists`: list operations `list_`, `cons`, `car`, `cdr`, `append`,
  `makelist`, `setcar`, `setcdr`, and conversions `value_from_python`,
  `value_from_iter`, `iter_value`, `as_cell`, `make_list`,
  `make_quoted_list`, `tail`, `wrap_in_list` and `extend`.
- `sexprs.errors`: `Error` and its kinds in `ErrorType`.
- `sexprs.tokens`, `sexprs.naive` and `sexprs.formatter`: a tokenizer for
  curly-brace style text, a naive layout of the resulting token trees, and
  terminal highlighting through Pygments.

## Installing

```
pip install .
```

## Using the data structures

```python
from sexprs.values import Value
from sexprs.lists import list_, car, cdr, append

value = list_([Value.symbol("head"), Value.symbol("middle"), Value.byte(33), Value.string("tail")])
print(value)             # (head middle 0x21 "tail")
print(car(value))        # head
print(cdr(value))        # (middle 0x21 "tail")
print(value.quote())     # '(head middle 0x21 "tail")

joined = append([
    list_([Value.symbol("a"), Value.symbol("b")]),
    Value.string("middle"),
    list_([Value.symbol("c")]),
])
print(joined)            # (a b "middle" c)
```

`car` of a quoted list gives a quoted item; `append` drops nil and empty
lists and splices the items of every list it is given.

## Formatting text

`format_code_naive` splits text into token trees and lays them out with
one field per line, indenting each bracketed group by four spaces:

```python
from sexprs.naive import format_code_naive

print(format_code_naive('Info(Info{id:1,name:"G"})'))
```

prints

```
Info(
    Info {
        id: 1,
        name: "G"
    }
)
```

Text that cannot be tokenized (unbalanced brackets, an unterminated
string) comes back as `Error(...)` holding the reason. `tokenize` in
`sexprs.tokens` raises `TokenizeError` instead.

`sexprs.formatter.highlight(source, lang)` colours text with 24-bit
terminal escapes, choosing the lexer by file extension `lang`; an unknown
extension raises `Error`. `highlight_code_string` lays text out and then
colours it as `rs` code.

## The command

```
sexprs-format [-h | -n] FILE...
```

Each named file is laid out and printed, highlighted by default. `-h`
turns highlighting on and `-n` turns it off. With no arguments, or with an
argument that is neither an option nor an existing file, the command
prints a message and exits with status 1.

## What it does not do

The package holds the data structures of the dialect only. It has no
reader that parses lisp text into values, no evaluator and no interactive
prompt. The formatter's layout is its own naive one; it does not call out
to any external code formatter.