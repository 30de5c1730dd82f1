# reprenum

Serialize and deserialize integer-valued enums as their underlying integer
representation rather than by member name.

An enum class declares its integer representation (`u8`, `i32`, `u64`, ...)
and then serializes as that integer. Deserialization checks that the value is
one of the declared discriminants. Any other value raises an error, unless one
member is marked as the catch-all "other" member.

## Installation

```
pip install reprenum
```

The package uses only the Python standard library. It needs Python 3.10 or
later.

## Usage

```python
import enum

from reprenum.derive import derive_deserialize, derive_serialize, from_json, to_json


@derive_deserialize
@derive_serialize
class SmallPrime(enum.IntEnum):
    __repr_type__ = "u8"

    TWO = 2
    THREE = 3
    FIVE = 5
    SEVEN = 7


assert to_json(SmallPrime.SEVEN) == "7"
assert from_json(SmallPrime, "2") is SmallPrime.TWO
```

`to_json` raises `TypeError` for a member whose class is not decorated with
`derive_serialize`. `from_json` raises `TypeError` for a class that is not
decorated with `derive_deserialize`.

### Declaring the representation

The class attribute `__repr_type__` names the representation. It takes one of
these forms:

- a string such as `"u8"`,
- a `reprenum.parse.ReprType` member such as `ReprType.I32`,
- an iterable of either.

The recognized types are `u8`, `u16`, `u32`, `u64`, `u128`, `usize`, `i8`,
`i16`, `i32`, `i64`, `i128` and `isize`. The `size` types are 64 bits wide. A
string may hold several comma-separated items. Layout modifiers such as
`"u8, align(4)"` or `"packed"` are accepted and ignored. Anything else, for
example `"C"`, is rejected as unsupported.

### Errors when decoding

`from_json` raises `reprenum.derive.DeserializeError` in these cases:

- the text is not valid JSON,
- the value is not an integer (`invalid type: ...`),
- the integer does not fit the representation, for example
  ``invalid value: integer `300`, expected u8``,
- the integer fits but is not a discriminant and no catch-all is declared,
  for example `invalid value: 4, expected one of: 2, 3, 5, 7`.

With one discriminant, the message reads `expected 0`. With two, it reads
`expected 0 or 1`.

### A catch-all member

Name one member in the class attribute `__other__`. Every in-range value that
is not a discriminant then decodes to that member instead of raising an error:

```python
@derive_deserialize
class TestOther(enum.IntEnum):
    __repr_type__ = "u8"
    __other__ = "OTHER"

    A = 0
    B = 1
    OTHER = 2


assert from_json(TestOther, "5") is TestOther.OTHER
```

`__other__` may be a member name or an iterable of names. Only one member may
be marked. Values outside the representation's range still raise
`DeserializeError`.

### Validation

`reprenum.parse.parse_enum(cls)` inspects a class and returns an `EnumSpec`.
The spec holds `cls`, `repr` (a `ReprType`), `variants` (a tuple of `Variant`
with `name`, `value` and `is_default`) and `default_variant`. Both decorators
call it. A class that cannot be derived raises `reprenum.parse.DeriveError`,
which is a `TypeError`, when:

- the class is not an `enum.Enum` subclass,
- the enum has no members,
- a member's value is not a plain integer (booleans are rejected),
- two members share a value (an alias),
- `__repr_type__` is missing or unsupported,
- a discriminant does not fit the representation,
- `__other__` names an unknown member or more than one member.

`ReprType` provides `signed`, `bits`, `minimum` and `maximum`. The method
`contains(value)` reports whether an integer fits the type's range.

### Lower-level helpers

`expand_serialize(spec)` and `expand_deserialize(spec)` in `reprenum.derive`
build the plain encoding and decoding functions from an `EnumSpec`. The
encoder maps a member to its integer. The decoder maps a Python integer to a
member and applies the same checks as `from_json`. Use them to plug the
integer form into a serializer other than JSON.

## Scope

The package is a library only. It has no command-line tool. The ready-made
helpers cover JSON through the standard `json` module. Other formats must go
through `expand_serialize` and `expand_deserialize`.