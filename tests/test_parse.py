import enum

import pytest

from reprenum.parse import DeriveError, EnumSpec, ReprType, Variant, parse_enum


def test_empty_enum():
    class SmallPrime(enum.Enum):
        __repr_type__ = "u8"

    with pytest.raises(DeriveError, match="there must be at least one variant"):
        parse_enum(SmallPrime)


def test_missing_repr():
    class SmallPrime(enum.Enum):
        Two = 2
        Three = 3
        Five = 5
        Seven = 7

    with pytest.raises(DeriveError, match="missing __repr_type__ attribute"):
        parse_enum(SmallPrime)


def test_multiple_others():
    class MultipleOthers(enum.Enum):
        __repr_type__ = "u8"
        __other__ = ("A", "B")
        A = 0
        B = 1

    with pytest.raises(DeriveError, match="only one variant can be marked as other"):
        parse_enum(MultipleOthers)


def test_non_unit_variant():
    class SmallPrime(enum.Enum):
        __repr_type__ = "u8"
        Two = (2,)
        Three = (3,)

    with pytest.raises(DeriveError, match="Two: must be a unit variant"):
        parse_enum(SmallPrime)


def test_not_enum():
    class SmallPrime:
        two = 2
        three = 3

    with pytest.raises(DeriveError, match="input must be an enum"):
        parse_enum(SmallPrime)


def test_not_a_class():
    with pytest.raises(DeriveError, match="input must be an enum"):
        parse_enum(42)


def test_repr_c():
    class SmallPrime(enum.Enum):
        __repr_type__ = "C"
        Two = 2
        Three = 3

    with pytest.raises(DeriveError, match="unsupported repr"):
        parse_enum(SmallPrime)


def test_valid_enum_spec():
    class SmallPrime(enum.Enum):
        __repr_type__ = "u8"
        Two = 2
        Three = 3
        Five = 5
        Seven = 7

    spec = parse_enum(SmallPrime)
    assert spec == EnumSpec(
        cls=SmallPrime,
        repr=ReprType.U8,
        variants=(
            Variant("Two", 2),
            Variant("Three", 3),
            Variant("Five", 5),
            Variant("Seven", 7),
        ),
        default_variant=None,
    )
    assert spec.name == "SmallPrime"


def test_other_variant_recorded():
    class TestOther(enum.Enum):
        __repr_type__ = "u8"
        __other__ = "Other"
        A = 0
        B = 1
        Other = 2

    spec = parse_enum(TestOther)
    assert spec.default_variant == Variant("Other", 2, True)
    assert [v.is_default for v in spec.variants] == [False, False, True]


def test_unknown_other_name():
    class TestOther(enum.Enum):
        __repr_type__ = "u8"
        __other__ = "Missing"
        A = 0

    with pytest.raises(DeriveError, match="unknown variant 'Missing'"):
        parse_enum(TestOther)


def test_align_and_packed_are_ignored():
    class Aligned(enum.Enum):
        __repr_type__ = "align(4), i16, packed"
        A = -1

    assert parse_enum(Aligned).repr is ReprType.I16


def test_repr_given_as_member_and_sequence():
    class ByMember(enum.Enum):
        __repr_type__ = ReprType.U32
        A = 1

    class BySequence(enum.Enum):
        __repr_type__ = ("packed", "u64")
        A = 1

    assert parse_enum(ByMember).repr is ReprType.U32
    assert parse_enum(BySequence).repr is ReprType.U64


def test_later_repr_wins():
    class Twice(enum.Enum):
        __repr_type__ = "u8, i64"
        A = 1

    assert parse_enum(Twice).repr is ReprType.I64


@pytest.mark.parametrize("declared", ["u8(3)", "u8,,u16", "align(4", "align)4(", 5, "8bit"])
def test_malformed_repr(declared):
    class Broken(enum.Enum):
        A = 1

    Broken.__repr_type__ = declared
    with pytest.raises(DeriveError, match="unsupported repr"):
        parse_enum(Broken)


def test_discriminant_out_of_range():
    class TooBig(enum.Enum):
        __repr_type__ = "u8"
        A = 256

    with pytest.raises(DeriveError, match="does not fit in u8"):
        parse_enum(TooBig)


def test_negative_discriminant_in_unsigned():
    class Negative(enum.Enum):
        __repr_type__ = "u16"
        A = -1

    with pytest.raises(DeriveError, match="does not fit in u16"):
        parse_enum(Negative)


def test_duplicate_discriminant():
    class Duplicate(enum.Enum):
        __repr_type__ = "u8"
        A = 1
        B = 1

    with pytest.raises(DeriveError, match="already used by A"):
        parse_enum(Duplicate)


def test_bool_value_is_not_unit():
    class Flagged(enum.Enum):
        __repr_type__ = "u8"
        A = True

    with pytest.raises(DeriveError, match="must be a unit variant"):
        parse_enum(Flagged)


@pytest.mark.parametrize(
    ("repr_type", "low", "high"),
    [
        (ReprType.U8, 0, 255),
        (ReprType.I8, -128, 127),
        (ReprType.U16, 0, 65535),
        (ReprType.I32, -(2**31), 2**31 - 1),
        (ReprType.USIZE, 0, 2**64 - 1),
        (ReprType.ISIZE, -(2**63), 2**63 - 1),
        (ReprType.U128, 0, 2**128 - 1),
        (ReprType.I128, -(2**127), 2**127 - 1),
    ],
)
def test_repr_type_bounds(repr_type, low, high):
    assert repr_type.minimum == low
    assert repr_type.maximum == high
    assert repr_type.contains(low)
    assert repr_type.contains(high)
    assert not repr_type.contains(low - 1)
    assert not repr_type.contains(high + 1)


@pytest.mark.parametrize("value", [True, 1.0, "1", None])
def test_repr_type_rejects_non_integers(value):
    assert ReprType.U8.contains(value) is False


def test_repr_type_str():
    class Wide(enum.Enum):
        __repr_type__ = "i64"
        A = 1

    assert str(parse_enum(Wide).repr) == "i64"