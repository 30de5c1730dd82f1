"""Inspection of enum classes that serialize through their integer representation."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["DeriveError", "EnumSpec", "ReprType", "Variant", "parse_enum"]

REPR_ATTRIBUTE = "__repr_type__"
OTHER_ATTRIBUTE = "__other__"

_UNSUPPORTED = "unsupported repr for reprenum enum"
_LAYOUT_MODIFIERS = frozenset({"align", "packed"})
_ITEM = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\s*(\(.*\))?", re.DOTALL)


class DeriveError(TypeError):
    """Raised when an enum class cannot be given repr-based serialization."""


class ReprType(enum.Enum):
    """Primitive integer types an enum may be represented as."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        return 64 if self.value.endswith("size") else int(self.value[1:])

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: object) -> bool:
        """Return whether ``value`` is an integer this type can hold."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.minimum <= value <= self.maximum

    def __str__(self) -> str:
        return self.value


_RECOGNIZED = frozenset(member.value for member in ReprType)


@dataclass(frozen=True)
class Variant:
    """One member of an enum together with its discriminant."""

    name: str
    value: int
    is_default: bool = False


@dataclass(frozen=True)
class EnumSpec:
    """Everything needed to serialize an enum through its integer repr."""

    cls: type[enum.Enum]
    repr: ReprType
    variants: tuple[Variant, ...]
    default_variant: Variant | None = None

    @property
    def name(self) -> str:
        return self.cls.__name__


def _split_items(text: str) -> Iterator[str]:
    pieces: list[str] = []
    current: list[str] = []
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise DeriveError(_UNSUPPORTED)
        if char == "," and depth == 0:
            pieces.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    if depth:
        raise DeriveError(_UNSUPPORTED)
    pieces.append("".join(current).strip())
    if not pieces[-1]:
        pieces.pop()
    if any(not piece for piece in pieces):
        raise DeriveError(_UNSUPPORTED)
    yield from pieces


def _parse_repr(declared: object) -> ReprType | None:
    if declared is None:
        return None
    if isinstance(declared, (str, ReprType)):
        declared = [declared]
    if not isinstance(declared, Iterable):
        raise DeriveError(_UNSUPPORTED)

    result: ReprType | None = None
    for item in declared:
        if isinstance(item, ReprType):
            result = item
            continue
        if not isinstance(item, str):
            raise DeriveError(_UNSUPPORTED)
        for piece in _split_items(item):
            match = _ITEM.fullmatch(piece)
            if match is None:
                raise DeriveError(_UNSUPPORTED)
            name, args = match.groups()
            if name in _RECOGNIZED and args is None:
                result = ReprType(name)
            elif name not in _LAYOUT_MODIFIERS:
                raise DeriveError(_UNSUPPORTED)
    return result


def _parse_other(declared: object) -> list[str]:
    if declared is None:
        return []
    if isinstance(declared, str):
        return [declared]
    if isinstance(declared, Iterable):
        names = list(declared)
        if all(isinstance(name, str) for name in names):
            return names
    raise DeriveError(f"{OTHER_ATTRIBUTE} must name enum members")


def parse_enum(cls: object) -> EnumSpec:
    """Validate ``cls`` and describe how it maps to its integer repr."""
    if not (isinstance(cls, type) and issubclass(cls, enum.Enum)):
        raise DeriveError("input must be an enum")

    other_names = _parse_other(getattr(cls, OTHER_ATTRIBUTE, None))

    variants: list[Variant] = []
    for name, member in cls.__members__.items():
        if member.name != name:
            raise DeriveError(
                f"{name}: discriminant {member.value!r} already used by {member.name}"
            )
        value = member.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise DeriveError(f"{name}: must be a unit variant to use reprenum derive")
        variants.append(Variant(name, value, name in other_names))

    if not variants:
        raise DeriveError("there must be at least one variant")

    repr_type = _parse_repr(getattr(cls, REPR_ATTRIBUTE, None))
    if repr_type is None:
        raise DeriveError(f"missing {REPR_ATTRIBUTE} attribute")

    for variant in variants:
        if not repr_type.contains(variant.value):
            raise DeriveError(
                f"{variant.name}: discriminant {variant.value} does not fit in {repr_type}"
            )

    known = {variant.name for variant in variants}
    for name in other_names:
        if name not in known:
            raise DeriveError(f"{OTHER_ATTRIBUTE} names unknown variant {name!r}")

    defaults = [variant for variant in variants if variant.is_default]
    if len(defaults) > 1:
        raise DeriveError("only one variant can be marked as other")

    return EnumSpec(
        cls=cls,
        repr=repr_type,
        variants=tuple(variants),
        default_variant=defaults[0] if defaults else None,
    )