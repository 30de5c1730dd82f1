"""Serialization of enums through their integer representation."""

from __future__ import annotations

import enum
import json
from collections.abc import Callable, Iterable

from .parse import EnumSpec, parse_enum

__all__ = [
    "DeserializeError",
    "derive_deserialize",
    "derive_serialize",
    "expand_deserialize",
    "expand_serialize",
    "from_json",
    "to_json",
]

_SERIALIZE_ATTR = "__repr_serialize__"
_DESERIALIZE_ATTR = "__repr_deserialize__"


class DeserializeError(ValueError):
    """Raised when a value does not correspond to any enum member."""


def _expected(values: Iterable[int]) -> str:
    text = [str(value) for value in values]
    if len(text) == 1:
        return text[0]
    if len(text) == 2:
        return f"{text[0]} or {text[1]}"
    return "one of: " + ", ".join(text)


def expand_serialize(spec: EnumSpec) -> Callable[[enum.Enum], int]:
    """Build a function mapping members of ``spec.cls`` to their integer repr."""
    values = {variant.name: variant.value for variant in spec.variants}
    cls = spec.cls

    def serialize(member: enum.Enum) -> int:
        if not isinstance(member, cls):
            raise TypeError(f"{member!r} is not a member of {spec.name}")
        return values[member.name]

    return serialize


def expand_deserialize(spec: EnumSpec) -> Callable[[object], enum.Enum]:
    """Build a function mapping integers back to members of ``spec.cls``."""
    by_value = {variant.value: spec.cls[variant.name] for variant in spec.variants}
    default = (
        spec.cls[spec.default_variant.name] if spec.default_variant is not None else None
    )
    expected = _expected(variant.value for variant in spec.variants)
    repr_type = spec.repr

    def deserialize(value: object) -> enum.Enum:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DeserializeError(
                f"invalid type: {type(value).__name__} {value!r}, expected {repr_type}"
            )
        if not repr_type.contains(value):
            raise DeserializeError(
                f"invalid value: integer `{value}`, expected {repr_type}"
            )
        member = by_value.get(value)
        if member is not None:
            return member
        if default is not None:
            return default
        raise DeserializeError(f"invalid value: {value}, expected {expected}")

    return deserialize


def derive_serialize(cls: type[enum.Enum]) -> type[enum.Enum]:
    """Class decorator: serialize members as their integer repr."""
    spec = parse_enum(cls)
    setattr(cls, _SERIALIZE_ATTR, staticmethod(expand_serialize(spec)))
    return cls


def derive_deserialize(cls: type[enum.Enum]) -> type[enum.Enum]:
    """Class decorator: deserialize members from their integer repr."""
    spec = parse_enum(cls)
    setattr(cls, _DESERIALIZE_ATTR, staticmethod(expand_deserialize(spec)))
    return cls


def to_json(member: enum.Enum) -> str:
    """Encode ``member`` as JSON through its integer repr."""
    serialize = getattr(type(member), _SERIALIZE_ATTR, None)
    if serialize is None:
        raise TypeError(f"{type(member).__name__} does not derive repr serialization")
    return json.dumps(serialize(member))


def from_json(cls: type[enum.Enum], text: str | bytes) -> enum.Enum:
    """Decode a member of ``cls`` from JSON holding its integer repr."""
    deserialize = getattr(cls, _DESERIALIZE_ATTR, None)
    if deserialize is None:
        raise TypeError(f"{cls.__name__} does not derive repr deserialization")
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializeError(str(exc)) from exc
    return deserialize(value)