"""Value types used by provider schemas, and their Markdown names."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


class SchemaRenderError(Exception):
    """Raised when a schema cannot be rendered as documentation."""


class TypeKind(enum.Enum):
    """The kinds of value type a schema attribute can have."""

    DYNAMIC = "dynamic"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    LIST = "list"
    SET = "set"
    MAP = "map"
    OBJECT = "object"
    TUPLE = "tuple"


_PRIMITIVE_KINDS = frozenset({TypeKind.STRING, TypeKind.NUMBER, TypeKind.BOOL})
_COLLECTION_KINDS = frozenset({TypeKind.LIST, TypeKind.SET, TypeKind.MAP})


@dataclass(frozen=True)
class CtyType:
    """An immutable value type: primitive, collection, object, tuple or dynamic."""

    kind: TypeKind
    element: CtyType | None = None
    attributes: tuple[tuple[str, CtyType], ...] = ()
    elements: tuple[CtyType, ...] = ()

    def __post_init__(self) -> None:
        if self.kind in _COLLECTION_KINDS and self.element is None:
            raise ValueError(f"a {self.kind.value} type needs an element type")

    @classmethod
    def from_json(cls, value: Any) -> CtyType:
        """Build a type from its JSON encoding, e.g. ``"string"`` or ``["list", "bool"]``."""
        if isinstance(value, str):
            try:
                kind = TypeKind(value)
            except ValueError:
                raise ValueError(f"unknown type {value!r}") from None
            if kind not in _PRIMITIVE_KINDS and kind is not TypeKind.DYNAMIC:
                raise ValueError(f"type {value!r} needs a type argument")
            return cls(kind)

        if isinstance(value, (list, tuple)) and len(value) >= 2 and isinstance(value[0], str):
            name, argument = value[0], value[1]
            if name in ("list", "set", "map"):
                return cls(TypeKind(name), element=cls.from_json(argument))
            if name == "object":
                if not isinstance(argument, Mapping):
                    raise ValueError("object type needs a mapping of attribute types")
                return object_of({k: cls.from_json(v) for k, v in argument.items()})
            if name == "tuple":
                if not isinstance(argument, (list, tuple)):
                    raise ValueError("tuple type needs a list of element types")
                return tuple_of(cls.from_json(v) for v in argument)
            raise ValueError(f"unknown type constructor {name!r}")

        raise ValueError(f"invalid type encoding {value!r}")

    @property
    def attribute_types(self) -> dict[str, CtyType]:
        """The attribute types of an object type, by name."""
        return dict(self.attributes)

    def is_primitive(self) -> bool:
        return self.kind in _PRIMITIVE_KINDS

    def is_collection(self) -> bool:
        return self.kind in _COLLECTION_KINDS

    def is_object(self) -> bool:
        return self.kind is TypeKind.OBJECT

    def is_tuple(self) -> bool:
        return self.kind is TypeKind.TUPLE

    def friendly_name(self) -> str:
        """A short human-readable name for the type."""
        if self.is_collection():
            return f"{self.kind.value} of {self.element.friendly_name()}"
        return self.kind.value


STRING = CtyType(TypeKind.STRING)
NUMBER = CtyType(TypeKind.NUMBER)
BOOL = CtyType(TypeKind.BOOL)
DYNAMIC = CtyType(TypeKind.DYNAMIC)


def list_of(element: CtyType) -> CtyType:
    return CtyType(TypeKind.LIST, element=element)


def set_of(element: CtyType) -> CtyType:
    return CtyType(TypeKind.SET, element=element)


def map_of(element: CtyType) -> CtyType:
    return CtyType(TypeKind.MAP, element=element)


def object_of(attributes: Mapping[str, CtyType]) -> CtyType:
    return CtyType(TypeKind.OBJECT, attributes=tuple(sorted(attributes.items())))


def tuple_of(elements: Iterable[CtyType]) -> CtyType:
    return CtyType(TypeKind.TUPLE, elements=tuple(elements))


EMPTY_OBJECT = object_of({})
EMPTY_TUPLE = tuple_of(())

_PRIMITIVE_NAMES = {
    TypeKind.STRING: "String",
    TypeKind.BOOL: "Boolean",
    TypeKind.NUMBER: "Number",
}

_COLLECTION_PREFIXES = {
    TypeKind.LIST: "List of ",
    TypeKind.SET: "Set of ",
    TypeKind.MAP: "Map of ",
}


def format_type(ty: CtyType) -> str:
    """Return the Markdown name of a type, such as ``List of String``."""
    if ty.kind is TypeKind.DYNAMIC:
        return "Dynamic"
    if ty.is_primitive():
        return _PRIMITIVE_NAMES[ty.kind]
    if ty.is_collection():
        try:
            inner = format_type(ty.element)
        except SchemaRenderError as exc:
            raise SchemaRenderError(
                f"unable to write element type for {ty.friendly_name()!r}: {exc}"
            ) from exc
        return _COLLECTION_PREFIXES[ty.kind] + inner
    if ty.is_tuple():
        return "Tuple"
    if ty.is_object():
        return "Object"
    raise SchemaRenderError(f"unexpected type {ty.friendly_name()!r}")