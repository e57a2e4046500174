"""Provider schema model and the rules that classify its attributes and blocks."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from typing import Any

from tfschemadoc.ctytype import CtyType


class NestingMode(enum.Enum):
    """How a nested block or nested attribute type repeats."""

    SINGLE = "single"
    GROUP = "group"
    LIST = "list"
    SET = "set"
    MAP = "map"


@dataclass
class SchemaAttribute:
    """One attribute of a block, either typed or with nested attributes."""

    attribute_type: CtyType | None = None
    attribute_nested_type: SchemaNestedAttributeType | None = None
    description: str = ""
    description_kind: str = "plain"
    deprecated: bool = False
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    write_only: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchemaAttribute:
        type_value = data.get("type")
        nested_value = data.get("nested_type")
        return cls(
            attribute_type=CtyType.from_json(type_value) if type_value is not None else None,
            attribute_nested_type=(
                SchemaNestedAttributeType.from_dict(nested_value) if nested_value is not None else None
            ),
            description=data.get("description", ""),
            description_kind=data.get("description_kind", "plain"),
            deprecated=bool(data.get("deprecated", False)),
            required=bool(data.get("required", False)),
            optional=bool(data.get("optional", False)),
            computed=bool(data.get("computed", False)),
            sensitive=bool(data.get("sensitive", False)),
            write_only=bool(data.get("write_only", False)),
        )


@dataclass
class SchemaNestedAttributeType:
    """The nested attributes of an attribute, with how they repeat."""

    attributes: dict[str, SchemaAttribute] = field(default_factory=dict)
    nesting_mode: NestingMode = NestingMode.SINGLE
    min_items: int = 0
    max_items: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchemaNestedAttributeType:
        return cls(
            attributes={
                name: SchemaAttribute.from_dict(value)
                for name, value in (data.get("attributes") or {}).items()
            },
            nesting_mode=NestingMode(data.get("nesting_mode", "single")),
            min_items=int(data.get("min_items", 0)),
            max_items=int(data.get("max_items", 0)),
        )


@dataclass
class SchemaBlock:
    """A block: its attributes and nested block types."""

    attributes: dict[str, SchemaAttribute] = field(default_factory=dict)
    nested_blocks: dict[str, SchemaBlockType] = field(default_factory=dict)
    description: str = ""
    description_kind: str = "plain"
    deprecated: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchemaBlock:
        return cls(
            attributes={
                name: SchemaAttribute.from_dict(value)
                for name, value in (data.get("attributes") or {}).items()
            },
            nested_blocks={
                name: SchemaBlockType.from_dict(value)
                for name, value in (data.get("block_types") or {}).items()
            },
            description=data.get("description", ""),
            description_kind=data.get("description_kind", "plain"),
            deprecated=bool(data.get("deprecated", False)),
        )


@dataclass
class SchemaBlockType:
    """A nested block type: a block with nesting mode and item limits."""

    block: SchemaBlock = field(default_factory=SchemaBlock)
    nesting_mode: NestingMode = NestingMode.SINGLE
    min_items: int = 0
    max_items: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchemaBlockType:
        return cls(
            block=SchemaBlock.from_dict(data.get("block") or {}),
            nesting_mode=NestingMode(data.get("nesting_mode", "single")),
            min_items=int(data.get("min_items", 0)),
            max_items=int(data.get("max_items", 0)),
        )


@dataclass
class Schema:
    """A resource or data source schema: a version and its root block."""

    block: SchemaBlock = field(default_factory=SchemaBlock)
    version: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schema:
        return cls(
            block=SchemaBlock.from_dict(data.get("block") or {}),
            version=int(data.get("version", 0)),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> Schema:
        return cls.from_dict(json.loads(text))


def child_attribute_is_required(att: SchemaAttribute) -> bool:
    return att.required


def child_attribute_is_write_only(att: SchemaAttribute) -> bool:
    return att.write_only


def child_attribute_is_optional(att: SchemaAttribute) -> bool:
    return att.optional


def child_attribute_is_read_only(att: SchemaAttribute) -> bool:
    """Read-only means computed but neither optional nor required."""
    return att.computed and not att.optional and not att.required


def child_block_is_required(block: SchemaBlockType) -> bool:
    return block.min_items > 0


def child_block_is_optional(block: SchemaBlockType) -> bool:
    """True for blocks with no minimum that are empty or have any settable child."""
    if block.min_items > 0:
        return False
    inner = block.block
    if not inner.nested_blocks and not inner.attributes:
        return True
    if any(
        child_block_is_required(child) or child_block_is_optional(child)
        for child in inner.nested_blocks.values()
    ):
        return True
    return any(
        child_attribute_is_required(att) or child_attribute_is_optional(att)
        for att in inner.attributes.values()
    )


def child_block_is_read_only(block: SchemaBlockType) -> bool:
    """True for blocks without item limits whose every leaf is read-only."""
    if block.min_items != 0 or block.max_items != 0:
        return False
    inner = block.block
    return all(child_block_is_read_only(child) for child in inner.nested_blocks.values()) and all(
        child_attribute_is_read_only(att) for att in inner.attributes.values()
    )


def child_block_contains_write_only(block: SchemaBlockType) -> bool:
    """True for blocks that hold any write-only attribute at any depth."""
    inner = block.block
    return any(child_block_contains_write_only(child) for child in inner.nested_blocks.values()) or any(
        child_attribute_is_write_only(att) for att in inner.attributes.values()
    )