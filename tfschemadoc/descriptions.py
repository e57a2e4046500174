"""One-line Markdown descriptions of attributes and block types."""

from __future__ import annotations

from tfschemadoc.ctytype import SchemaRenderError, format_type
from tfschemadoc.schema import (
    NestingMode,
    SchemaAttribute,
    SchemaBlockType,
    child_attribute_is_optional,
    child_attribute_is_read_only,
    child_attribute_is_required,
    child_block_is_optional,
    child_block_is_read_only,
    child_block_is_required,
)

_WRITE_ONLY = (
    ", [Write-only](https://developer.hashicorp.com/terraform/language/resources/"
    "ephemeral#write-only-arguments)"
)

_NESTING_LABELS = {
    NestingMode.SINGLE: "",
    NestingMode.LIST: " List",
    NestingMode.SET: " Set",
    NestingMode.MAP: " Map",
}


def _with_description(summary: str, description: str) -> str:
    desc = description.strip()
    return f"{summary} {desc}" if desc else summary


def _attribute_rw(att: SchemaAttribute) -> str:
    if child_attribute_is_required(att):
        return ", Required"
    if child_attribute_is_optional(att):
        return ", Optional"
    if child_attribute_is_read_only(att):
        return ", Read-only"
    raise SchemaRenderError("attribute does not match any filter states")


def _attribute_flags(att: SchemaAttribute) -> str:
    parts = []
    if att.sensitive:
        parts.append(", Sensitive")
    if att.deprecated:
        parts.append(", Deprecated")
    if att.write_only:
        parts.append(_WRITE_ONLY)
    return "".join(parts)


def attribute_description(att: SchemaAttribute, include_rw: bool) -> str:
    """Describe a typed attribute, e.g. ``(String, Required) The name.``."""
    if att.attribute_type is None:
        raise SchemaRenderError("attribute has no type")
    parts = ["(", format_type(att.attribute_type)]
    if include_rw:
        parts.append(_attribute_rw(att))
    parts.append(_attribute_flags(att))
    parts.append(")")
    return _with_description("".join(parts), att.description)


def block_type_description(block: SchemaBlockType) -> str:
    """Describe a nested block type, e.g. ``(Block List, Min: 1) A block.``."""
    try:
        label = _NESTING_LABELS[block.nesting_mode]
    except KeyError:
        raise SchemaRenderError(
            f"unexpected nesting mode for block: {block.nesting_mode.value}"
        ) from None
    parts = ["(Block", label]

    if block.nesting_mode is NestingMode.SINGLE:
        if child_block_is_required(block):
            parts.append(", Required")
        elif child_block_is_optional(block):
            parts.append(", Optional")
        elif child_block_is_read_only(block):
            parts.append(", Read-only")
        else:
            raise SchemaRenderError("block does not match any filter states")
    elif block.min_items > 0:
        parts.append(f", Min: {block.min_items}")

    if block.max_items > 0:
        parts.append(f", Max: {block.max_items}")
    if block.block.deprecated:
        parts.append(", Deprecated")
    parts.append(")")
    return _with_description("".join(parts), block.block.description)


def nested_attribute_type_description(att: SchemaAttribute, include_rw: bool) -> str:
    """Describe an attribute with nested attributes, e.g. ``(Attributes Map) Tags.``."""
    nested = att.attribute_nested_type
    if nested is None:
        raise SchemaRenderError("AttributeNestedType is nil")
    try:
        label = _NESTING_LABELS[nested.nesting_mode]
    except KeyError:
        raise SchemaRenderError(
            f"unexpected nesting mode for attributes: {nested.nesting_mode.value}"
        ) from None
    parts = ["(Attributes", label]

    if nested.nesting_mode is NestingMode.SINGLE:
        if include_rw:
            parts.append(_attribute_rw(att))
    elif nested.min_items > 0:
        parts.append(f", Min: {nested.min_items}")

    if nested.max_items > 0:
        parts.append(f", Max: {nested.max_items}")
    parts.append(_attribute_flags(att))
    parts.append(")")
    return _with_description("".join(parts), att.description)