"""Render a provider schema as a Markdown "Schema" section."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, replace

from tfschemadoc.ctytype import CtyType, SchemaRenderError, format_type
from tfschemadoc.descriptions import (
    attribute_description,
    block_type_description,
    nested_attribute_type_description,
)
from tfschemadoc.schema import (
    Schema,
    SchemaAttribute,
    SchemaBlock,
    SchemaBlockType,
    SchemaNestedAttributeType,
    child_attribute_is_optional,
    child_attribute_is_read_only,
    child_attribute_is_required,
    child_attribute_is_write_only,
    child_block_contains_write_only,
    child_block_is_optional,
    child_block_is_read_only,
    child_block_is_required,
)

_DEFAULT_ID_DESCRIPTION = "The ID of this resource."

_WRITE_ONLY_NOTE = (
    "> **NOTE**: [Write-only arguments](https://developer.hashicorp.com/terraform/language/"
    "resources/ephemeral#write-only-arguments) are supported in Terraform 1.11 and later.\n\n"
)


@dataclass(frozen=True)
class _GroupFilter:
    top_level_title: str
    nested_title: str
    filter_attribute: Callable[[SchemaAttribute], bool]
    filter_block: Callable[[SchemaBlockType], bool]


# Every attribute and block falls in one of these groups, tried in order.
_GROUP_FILTERS = (
    _GroupFilter("### Required", "Required:", child_attribute_is_required, child_block_is_required),
    _GroupFilter("### Optional", "Optional:", child_attribute_is_optional, child_block_is_optional),
    _GroupFilter("### Read-Only", "Read-Only:", child_attribute_is_read_only, child_block_is_read_only),
)


@dataclass(frozen=True)
class _NestedType:
    anchor_id: str
    path: tuple[str, ...]
    block: SchemaBlock | None = None
    obj: CtyType | None = None
    attrs: SchemaNestedAttributeType | None = None
    group: _GroupFilter | None = None

    @property
    def path_title(self) -> str:
        return ".".join(self.path)


def _see_below(anchor_id: str) -> str:
    return f" (see [below for nested schema](#{anchor_id}))"


def _is_object_collection(ty: CtyType) -> bool:
    return ty.is_collection() and ty.element is not None and ty.element.is_object()


class _MarkdownWriter:
    """Accumulates the Markdown text of one schema."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def text(self) -> str:
        return "".join(self._parts)

    def write(self, text: str) -> None:
        self._parts.append(text)

    def attribute(
        self, path: tuple[str, ...], att: SchemaAttribute, group: _GroupFilter | None
    ) -> list[_NestedType]:
        self.write(f"- `{path[-1]}` ")
        if att.attribute_nested_type is None:
            self.write(attribute_description(att, False))
        else:
            self.write(nested_attribute_type_description(att, False))

        ty = att.attribute_type
        if ty is not None and ty.is_tuple():
            raise SchemaRenderError("tuples are not yet supported")

        anchor_id = "nestedatt--" + "--".join(path)
        nested: list[_NestedType] = []
        if att.attribute_nested_type is not None:
            nested.append(_NestedType(anchor_id, path, attrs=att.attribute_nested_type, group=group))
        elif ty is not None and ty.is_object():
            nested.append(_NestedType(anchor_id, path, obj=ty, group=group))
        elif ty is not None and _is_object_collection(ty):
            nested.append(_NestedType(anchor_id, path, obj=ty.element, group=group))
        if nested:
            self.write(_see_below(anchor_id))
        self.write("\n")
        return nested

    def block_type(self, path: tuple[str, ...], block: SchemaBlockType) -> list[_NestedType]:
        name = path[-1]
        self.write(f"- `{name}` ")
        try:
            self.write(block_type_description(block))
        except SchemaRenderError as exc:
            raise SchemaRenderError(f'unable to write block description for "{name}": {exc}') from exc
        anchor_id = "nestedblock--" + "--".join(path)
        self.write(_see_below(anchor_id) + "\n")
        return [_NestedType(anchor_id, path, block=block.block)]

    def block_children(self, parents: tuple[str, ...], block: SchemaBlock, root: bool) -> None:
        attributes = dict(block.attributes)
        groups: list[list[str]] = [[] for _ in _GROUP_FILTERS]
        for name in [*block.attributes, *block.nested_blocks]:
            groups[_classify(name, parents, block, attributes)].append(name)

        nested: list[_NestedType] = []
        for gf, group_names in zip(_GROUP_FILTERS, groups):
            if not group_names:
                continue
            names = sorted(group_names)
            self.write((gf.top_level_title if root else gf.nested_title) + "\n\n")

            if any(_holds_write_only(name, block, attributes) for name in names):
                self.write(_WRITE_ONLY_NOTE)

            for name in names:
                path = (*parents, name)
                child_block = block.nested_blocks.get(name)
                if child_block is not None:
                    try:
                        nested.extend(self.block_type(path, child_block))
                    except SchemaRenderError as exc:
                        raise SchemaRenderError(f'unable to render block "{name}": {exc}') from exc
                else:
                    try:
                        nested.extend(self.attribute(path, attributes[name], gf))
                    except SchemaRenderError as exc:
                        raise SchemaRenderError(f'unable to render attribute "{name}": {exc}') from exc
            self.write("\n")

        self.nested_types(nested)

    def nested_types(self, nested: Iterable[_NestedType]) -> None:
        for nt in nested:
            self.write(f'<a id="{nt.anchor_id}"></a>\n')
            self.write(f"### Nested Schema for `{nt.path_title}`\n\n")
            if nt.block is not None:
                self.block_children(nt.path, nt.block, False)
            elif nt.obj is not None and nt.group is not None:
                self.object_children(nt.path, nt.obj, nt.group)
            elif nt.attrs is not None and nt.group is not None:
                self.nested_attribute_children(nt.path, nt.attrs, nt.group)
            else:
                raise SchemaRenderError(f"missing information on nested block: {nt.path_title}")
            self.write("\n")

    def object_attribute(
        self, path: tuple[str, ...], ty: CtyType, group: _GroupFilter
    ) -> list[_NestedType]:
        self.write(f"- `{path[-1]}` ({format_type(ty)})")
        if ty.is_tuple():
            raise SchemaRenderError("tuples are not yet supported")

        anchor_id = "nestedobjatt--" + "--".join(path)
        nested: list[_NestedType] = []
        if ty.is_object():
            nested.append(_NestedType(anchor_id, path, obj=ty, group=group))
        elif _is_object_collection(ty):
            nested.append(_NestedType(anchor_id, path, obj=ty.element, group=group))
        if nested:
            self.write(_see_below(anchor_id))
        self.write("\n")
        return nested

    def object_children(self, parents: tuple[str, ...], ty: CtyType, group: _GroupFilter) -> None:
        self.write(group.nested_title + "\n\n")
        nested: list[_NestedType] = []
        for name, att_type in sorted(ty.attribute_types.items()):
            try:
                nested.extend(self.object_attribute((*parents, name), att_type, group))
            except SchemaRenderError as exc:
                raise SchemaRenderError(f'unable to render attribute "{name}": {exc}') from exc
        self.write("\n")
        self.nested_types(nested)

    def nested_attribute_children(
        self,
        parents: tuple[str, ...],
        nested_attributes: SchemaNestedAttributeType,
        group: _GroupFilter,
    ) -> None:
        attrs = nested_attributes.attributes
        names = sorted(attrs)
        nested: list[_NestedType] = []
        for gf in _GROUP_FILTERS:
            # An attribute is listed under every group whose filter it passes.
            members = [name for name in names if gf.filter_attribute(attrs[name])]
            if not members:
                continue
            self.write(gf.nested_title + "\n\n")
            for name in members:
                try:
                    nested.extend(self.attribute((*parents, name), attrs[name], group))
                except SchemaRenderError as exc:
                    raise SchemaRenderError(f'unable to render attribute "{name}": {exc}') from exc
            self.write("\n")
        self.nested_types(nested)


def _classify(
    name: str,
    parents: Sequence[str],
    block: SchemaBlock,
    attributes: dict[str, SchemaAttribute],
) -> int:
    """Return the index of the group a child belongs to."""
    child_block = block.nested_blocks.get(name)
    if child_block is not None:
        for index, gf in enumerate(_GROUP_FILTERS):
            if gf.filter_block(child_block):
                return index
    else:
        att = attributes[name]
        # A root "id" without a description is always listed as read-only.
        default_id = name.lower() == "id" and not parents and att.description == ""
        for index, gf in enumerate(_GROUP_FILTERS):
            if default_id:
                if "Read-Only" in gf.top_level_title:
                    attributes[name] = replace(att, description=_DEFAULT_ID_DESCRIPTION)
                    return index
            elif gf.filter_attribute(att):
                return index

    raise SchemaRenderError(
        f'no match for "{name}", this can happen if you have incompatible schema defined, '
        "for example an optional block where all the child attributes are computed, in which "
        "case the block itself should also be marked computed"
    )


def _holds_write_only(
    name: str, block: SchemaBlock, attributes: Mapping[str, SchemaAttribute]
) -> bool:
    child_block = block.nested_blocks.get(name)
    if child_block is not None:
        return child_block_contains_write_only(child_block)
    att = attributes.get(name)
    return att is not None and child_attribute_is_write_only(att)


def render(schema: Schema) -> str:
    """Return the Markdown documentation of a schema, starting with ``## Schema``."""
    writer = _MarkdownWriter()
    writer.write("## Schema\n\n")
    try:
        writer.block_children((), schema.block, True)
    except SchemaRenderError as exc:
        raise SchemaRenderError(f"unable to render schema: {exc}") from exc
    return writer.text()