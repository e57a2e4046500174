import pytest

from tfschemadoc.ctytype import SchemaRenderError
from tfschemadoc.render import render
from tfschemadoc.schema import Schema

WRITE_ONLY_LINK = (
    "[Write-only](https://developer.hashicorp.com/terraform/language/resources/"
    "ephemeral#write-only-arguments)"
)
WRITE_ONLY_NOTE = (
    "> **NOTE**: [Write-only arguments](https://developer.hashicorp.com/terraform/language/"
    "resources/ephemeral#write-only-arguments) are supported in Terraform 1.11 and later.\n\n"
)


def _schema(attributes=None, block_types=None):
    block = {"description_kind": "plain"}
    if attributes is not None:
        block["attributes"] = attributes
    if block_types is not None:
        block["block_types"] = block_types
    return Schema.from_dict({"version": 0, "block": block})


def test_groups_and_default_id_description():
    schema = _schema(
        attributes={
            "name": {"type": "string", "required": True, "description": "The name."},
            "tags": {"type": ["map", "string"], "optional": True},
            "id": {"type": "string", "computed": True},
            "arn": {"type": "string", "computed": True, "description": "The ARN."},
        }
    )
    expected = (
        "## Schema\n\n"
        "### Required\n\n"
        "- `name` (String) The name.\n"
        "\n"
        "### Optional\n\n"
        "- `tags` (Map of String)\n"
        "\n"
        "### Read-Only\n\n"
        "- `arn` (String) The ARN.\n"
        "- `id` (String) The ID of this resource.\n"
        "\n"
    )
    assert render(schema) == expected


def test_render_does_not_change_the_schema():
    schema = _schema(attributes={"id": {"type": "string", "computed": True}})
    render(schema)
    assert schema.block.attributes["id"].description == ""


def test_id_with_description_follows_its_flags():
    schema = _schema(
        attributes={"id": {"type": "string", "optional": True, "description": "Identifier."}},
        block_types={
            "timeouts": {
                "nesting_mode": "single",
                "block": {"attributes": {"create": {"type": "string", "optional": True}}},
            }
        },
    )
    expected = (
        "## Schema\n\n"
        "### Optional\n\n"
        "- `id` (String) Identifier.\n"
        "- `timeouts` (Block, Optional) (see [below for nested schema](#nestedblock--timeouts))\n"
        "\n"
        '<a id="nestedblock--timeouts"></a>\n'
        "### Nested Schema for `timeouts`\n\n"
        "Optional:\n\n"
        "- `create` (String)\n"
        "\n"
        "\n"
    )
    assert render(schema) == expected


def test_deep_nested_blocks():
    schema = _schema(
        block_types={
            "outer": {
                "nesting_mode": "list",
                "block": {
                    "block_types": {
                        "inner": {
                            "nesting_mode": "single",
                            "min_items": 1,
                            "block": {"attributes": {"x": {"type": "string", "required": True}}},
                        }
                    }
                },
            }
        }
    )
    expected = (
        "## Schema\n\n"
        "### Optional\n\n"
        "- `outer` (Block List) (see [below for nested schema](#nestedblock--outer))\n"
        "\n"
        '<a id="nestedblock--outer"></a>\n'
        "### Nested Schema for `outer`\n\n"
        "Required:\n\n"
        "- `inner` (Block, Required) (see [below for nested schema](#nestedblock--outer--inner))\n"
        "\n"
        '<a id="nestedblock--outer--inner"></a>\n'
        "### Nested Schema for `outer.inner`\n\n"
        "Required:\n\n"
        "- `x` (String)\n"
        "\n"
        "\n"
        "\n"
    )
    assert render(schema) == expected


def test_object_attributes():
    schema = _schema(
        attributes={
            "config": {
                "type": [
                    "object",
                    {"a": "string", "b": ["list", ["object", {"c": "bool"}]]},
                ],
                "optional": True,
            }
        }
    )
    expected = (
        "## Schema\n\n"
        "### Optional\n\n"
        "- `config` (Object) (see [below for nested schema](#nestedatt--config))\n"
        "\n"
        '<a id="nestedatt--config"></a>\n'
        "### Nested Schema for `config`\n\n"
        "Optional:\n\n"
        "- `a` (String)\n"
        "- `b` (List of Object) (see [below for nested schema](#nestedobjatt--config--b))\n"
        "\n"
        '<a id="nestedobjatt--config--b"></a>\n'
        "### Nested Schema for `config.b`\n\n"
        "Optional:\n\n"
        "- `c` (Boolean)\n"
        "\n"
        "\n"
        "\n"
    )
    assert render(schema) == expected


def test_nested_attributes():
    schema = _schema(
        attributes={
            "settings": {
                "nested_type": {
                    "nesting_mode": "single",
                    "attributes": {
                        "enabled": {"type": "bool", "required": True},
                        "level": {"type": "number", "computed": True},
                    },
                },
                "optional": True,
                "description": "Settings.",
            }
        }
    )
    expected = (
        "## Schema\n\n"
        "### Optional\n\n"
        "- `settings` (Attributes) Settings. (see [below for nested schema](#nestedatt--settings))\n"
        "\n"
        '<a id="nestedatt--settings"></a>\n'
        "### Nested Schema for `settings`\n\n"
        "Required:\n\n"
        "- `enabled` (Boolean)\n"
        "\n"
        "Read-Only:\n\n"
        "- `level` (Number)\n"
        "\n"
        "\n"
    )
    assert render(schema) == expected


def test_write_only_note():
    schema = _schema(
        attributes={"value_wo": {"type": "string", "optional": True, "write_only": True}}
    )
    expected = (
        "## Schema\n\n"
        "### Optional\n\n"
        + WRITE_ONLY_NOTE
        + f"- `value_wo` (String, {WRITE_ONLY_LINK})\n"
        "\n"
    )
    assert render(schema) == expected


def test_write_only_note_for_nested_block_written_once():
    schema = _schema(
        block_types={
            "creds": {
                "nesting_mode": "single",
                "block": {
                    "attributes": {
                        "value_wo": {"type": "string", "optional": True, "write_only": True}
                    }
                },
            }
        }
    )
    assert render(schema).count(WRITE_ONLY_NOTE) == 2


def test_incompatible_block_raises():
    schema = _schema(
        block_types={
            "b": {
                "nesting_mode": "single",
                "max_items": 1,
                "block": {"attributes": {"x": {"type": "string", "computed": True}}},
            }
        }
    )
    with pytest.raises(SchemaRenderError, match='no match for "b"'):
        render(schema)


def test_tuple_attribute_raises():
    schema = _schema(attributes={"t": {"type": ["tuple", ["string"]], "optional": True}})
    with pytest.raises(SchemaRenderError, match="tuples are not yet supported"):
        render(schema)


def test_render_from_json():
    schema = Schema.from_json(
        '{"version": 0, "block": {"attributes": {"route_table_id": '
        '{"type": "string", "description_kind": "plain", "required": true}}, '
        '"description_kind": "plain"}}'
    )
    assert render(schema) == "## Schema\n\n### Required\n\n- `route_table_id` (String)\n\n"