# tfschemadoc

Render Terraform provider schemas as Markdown reference documentation.

The package reads the JSON schema of a single resource or data source. This
is one entry of the document that Terraform prints for a provider's schemas:
an object with a `block` and a `version`. From it the package writes a
`## Schema` section. That section splits arguments into Required, Optional and
Read-Only groups. Each nested block, nested attribute or object-typed
attribute gets its own anchored "Nested Schema" section.

## Installation

```
pip install tfschemadoc
```

The package has no runtime dependencies.

## Rendering a schema

```python
from pathlib import Path

from tfschemadoc.render import render
from tfschemadoc.schema import Schema

schema = Schema.from_json(Path("aws_route_table_association.schema.json").read_text())
print(render(schema))
```

`Schema.from_dict` takes data that has already been decoded.

Rendering follows a few rules:

- A top-level `id` attribute that has no description always goes in the
  Read-Only group. It is given the description "The ID of this resource."
- A group that holds a write-only argument starts with a note that write-only
  arguments need Terraform 1.11 or later.

`render` raises `tfschemadoc.ctytype.SchemaRenderError` if the schema cannot
be documented. Examples are an optional block whose children are all
computed, or a tuple-typed attribute.

## Smaller building blocks

- `tfschemadoc.ctytype.format_type` turns a `CtyType` into its label, for
  example `List of Map of String`.
- `CtyType.from_json` decodes the type notation used in schema JSON, such as
  `"string"` or `["list", "string"]`.
- `list_of`, `set_of`, `map_of`, `object_of` and `tuple_of` build types
  directly. The module also provides the constants `STRING`, `NUMBER`, `BOOL`,
  `DYNAMIC`, `EMPTY_OBJECT` and `EMPTY_TUPLE`.
- `tfschemadoc.descriptions` has three functions:
  `attribute_description`, `block_type_description` and
  `nested_attribute_type_description`. Each returns the parenthesised
  summary that follows an argument name, for example
  `(String, Required, Sensitive) The password.`
- `tfschemadoc.schema` holds the schema model: `Schema`, `SchemaBlock`,
  `SchemaBlockType`, `SchemaAttribute`, `SchemaNestedAttributeType` and
  `NestingMode`. It also has the classification predicates, such as
  `child_attribute_is_required`, `child_attribute_is_read_only`,
  `child_block_is_optional`, `child_block_is_read_only` and
  `child_block_contains_write_only`.

## Template helpers

`tfschemadoc.tmplfuncs` has two helpers for documentation templates:

- `prefix_lines(prefix, text)` puts a prefix in front of every line of the text.
- `code_file(format, file)` wraps a file's trimmed contents in a fenced code
  block tagged with `format`. It raises `OSError` if the file cannot be read
  and `ValueError` if the file is empty or holds only whitespace.

## What it does not do

This is a library only. It has no command-line tool. It does not run
Terraform or fetch schemas itself. It does not generate a full documentation
site, process templates or write files. It returns the schema section as a
string, and the surrounding page is up to you.

## Running the tests

```
pip install -e ".[test]"
pytest
```