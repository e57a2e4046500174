"""Render Terraform provider schemas as Markdown documentation, with template helpers."""

__version__ = "0.1.0"
__all__ = ["ctytype", "schema", "descriptions", "render", "tmplfuncs"]