from .dockerfile import render_build_definition, render_expose_lines, render_copy_lines

__all__ = ["render_build_definition", "render_expose_lines", "render_copy_lines"]
