"""Actions built on top of the renderer."""

from jtree.modules.template import CopyParams, exec_template, render_content

__all__ = ["CopyParams", "exec_template", "render_content"]
