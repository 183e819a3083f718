"""Navigation outline to HTML table of contents generator.

Converts a JSON-described documentation outline into the ``toc.html``
fragment included by the documentation site.
"""

from tocgen.core.nodes import DocumentNode, DropdownNode, Node, TocNode, loads
from tocgen.core.renderer import RenderOptions, TocRenderer, render
from tocgen.exceptions import InvariantViolation, TocFormatError, TocgenError
from tocgen.generator import generate, generate_file

__all__ = [
    "DocumentNode",
    "DropdownNode",
    "InvariantViolation",
    "Node",
    "RenderOptions",
    "TocFormatError",
    "TocNode",
    "TocRenderer",
    "TocgenError",
    "generate",
    "generate_file",
    "loads",
    "render",
]
