"""HTML rendering of the outline tree.

Walks the node tree in pre-order and emits the ``toc.html`` fragment.
Dropdowns and documents render each other's children, so nesting may mix
both kinds to any depth. Nesting depth is passed explicitly through the
traversal; a renderer holds no per-render state and may be shared.
"""

import logging
from dataclasses import dataclass

from tocgen.core.nodes import ChildNode, DocumentNode, DropdownNode, Node, TocNode
from tocgen.core.types import ROOT_DIR, Href
from tocgen.exceptions import InvariantViolation

logger = logging.getLogger(__name__)

GENERATED_COMMENT = "<!-- Computer Generated File, Do Not Edit! -->"
TOC_DIV_OPEN = '<div id="toc" class="nav toc hidden-print">'
INDENT_UNIT = "  "


@dataclass(frozen=True)
class RenderOptions:
    """Site-specific strings placed into the generated markup."""

    stylesheet_href: str = "/css/toc.css"
    docs_dir: str = "{{site.docs_dir}}"
    docs_pdf_dir: str = "{{site.docs_pdf_dir}}"


class TocRenderer:
    """Renders an outline tree to an HTML fragment."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options or RenderOptions()

    @property
    def options(self) -> RenderOptions:
        """Site-specific strings used by this renderer."""
        return self._options

    def render(self, root: Node) -> str:
        """Render a complete outline.

        Args:
            root: Root node, normally a TocNode

        Returns:
            HTML fragment, one element per line, ending with a newline
        """
        lines: list[str] = []
        self._render_node(root, 0, lines)
        html = "".join(f"{line}\n" for line in lines)
        logger.debug(f"Rendered {len(lines)} lines ({len(html)} characters)")
        return html

    def _render_node(self, node: Node, depth: int, out: list[str]) -> None:
        if isinstance(node, TocNode):
            self._render_toc(node, depth, out)
        elif isinstance(node, DropdownNode):
            self._render_dropdown(node, depth, out)
        else:
            self._render_document(node, depth, out)

    def _render_children(
        self,
        children: tuple[ChildNode, ...],
        depth: int,
        out: list[str],
    ) -> None:
        for child in children:
            self._render_node(child, depth, out)

    def _render_toc(self, node: TocNode, depth: int, out: list[str]) -> None:
        out.append(GENERATED_COMMENT)
        out.append(f'<link rel="stylesheet" href={quotes(self._options.stylesheet_href)}>')
        out.append(TOC_DIV_OPEN)
        self._render_children(node.array, depth + 1, out)
        out.append("</div>")

    def _render_dropdown(self, node: DropdownNode, depth: int, out: list[str]) -> None:
        p_id, div_id = dropdown_ids(node.desc)
        href = f"#{div_id}"
        pad = indent(depth)

        out.append("")
        out.append(f"{pad}<p id={quotes(p_id)}>")
        out.append(
            f'{pad}{INDENT_UNIT}<a data-toggle="collapse" class="menu collapsed" '
            f"href={quotes(href)}>{node.desc}</a>"
        )
        out.append(f"{pad}</p>")
        out.append(f'{pad}<div class="collapse" id={quotes(div_id)}>')
        self._render_children(node.array, depth + 1, out)
        out.append(f"{pad}</div>")

    def _render_document(self, node: DocumentNode, depth: int, out: list[str]) -> None:
        href = document_href(node, self._options)
        out.append(f"{indent(depth)}<li><a href={quotes(href)}>{node.desc}</a></li>")


def render(root: Node, options: RenderOptions | None = None) -> str:
    """Render an outline tree with the given (or default) options."""
    return TocRenderer(options).render(root)


def dropdown_ids(desc: str) -> tuple[str, str]:
    """Build element ids for a dropdown.

    Args:
        desc: Dropdown display text

    Returns:
        Tuple of (paragraph id, collapsible div id), e.g.
        ("my-section", "collapse_my_section") for "My Section"
    """
    lowered = desc.lower()
    return lowered.replace(" ", "-"), "collapse_" + lowered.replace(" ", "_")


def document_href(node: DocumentNode, options: RenderOptions | None = None) -> Href:
    """Build the link target for a document entry.

    ``ROOT`` documents link from the site root. Others link into the HTML or
    PDF docs directory, under ``dir`` when it is non-empty.
    """
    opts = options or RenderOptions()
    suffix = ".pdf" if node.pdf else ".html"
    if node.dir == ROOT_DIR:
        prefix = "/"
    else:
        prefix = (opts.docs_pdf_dir if node.pdf else opts.docs_dir) + "/"
        if node.dir:
            prefix += f"{node.dir}/"
    return Href(f"{prefix}{node.file}{suffix}")


def indent(level: int) -> str:
    """Return two spaces per nesting level.

    Raises:
        InvariantViolation: If level is negative
    """
    if level < 0:
        raise InvariantViolation(f"Negative nesting depth: {level}")
    return INDENT_UNIT * level


def quotes(value: str) -> str:
    """Wrap a string in double quotes without escaping its contents."""
    return f'"{value}"'
