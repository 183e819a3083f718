"""Outline tree parsed from the navigation JSON.

The outline is a tagged union of three node kinds. The ``class`` field of
each raw JSON object selects the kind; unrecognized values fall through to
a document entry.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from tocgen.core.types import DROPDOWN_CLASS, TOC_CLASS
from tocgen.exceptions import TocFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentNode:
    """Leaf entry linking to an HTML page or a PDF."""

    dir: str
    file: str
    desc: str
    pdf: bool = False


@dataclass(frozen=True)
class DropdownNode:
    """Collapsible section holding further dropdowns or documents."""

    desc: str
    array: tuple[DropdownNode | DocumentNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TocNode:
    """Root container of the navigation tree."""

    array: tuple[DropdownNode | DocumentNode, ...] = field(default_factory=tuple)


Node = TocNode | DropdownNode | DocumentNode
ChildNode = DropdownNode | DocumentNode


def loads(text: str) -> Node:
    """Parse outline JSON text into a node tree.

    Args:
        text: JSON document with a top-level ``class`` field

    Returns:
        Root node of the outline

    Raises:
        TocFormatError: If the text is not valid JSON or a node is malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TocFormatError(f"Invalid outline JSON: {e}") from e
    root = parse_node(data)
    logger.debug(f"Parsed outline with {sum(1 for _ in walk(root))} nodes")
    return root


def parse_node(data: object, path: str = "$") -> Node:
    """Parse the root object of an outline.

    The root may be a TOC, a Dropdown, or a document entry.
    """
    obj = _require_object(data, path)
    node_class = _require_str(obj, "class", path)
    if node_class == TOC_CLASS:
        return TocNode(array=_parse_array(obj, path))
    if node_class == DROPDOWN_CLASS:
        return _parse_dropdown(obj, path)
    return _parse_document(obj, path)


def parse_child(data: object, path: str) -> ChildNode:
    """Parse an element of a TOC or Dropdown ``array``.

    Only ``Dropdown`` is recognized here; every other class, including a
    nested ``TOC``, is parsed as a document entry.
    """
    obj = _require_object(data, path)
    node_class = _require_str(obj, "class", path)
    if node_class == DROPDOWN_CLASS:
        return _parse_dropdown(obj, path)
    return _parse_document(obj, path)


def _parse_dropdown(obj: dict[str, object], path: str) -> DropdownNode:
    desc = _require_str(obj, "desc", path)
    return DropdownNode(desc=desc, array=_parse_array(obj, path))


def _parse_document(obj: dict[str, object], path: str) -> DocumentNode:
    return DocumentNode(
        dir=_require_str(obj, "dir", path),
        file=_require_str(obj, "file", path),
        desc=_require_str(obj, "desc", path),
        pdf=_parse_pdf_flag(obj.get("pdf")),
    )


def _parse_array(obj: dict[str, object], path: str) -> tuple[ChildNode, ...]:
    items = obj.get("array")
    if items is None:
        raise TocFormatError(f"{path}: missing required field 'array'")
    if not isinstance(items, list):
        raise TocFormatError(f"{path}.array must be a list")
    return tuple(parse_child(item, f"{path}.array[{i}]") for i, item in enumerate(items))


def _parse_pdf_flag(value: object) -> bool:
    """Interpret the optional ``pdf`` field; anything unrecognized is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False


def _require_object(data: object, path: str) -> dict[str, object]:
    if not isinstance(data, dict):
        raise TocFormatError(f"{path} must be a JSON object")
    return data


def _require_str(obj: dict[str, object], key: str, path: str) -> str:
    value = obj.get(key)
    if value is None:
        raise TocFormatError(f"{path}: missing required field '{key}'")
    if not isinstance(value, str):
        raise TocFormatError(f"{path}.{key} must be a string")
    return value


def walk(root: Node) -> Iterator[Node]:
    """Yield every node of the tree in pre-order (render order)."""
    yield root
    if isinstance(root, (TocNode, DropdownNode)):
        for child in root.array:
            yield from walk(child)
