"""TOC file generation.

Combines outline parsing, rendering and the optional trailing script text.
The full output is built in memory and only written once rendering succeeds.
"""

import logging
from pathlib import Path

from tocgen.core.nodes import loads
from tocgen.core.renderer import RenderOptions, render

logger = logging.getLogger(__name__)


def generate(
    json_text: str,
    script_text: str = "",
    options: RenderOptions | None = None,
) -> str:
    """Generate TOC markup from outline JSON.

    Args:
        json_text: Outline JSON document
        script_text: Raw text appended verbatim after the markup
        options: Site-specific render options

    Returns:
        Rendered markup followed by script_text

    Raises:
        TocFormatError: If the outline is malformed
    """
    root = loads(json_text)
    return render(root, options) + script_text


def generate_file(
    source: Path,
    script: Path | None,
    output: Path | None,
    options: RenderOptions | None = None,
) -> str:
    """Generate a TOC file from outline and script files.

    An existing output file is replaced. Nothing is written if reading or
    rendering fails.

    Args:
        source: Outline JSON file
        script: File whose contents are appended after the markup, or None
        output: Target file, or None to skip writing

    Returns:
        Generated text, ending with a newline

    Raises:
        FileNotFoundError: If source or script doesn't exist
        TocFormatError: If the outline is malformed
    """
    logger.info(f"Reading outline from {source}")
    json_text = source.read_text(encoding="utf-8")
    script_text = script.read_text(encoding="utf-8") if script is not None else ""

    text = generate(json_text, script_text, options) + "\n"

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {len(text)} characters to {output}")
    return text
