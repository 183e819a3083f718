"""Core type definitions."""

from typing import NewType

# Link target emitted into <a href="...">, e.g. "/index.html" or
# "{{site.docs_dir}}/guide/setup.html"
Href = NewType("Href", str)

# Document "dir" value that links straight to the site root
ROOT_DIR = "ROOT"

TOC_CLASS = "TOC"
DROPDOWN_CLASS = "Dropdown"
