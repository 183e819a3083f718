"""Shared test fixtures."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def outline_data() -> dict[str, object]:
    """Outline with a root document, a nested dropdown and a PDF link."""
    return {
        "class": "TOC",
        "array": [
            {"class": "Document", "dir": "ROOT", "file": "index", "desc": "Home"},
            {
                "class": "Dropdown",
                "desc": "User Guide",
                "array": [
                    {"class": "Doc", "dir": "guide", "file": "setup", "desc": "Setup"},
                    {
                        "class": "Dropdown",
                        "desc": "Advanced Topics",
                        "array": [
                            {
                                "class": "Doc",
                                "dir": "guide/advanced",
                                "file": "tuning",
                                "desc": "Tuning",
                                "pdf": True,
                            },
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def outline_file(tmp_path: Path, outline_data: dict[str, object]) -> Path:
    """Write the sample outline to toc.json in tmp_path."""
    path = tmp_path / "toc.json"
    path.write_text(json.dumps(outline_data))
    return path
