"""Configuration management for tocgen.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from tocgen.core.renderer import RenderOptions

CONFIG_FILENAME = "tocgen.toml"

# Output value meaning "print to stdout instead of writing a file"
STDOUT_OUTPUT = "-"


@dataclass
class TocConfig:
    """Input and output file configuration."""

    source: Path = field(default_factory=lambda: Path("toc.json"))
    script: Path | None = None
    output: Path = field(default_factory=lambda: Path("toc.html"))


@dataclass
class HtmlConfig:
    """Site-specific strings placed into the generated markup."""

    stylesheet: str = "/css/toc.css"
    docs_dir: str = "{{site.docs_dir}}"
    docs_pdf_dir: str = "{{site.docs_pdf_dir}}"

    def to_render_options(self) -> RenderOptions:
        """Convert to renderer options."""
        return RenderOptions(
            stylesheet_href=self.stylesheet,
            docs_dir=self.docs_dir,
            docs_pdf_dir=self.docs_pdf_dir,
        )


@dataclass
class Config:
    """Application configuration."""

    toc: TocConfig
    html: HtmlConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for tocgen.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(toc=TocConfig(), html=HtmlConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            toc=cls._parse_toc(data.get("toc"), config_dir),
            html=cls._parse_html(data.get("html")),
            config_path=path,
        )

    @classmethod
    def _parse_toc(cls, data: object, config_dir: Path) -> TocConfig:
        """Parse toc configuration section.

        Args:
            data: Raw toc section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            TocConfig instance
        """
        if data is None:
            return TocConfig(
                source=config_dir / "toc.json",
                output=config_dir / "toc.html",
            )

        if not isinstance(data, dict):
            raise ValueError("toc section must be a dictionary")

        source = data.get("source", "toc.json")
        if not isinstance(source, str):
            raise ValueError("toc.source must be a string")

        script = data.get("script")
        if script is not None and not isinstance(script, str):
            raise ValueError("toc.script must be a string")

        output = data.get("output", "toc.html")
        if not isinstance(output, str):
            raise ValueError("toc.output must be a string")

        return TocConfig(
            source=config_dir / source,
            script=config_dir / script if script else None,
            output=Path(output) if output == STDOUT_OUTPUT else config_dir / output,
        )

    @classmethod
    def _parse_html(cls, data: object) -> HtmlConfig:
        """Parse html configuration section."""
        if data is None:
            return HtmlConfig()

        if not isinstance(data, dict):
            raise ValueError("html section must be a dictionary")

        defaults = HtmlConfig()
        values: dict[str, str] = {}
        for key in ("stylesheet", "docs_dir", "docs_pdf_dir"):
            value = data.get(key, getattr(defaults, key))
            if not isinstance(value, str):
                raise ValueError(f"html.{key} must be a string")
            values[key] = value

        return HtmlConfig(**values)

    def with_overrides(
        self,
        *,
        source: Path | None = None,
        script: Path | None = None,
        output: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            source: Override toc.source
            script: Override toc.script
            output: Override toc.output

        Returns:
            New Config instance with overrides applied
        """
        toc = replace(
            self.toc,
            source=source if source is not None else self.toc.source,
            script=script if script is not None else self.toc.script,
            output=output if output is not None else self.toc.output,
        )
        return replace(self, toc=toc)
