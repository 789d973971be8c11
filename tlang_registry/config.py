"""Configuration management for the tlang node registry generator."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

# Palette colours per namespace, as shown in the editor's node palette.
CATEGORY_COLORS: Mapping[str, str] = MappingProxyType({
    "Numbers": "#3b82f6",
    "Strings": "#10b981",
    "Objects": "#f59e0b",
    "Booleans": "#8b5cf6",
    "Tuples": "#ec4899",
    "Unions": "#ec4899",
    "Deep": "#06b6d4",
    "Basic": "#f59e0b",
    "Conditional": "#6366f1",
    "Functions": "#14b8a6",
    "Match": "#f97316",
})

DEFAULT_COLOR = "#6b7280"

OUTPUT_FORMATS = ("typescript", "json", "both")


@dataclass
class SourceConfig:
    """tlang source tree settings."""

    source_dir: Path = field(default_factory=lambda: Path("src"))
    manifest_name: str = "index.ts"

    @property
    def manifest_path(self) -> Path:
        return Path(self.source_dir) / self.manifest_name


@dataclass
class OutputConfig:
    """Generated artifact settings."""

    path: Path = field(default_factory=lambda: Path("playground/src/core/nodes/registry.ts"))
    format: str = "typescript"  # "typescript", "json", or "both"
    types_import: str = "../../types/node"  # Module providing TLangNodeMetadata

    def __post_init__(self):
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.format!r} "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )

    @property
    def json_path(self) -> Path:
        return Path(self.path).with_suffix(".json")


@dataclass
class RegistryConfig:
    """Registry emission settings."""

    category_colors: Mapping[str, str] = field(default_factory=lambda: CATEGORY_COLORS)
    default_color: str = DEFAULT_COLOR


@dataclass
class Config:
    """Main configuration container."""

    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
