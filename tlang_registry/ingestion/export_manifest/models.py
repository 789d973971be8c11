"""Data model for the root export manifest (index.ts)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class ExportManifest:
    """Exports discovered in the root manifest.

    ``namespaces`` keeps discovery order; that order becomes the registry's
    insertion order. ``top_level_names`` are plain named re-exports (shared
    utility types and the like) and are not scanned for nodes.
    """

    top_level_names: frozenset[str] = frozenset()
    namespaces: Mapping[str, Path] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        # Freeze whatever mapping was passed in
        object.__setattr__(self, "namespaces", MappingProxyType(dict(self.namespaces)))
        object.__setattr__(self, "top_level_names", frozenset(self.top_level_names))

    @property
    def namespace_count(self) -> int:
        return len(self.namespaces)

    def to_dict(self) -> dict[str, Any]:
        return {
            "top_level_names": sorted(self.top_level_names),
            "namespaces": {name: str(path) for name, path in self.namespaces.items()},
        }
