"""The node registry: one entry per node, keyed by "<namespace>.<name>"."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ..config import CATEGORY_COLORS, DEFAULT_COLOR
from ..ingestion.node_defs.models import NodeDefinition, Port
from .artifact import write_artifact

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RegistryEntry:
    """Editor-facing metadata for a single node."""

    id: str
    name: str
    category: str
    description: str
    inputs: tuple[Port, ...]
    outputs: tuple[Port, ...]
    type_signature: str
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "inputs": [p.to_dict() for p in self.inputs],
            "outputs": [p.to_dict() for p in self.outputs],
            "tlangType": self.type_signature,
            "style": {"color": self.color},
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> RegistryEntry:
        return cls(
            id=d["id"],
            name=d.get("name", d["id"].split(".", 1)[-1]),
            category=d.get("category", ""),
            description=d.get("description", ""),
            inputs=tuple(Port.from_dict(p) for p in d.get("inputs", [])),
            outputs=tuple(Port.from_dict(p) for p in d.get("outputs", [])),
            type_signature=d.get("tlangType", d["id"]),
            color=d.get("style", {}).get("color", DEFAULT_COLOR),
        )


class Registry:
    """Read-only, insertion-ordered collection of registry entries."""

    def __init__(self, entries: Iterable[RegistryEntry] = (), generated_at: str = "") -> None:
        self._nodes: dict[str, RegistryEntry] = {}
        for entry in entries:
            if entry.id in self._nodes:
                raise ValueError(f"Duplicate registry id: {entry.id}")
            self._nodes[entry.id] = entry
        self.generated_at = generated_at

    @property
    def nodes(self) -> Mapping[str, RegistryEntry]:
        return MappingProxyType(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def get_node_by_id(self, full_id: str) -> RegistryEntry | None:
        """Lookup by "<namespace>.<name>" id."""
        return self._nodes.get(full_id)

    def get_nodes_by_category(self, category: str) -> list[RegistryEntry]:
        """Entries of one namespace, in registry order."""
        return [e for e in self._nodes.values() if e.category == category]

    def get_all_categories(self) -> list[str]:
        """Return sorted list of unique categories."""
        return sorted({e.category for e in self._nodes.values()})

    def to_dict(self) -> dict[str, Any]:
        """Serialize the registry to a JSON-compatible dict."""
        return {
            "version": "1.0",
            "generated_at": self.generated_at,
            "node_count": self.node_count,
            "categories": self.get_all_categories(),
            "nodes": {key: entry.to_dict() for key, entry in self._nodes.items()},
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Registry:
        entries = [RegistryEntry.from_dict(node_d) for node_d in d.get("nodes", {}).values()]
        return cls(entries, generated_at=d.get("generated_at", ""))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    def save_json(self, path: Path | str) -> None:
        """Write registry to a JSON file, keeping registry order."""
        write_artifact(path, self.to_json())

    @classmethod
    def load_json(cls, path: Path | str) -> Registry:
        """Load a registry from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


class RegistryEmitter:
    """Assembles the registry from parsed node definitions."""

    def __init__(
        self,
        category_colors: Mapping[str, str] = CATEGORY_COLORS,
        default_color: str = DEFAULT_COLOR,
        clock: Clock | None = None,
    ) -> None:
        self.category_colors = MappingProxyType(dict(category_colors))
        self.default_color = default_color
        self.clock = clock or utc_now

    def color_for(self, namespace: str) -> str:
        return self.category_colors.get(namespace, self.default_color)

    def entry(self, namespace: str, definition: NodeDefinition) -> RegistryEntry:
        full_id = f"{namespace}.{definition.exported_name}"
        return RegistryEntry(
            id=full_id,
            name=definition.exported_name,
            category=namespace,
            description=definition.description or f"{definition.exported_name} operation",
            inputs=definition.inputs,
            outputs=definition.outputs,
            type_signature=full_id,
            color=self.color_for(namespace),
        )

    def emit(self, definitions: Iterable[tuple[str, NodeDefinition]]) -> Registry:
        """Build the registry from (namespace, definition) pairs, in order.

        Two nodes resolving to the same id is an error in the source tree
        and raises ValueError.
        """
        entries = []
        declared_by: dict[str, str] = {}
        for namespace, definition in definitions:
            entry = self.entry(namespace, definition)
            if entry.id in declared_by:
                raise ValueError(
                    f"Duplicate node id {entry.id!r}: declared by both "
                    f"{declared_by[entry.id]} and {definition.declared_name} "
                    f"in namespace {namespace}"
                )
            declared_by[entry.id] = definition.declared_name
            entries.append(entry)

        return Registry(entries, generated_at=self.clock().isoformat())
