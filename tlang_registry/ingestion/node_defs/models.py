"""Data models for node definitions extracted from tlang sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

PORT_TYPES = ("number", "string", "boolean", "array", "object", "any")


class PortRole(Enum):
    """Which side of a node a port sits on."""

    INPUT = "input"
    OUTPUT = "output"


def capitalize(text: str) -> str:
    """Upper-case the first character only ("inputValue" -> "InputValue")."""
    return text[:1].upper() + text[1:]


@dataclass(frozen=True)
class Port:
    """A single input or output slot of a node."""

    id: str
    label: str
    type: str = "any"
    required: bool = False

    @classmethod
    def for_role(cls, port_id: str, type_category: str, role: PortRole) -> Port:
        """Build a port; inputs are always required, outputs never are."""
        return cls(
            id=port_id,
            label=capitalize(port_id),
            type=type_category,
            required=role is PortRole.INPUT,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "required": self.required,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Port:
        return cls(
            id=d["id"],
            label=d.get("label", capitalize(d["id"])),
            type=d.get("type", "any"),
            required=d.get("required", False),
        )


@dataclass(frozen=True)
class NodeDefinition:
    """One recognised node interface from a namespace file."""

    exported_name: str
    declared_name: str
    description: str = ""
    inputs: tuple[Port, ...] = ()
    outputs: tuple[Port, ...] = ()
