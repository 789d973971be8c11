"""Renders the registry as the TypeScript module imported by the editor."""

from __future__ import annotations

from ..ingestion.node_defs.models import Port
from .registry import Registry, RegistryEntry

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

_HELPERS = """\
/**
 * Get all nodes for a specific category
 */
export function getNodesByCategory(category: string): TLangNodeMetadata[] {
  return Object.values(nodeRegistry).filter(node => node.category === category)
}

/**
 * Get all unique categories
 */
export function getAllCategories(): string[] {
  const categories = new Set<string>()
  Object.values(nodeRegistry).forEach(node => categories.add(node.category))
  return Array.from(categories).sort()
}

/**
 * Get a node by its ID
 */
export function getNodeById(id: string): TLangNodeMetadata | undefined {
  return nodeRegistry[id]
}
"""


def ts_string(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    return "'" + "".join(_ESCAPES.get(ch, ch) for ch in value) + "'"


def render_registry_module(
    registry: Registry,
    types_import: str = "../../types/node",
    generator: str = "tlang-registry",
) -> str:
    """Render ``registry`` as registry.ts source text.

    Everything except the "Generated at" header line is a pure function of
    the registry contents.
    """
    entries = ",\n\n".join(_render_entry(entry) for entry in registry.nodes.values())
    body = f"{entries}\n" if entries else ""

    return (
        "/**\n"
        " * Central registry for all tlang node types\n"
        " *\n"
        f" * AUTO-GENERATED by {generator}\n"
        " * DO NOT EDIT MANUALLY - it will be overwritten\n"
        " *\n"
        " * Single Source of Truth: tlang/src/\n"
        f" * Generated at: {registry.generated_at}\n"
        " */\n"
        "\n"
        f"import type {{ TLangNodeMetadata }} from {ts_string(types_import)}\n"
        "\n"
        "/**\n"
        " * Complete registry of all tlang nodes\n"
        " */\n"
        "export const nodeRegistry: Record<string, TLangNodeMetadata> = {\n"
        f"{body}"
        "}\n"
        "\n"
        f"{_HELPERS}"
    )


def _render_entry(entry: RegistryEntry) -> str:
    return (
        f"  {ts_string(entry.id)}: {{\n"
        f"    id: {ts_string(entry.id)},\n"
        f"    name: {ts_string(entry.name)},\n"
        f"    category: {ts_string(entry.category)},\n"
        f"    description: {ts_string(entry.description)},\n"
        f"    inputs: {_render_ports(entry.inputs)},\n"
        f"    outputs: {_render_ports(entry.outputs)},\n"
        f"    tlangType: {ts_string(entry.type_signature)},\n"
        f"    style: {{ color: {ts_string(entry.color)} }}\n"
        "  }"
    )


def _render_ports(ports: tuple[Port, ...]) -> str:
    if not ports:
        return "[]"
    lines = ",\n".join(
        f"      {{ id: {ts_string(p.id)}, label: {ts_string(p.label)}, "
        f"type: {ts_string(p.type)}, required: {'true' if p.required else 'false'} }}"
        for p in ports
    )
    return f"[\n{lines}\n    ]"
