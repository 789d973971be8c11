"""Ingestion of tlang TypeScript sources: manifest exports and node interfaces."""

from .export_manifest import ExportManifest, resolve_exports
from .node_defs import NodeDefinition, NodeDefinitionParser, Port, PortRole
from .source import SourceFile, load_source, parse_source

__all__ = [
    "ExportManifest",
    "resolve_exports",
    "NodeDefinition",
    "NodeDefinitionParser",
    "Port",
    "PortRole",
    "SourceFile",
    "load_source",
    "parse_source",
]
