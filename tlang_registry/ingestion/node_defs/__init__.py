"""Node interface discovery and port extraction for tlang namespace files."""

from .models import PORT_TYPES, NodeDefinition, Port, PortRole
from .parser import NodeDefinitionParser, jsdoc_summary, resolve_export_name
from .ports import (
    ConditionalShape,
    LiteralShape,
    OpaqueShape,
    TypeShape,
    classify_shape,
    extract_ports,
    heuristic_ports,
)
from .type_classifier import classify_type

__all__ = [
    "PORT_TYPES",
    "ConditionalShape",
    "LiteralShape",
    "NodeDefinition",
    "NodeDefinitionParser",
    "OpaqueShape",
    "Port",
    "PortRole",
    "TypeShape",
    "classify_shape",
    "classify_type",
    "extract_ports",
    "heuristic_ports",
    "jsdoc_summary",
    "resolve_export_name",
]
