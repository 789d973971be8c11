"""Port extraction from the ``inputs`` / ``outputs`` type of a node interface.

Type expressions are sorted into one of three shapes before extraction:

- LiteralShape: an object type literal ``{ a: number; b: string }``. Exact:
  one port per property signature with a classified type.
- ConditionalShape: ``C extends X ? { ... } : never``. The true branch is
  the node's visible shape; the false branch is never looked at.
- OpaqueShape: everything else (unions, intersections, generics wrapping a
  conditional, mapped types). Best effort: the first ``? { ... }`` block in
  the text is scanned for ``name:`` tokens, every port gets type "any".
  This can pick up nested property names and can miss ports entirely; it
  only guarantees that unusual shapes never abort a run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from tree_sitter import Node

from ..source import SourceFile
from .models import Port, PortRole
from .type_classifier import classify_type

# "? { ... }" up to the first closing brace
_RE_CONDITIONAL_OBJECT = re.compile(r"\?\s*\{([^}]+)\}", re.DOTALL)

# "name:" inside that block
_RE_PROPERTY_NAME = re.compile(r"(\w+)\s*:")

_IGNORED_NAMES = frozenset({"readonly"})


@dataclass(frozen=True)
class LiteralShape:
    node: Node


@dataclass(frozen=True)
class ConditionalShape:
    true_branch: Node


@dataclass(frozen=True)
class OpaqueShape:
    text: str


TypeShape = Union[LiteralShape, ConditionalShape, OpaqueShape]


def classify_shape(source_file: SourceFile, type_node: Node) -> TypeShape:
    """Sort a type node by its syntactic kind."""
    if type_node.type == "object_type":
        return LiteralShape(type_node)
    if type_node.type == "conditional_type":
        consequence = type_node.child_by_field_name("consequence")
        if consequence is not None:
            return ConditionalShape(consequence)
    return OpaqueShape(source_file.text(type_node))


def extract_ports(source_file: SourceFile, type_node: Node, role: PortRole) -> list[Port]:
    """Extract the ordered ports described by ``type_node``."""
    shape = classify_shape(source_file, type_node)

    if isinstance(shape, LiteralShape):
        ports = _literal_ports(source_file, shape.node, role)
    elif isinstance(shape, ConditionalShape):
        return extract_ports(source_file, shape.true_branch, role)
    else:
        ports = heuristic_ports(shape.text, role)

    return _unique(ports)


def heuristic_ports(type_text: str, role: PortRole) -> list[Port]:
    """Text-pattern fallback used for OpaqueShape types."""
    match = _RE_CONDITIONAL_OBJECT.search(type_text)
    if not match:
        return []

    ports = []
    for name in _RE_PROPERTY_NAME.findall(match.group(1)):
        if name in _IGNORED_NAMES:
            continue
        ports.append(Port.for_role(name, "any", role))
    return _unique(ports)


def property_type_node(member: Node) -> Node | None:
    """The type inside a property signature's annotation, if any."""
    annotation = member.child_by_field_name("type")
    if annotation is None:
        return None
    if annotation.type == "type_annotation":
        named = annotation.named_children
        return named[0] if named else None
    return annotation


def _literal_ports(source_file: SourceFile, literal: Node, role: PortRole) -> list[Port]:
    ports = []
    for member in literal.named_children:
        if member.type != "property_signature":
            continue
        name_node = member.child_by_field_name("name")
        if name_node is None:
            continue

        type_node = property_type_node(member)
        type_text = source_file.text(type_node) if type_node is not None else "unknown"
        ports.append(Port.for_role(source_file.text(name_node), classify_type(type_text), role))
    return ports


def _unique(ports: list[Port]) -> list[Port]:
    """Drop repeated port ids, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for port in ports:
        if port.id in seen:
            continue
        seen.add(port.id)
        result.append(port)
    return result
