"""Finds node interfaces in a tlang namespace file.

A node is a top-level interface whose name ends in ``Node``. Its public
name comes from an exported alias at the bottom of the file
(``export type Add = AddNode``) and falls back to the interface name
without the suffix. Anything else in the file is skipped.
"""

from __future__ import annotations

import re
from pathlib import Path

from tree_sitter import Node

from ..source import SourceFile, load_source, parse_source, unwrap_export
from .models import NodeDefinition, PortRole
from .ports import extract_ports, property_type_node

NODE_SUFFIX = "Node"

# Leading "*" of each JSDoc line
_RE_JSDOC_LINE = re.compile(r"^\s*\*?\s?")


class NodeDefinitionParser:
    """Parses one namespace file into an ordered list of NodeDefinitions."""

    def parse_file(self, path: Path | str) -> list[NodeDefinition]:
        """Parse a namespace file from disk. Missing files raise FileNotFoundError."""
        return self.parse_source_file(load_source(path))

    def parse(self, text: str, filename: str = "<memory>") -> list[NodeDefinition]:
        """Parse namespace source text."""
        return self.parse_source_file(parse_source(text, filename))

    def parse_source_file(self, source_file: SourceFile) -> list[NodeDefinition]:
        aliases = self.alias_table(source_file)

        nodes = []
        for statement in source_file.statements():
            declaration, _ = unwrap_export(statement)
            if declaration is None or declaration.type != "interface_declaration":
                continue

            name = source_file.text(declaration.child_by_field_name("name"))
            if not name.endswith(NODE_SUFFIX):
                continue

            nodes.append(self._build_definition(source_file, statement, declaration, name, aliases))
        return nodes

    def alias_table(self, source_file: SourceFile) -> dict[str, str]:
        """Exported type aliases that point at a node interface.

        Maps alias name to the aliased type text, in declaration order.
        """
        aliases: dict[str, str] = {}
        for statement in source_file.statements():
            declaration, exported = unwrap_export(statement)
            if not exported or declaration is None:
                continue
            if declaration.type != "type_alias_declaration":
                continue

            alias = source_file.text(declaration.child_by_field_name("name"))
            target = source_file.text(declaration.child_by_field_name("value")).strip()
            if target.endswith(NODE_SUFFIX) or f"{NODE_SUFFIX}<" in target:
                aliases[alias] = target
        return aliases

    def _build_definition(
        self,
        source_file: SourceFile,
        statement: Node,
        declaration: Node,
        name: str,
        aliases: dict[str, str],
    ) -> NodeDefinition:
        inputs = []
        outputs = []

        body = declaration.child_by_field_name("body")
        members = body.named_children if body is not None else []
        for member in members:
            if member.type != "property_signature":
                continue
            member_name = source_file.text(member.child_by_field_name("name"))
            type_node = property_type_node(member)
            if type_node is None:
                continue

            if member_name == "inputs":
                inputs = extract_ports(source_file, type_node, PortRole.INPUT)
            elif member_name == "outputs":
                outputs = extract_ports(source_file, type_node, PortRole.OUTPUT)

        return NodeDefinition(
            exported_name=resolve_export_name(name, aliases),
            declared_name=name,
            description=leading_description(source_file, statement),
            inputs=tuple(inputs),
            outputs=tuple(outputs),
        )


def resolve_export_name(interface_name: str, aliases: dict[str, str]) -> str:
    """Public name for a node interface.

    First alias (in table order) whose target is the interface itself or a
    generic instantiation of it; otherwise the interface name minus "Node".
    """
    for alias, target in aliases.items():
        if target == interface_name or target.startswith(interface_name + "<"):
            return alias
    return interface_name.removesuffix(NODE_SUFFIX)


def leading_description(source_file: SourceFile, statement: Node) -> str:
    """First line of the JSDoc block directly above ``statement``."""
    docs = []
    sibling = statement.prev_sibling
    while sibling is not None and sibling.type == "comment":
        text = source_file.text(sibling)
        if text.startswith("/**"):
            docs.append(text)
        sibling = sibling.prev_sibling

    if not docs:
        return ""
    # Walked bottom-up; the outermost block is the one that counts
    return jsdoc_summary(docs[-1])


def jsdoc_summary(comment: str) -> str:
    """First line of a JSDoc comment's description, tags excluded."""
    body = comment.strip()
    body = body.removeprefix("/**").removesuffix("*/")

    lines = []
    for raw in body.splitlines():
        line = _RE_JSDOC_LINE.sub("", raw, count=1).rstrip()
        if line.lstrip().startswith("@"):
            break
        lines.append(line)

    description = "\n".join(lines).strip()
    return description.split("\n")[0].strip()
