"""TypeScript source loading via tree-sitter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

LANGUAGE = "typescript"


@dataclass
class SourceFile:
    """A parsed TypeScript file: raw bytes plus its syntax tree."""

    path: Path
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def statements(self) -> list[Node]:
        """Top-level statements, including comment nodes, in source order."""
        return list(self.root.children)

    def text(self, node: Node | None) -> str:
        """Source text covered by ``node`` ("" for None)."""
        if node is None:
            return ""
        return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def parse_source(text: str, path: Path | str = "<memory>") -> SourceFile:
    """Parse TypeScript text without touching the filesystem."""
    source = text.encode("utf-8")
    parser = get_parser(LANGUAGE)
    return SourceFile(path=Path(path), source=source, tree=parser.parse(source))


def load_source(path: Path | str) -> SourceFile:
    """Read and parse a TypeScript file.

    Raises FileNotFoundError when the file does not exist; other read
    failures propagate as OSError.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"TypeScript source not found: {path}")
    return parse_source(path.read_text(encoding="utf-8"), path)


def string_literal_value(source_file: SourceFile, node: Node) -> str:
    """Value of a string literal node, without its quotes."""
    text = source_file.text(node)
    if len(text) >= 2 and text[0] in "'\"`" and text[-1] == text[0]:
        return text[1:-1]
    return text


def unwrap_export(node: Node) -> tuple[Node | None, bool]:
    """Return (declaration, is_exported) for a top-level statement.

    ``export interface X {}`` yields the inner interface declaration with
    is_exported=True; a bare declaration is returned as-is. Export
    statements that carry no declaration yield (None, True). Ambient forms
    (``declare interface X``, ``export declare type A = X``) yield the
    wrapped declaration.
    """
    exported = node.type == "export_statement"
    declaration = node.child_by_field_name("declaration") if exported else node
    if declaration is not None and declaration.type == "ambient_declaration":
        declaration = _ambient_inner(declaration)
    return declaration, exported


def _ambient_inner(node: Node) -> Node | None:
    for child in node.named_children:
        if child.type in ("interface_declaration", "type_alias_declaration"):
            return child
    return None
