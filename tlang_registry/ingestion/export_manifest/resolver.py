"""Discovers namespaces re-exported from the tlang root manifest."""

from __future__ import annotations

from pathlib import Path

from tree_sitter import Node

from ..source import SourceFile, load_source, string_literal_value
from .models import ExportManifest


def resolve_exports(manifest_path: Path | str) -> ExportManifest:
    """Parse the manifest and return its top-level names and namespaces.

    Only ``export ... from '<module>'`` statements are considered:

    - ``export { A, B as C } from './x'`` adds A and C to the top-level names
    - ``export * as Numbers from './numbers'`` maps Numbers to
      ``<manifest dir>/numbers.ts``

    A missing manifest raises FileNotFoundError.
    """
    manifest_path = Path(manifest_path)
    source_file = load_source(manifest_path)
    base_dir = manifest_path.parent

    top_level: set[str] = set()
    namespaces: dict[str, Path] = {}

    for statement in source_file.statements():
        if statement.type != "export_statement":
            continue

        module_node = _module_specifier(statement)
        if module_node is None:
            continue
        specifier = string_literal_value(source_file, module_node)

        for child in statement.named_children:
            if child.type == "export_clause":
                top_level.update(_named_exports(source_file, child))
            elif child.type == "namespace_export":
                name = _namespace_name(source_file, child)
                if name:
                    namespaces[name] = resolve_module_path(base_dir, specifier)

    return ExportManifest(top_level_names=frozenset(top_level), namespaces=namespaces)


def resolve_module_path(base_dir: Path, specifier: str) -> Path:
    """Map a relative module specifier to the .ts file backing it."""
    if specifier.endswith(".ts"):
        return base_dir / specifier
    if specifier.endswith(".js"):
        # ESM-style specifiers name the emitted file
        return base_dir / (specifier[:-3] + ".ts")
    return base_dir / (specifier + ".ts")


def _module_specifier(statement: Node) -> Node | None:
    source = statement.child_by_field_name("source")
    if source is not None:
        return source
    for child in statement.named_children:
        if child.type == "string":
            return child
    return None


def _named_exports(source_file: SourceFile, clause: Node) -> list[str]:
    names = []
    for spec in clause.named_children:
        if spec.type != "export_specifier":
            continue
        # The public name is the alias when one is given
        name_node = spec.child_by_field_name("alias") or spec.child_by_field_name("name")
        if name_node is not None:
            names.append(string_literal_value(source_file, name_node))
    return names


def _namespace_name(source_file: SourceFile, clause: Node) -> str:
    named = clause.named_children
    if not named:
        return ""
    return string_literal_value(source_file, named[-1])
