"""End-to-end registry generation: manifest -> node definitions -> artifact."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .config import Config, get_config
from .ingestion.export_manifest import ExportManifest, resolve_exports
from .ingestion.node_defs import NodeDefinition, NodeDefinitionParser
from .output.artifact import write_artifacts
from .output.registry import Clock, Registry, RegistryEmitter
from .output.typescript_module import render_registry_module

# Called after each namespace is parsed: (namespace, file path, node count)
NamespaceCallback = Callable[[str, Path, int], None]


@dataclass
class PipelineResult:
    """Everything one run produced."""

    manifest: ExportManifest
    registry: Registry
    node_counts: dict[str, int] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)


def collect_definitions(
    manifest: ExportManifest,
    parser: NodeDefinitionParser | None = None,
    on_namespace: NamespaceCallback | None = None,
) -> list[tuple[str, NodeDefinition]]:
    """Parse every namespace file, in manifest order.

    A missing namespace file raises FileNotFoundError.
    """
    parser = parser or NodeDefinitionParser()
    pairs: list[tuple[str, NodeDefinition]] = []
    for namespace, path in manifest.namespaces.items():
        definitions = parser.parse_file(path)
        pairs.extend((namespace, d) for d in definitions)
        if on_namespace is not None:
            on_namespace(namespace, path, len(definitions))
    return pairs


def build_registry(
    config: Config | None = None,
    clock: Clock | None = None,
    on_namespace: NamespaceCallback | None = None,
) -> tuple[ExportManifest, Registry, dict[str, int]]:
    """Resolve, parse and emit without writing anything."""
    config = config or get_config()

    manifest = resolve_exports(config.source.manifest_path)

    node_counts: dict[str, int] = {}

    def _record(namespace: str, path: Path, count: int) -> None:
        node_counts[namespace] = count
        if on_namespace is not None:
            on_namespace(namespace, path, count)

    pairs = collect_definitions(manifest, on_namespace=_record)

    emitter = RegistryEmitter(
        category_colors=config.registry.category_colors,
        default_color=config.registry.default_color,
        clock=clock,
    )
    return manifest, emitter.emit(pairs), node_counts


def render_outputs(registry: Registry, config: Config) -> dict[Path, str]:
    """Artifact path -> text for the configured output format."""
    outputs: dict[Path, str] = {}
    fmt = config.output.format
    if fmt in ("typescript", "both"):
        outputs[Path(config.output.path)] = render_registry_module(
            registry, types_import=config.output.types_import
        )
    if fmt == "json":
        outputs[Path(config.output.path)] = registry.to_json()
    elif fmt == "both":
        outputs[config.output.json_path] = registry.to_json()
    return outputs


def run_pipeline(
    config: Config | None = None,
    clock: Clock | None = None,
    on_namespace: NamespaceCallback | None = None,
) -> PipelineResult:
    """Generate the registry and write the artifact(s).

    All reading and parsing happens before the first write, and every
    artifact is staged before any is replaced, so a failed run leaves no
    output behind.
    """
    config = config or get_config()
    manifest, registry, node_counts = build_registry(config, clock=clock, on_namespace=on_namespace)

    result = PipelineResult(manifest=manifest, registry=registry, node_counts=node_counts)
    result.written.extend(write_artifacts(render_outputs(registry, config)))
    return result
