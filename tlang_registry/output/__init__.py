"""Registry assembly and artifact writers (registry.ts and registry.json)."""

from .artifact import write_artifact, write_artifacts
from .registry import Registry, RegistryEmitter, RegistryEntry
from .typescript_module import render_registry_module, ts_string

__all__ = [
    "Registry",
    "RegistryEmitter",
    "RegistryEntry",
    "render_registry_module",
    "ts_string",
    "write_artifact",
    "write_artifacts",
]
