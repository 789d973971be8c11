"""Root manifest (index.ts) export discovery."""

from .models import ExportManifest
from .resolver import resolve_exports, resolve_module_path

__all__ = [
    "ExportManifest",
    "resolve_exports",
    "resolve_module_path",
]
