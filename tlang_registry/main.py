"""CLI entry point for the tlang node registry generator."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import OUTPUT_FORMATS, Config, OutputConfig, SourceConfig, set_config
from .pipeline import run_pipeline

console = Console()

DEFAULT_SOURCE_DIR = str(SourceConfig().source_dir)
DEFAULT_OUTPUT = str(OutputConfig().path)


@click.command()
@click.option(
    "--source-dir",
    type=click.Path(file_okay=False),
    default=DEFAULT_SOURCE_DIR,
    help=f"tlang source directory containing index.ts (default: {DEFAULT_SOURCE_DIR})",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=DEFAULT_OUTPUT,
    help=f"Generated registry path (default: {DEFAULT_OUTPUT})",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="typescript",
    help="Artifact format: TypeScript module, JSON, or both (default: typescript)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def main(source_dir: str, output: str, output_format: str, verbose: bool):
    """Generate the editor's node registry from tlang's TypeScript sources.

    Reads the namespace re-exports in <source-dir>/index.ts, extracts every
    *Node interface with its input and output ports, and writes the registry
    module consumed by the playground.
    """
    config = Config(
        source=SourceConfig(source_dir=Path(source_dir)),
        output=OutputConfig(path=Path(output), format=output_format),
    )
    set_config(config)

    console.print("[bold blue]tlang Node Registry Generator[/bold blue]")
    console.print(f"Manifest: {config.source.manifest_path}")

    def _on_namespace(namespace: str, path: Path, count: int) -> None:
        if verbose:
            console.print(f"  {namespace}: {count} nodes [dim]({path})[/dim]")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Analyzing tlang source code...", total=None)
            result = run_pipeline(config, on_namespace=_on_namespace)
            progress.update(task, completed=True)

        manifest = result.manifest
        console.print(f"[green]✓[/green] Found {len(manifest.top_level_names)} top-level exports")
        console.print(f"[green]✓[/green] Found {manifest.namespace_count} namespace exports")
        console.print(f"[green]✓[/green] Total nodes: {result.registry.node_count}")
        for path in result.written:
            console.print(f"[green]✓[/green] Generated {path}")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
