"""Click CLI with scan, merge, import, and serve subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from graphql import GraphQLError

from gql_import.analysis import get_node_name
from gql_import.errors import ImportSyntaxError, ResolutionError, SchemaFileNotFoundError
from gql_import.models import DefinitionKind, ExportResult, ImportConfig
from gql_import.pipeline import run_import, run_merge, run_scan

_KIND_CHOICES = [kind.value for kind in DefinitionKind]

_KIND_COLORS = {
    "object": "yellow",
    "interface": "cyan",
    "input": "green",
    "union": "magenta",
    "enum": "bright_green",
    "scalar": "white",
    "directive": "red",
    "schema": "bright_blue",
}

_FAILURES = (
    ResolutionError,
    SchemaFileNotFoundError,
    ImportSyntaxError,
    GraphQLError,
    ValueError,
)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """gql-import: Assemble a closed GraphQL schema from many schema files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".")
@click.option("--kind", "-k", type=click.Choice(_KIND_CHOICES), help="Filter by definition kind")
def scan(source_dir: Path, kind: str | None):
    """Scan a directory and list the definitions in each schema file."""
    sources = run_scan(ImportConfig(source_dir=source_dir))

    total = 0
    by_kind: dict[str, int] = {}
    for source in sources:
        entries = [
            (DefinitionKind.of(d).value, get_node_name(d)) for d in source.definitions
        ]
        if kind:
            entries = [e for e in entries if e[0] == kind]
        if not entries:
            continue
        click.echo(click.style(str(source.file_path), fg="cyan"))
        for kind_name, name in entries:
            color = _KIND_COLORS.get(kind_name, "white")
            click.echo(f"  {click.style(kind_name, fg=color):>20}  {name}")
            by_kind[kind_name] = by_kind.get(kind_name, 0) + 1
            total += 1
        click.echo()

    if not total:
        click.echo("No definitions found.")
        return

    click.echo(f"Found {total} definition(s). Summary:")
    for kind_name, count in sorted(by_kind.items()):
        click.echo(f"  {kind_name}: {count}")


@cli.command()
@click.argument("source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".")
@click.argument("targets", nargs=-1)
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path), help="Output schema file")
@click.option("--pattern", "-p", help="Glob pattern to match definition names")
@click.option("--all", "merge_all", is_flag=True, help="Include every definition")
@click.option("--manifest/--no-manifest", default=False, help="Write manifest.json next to the output")
def merge(
    source_dir: Path,
    targets: tuple[str, ...],
    output_path: Path | None,
    pattern: str | None,
    merge_all: bool,
    manifest: bool,
):
    """Merge the named definitions and everything they reference."""
    if not targets and not pattern and not merge_all:
        raise click.UsageError(
            "Specify one or more target names, --pattern, or --all"
        )

    config = ImportConfig(
        source_dir=source_dir,
        output_path=output_path,
        targets=list(targets),
        pattern=pattern,
        merge_all=merge_all,
        write_manifest=manifest,
    )

    try:
        result = run_merge(config)
    except _FAILURES as e:
        raise click.ClickException(str(e))

    _report(result)


@cli.command(name="import")
@click.argument("root_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path), help="Output schema file")
@click.option("--manifest/--no-manifest", default=False, help="Write manifest.json next to the output")
def import_schema(root_file: Path, output_path: Path | None, manifest: bool):
    """Resolve the # import lines of ROOT_FILE into one schema."""
    config = ImportConfig(
        source_dir=root_file.parent,
        root_file=root_file,
        output_path=output_path,
        write_manifest=manifest,
    )

    try:
        result = run_import(config)
    except _FAILURES as e:
        raise click.ClickException(str(e))

    _report(result)


def _report(result: ExportResult) -> None:
    if result.output_path is None:
        click.echo(result.sdl, nl=False)
        return
    click.echo(f"Wrote {len(result.definitions)} definition(s) to {result.output_path}")
    for f in result.files_created:
        click.echo(f"  {f}")


@cli.command()
@click.option("--port", "-p", default=8430, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the HTTP API. "
            "Install with: pip install 'gql-import[web]'"
        )

    from gql_import.web import create_app

    click.echo(f"Starting gql-import API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
