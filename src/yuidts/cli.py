"""Command-line entry point: ``yuidts SCHEMA ROOT_DIR OUT_DIR``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from yuidts.codegen import generate
from yuidts.config import GeneratorConfig, load_config
from yuidts.errors import YuidtsError
from yuidts.loader import load_schema

app = typer.Typer(add_completion=False, help="Generate TypeScript declarations from YUIDoc data.json.")

err_console = Console(stderr=True)


@app.command()
def main(
    schema: Annotated[str, typer.Argument(help="Path or http(s) URL of the YUIDoc data.json.")],
    root_dir: Annotated[Path, typer.Argument(help="Library source root, used to locate reported files.")],
    out_dir: Annotated[Path, typer.Argument(help="Directory the declaration files are written to.")],
    config_path: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="JSON file overriding the generator settings.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress.")] = False,
) -> None:
    """Write ``<root>.d.ts`` and ``<root>.global-mode.d.ts`` into OUT_DIR."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path) if config_path else GeneratorConfig()
        doc = asyncio.run(load_schema(schema))
        report = generate(doc, out_dir, config)
    except (YuidtsError, httpx.HTTPError) as e:
        err_console.print(f"[bold red]error:[/] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1) from e

    for line in report.format_diagnostics(root_dir.resolve()):
        err_console.print(line, highlight=False, markup=False)
    for path in report.outputs:
        err_console.print(f"[green]wrote[/] {escape(str(path))}", highlight=False)


if __name__ == "__main__":
    app()
