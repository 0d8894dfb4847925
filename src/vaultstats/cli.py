"""Command line interface for vaultstats."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from vaultstats.config import ConfigError, VaultConfig, get_doc_extension, get_scan_workers, get_vault_config
from vaultstats.index.aggregate import rank
from vaultstats.index.scan import run
from vaultstats.template import Template
from vaultstats.tools.daily import ensure_daily_note
from vaultstats.tools.read import read_note
from vaultstats.tools.write import append_to_note, create_note


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="vaultstats - capture ideas and summarise an Obsidian vault")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> None:
    err_console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def _load_config(ctx: typer.Context, require_template: bool = False) -> VaultConfig:
    opts = ctx.obj or {}
    try:
        return get_vault_config(opts.get("vault"), opts.get("template"), require_template=require_template)
    except ConfigError as e:
        _fail(f"Configuration error: {e}")


@app.callback()
def main(
    ctx: typer.Context,
    vault: Optional[Path] = typer.Option(None, "--vault", "-v", help="Path to vault"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="Path to note template"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose logging"),
) -> None:
    _setup_logging(verbose)
    ctx.obj = {"vault": vault, "template": template}


@app.command()
def stats(
    ctx: typer.Context,
    top: int = typer.Option(3, "--top", min=0, help="Number of most frequent tags to show"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Concurrent document reads"),
    ext: Optional[str] = typer.Option(None, "--ext", help="Document extension to scan"),
) -> None:
    """Print word, link and tag statistics of the vault."""
    cfg = _load_config(ctx)
    try:
        max_workers = workers or get_scan_workers()
    except ConfigError as e:
        _fail(f"Configuration error: {e}")
    extension = ext or get_doc_extension()
    if not extension.startswith("."):
        extension = f".{extension}"

    try:
        totals = run(cfg.vault, extension=extension, max_workers=max_workers)
    except OSError as e:
        _fail(str(e))

    console.print(f"Vault Links: {totals.total_link_count}")
    console.print(f"Vault Words: {totals.total_word_count}")

    ranked = rank(totals, top)
    if ranked:
        table = Table(title="Most Frequent Tags")
        table.add_column("Tag")
        table.add_column("Count", justify="right")
        for tag, count in ranked:
            table.add_row(tag, str(count))
        console.print(table)
    elif not totals.tag_counts:
        console.print("[yellow]No tags found.[/yellow]")

    if totals.skipped_documents:
        console.print(f"[yellow]Skipped: {totals.skipped_documents} document(s) could not be read[/yellow]")
    if totals.skipped_directories:
        console.print(f"[yellow]Skipped: {totals.skipped_directories} director(ies) could not be listed[/yellow]")


@app.command()
def new(
    ctx: typer.Context,
    idea: Optional[str] = typer.Argument(None, help="Idea to capture; prompted for when omitted"),
) -> None:
    """Create a new note from an idea."""
    cfg = _load_config(ctx, require_template=True)
    while idea is None or not idea.strip():
        idea = typer.prompt("Please enter your idea")

    try:
        relative = create_note(idea, cfg.vault, Template.load(cfg.template))
    except (OSError, ValueError) as e:
        _fail(str(e))
    console.print(f"Created note: [bold]{cfg.vault / relative}[/bold]")


@app.command()
def append(
    ctx: typer.Context,
    idea: str = typer.Argument(..., help="Text to append"),
    note: Path = typer.Option(..., "--note", "-n", help="Note path, relative to the vault"),
) -> None:
    """Append to an existing note."""
    cfg = _load_config(ctx)
    try:
        relative = append_to_note(str(note), idea, cfg.vault)
    except (OSError, ValueError) as e:
        _fail(str(e))
    console.print(f"Appended to note: [bold]{cfg.vault / relative}[/bold]")


@app.command("open")
def open_daily(ctx: typer.Context) -> None:
    """Open today's daily note in Obsidian, creating it if needed."""
    cfg = _load_config(ctx)
    try:
        relative, uri = ensure_daily_note(cfg.vault)
    except (OSError, ValueError) as e:
        _fail(str(e))
    console.print(f"Opening daily note: [bold]{relative}[/bold]")
    if typer.launch(uri) != 0:
        _fail(f"Could not open {uri}")


@app.command()
def show(
    ctx: typer.Context,
    note: Path = typer.Option(..., "--note", "-n", help="Note path, relative to the vault"),
) -> None:
    """Pretty print a note with markdown formatting."""
    cfg = _load_config(ctx)
    try:
        content = read_note(str(note), cfg.vault)
    except (OSError, ValueError) as e:
        _fail(str(e))
    console.print(Markdown(content))


@app.command()
def serve(
    ctx: typer.Context,
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Concurrent document reads"),
) -> None:
    """Run the MCP server for the vault."""
    from vaultstats import server

    opts = ctx.obj or {}
    server.serve(opts.get("vault"), opts.get("template"), max_workers=workers)


if __name__ == "__main__":
    app()
