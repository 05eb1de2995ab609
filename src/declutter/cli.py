"""Command line interface for Declutter."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from declutter import api
from declutter.config import AppConfig, DeletePolicy
from declutter.errors import DeclutterError
from declutter.models import DirectoryNode
from declutter.web.app import app as web_app

console = Console()
app = typer.Typer(help="Declutter - scan, size and clean up folders")

T = TypeVar("T")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _run(operation: Callable[..., T], *args: object) -> T:
    try:
        return operation(*args)
    except DeclutterError as exc:
        console.print(f"[red]{exc.kind}: {escape(exc.detail)}[/red]")
        raise typer.Exit(code=1) from exc


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KB", "MB", "GB"):
        value /= 1024
        if value < 1024:
            return f"{value:.1f} {unit}"
    return f"{value / 1024:.1f} TB"


def _add_branch(parent: Tree, node: DirectoryNode) -> None:
    label = f"{node.name}/" if node.is_directory else node.name
    branch = parent.add(f"{label} [dim]{_format_size(node.size)}[/dim]")
    for child in node.children or []:
        _add_branch(branch, child)


@app.command("ls")
def list_files(
    folder: str = typer.Argument(..., help="Folder to list"),
    include_folders: bool = typer.Option(
        AppConfig().include_folders, "--folders/--files-only", help="Include sub-folders"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the visible entries of a folder."""
    _setup_logging(verbose)
    entries = _run(api.list_files, folder, include_folders)
    if not entries:
        console.print("[yellow]Folder is empty.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    for entry in entries:
        table.add_row(entry.name, entry.category.value, _format_size(entry.size))
    console.print(table)


@app.command()
def tree(
    folder: str = typer.Argument(..., help="Folder to preview"),
    max_depth: int = typer.Option(AppConfig().max_depth, "--depth", "-d", help="Levels to expand"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show a depth-bounded tree with sizes."""
    _setup_logging(verbose)
    try:
        root = _run(api.list_directory_tree, folder, max_depth)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    rich_tree = Tree(f"[bold]{root.name}/[/bold] [dim]{_format_size(root.size)}[/dim]")
    for child in root.children or []:
        _add_branch(rich_tree, child)
    console.print(rich_tree)


@app.command()
def count(folder: str = typer.Argument(..., help="Folder to count")) -> None:
    """Count files and folders beneath a folder."""
    counts = _run(api.get_folder_contents_count, folder)
    console.print(f"Files: {counts.file_count}, folders: {counts.folder_count}")


@app.command()
def info(path: str = typer.Argument(..., help="File or folder to describe")) -> None:
    """Show metadata for a single path."""
    metadata = _run(api.get_file_metadata, path)
    table = Table(show_header=False)
    table.add_row("Path", metadata.path)
    table.add_row("Name", metadata.name)
    table.add_row("Type", metadata.category.value)
    table.add_row("Extension", metadata.extension or "-")
    table.add_row("Size", f"{_format_size(metadata.size)} ({metadata.size} bytes)")
    console.print(table)


@app.command()
def rename(
    old_path: str = typer.Argument(..., help="Current path"),
    new_path: str = typer.Argument(..., help="New path"),
) -> None:
    """Rename a file or folder."""
    _setup_logging(False)
    _run(api.rename_file, old_path, new_path)
    console.print(f"Renamed to [bold]{escape(new_path)}[/bold]")
    console.print(f"Undo with: declutter undo-rename {escape(new_path)} {escape(old_path)}")


@app.command("undo-rename")
def undo_rename(
    current_path: str = typer.Argument(..., help="Path after the rename"),
    original_path: str = typer.Argument(..., help="Path before the rename"),
) -> None:
    """Revert a previous rename."""
    _setup_logging(False)
    _run(api.undo_rename, current_path, original_path)
    console.print(f"Restored [bold]{escape(original_path)}[/bold]")


@app.command()
def preview(
    path: str = typer.Argument(..., help="Text file to preview"),
    max_chars: int = typer.Option(AppConfig().preview_chars, "--chars", "-n", help="Characters to show"),
) -> None:
    """Print the beginning of a text file."""
    try:
        text = _run(api.read_text_preview, path, max_chars)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(text, markup=False, highlight=False)


@app.command()
def delete(
    paths: List[str] = typer.Argument(..., help="Files or folders to delete"),
    permanent: bool = typer.Option(False, "--permanent", help="Skip the trash and remove for good"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Move files or folders to the trash (or delete them permanently)."""
    _setup_logging(verbose)
    policy = DeletePolicy.PERMANENT if permanent else AppConfig().delete_policy

    if not yes:
        files, folders = len(paths), 0
        for path in paths:
            try:
                nested = api.get_folder_contents_count(path)
            except DeclutterError:
                continue
            files += nested.file_count - 1
            folders += nested.folder_count + 1
        action = "Permanently delete" if policy is DeletePolicy.PERMANENT else "Move to trash"
        if not typer.confirm(f"{action} {files} files and {folders} folders?"):
            console.print("[yellow]Aborted.[/yellow]")
            raise typer.Exit()

    result = api.delete_files(paths, policy)
    for path in result.succeeded:
        console.print(f"[green]Deleted[/green] {escape(path)}")
    for path, reason in result.failed:
        console.print(f"[red]Failed[/red] {escape(path)}: {escape(reason)}")
    console.print(f"Deleted: {len(result.succeeded)}, failed: {len(result.failed)}")
    if result.failed:
        raise typer.Exit(code=1)


@app.command()
def reveal(path: str = typer.Argument(..., help="File or folder to reveal")) -> None:
    """Show a path in the system file manager."""
    _run(api.reveal_in_explorer, path)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    permanent: bool = typer.Option(False, "--permanent", help="Default to permanent deletion"),
    max_depth: Optional[int] = typer.Option(None, "--depth", help="Default tree depth"),
) -> None:
    """Start the HTTP interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    defaults = AppConfig()
    try:
        web_app.state.config = AppConfig(
            delete_policy=DeletePolicy.PERMANENT if permanent else defaults.delete_policy,
            max_depth=max_depth if max_depth is not None else defaults.max_depth,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
