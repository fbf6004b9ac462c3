"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from document_file_manager import __version__
from document_file_manager.console import TUI
from document_file_manager.context import AppContext, create_context
from document_file_manager.manager import DocumentRootError

app = typer.Typer(
    name="docfm",
    help="List, copy, create and delete files in your documents directory",
    no_args_is_help=True,
)

console = Console()
tui = TUI()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"docfm v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Document root (defaults to ~/Documents)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
) -> None:
    """List, copy, create and delete files in your documents directory."""
    ctx.obj = create_context(root)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _get_context(ctx: typer.Context) -> AppContext:
    """Return the context built by the callback, or a default one."""
    if ctx.obj is None:
        ctx.obj = create_context()
    return ctx.obj


def _resolve_path(ctx: AppContext, raw: str) -> Path:
    """Resolve a user-supplied path against the document root.

    Args:
        ctx: Application context.
        raw: Absolute path, ~-prefixed path, or path relative to the root.

    Returns:
        Absolute path.
    """
    path = Path(raw).expanduser()
    if path.is_absolute():
        return path
    return ctx.manager.document_root / path


def _fail(error: Exception) -> typer.Exit:
    """Report a failed operation and build the exit to raise."""
    tui.show_error(str(error))
    return typer.Exit(1)


# ============================================================================
# Root Commands
# ============================================================================


@app.command("root")
def show_root(
    ctx: typer.Context,
) -> None:
    """Show the document root."""
    app_ctx = _get_context(ctx)
    try:
        tui.show_paths([app_ctx.manager.document_root])
    except DocumentRootError as e:
        raise _fail(e) from e


@app.command("ls")
def ls(
    ctx: typer.Context,
    folder: Annotated[str | None, typer.Argument(help="Folder name (root if omitted)")] = None,
    paths: Annotated[bool, typer.Option("--paths", "-p", help="Print full paths")] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Print entries as JSON")] = False,
    long: Annotated[bool, typer.Option("--long", "-l", help="Show type and size")] = False,
) -> None:
    """List entries directly inside the root or a folder."""
    app_ctx = _get_context(ctx)
    try:
        if json_output:
            entries = app_ctx.manager.list_entries(folder)
            tui.show_json([e.model_dump(mode="json", by_alias=True) for e in entries])
        elif long:
            tui.show_entries(app_ctx.manager.list_entries(folder), title=folder or "Documents")
        elif paths:
            tui.show_paths(app_ctx.manager.list_locations(folder))
        else:
            tui.show_names(app_ctx.manager.list_names(folder))
    except (DocumentRootError, OSError) as e:
        raise _fail(e) from e


@app.command("exists")
def exists(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path (relative paths resolve against the root)")],
) -> None:
    """Check whether a path exists. Exits with 1 when it does not."""
    app_ctx = _get_context(ctx)
    try:
        target = _resolve_path(app_ctx, path)
    except DocumentRootError as e:
        raise _fail(e) from e

    if app_ctx.manager.exists(target):
        tui.show_success(f"{target} exists")
    else:
        tui.show_info(f"{target} does not exist")
        raise typer.Exit(1)


@app.command("cp")
def cp(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Source path")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    no_replace: Annotated[
        bool, typer.Option("--no-replace", help="Fail if the destination already exists")
    ] = False,
) -> None:
    """Copy a file or folder, replacing the destination by default."""
    app_ctx = _get_context(ctx)
    try:
        src = _resolve_path(app_ctx, source)
        dst = _resolve_path(app_ctx, destination)
        app_ctx.manager.copy(src, dst, replace=not no_replace)
    except (DocumentRootError, OSError) as e:
        raise _fail(e) from e
    tui.show_success(f"Copied '{source}' to '{destination}'")


@app.command("rm")
def rm(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to remove")],
) -> None:
    """Remove a file or folder. Missing paths are ignored."""
    app_ctx = _get_context(ctx)
    try:
        app_ctx.manager.remove(_resolve_path(app_ctx, path))
    except (DocumentRootError, OSError) as e:
        raise _fail(e) from e
    tui.show_success(f"Removed '{path}'")


# ============================================================================
# Folder Commands
# ============================================================================


@app.command("mkdir")
def mkdir(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Folder name")],
) -> None:
    """Create a folder under the root if it does not exist."""
    app_ctx = _get_context(ctx)
    try:
        location = app_ctx.manager.create_folder(name)
    except (DocumentRootError, OSError) as e:
        raise _fail(e) from e
    tui.show_success(f"Folder ready: {location}")


@app.command("rmdir")
def rmdir(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Folder name")],
) -> None:
    """Remove a folder and everything inside it."""
    app_ctx = _get_context(ctx)
    try:
        app_ctx.manager.remove_folder(name)
    except (DocumentRootError, OSError) as e:
        raise _fail(e) from e
    tui.show_success(f"Removed folder '{name}'")


@app.command("clear")
def clear(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Folder name")],
) -> None:
    """Delete everything inside a folder, keeping the folder."""
    app_ctx = _get_context(ctx)
    try:
        app_ctx.manager.delete_contents(name)
    except (DocumentRootError, OSError) as e:
        raise _fail(e) from e
    tui.show_success(f"Cleared folder '{name}'")


if __name__ == "__main__":
    app()
