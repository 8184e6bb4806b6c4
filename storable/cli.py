"""CLI for inspecting and managing stored data files."""

import json
import logging
from pathlib import Path
from typing import Any, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from storable.consts import DEFAULT_APP_NAME, LOG_FORMAT
from storable.errors import StoreError
from storable.models.model_options import BaseDirectory, FileFormat, StoreOptions
from storable.storage.file_store import FileStore

app = typer.Typer(
    name="storable",
    help="storable - Inspect, back up and remove stored data files",
)

console = Console()

TypeNameArg = typer.Argument(..., help="Type name the file was saved under (e.g. Record)")
FormatOpt = typer.Option(FileFormat.JSON, "--format", "-f", help="File format")
DirOpt = typer.Option(BaseDirectory.USER_DATA, "--dir", "-d", help="Base directory")
SubDirOpt = typer.Option(None, "--sub-dir", "-s", help="Subdirectory under the base directory")
FilenameOpt = typer.Option(None, "--filename", help="Custom file name")
ExtensionOpt = typer.Option(None, "--extension", help="Custom file extension")
AppNameOpt = typer.Option(DEFAULT_APP_NAME, "--app-name", help="Application name for platform dirs")
RootOpt = typer.Option(None, "--root", help="Use this path as the base directory")
VerboseOpt = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def _setup(
    directory: BaseDirectory,
    sub_dir: str | None,
    filename: str | None,
    extension: str | None,
    app_name: str,
    root: Path | None,
    verbose: bool,
) -> tuple[FileStore, StoreOptions]:
    """Build the store and options shared by every command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    roots = {directory: root} if root is not None else None
    store = FileStore(app_name=app_name, roots=roots)
    try:
        options = StoreOptions(
            directory=directory,
            sub_directory=sub_dir,
            custom_filename=filename,
            custom_extension=extension,
            create_sub_dir=False,
        )
    except ValidationError as e:
        _fail(e)
    return store, options


def _fail(e: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    raise typer.Exit(1)


@app.command()
def path(
    type_name: str = TypeNameArg,
    fmt: FileFormat = FormatOpt,
    directory: BaseDirectory = DirOpt,
    sub_dir: str = SubDirOpt,
    filename: str = FilenameOpt,
    extension: str = ExtensionOpt,
    app_name: str = AppNameOpt,
    root: Path = RootOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """Show where a data file and its backup live."""
    store, options = _setup(directory, sub_dir, filename, extension, app_name, root, verbose)
    data_path = store.path_for(type_name, fmt, options)
    bak_path = store.backup_path_for(type_name, fmt, options)

    table = Table(title=f"{type_name} ({fmt.value})")
    table.add_column("File", style="cyan")
    table.add_column("Path")
    table.add_column("Exists", justify="center")
    for label, p in (("data", data_path), ("backup", bak_path)):
        present = "[green]yes[/green]" if p.is_file() else "[red]no[/red]"
        table.add_row(label, str(p), present)
    console.print(table)


@app.command()
def exists(
    type_name: str = TypeNameArg,
    fmt: FileFormat = FormatOpt,
    directory: BaseDirectory = DirOpt,
    sub_dir: str = SubDirOpt,
    filename: str = FilenameOpt,
    extension: str = ExtensionOpt,
    app_name: str = AppNameOpt,
    root: Path = RootOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """Check whether a data file exists. Exits with 1 if it does not."""
    store, options = _setup(directory, sub_dir, filename, extension, app_name, root, verbose)
    if store.exists(type_name, fmt, options):
        console.print(f"[green]Found:[/green] {store.path_for(type_name, fmt, options)}")
        return
    console.print(f"[yellow]Not found:[/yellow] {store.path_for(type_name, fmt, options)}")
    raise typer.Exit(1)


@app.command()
def show(
    type_name: str = TypeNameArg,
    fmt: FileFormat = FormatOpt,
    directory: BaseDirectory = DirOpt,
    sub_dir: str = SubDirOpt,
    filename: str = FilenameOpt,
    extension: str = ExtensionOpt,
    app_name: str = AppNameOpt,
    root: Path = RootOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """Decode a JSON or property list data file and print its contents."""
    if fmt is FileFormat.ARCHIVE:
        console.print("[red]Error:[/red] archive files can only be decoded into their Python type")
        raise typer.Exit(1)

    store, options = _setup(directory, sub_dir, filename, extension, app_name, root, verbose)
    try:
        value = store.load(Any, fmt, options, type_name=type_name)
    except StoreError as e:
        _fail(e)

    if value is None:
        console.print(f"[yellow]No data file at {store.path_for(type_name, fmt, options)}[/yellow]")
        raise typer.Exit(1)

    console.print_json(json.dumps(value, default=str))


@app.command()
def backup(
    type_name: str = TypeNameArg,
    fmt: FileFormat = FormatOpt,
    directory: BaseDirectory = DirOpt,
    sub_dir: str = SubDirOpt,
    filename: str = FilenameOpt,
    extension: str = ExtensionOpt,
    app_name: str = AppNameOpt,
    root: Path = RootOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """Copy a data file to its .bak backup, replacing any previous backup."""
    store, options = _setup(directory, sub_dir, filename, extension, app_name, root, verbose)
    try:
        done = store.backup(type_name, fmt, options)
    except StoreError as e:
        _fail(e)

    if done:
        console.print(f"[green]Backed up to[/green] {store.backup_path_for(type_name, fmt, options)}")
    else:
        console.print("[yellow]Nothing to back up.[/yellow]")


@app.command("remove-backup")
def remove_backup(
    type_name: str = TypeNameArg,
    fmt: FileFormat = FormatOpt,
    directory: BaseDirectory = DirOpt,
    sub_dir: str = SubDirOpt,
    filename: str = FilenameOpt,
    extension: str = ExtensionOpt,
    app_name: str = AppNameOpt,
    root: Path = RootOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """Delete the .bak backup of a data file."""
    store, options = _setup(directory, sub_dir, filename, extension, app_name, root, verbose)
    try:
        done = store.remove_backup(type_name, fmt, options)
    except StoreError as e:
        _fail(e)

    if done:
        console.print("[green]Backup removed.[/green]")
    else:
        console.print("[yellow]No backup to remove.[/yellow]")


@app.command()
def remove(
    type_name: str = TypeNameArg,
    fmt: FileFormat = FormatOpt,
    directory: BaseDirectory = DirOpt,
    sub_dir: str = SubDirOpt,
    filename: str = FilenameOpt,
    extension: str = ExtensionOpt,
    app_name: str = AppNameOpt,
    root: Path = RootOpt,
    verbose: bool = VerboseOpt,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete a data file. Its backup is left in place."""
    store, options = _setup(directory, sub_dir, filename, extension, app_name, root, verbose)
    target = store.path_for(type_name, fmt, options)
    if not yes and target.exists():
        typer.confirm(f"Delete {target}?", abort=True)

    try:
        done = store.remove(type_name, fmt, options)
    except StoreError as e:
        _fail(e)

    if done:
        console.print(f"[green]Removed[/green] {target}")
    else:
        console.print("[yellow]Nothing to remove.[/yellow]")


if __name__ == "__main__":
    app()
