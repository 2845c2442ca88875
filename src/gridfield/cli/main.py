"""CLI entry point for gridfield.

Invoked as::

    gridfield [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m gridfield.cli.main

Every command that takes a CONFIG reads a type-option document (JSON or
YAML) describing one field, e.g.::

    field_type: checklist
    options:
      - {id: a, label: Draft, color: purple}
      - {id: b, label: Review, color: orange}

Commands
--------
options     List the options defined by a field configuration
show        Decode a stored cell string and show its options
apply       Apply an insert/delete edit to a stored cell string
filter      Print the cells that pass a filter condition
sort        Print cells in sort order
plugins     List registered field types
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from gridfield.selection.options import SelectOption
    from gridfield.type_options.base import TypeOption
    from gridfield.type_options.select_base import SelectTypeOption

console = Console()
err_console = Console(stderr=True)

_RICH_COLORS = {
    "purple": "medium_purple",
    "pink": "hot_pink",
    "light_pink": "pink1",
    "orange": "orange1",
    "yellow": "yellow",
    "lime": "green_yellow",
    "green": "green",
    "aqua": "aquamarine1",
    "blue": "dodger_blue1",
}


def _load_or_exit(path: str) -> "TypeOption[Any, Any]":
    """Load a type-option document, exiting on error."""
    from gridfield.core.errors import TypeOptionDecodeError
    from gridfield.type_options.serializer import TypeOptionSerializer

    try:
        return TypeOptionSerializer().load(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    except TypeOptionDecodeError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _load_selection_or_exit(path: str) -> "SelectTypeOption[Any]":
    """Load a document that must configure an option-based field."""
    from gridfield.type_options.select_base import SelectTypeOption

    type_option = _load_or_exit(path)
    if not isinstance(type_option, SelectTypeOption):
        err_console.print(
            f"[red]Error:[/red] {path} configures a {type_option.field_type.value} "
            "field, which has no options."
        )
        sys.exit(1)
    return type_option


def _option_label(option: "SelectOption", disable_color: bool) -> str:
    if disable_color:
        return option.label
    style = _RICH_COLORS.get(option.color.value, "white")
    return f"[{style}]{option.label}[/{style}]"


def _options_table(title: str, options: "tuple[SelectOption, ...]", disable_color: bool) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Id", style="bold")
    table.add_column("Label")
    table.add_column("Color")
    for position, option in enumerate(options, start=1):
        table.add_row(
            str(position),
            option.id,
            _option_label(option, disable_color),
            option.color.value,
        )
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="gridfield")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Pluggable cell-data types for tabular data: checklist and select fields."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from gridfield import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]gridfield[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# plugins command
# ---------------------------------------------------------------------------


@cli.command(name="plugins")
def plugins_command() -> None:
    """List registered field types, including installed entry-points."""
    from gridfield.type_options.registry import ENTRYPOINT_GROUP, type_option_registry

    type_option_registry.load_entrypoints(ENTRYPOINT_GROUP)

    table = Table(title="Registered field types")
    table.add_column("Field type", style="bold")
    table.add_column("Type option")
    for name in type_option_registry.list_plugins():
        cls = type_option_registry.get(name)
        table.add_row(name, f"{cls.__module__}.{cls.__qualname__}")
    console.print(table)


# ---------------------------------------------------------------------------
# options command
# ---------------------------------------------------------------------------


@cli.command(name="options")
@click.argument("config", type=click.Path(exists=False))
def options_command(config: str) -> None:
    """List the options a field configuration defines.

    CONFIG is the path to a JSON or YAML type-option document.
    """
    type_option = _load_selection_or_exit(config)

    options = tuple(type_option.options)
    if not options:
        console.print(f"[yellow]No options defined[/yellow] in {config}")
        return
    console.print(
        _options_table(
            f"{type_option.field_type.value} options: {config}",
            options,
            type_option.disable_color,
        )
    )


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("config", type=click.Path(exists=False))
@click.argument("cell")
def show_command(config: str, cell: str) -> None:
    """Decode a stored cell string and show the options it selects.

    CONFIG is the field's type-option document; CELL is the stored
    string, e.g. "a,b".  Ids that no longer exist are reported but not
    shown as options.
    """
    type_option = _load_selection_or_exit(config)

    state = type_option.decode_cell_str(cell)
    selected = type_option.encode_for_display(state)
    stale = [option_id for option_id in state if option_id not in type_option.options]

    if selected:
        console.print(_options_table("Selected", selected, type_option.disable_color))
    else:
        console.print("[dim]No options selected[/dim]")
    if stale:
        console.print(f"[yellow]Unknown ids ignored:[/yellow] {', '.join(stale)}")
    console.print(
        f"\n[bold]{len(selected)}[/bold] of {len(type_option.options)} option(s) selected"
    )


# ---------------------------------------------------------------------------
# apply command
# ---------------------------------------------------------------------------


@cli.command(name="apply")
@click.argument("config", type=click.Path(exists=False))
@click.argument("cell", required=False, default=None)
@click.option("--insert", "-i", "insert_ids", multiple=True, help="Option id to insert (repeatable)")
@click.option("--delete", "-d", "delete_ids", multiple=True, help="Option id to delete (repeatable)")
def apply_command(
    config: str,
    cell: str | None,
    insert_ids: tuple[str, ...],
    delete_ids: tuple[str, ...],
) -> None:
    """Apply an edit to a stored cell string and print the new one.

    CONFIG is the field's type-option document; CELL is the current
    stored string (omit it for a cell that was never written).

    Examples:

    \b
        gridfield apply todo.yaml "a,b" --insert c --delete a
        gridfield apply todo.yaml --insert a --insert b
    """
    from gridfield.selection.changeset import EditChangeset

    type_option = _load_or_exit(config)
    changeset = EditChangeset(insert_ids=insert_ids, delete_ids=delete_ids)
    cell_str, _ = type_option.apply_changeset(changeset, cell)
    console.print(cell_str, highlight=False, markup=False)


# ---------------------------------------------------------------------------
# filter command
# ---------------------------------------------------------------------------


def _build_filter(type_option: "TypeOption[Any, Any]", condition: str, option_ids: tuple[str, ...]) -> Any:
    from gridfield.filter import (
        ChecklistFilter,
        ChecklistFilterCondition,
        SelectOptionFilter,
        SelectOptionFilterCondition,
    )

    if type_option.field_type.is_checklist:
        return ChecklistFilter(ChecklistFilterCondition.parse(condition))
    return SelectOptionFilter(SelectOptionFilterCondition.parse(condition), option_ids)


@cli.command(name="filter")
@click.argument("config", type=click.Path(exists=False))
@click.argument("cells", nargs=-1)
@click.option("--condition", "-c", required=True, help="Filter condition, e.g. is-complete or option-is")
@click.option("--option", "-o", "option_ids", multiple=True, help="Option id for option-is / option-is-not")
@click.option(
    "--row-type",
    default=None,
    help="Field type of the rows being filtered (defaults to the field's own type)",
)
def filter_command(
    config: str,
    cells: tuple[str, ...],
    condition: str,
    option_ids: tuple[str, ...],
    row_type: str | None,
) -> None:
    """Print the stored cell strings that pass a filter, one per line.

    CONFIG is the field's type-option document; CELLS are stored strings.

    Checklist conditions: is-complete, is-incomplete, is-empty,
    is-not-empty.  Select conditions: option-is, option-is-not,
    option-is-empty, option-is-not-empty.
    """
    from gridfield.core.field_type import FieldType

    type_option = _load_or_exit(config)
    try:
        filter_value = _build_filter(type_option, condition, option_ids)
        field_type = FieldType.parse(row_type) if row_type else None
    except ValueError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    for cell_str in type_option.filter_cells(filter_value, cells, field_type):
        console.print(cell_str, highlight=False, markup=False)


# ---------------------------------------------------------------------------
# sort command
# ---------------------------------------------------------------------------


@cli.command(name="sort")
@click.argument("config", type=click.Path(exists=False))
@click.argument("cells", nargs=-1)
@click.option("--reverse", is_flag=True, default=False, help="Sort in descending order")
def sort_command(config: str, cells: tuple[str, ...], reverse: bool) -> None:
    """Print stored cell strings in sort order, one per line.

    CONFIG is the field's type-option document; CELLS are stored strings.
    """
    type_option = _load_or_exit(config)
    for cell_str in type_option.sort_cells(cells, reverse=reverse):
        console.print(cell_str, highlight=False, markup=False)


if __name__ == "__main__":
    cli()
