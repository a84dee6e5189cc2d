"""CLI for previewing inserter panels from a catalog file."""

import json
import logging
from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from inserter.consts import LOG_FORMAT, RESERVED_CATEGORY
from inserter.models.model_display import DisplayGroup, GroupKind
from inserter.storage.catalog_store import CatalogError, CatalogStore
from inserter.tab import InserterTab

app = typer.Typer(
    name="inserter",
    help="Block inserter - preview how a block catalog is grouped into panels",
)

console = Console()

KIND_STYLES = {
    GroupKind.CHILD: "magenta",
    GroupKind.SUGGESTED: "green",
    GroupKind.CATEGORY: "cyan",
    GroupKind.UNCATEGORIZED: "yellow",
    GroupKind.COLLECTION: "blue",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _load_store(catalog: Path) -> CatalogStore:
    """Load catalog or exit with an error."""
    try:
        return CatalogStore.load(catalog)
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _group_table(group: DisplayGroup) -> Table:
    style = KIND_STYLES.get(group.kind, "white")
    title = f"[{style}]{escape(group.title)}[/{style}] ({group.kind.value})"
    if group.icon:
        title += f" [dim]{escape(group.icon)}[/dim]"

    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Frecency", justify="right", style="magenta")

    for index, item in enumerate(group.items, 1):
        table.add_row(
            str(index), escape(item.name), escape(item.category or "-"), f"{item.frecency:g}"
        )
    return table


@app.command()
def groups(
    catalog: Path = typer.Argument(..., help="Catalog JSON file"),
    context: str = typer.Option(None, "--context", "-c", help="Insertion context (client id)"),
    no_suggestions: bool = typer.Option(
        False, "--no-suggestions", help="Hide the 'Most used' panel"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print groups as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show the panels the inserter would render for a context."""
    _configure_logging(verbose)
    store = _load_store(catalog)

    # CLI has no preview pane, so hover events are dropped
    with InserterTab(
        item_source=store.item_source(),
        child_name_lookup=store.child_names,
        on_hover=lambda item: None,
        context_id=context,
        show_suggestions=not no_suggestions,
    ) as tab:
        display_groups = tab.groups()

    if as_json:
        console.print_json(json.dumps([group.to_dict() for group in display_groups]))
        return

    if not display_groups:
        console.print("[yellow]No blocks to show.[/yellow]")
        return

    for group in display_groups:
        console.print(_group_table(group))
        console.print()


@app.command()
def categories(
    catalog: Path = typer.Argument(..., help="Catalog JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """List registered categories in panel order with their item counts."""
    _configure_logging(verbose)
    store = _load_store(catalog)
    data = store.catalog

    counts = Counter(item.category for item in data.items if item.category)
    registered = {category.slug for category in data.categories}

    table = Table(title=f"Categories ({len(data.categories)} registered)")
    table.add_column("Order", justify="right", style="dim")
    table.add_column("Slug", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Items", justify="right", style="magenta")
    table.add_column("Note", style="dim")

    for order, category in enumerate(data.categories, 1):
        note = ""
        if category.slug == RESERVED_CATEGORY:
            note = "reserved, no panel"
        elif counts[category.slug] == 0:
            note = "empty, no panel"
        table.add_row(
            str(order),
            escape(category.slug),
            escape(category.title),
            str(counts[category.slug]),
            note,
        )

    console.print(table)

    orphaned = sorted(slug for slug in counts if slug not in registered)
    if orphaned:
        console.print(
            "\n[yellow]Unregistered categories:[/yellow] "
            + ", ".join(f"{escape(slug)} ({counts[slug]})" for slug in orphaned)
        )

    uncategorized = sum(1 for item in data.items if item.is_uncategorized)
    if uncategorized:
        console.print(f"\nUncategorized items: {uncategorized}")


if __name__ == "__main__":
    app()
