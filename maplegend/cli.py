"""Command-line interface for the legend builder."""

import logging
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from . import __version__
from .config import get_config
from .models.layer import MapDefinition
from .models.legend import LayerNestingError, LegendNode
from .services.legend_service import LegendService
from .services.symbol_service import SymbolPreviewService
from .utils.image_utils import save_image

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Map Legend Builder - turn a map's layers into a legend tree."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load_map(map_path: str) -> MapDefinition:
    map_file = Path(map_path)

    if map_file.is_dir():
        map_file = map_file / "map.yaml"

    if not map_file.exists():
        console.print(f"[red]Error:[/red] Map file not found: {map_file}")
        raise SystemExit(1)

    try:
        return MapDefinition.from_yaml(map_file)
    except yaml.YAMLError as exc:
        console.print(f"[red]Error:[/red] Map file {map_file} is not valid YAML:\n{escape(str(exc))}")
        raise SystemExit(1)
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] Invalid map file {map_file}:\n{escape(str(exc))}")
        raise SystemExit(1)


def _add_branch(tree: Tree, node: LegendNode, hide_excluded: bool) -> None:
    for child in node.children:
        if child.exclude and hide_excluded:
            continue
        label = escape(child.label) if child.label else "[dim]<unlabeled>[/dim]"
        if child.symbol is not None:
            label = f"{label} [dim]({child.symbol.width}x{child.symbol.height})[/dim]"
        if child.exclude:
            label = f"[dim strike]{label}[/dim strike]"
        branch = tree.add(label)
        if child.expanded:
            _add_branch(branch, child, hide_excluded)


@main.command()
@click.argument("map_path", type=click.Path(exists=True))
@click.option("--symbol-size", "-s", type=int, default=None, help="Symbol size in pixels (0 disables symbols)")
@click.option("--hide-excluded", is_flag=True, help="Leave disabled layers out of the tree")
def show(map_path: str, symbol_size: Optional[int], hide_excluded: bool):
    """Build the legend for a map file and print it as a tree."""
    config = get_config()
    map_definition = _load_map(map_path)

    service = LegendService(style=config.legend_style(symbol_size), decoration=config.decoration)
    try:
        legend = service.create(map_definition)
    except LayerNestingError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    tree = Tree(f"[bold]{escape(legend.root.label)}[/bold] [dim]({escape(legend.map_name)})[/dim]")
    _add_branch(tree, legend.root, hide_excluded)
    console.print(tree)

    if not legend.root.children:
        console.print("[yellow]Note:[/yellow] Map has no layers.")


@main.command()
def factories():
    """List the item factories a new legend service starts with."""
    service = LegendService(style=get_config().legend_style())

    table = Table(title="Legend item factories")
    table.add_column("Type", style="cyan")
    table.add_column("Factory", style="green")

    for type_key, factory in service.registry.items():
        table.add_row(type_key.name, type(factory).__name__)

    console.print(table)


@main.command()
@click.argument("map_path", type=click.Path(exists=True))
@click.argument("layer_name")
@click.option("--output", "-o", type=click.Path(), help="Output PNG path")
@click.option("--size", "-s", type=int, default=None, help="Symbol size in pixels")
def symbol(map_path: str, layer_name: str, output: Optional[str], size: Optional[int]):
    """Export the generic symbol of a layer as a PNG."""
    config = get_config()
    map_definition = _load_map(map_path)

    layer = map_definition.find_layer(layer_name)
    if layer is None:
        console.print(f"[red]Error:[/red] Layer not found: {escape(layer_name)}")
        raise SystemExit(1)

    size = config.symbol_size if size is None else size
    image = SymbolPreviewService().render(layer, size, size)
    if image is None:
        console.print("[red]Error:[/red] Symbol size must be greater than 0")
        raise SystemExit(1)

    if output:
        output_path = Path(output)
    else:
        output_path = config.output_dir / f"{layer_name.replace(' ', '_')}_symbol.png"

    save_image(image, output_path)
    console.print(f"[green]Saved:[/green] {output_path}")
