"""
Command-line interface for the Vue wrapper generator.

Usage:
    dx-vue-generator generate --metadata metadata.json --components-dir src
    dx-vue-generator inspect dxButton --metadata metadata.json
    dx-vue-generator init-config generator.json
"""

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.tree import Tree

from . import __version__
from .codegen.core.config import (
    EXAMPLE_CONFIG,
    ConfigError,
    GeneratorConfig,
    get_config_manager,
    load_config,
)
from .codegen.core.generator import GeneratorError, VueGenerator
from .codegen.core.mapper import map_widget
from .codegen.core.model import MetadataModel
from .codegen.core.templates import TemplateError
from .loader import MetadataLoaderError, is_url, load_metadata
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dx-vue-generator",
        description="Generate Vue wrapper components from widget metadata",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate component modules for all widgets"
    )
    _add_source_args(generate_parser)
    _add_config_args(generate_parser)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the intermediate representation of one widget"
    )
    inspect_parser.add_argument("widget", help="Widget name (e.g. dxButton or Button)")
    _add_source_args(inspect_parser)
    _add_config_args(inspect_parser)

    init_parser = subparsers.add_parser(
        "init-config", help="Write an example configuration file"
    )
    init_parser.add_argument("output", metavar="FILE", help="Target JSON file")

    return parser


def _add_source_args(parser: argparse.ArgumentParser):
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument("--metadata", "-m", metavar="FILE", help="Metadata JSON file")
    source_group.add_argument("--url", metavar="URL", help="Metadata JSON URL")


def _add_config_args(parser: argparse.ArgumentParser):
    config_group = parser.add_argument_group("generation options")
    config_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for generation"
    )
    config_group.add_argument("--components-dir", metavar="DIR", help="Output directory")
    config_group.add_argument("--index-file", metavar="FILE", help="Index module path")
    config_group.add_argument(
        "--base-component-path", metavar="PATH", help="Module exporting createComponent"
    )
    config_group.add_argument(
        "--config-component-path",
        metavar="PATH",
        help="Module exporting createConfigurationComponent",
    )
    config_group.add_argument(
        "--widgets-package", metavar="NAME", help="Package the widgets are imported from"
    )
    config_group.add_argument(
        "--vue-version", type=int, choices=[2, 3], help="Target Vue major version"
    )
    config_group.add_argument(
        "--generate-reexports",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit type re-exports and common re-export modules (overrides the config file)",
    )


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from file and command line overrides."""
    overrides = {
        "components_dir": args.components_dir,
        "index_file_name": args.index_file,
        "base_component_path": args.base_component_path,
        "config_component_path": args.config_component_path,
        "widgets_package": args.widgets_package,
        "vue_version": args.vue_version,
        "generate_reexports": args.generate_reexports,
    }
    config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    return config


def _load_model(args: argparse.Namespace) -> tuple[str, MetadataModel]:
    if args.url and not is_url(args.url):
        raise CLIError(f"--url expects an http(s) URL: {args.url}")
    source = args.metadata or args.url
    return source, load_metadata(source)


def _handle_generate(args: argparse.Namespace) -> int:
    config = _build_config(args)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        load_task = progress.add_task("[cyan]Loading metadata...", total=None)
        source, model = _load_model(args)
        progress.remove_task(load_task)

        gen_task = progress.add_task(
            f"[green]Generating {len(model.widgets)} components...", total=None
        )
        result = VueGenerator(config).generate(model)
        progress.remove_task(gen_task)

    console.print(f"[green]✓[/green] Loaded [cyan]{source}[/cyan]")
    console.print(
        f"[green]✓[/green] Wrote {len(result.files)} files to [cyan]{config.components_dir}[/cyan]"
    )

    if args.verbose:
        files_table = Table(
            title="📄 Generated Files",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        files_table.add_column("Component", style="bold")
        files_table.add_column("Index path", style="green")
        for entry in result.reexports:
            files_table.add_row(entry.name, entry.path)
        console.print(files_table)

        metadata_table = Table(title="📊 Generation Metadata", box=box.SIMPLE)
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print(metadata_table)

    return 0


def _handle_inspect(args: argparse.Namespace) -> int:
    config = _build_config(args)
    _, model = _load_model(args)

    widget = model.get_widget(args.widget)
    if widget is None:
        raise CLIError(f"Widget not found: {args.widget}")

    widget_file = map_widget(
        widget,
        config.base_component_path,
        config.config_component_path,
        model.custom_types,
        config.file_extension,
    )
    component = widget_file.component

    console.print(
        f"[bold cyan]{component.name}[/bold cyan] → {widget_file.file_name} "
        f"(base: {component.base_component.name})"
    )

    props_table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
    props_table.add_column("Prop", style="bold")
    props_table.add_column("Types", style="green")
    props_table.add_column("Array")
    props_table.add_column("Acceptable values")
    for prop in component.props:
        restriction = (
            f"{prop.acceptable_value_type}: {list(prop.acceptable_values)}"
            if prop.acceptable_values is not None
            else ""
        )
        props_table.add_row(
            prop.name, ", ".join(prop.types) or "any", "✓" if prop.is_array else "", restriction
        )
    console.print(props_table)

    tree = Tree(f"🌳 {component.name}")
    if component.expected_children:
        children = tree.add("expected children")
        for name, child in component.expected_children.items():
            kind = "collection item" if child.is_collection_item else "option"
            children.add(f"{name} → {child.option_name} ({kind})")
    for nested in component.nested_components or ():
        branch = tree.add(f"{nested.name} [dim]({nested.option_name})[/dim]")
        for prop in nested.props:
            branch.add(f"{prop.name}: {', '.join(prop.types) or 'any'}")
    console.print(tree)

    return 0


def _handle_init_config(args: argparse.Namespace) -> int:
    config = load_config(custom_config=EXAMPLE_CONFIG)
    output = Path(args.output)
    get_config_manager().save_config(config, output)
    console.print(f"[green]✓[/green] Configuration saved to [cyan]{output}[/cyan]")
    return 0


HANDLERS = {
    "generate": _handle_generate,
    "inspect": _handle_inspect,
    "init-config": _handle_init_config,
}


def main(argv=None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return HANDLERS[args.command](args)
    except (CLIError, ConfigError, MetadataLoaderError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except (GeneratorError, TemplateError) as e:
        console.print(f"[red]✗ Generation failed:[/red] {e}")
        logger.debug("Generation failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
