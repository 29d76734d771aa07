"""Main CLI entry point for fairy-data.

Generates words and text, and bewitches objects from the command line.
"""

from typing import Any
import importlib
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fairy_data import __version__
from fairy_data.config import ConfigLoader, FairyConfig, load_config
from fairy_data.errors import ExhaustionError
from fairy_data.fairy import Fairy
from fairy_data.magic.fields import declared_fields

console = Console()

TEXT_KINDS = ["word", "sentence", "paragraph", "latin-word", "latin-sentence"]


def _build_fairy(config_path: str | None, seed: int | None, limit: int | None = None) -> Fairy:
    config = load_config(config_path) if config_path else FairyConfig()
    overrides: dict[str, Any] = {}
    if seed is not None:
        overrides["seed"] = seed
    if limit is not None:
        overrides["text"] = {"limit": limit}
    return Fairy.create(config, **overrides)


def _fail(ctx: click.Context, e: Exception) -> None:
    console.print(f"[red]Error: {e}[/red]")
    if ctx.obj.get("verbose", False):
        import traceback
        console.print(traceback.format_exc())
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="fairy-gen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """fairy-gen - Generate synthetic test data."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command()
@click.option("--kind", "-k", type=click.Choice(TEXT_KINDS), default="word", help="Kind of text to generate")
@click.option("--count", "-n", type=int, default=5, help="Number of values")
@click.option("--unique", "-u", is_flag=True, help="Never repeat a value")
@click.option("--limit", "-l", type=int, help="Truncate values to this many characters")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file")
@click.pass_context
def text(
    ctx: click.Context,
    kind: str,
    count: int,
    unique: bool,
    limit: int | None,
    seed: int | None,
    config_path: str | None,
) -> None:
    """Generate words, sentences or paragraphs, one per line."""
    try:
        fairy = _build_fairy(config_path, seed, limit)
        texts = fairy.text_producer()
        if unique:
            texts = texts.unique()

        operation = getattr(texts, kind.replace("-", "_"))
        for _ in range(count):
            click.echo(operation())

    except ExhaustionError as e:
        console.print(f"[yellow]Stopped after {e.attempts} attempts: no more unique values[/yellow]")
        sys.exit(1)
    except Exception as e:
        _fail(ctx, e)


def _import_target(path: str) -> type:
    module_name, _, class_name = path.partition(":")
    if not module_name or not class_name:
        raise click.BadParameter(f"expected 'module:Class', got {path!r}")
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


@cli.command()
@click.argument("target")
@click.option("--field", "-f", "fields", multiple=True, help="Field(s) to bewitch (default: all)")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file")
@click.pass_context
def bewitch(
    ctx: click.Context,
    target: str,
    fields: tuple[str, ...],
    seed: int | None,
    config_path: str | None,
) -> None:
    """Instantiate a class and fill its fields with random values.

    TARGET is 'module:Class'; the class must be constructible without arguments.
    """
    try:
        klass = _import_target(target)
        obj = klass()
        fairy = _build_fairy(config_path, seed)
        fairy.magic_producer().bewitch(obj, *fields)

        table = Table(title=klass.__name__)
        table.add_column("Field", style="cyan")
        table.add_column("Type", style="green")
        table.add_column("Value")

        for spec in declared_fields(klass):
            table.add_row(
                spec.name,
                spec.semantic_type.value,
                repr(getattr(obj, spec.attribute, None)),
            )

        console.print(table)

    except click.BadParameter:
        raise
    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file")
@click.option("--seed", "-s", type=int, help="Random seed")
@click.pass_context
def config(ctx: click.Context, config_path: str | None, seed: int | None) -> None:
    """Show the effective configuration as YAML."""
    try:
        fairy = _build_fairy(config_path, seed)
        data = ConfigLoader().to_dict(fairy.config)
        click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False), nl=False)
    except Exception as e:
        _fail(ctx, e)


if __name__ == "__main__":
    cli()
