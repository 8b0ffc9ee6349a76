"""Click CLI entry point for dotscribe."""

from __future__ import annotations

from pathlib import Path

import click
import yaml

from dotscribe import __version__
from dotscribe.attributes import InvalidAttributeValue, attribute_value
from dotscribe.config import apply_config, is_initialized, load_config, save_config
from dotscribe.keywords import KeywordFileError, families, keywords
from dotscribe.models import RenderConfig


@click.group()
@click.version_option(version=__version__, prog_name="dotscribe")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """dotscribe: build and render Graphviz DOT documents."""
    ctx.ensure_object(dict)
    project_root = Path.cwd()
    config = RenderConfig()
    if is_initialized(project_root):
        config = load_config(project_root)
        try:
            apply_config(config, project_root)
        except KeywordFileError as exc:
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(1)
            return
    ctx.obj["config"] = config


@cli.command()
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Spaces per indent level")
@click.pass_context
def init(ctx: click.Context, indent: int | None) -> None:
    """Initialize a project for dotscribe."""
    project_root = Path.cwd()
    already = is_initialized(project_root)

    if already:
        click.echo("Warning: Project is already initialized. Updating configuration.")
        config = ctx.obj["config"]
    else:
        config = RenderConfig()
    if indent is not None:
        config.indent = indent

    path = save_config(config, project_root)
    click.echo(f"Config written: {path}")


@cli.command("config")
@click.pass_context
def config_cmd(ctx: click.Context) -> None:
    """Show the project configuration."""
    from dotscribe.config import ensure_initialized

    try:
        config = ensure_initialized(Path.cwd())
    except RuntimeError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
        return

    click.echo(f"version: {config.version}")
    click.echo(f"indent: {config.indent}")
    if config.keyword_files:
        click.echo("keyword files:")
        for keyword_file in config.keyword_files:
            click.echo(f"  {keyword_file}")
    else:
        click.echo("keyword files: none")


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output", type=click.Path(dir_okay=False), default=None,
              help="Write the document to a file instead of stdout")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Spaces per indent level")
@click.pass_context
def render(ctx: click.Context, file_path: str, output: str | None, indent: int | None) -> None:
    """Render a YAML or JSON graph description as DOT."""
    from dotscribe.exporters.dot import dump
    from dotscribe.exporters.dot import render as render_dot
    from dotscribe.loader import GraphDescriptionError, load_graph_file

    try:
        graph = load_graph_file(Path(file_path))
    except GraphDescriptionError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
        return

    if indent is None:
        indent = ctx.obj["config"].indent
    unit = " " * indent

    if output:
        with open(output, "wb") as sink:
            dump(graph, sink, indent=unit)
        click.echo(f"Wrote {output}")
    else:
        click.echo(render_dot(graph, indent=unit), nl=False)


@cli.command("keywords")
@click.argument("family", required=False)
@click.pass_context
def keywords_cmd(ctx: click.Context, family: str | None) -> None:
    """List keyword families, or the keywords of one family."""
    if family is None:
        for name in families():
            click.echo(f"{name} ({len(keywords(name))})")
        return

    try:
        values = keywords(family)
    except KeyError:
        click.echo(f"Error: Unknown keyword family '{family}'", err=True)
        ctx.exit(1)
        return
    for value in values:
        click.echo(value)


@cli.command()
@click.argument("attribute")
@click.argument("value")
@click.pass_context
def check(ctx: click.Context, attribute: str, value: str) -> None:
    """Validate VALUE for ATTRIBUTE and print the rendered attribute.

    VALUE is read as YAML, so ``1.5`` is a number, ``true`` a boolean and
    ``"{html: '<b>x</b>'}"`` an HTML label.
    """
    from dotscribe.identifiers import format_id
    from dotscribe.loader import description_value

    try:
        raw = yaml.safe_load(value)
    except yaml.YAMLError:
        raw = value
    # A leading "#" reads as a YAML comment.
    if raw is None:
        raw = value

    try:
        parsed = attribute_value(attribute, description_value(raw))
    except InvalidAttributeValue as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
        return

    click.echo(f"{format_id(attribute)}={parsed.render()}")
