"""Main CLI entry point using Click."""

import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from configfileio import __version__
from configfileio.config import FileOptions, load_options
from configfileio.core.exceptions import ConfigFileIOError, FormatMismatchError
from configfileio.file import ConfigurationFile
from configfileio.utils.logging import setup_logging

logger = logging.getLogger(__name__)

VALUE_TYPES = ("str", "int", "real", "bool")


@click.group()
@click.option("-d", "--delimiter", type=str, default=None, help="Character separating names from values")
@click.option("--encoding", type=str, default=None, help="File encoding")
@click.option("--env-file", type=click.Path(dir_okay=False), default=None, help="Load options from a .env file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="configfileio")
@click.pass_context
def cli(
    ctx: click.Context,
    delimiter: Optional[str],
    encoding: Optional[str],
    env_file: Optional[str],
    verbose: bool,
) -> None:
    """configfileio - inspect and edit categorized configuration files."""
    ctx.ensure_object(dict)

    load_dotenv(Path(env_file) if env_file else Path.cwd() / ".env")
    setup_logging(verbose=verbose)

    try:
        ctx.obj["options"] = load_options(delimiter=delimiter, encoding=encoding)
    except ConfigFileIOError as exc:
        raise click.BadParameter(str(exc)) from exc


def _open(ctx: click.Context, path: str, *, create: bool = False) -> ConfigurationFile:
    """Open a configuration file, turning library errors into CLI errors."""
    options: FileOptions = ctx.obj["options"]
    try:
        return ConfigurationFile.open(path, create=create, options=options)
    except ConfigFileIOError as exc:
        raise click.ClickException(str(exc)) from exc


def _save(config: ConfigurationFile) -> None:
    try:
        config.write()
    except ConfigFileIOError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def show(ctx: click.Context, path: str) -> None:
    """Print all categories and settings."""
    config = _open(ctx, path)
    for category in config.list_categories():
        click.echo(f"[{category}]")
        for name in config.list_setting_names(category):
            click.echo(f"  {name}{config.delimiter}{config.get_value(category, name)}")


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("category")
@click.argument("name")
@click.option("--as", "as_type", type=click.Choice(VALUE_TYPES), default="str", help="Type to read the value as")
@click.option("--default", type=str, default=None, help="Value to print when the setting is missing")
@click.pass_context
def get(ctx: click.Context, path: str, category: str, name: str, as_type: str, default: Optional[str]) -> None:
    """Print the value of a setting."""
    config = _open(ctx, path)
    value = config.get_value(category, name)

    if value.absent and default is None:
        raise click.ClickException(f"Setting {category}/{name} does not exist")
    if value.absent:
        value.set(default)

    try:
        if as_type == "int":
            result = value.as_integer()
        elif as_type == "real":
            result = value.as_real()
        elif as_type == "bool":
            result = value.as_boolean()
        else:
            result = value.as_string()
    except FormatMismatchError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(result)


@cli.command(name="set")
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("category")
@click.argument("name")
@click.argument("value")
@click.option("--append", is_flag=True, help="Re-add the setting at the end of its category")
@click.pass_context
def set_(ctx: click.Context, path: str, category: str, name: str, value: str, append: bool) -> None:
    """Set the value of a setting and save the file."""
    config = _open(ctx, path, create=ctx.obj["options"].create_if_missing)
    if append:
        config.add_setting(category, name, value)
    else:
        config.set_value(category, name, value)
    _save(config)
    logger.debug("Set %s/%s in %s", category, name, path)


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("category")
@click.argument("name", required=False)
@click.pass_context
def remove(ctx: click.Context, path: str, category: str, name: Optional[str]) -> None:
    """Remove a setting, or a whole category when no name is given."""
    config = _open(ctx, path)
    if name is None:
        config.remove_category(category)
    else:
        config.remove_setting(category, name)
    _save(config)


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def check(ctx: click.Context, path: str) -> None:
    """Report lines that were skipped while reading."""
    config = _open(ctx, path)
    diagnostics = config.diagnostics
    if not diagnostics:
        click.echo(f"{path}: OK")
        return

    for message in diagnostics:
        click.echo(message)
    ctx.exit(1)


if __name__ == "__main__":
    cli()
