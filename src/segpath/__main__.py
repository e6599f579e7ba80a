"""CLI entry point for segpath.

Small inspection commands for trying out normalization and
relativization from a shell.
"""

from pathlib import Path

import click

from segpath import __version__
from segpath.config.loader import load_config
from segpath.errors import PathKindError, SegPathError
from segpath.services.conversion import PathConverter
from segpath.utils.logging import configure_logging


def _kind(path: object) -> str:
    return type(path).__name__


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, config: Path | None) -> None:
    """Normalize, join and relativize filesystem-style paths.

    Nothing is read from or written to the filesystem.
    """
    try:
        cfg = load_config(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(cfg.logging)
    ctx.obj = PathConverter(cfg)


@cli.command()
@click.argument("path")
@click.pass_obj
def normalize(converter: PathConverter, path: str) -> None:
    """Print the kind and normalized form of PATH."""
    try:
        result = converter.convert(path)
    except SegPathError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{_kind(result)}: {result}")


@cli.command()
@click.argument("base")
@click.argument("sub")
@click.pass_obj
def join(converter: PathConverter, base: str, sub: str) -> None:
    """Print BASE joined with the relative path SUB."""
    try:
        result = converter.convert(base) / converter.to_relative(sub)
    except SegPathError as e:
        raise click.ClickException(str(e)) from e
    click.echo(str(result))


@cli.command()
@click.argument("path")
@click.argument("base")
@click.pass_obj
def relativize(converter: PathConverter, path: str, base: str) -> None:
    """Print PATH relative to BASE. Both must be of the same kind."""
    try:
        target = converter.convert(path)
        origin = converter.convert(base)
        if type(target) is not type(origin):
            raise PathKindError(
                f"Can't relativize {_kind(target)} {target} against {_kind(origin)} {origin}"
            )
        result = target.relative_to(origin)  # type: ignore[arg-type]
    except SegPathError as e:
        raise click.ClickException(str(e)) from e
    click.echo(str(result))


@cli.command()
@click.argument("path")
@click.pass_obj
def ext(converter: PathConverter, path: str) -> None:
    """Print the extension of PATH's last segment."""
    try:
        result = converter.convert(path)
        extension = converter.extension(result)
    except SegPathError as e:
        raise click.ClickException(str(e)) from e
    except IndexError as e:
        raise click.ClickException(f"{path} has no last segment") from e
    click.echo(extension)


if __name__ == "__main__":
    cli()
