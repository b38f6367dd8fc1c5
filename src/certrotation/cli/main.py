import click
from kubernetes import client
from pathlib import Path
from rich.console import Console
from rich.markup import escape

from . import handlers
from .config import load_config, get_default_config_path
from ..crds.errors import InvalidManifestError, KubeConfigError


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the certrotation config file.",
)
@click.pass_context
def main(ctx, config_path) -> None:
    """Validate and default NMState certificate rotation settings."""
    ctx.ensure_object(dict)
    effective_config_path = config_path if config_path else get_default_config_path()
    ctx.obj["CONFIG"] = load_config(effective_config_path)


@main.command(help="Print the default selfSignConfiguration.")
def defaults() -> None:
    handlers.print_defaults()


@main.command(help="Validate the selfSignConfiguration in a YAML file.")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx, path: Path) -> None:
    """Validate a manifest file."""
    console = Console()
    try:
        errs = handlers.validate_file(path)
    except InvalidManifestError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        ctx.exit(1)
    else:
        if errs:
            ctx.exit(1)


@main.command(help="Validate the selfSignConfiguration of an NMState in the cluster.")
@click.argument("name", type=str, required=False)
@click.pass_context
def check(ctx, name: str) -> None:
    """Validate an NMState resource from the cluster."""
    console = Console()
    if name is None:
        name = ctx.obj["CONFIG"]["nmstate"]["name"]

    try:
        errs = handlers.check_nmstate(name)
    except (KubeConfigError, InvalidManifestError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        ctx.exit(1)
    except client.ApiException as e:
        if e.status == 404:
            console.print(f"Error: NMState '{name}' not found.")
        else:
            console.print(f"An error occurred: {e.reason}")
        ctx.exit(1)
    else:
        if errs:
            ctx.exit(1)


if __name__ == "__main__":
    main()
