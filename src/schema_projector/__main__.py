"""CLI entry point for the schema projector."""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import ValidationError

from .config import Config
from .models.descriptors import MethodDescriptor, parse_type_descriptor
from .schema_gen.spec_generator import SpecGenerator
from .utils.log_setup import configure_logging


def _load_json(path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except ValueError as e:  # JSONDecodeError and UnicodeDecodeError
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="SCHEMA_PROJECTOR_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the logging level (e.g., DEBUG, INFO)."
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format."
)
@click.option(
    "--no-implicit-additional-properties",
    is_flag=True,
    help="Emit additionalProperties: false for free-form object schemas."
)
@click.option(
    "--quiet-advisories",
    is_flag=True,
    help="Suppress advisory warnings such as the free-form object discouragement."
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Optional[str],
    log_level: Optional[str],
    log_format: Optional[str],
    no_implicit_additional_properties: bool,
    quiet_advisories: bool,
) -> None:
    """Schema projector - turns type descriptors into Swagger 2.0 schema fragments."""
    try:
        cfg = Config.from_file(Path(config_file)) if config_file else Config()
    except (OSError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    overrides: dict[str, Any] = {}
    if no_implicit_additional_properties:
        overrides["no_implicit_additional_properties"] = True
    if quiet_advisories:
        overrides["suppress_advisory_warnings"] = True
    logging_updates: dict[str, str] = {}
    if log_level:
        logging_updates["level"] = log_level.upper()
    if log_format:
        logging_updates["format"] = log_format.lower()
    if logging_updates:
        overrides["logging"] = cfg.logging.model_copy(update=logging_updates)
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    configure_logging(cfg)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command("type")
@click.argument("descriptor_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def type_(ctx: click.Context, descriptor_file: str) -> None:
    """Project a JSON type descriptor into a schema fragment."""
    config: Config = ctx.obj["config"]
    try:
        descriptor = parse_type_descriptor(_load_json(descriptor_file))
    except ValidationError as e:
        raise click.ClickException(f"Invalid type descriptor: {e}") from e

    fragment = SpecGenerator(config).get_swagger_type(descriptor)
    click.echo(json.dumps(fragment.to_dict(), indent=2))


@cli.command()
@click.argument("controller_name")
@click.argument("method_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def operation(ctx: click.Context, controller_name: str, method_file: str) -> None:
    """Project a JSON method descriptor into an operation fragment."""
    config: Config = ctx.obj["config"]
    try:
        method = MethodDescriptor.model_validate(_load_json(method_file))
    except ValidationError as e:
        raise click.ClickException(f"Invalid method descriptor: {e}") from e

    fragment = SpecGenerator(config).build_operation(controller_name, method)
    click.echo(json.dumps(fragment.to_dict(), indent=2))


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"schema-projector v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
