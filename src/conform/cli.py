# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
conform CLI entrypoint.

Renders element templates for importable types and previews labels.
"""

import importlib
import json

import typer

from conform.logging import configure_logging
from conform.template.bindings import BindingType
from conform.template.errors import TemplateError
from conform.template.generator import TemplateGenerator
from conform.template.labels import transform_id_into_label

app = typer.Typer(help="conform CLI: element template generation tools.")


@app.callback()
def main() -> None:
    """conform CLI: element template generation tools."""
    # log output is configured from CONFORM_LOGGING_* for every command
    configure_logging()


def _load_target(target: str) -> object:
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise typer.BadParameter(
            f"Expected 'module:Class', got {target!r}", param_hint="TARGET"
        )
    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(
            f"Could not import module {module_name!r}: {e}", param_hint="TARGET"
        ) from e
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise typer.BadParameter(
                f"{module_name!r} has no attribute {attr_path!r}", param_hint="TARGET"
            ) from e
    return obj


@app.command()
def render(
    target: str = typer.Argument(..., help="Type to render, as 'module:Class'"),
    binding: str = typer.Option(
        BindingType.INPUT.value,
        "--binding",
        "-b",
        help="Binding for all properties: input, task_header, property, "
        "subscription_property or none",
    ),
    template_id: str | None = typer.Option(None, "--template-id", help="Template id"),
    name: str | None = typer.Option(None, "--name", help="Template name"),
    version: int | None = typer.Option(None, "--version", help="Template version"),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Print the element template of TARGET as JSON."""
    tp = _load_target(target)
    if binding == "none":
        binding_type = None
    else:
        try:
            binding_type = BindingType(binding)
        except ValueError as e:
            raise typer.BadParameter(
                f"Unknown binding {binding!r}", param_hint="--binding"
            ) from e

    try:
        template = TemplateGenerator().generate(
            tp,
            template_id=template_id,
            name=name,
            version=version,
            binding_type=binding_type,
        )
    except TemplateError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e
    typer.echo(json.dumps(template.to_dict(), indent=indent))


@app.command()
def labels(identifiers: list[str] = typer.Argument(..., help="Identifiers")) -> None:
    """Print the display label of each identifier."""
    for identifier in identifiers:
        try:
            typer.echo(f"{identifier}: {transform_id_into_label(identifier)}")
        except ValueError as e:
            typer.secho(f"{identifier!r}: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
