"""Shared formatting for validation and reservation results."""

from __future__ import annotations

import click

from fleetalloc.domain.model.results import ValidationResult


def echo_validation(result: ValidationResult) -> None:
    if result.is_valid:
        click.echo("OK")
    message = result.formatted_message()
    if message:
        click.echo(message)
