"""Flask CLI commands for checking registration payloads offline."""

from __future__ import annotations

import json
import logging

import click
from flask.cli import with_appcontext
from marshmallow import ValidationError

from signup.core.extensions import get_store
from signup.schemas import RegistrationPayloadSchema
from signup.services.registration.service import RegistrationService

LOGGER = logging.getLogger(__name__)


@click.group("registrations")
def registrations_cli() -> None:
    """Registration payload utilities."""


@registrations_cli.command("check")
@click.argument("payload_file", type=click.File("r", encoding="utf-8"))
@with_appcontext
def check_payload(payload_file) -> None:
    """Sanitize and validate PAYLOAD_FILE (JSON) without storing it.

    Prints every failure message in field order and exits with status 1
    when the payload would be rejected.
    """
    try:
        raw = json.load(payload_file)
        payload = RegistrationPayloadSchema().load(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise click.BadParameter(f"not a JSON object: {exc}", param_hint="PAYLOAD_FILE") from exc

    _, result = RegistrationService(get_store()).validate(payload)
    LOGGER.debug("registrations.check", extra={"error_count": len(result.errors)})
    if result.valid:
        click.echo("Payload is valid.")
        return
    click.echo(f"Payload rejected ({len(result.errors)} problem(s)):")
    for message in result.errors:
        click.echo(f"  - {message}")
    raise click.exceptions.Exit(1)
