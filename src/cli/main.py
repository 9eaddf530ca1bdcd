"""signup-api CLI (Typer).

Drives the sign-up controller once per invocation. The CLI stands in for the
transport layer: it builds the request, prints the response, and maps the
status code to the exit code.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.factories import make_signup_controller
from cli.ui_components import build_response_panel, build_settings_table
from core.config import AppSettings
from core.log import configure_logging
from presentation.helpers.http import to_payload
from presentation.protocols import HttpRequest

app = typer.Typer(no_args_is_help=True, help="Sign-up request handling from the command line.")

_console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override SIGNUP_LOG_LEVEL for this run.",
    ),
) -> None:
    # Init kwargs take precedence over SIGNUP_* variables.
    overrides: dict[str, Any] = {"log_level": log_level} if log_level else {}
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "settings"
        hint = "--log-level" if field in overrides else f"SIGNUP_{field.upper()}"
        raise typer.BadParameter(error["msg"], param_hint=hint) from None

    configure_logging(settings.log_level)
    ctx.obj = settings


@app.command()
def signup(
    ctx: typer.Context,
    name: str | None = typer.Option(None, "--name", help="Account display name."),
    email: str | None = typer.Option(None, "--email", help="Account email address."),
    password: str | None = typer.Option(None, "--password", help="Account password."),
    password_confirmation: str | None = typer.Option(
        None,
        "--password-confirmation",
        help="Must match --password.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the response as JSON."),
) -> None:
    """Submit one sign-up request and show the response."""

    # Omitted options stay out of the body so missing fields are reported as such.
    fields = {
        "name": name,
        "email": email,
        "password": password,
        "passwordConfirmation": password_confirmation,
    }
    body: dict[str, Any] = {key: value for key, value in fields.items() if value is not None}

    controller = make_signup_controller(ctx.obj)
    response = controller.handle(HttpRequest(body=body))
    payload = to_payload(response)

    if as_json:
        typer.echo(json.dumps(payload, ensure_ascii=False, sort_keys=True))
    else:
        _console.print(build_response_panel(payload))

    if not 200 <= response.status_code < 300:
        raise typer.Exit(code=1)


@app.command()
def config(ctx: typer.Context) -> None:
    """Show the effective settings."""

    _console.print(build_settings_table(ctx.obj))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
