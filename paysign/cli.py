"""Command line interface for signing payout request bodies."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from paysign import __version__
from paysign.config import load_config
from paysign.errors import InvalidArguments, PaysignError
from paysign.security import build_jws, detach_payload, read_key_file

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Sign POST request bodies for the Payouts API with a JWS.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"paysign {__version__}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def sign(
    body: Optional[str] = typer.Option(
        None, "--body", help="The payload you want to sign."
    ),
    key: Optional[Path] = typer.Option(
        None,
        "--key",
        help="The Elliptic Curve private key used to sign, in PEM format.",
    ),
    kid: Optional[str] = typer.Option(
        None,
        "--kid",
        help="The id of the public certificate uploaded to the provider console, "
        "used as the `kid` header of the JWS.",
    ),
    alg: Optional[str] = typer.Option(
        None, "--alg", help="Expected algorithm; must match the key's curve."
    ),
    detached: Optional[bool] = typer.Option(
        None,
        "--detached/--attached",
        help="Omit the payload from the printed JWS (header..signature).",
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML configuration file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    Print a JWS over BODY signed with KEY.

    The token goes to stdout so it can be dropped into the request-signature
    header. Nothing is printed to stdout on failure.

    Example:
        paysign --body '{"amount": 100}' --key ec512-private.pem --kid 3f0c...
        paysign --body '{"amount": 100}' --key ec512-private.pem --kid 3f0c... --detached
    """
    try:
        config = load_config(str(config_path) if config_path else None)
    except (ValidationError, yaml.YAMLError) as exc:
        _fail(f"Invalid configuration: {exc}")

    _configure_logging("DEBUG" if verbose else config.log_level)

    key_path = key or config.signing.key_path
    kid = kid or config.signing.kid
    alg = alg or config.signing.algorithm
    if detached is None:
        detached = config.signing.detached

    try:
        if body is None:
            raise InvalidArguments("Missing option '--body'.")
        if key_path is None:
            raise InvalidArguments("Missing option '--key'.")
        if not kid:
            raise InvalidArguments("Missing option '--kid'.")

        token = build_jws(read_key_file(key_path), kid, body.encode("utf-8"), alg)
        if detached:
            token = detach_payload(token)
    except PaysignError as exc:
        logger.debug("Signing failed", exc_info=True)
        _fail(str(exc))

    typer.echo(token)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
