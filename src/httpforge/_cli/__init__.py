import logging
from typing import Optional, Tuple

import click
import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from .._builders import build_http_request
from .._config import Config
from .._services import TransportService
from .._utils.constants import DOTENV_FILE, VERSION
from ..models.errors import RequestBuildError
from ._input import InputError, parse_args
from ._utils._console import ConsoleLogger
from ._utils._formatters import format_request, format_response

console = ConsoleLogger()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)


@click.command()
@click.version_option(version=VERSION, prog_name="httpforge")
@click.argument("args", nargs=-1, required=True)
@click.option(
    "--form/--json",
    "-f/-j",
    "form",
    default=False,
    help="Send body fields as an url-encoded form instead of a JSON object",
)
@click.option("--offline", is_flag=True, help="Print the request instead of sending it")
@click.option("-v", "--verbose", is_flag=True, help="Print the request as well as the response")
@click.option("--timeout", type=float, default=None, help="Timeout in seconds (env: HTTPFORGE_TIMEOUT)")
@click.option("--verify/--no-verify", default=None, help="Verify TLS certificates")
@click.option("--follow/--no-follow", default=None, help="Follow redirects")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(
    args: Tuple[str, ...],
    form: bool,
    offline: bool,
    verbose: bool,
    timeout: Optional[float],
    verify: Optional[bool],
    follow: Optional[bool],
    debug: bool,
) -> None:
    """Build and send an HTTP request.

    \b
    ARGS is [METHOD] URL [ITEM ...] where ITEM is one of:
      Name:value    header          Name:@path   header from file
      name==value   query parameter
      name=value    body field      name=@path   body field from file
      name:=json    raw JSON body field
    """
    _configure_logging(debug)
    load_dotenv(dotenv_path=DOTENV_FILE)

    try:
        config = Config.from_env(
            timeout=timeout, verify_ssl=verify, follow_redirects=follow
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise click.UsageError(f"Invalid configuration: {details}") from e

    try:
        request = parse_args(args, form=form)
    except InputError as e:
        raise click.UsageError(str(e)) from e

    try:
        outbound = build_http_request(request, user_agent=config.user_agent)
    except RequestBuildError as e:
        console.error(str(e))
        raise click.exceptions.Exit(1) from e

    if offline or verbose:
        click.echo(format_request(outbound))
        if offline:
            return
        click.echo()

    transport = TransportService(config)
    try:
        response = transport.send(outbound)
    except httpx.HTTPError as e:
        console.error(f"Request failed: {e}")
        raise click.exceptions.Exit(1) from e
    finally:
        transport.close()

    click.echo(format_response(response))
