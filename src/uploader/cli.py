# cli.py
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
import uvicorn
from pydantic import ValidationError

from uploader import __version__
from uploader.config.settings import DEFAULT_LISTEN_HOST, DEFAULT_LISTEN_PORT, DEFAULT_STORE_DIR, Settings
from uploader.errors import StartupError
from uploader.main import create_app

# Configure logging
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def split_host_port(value: str) -> Tuple[str, str]:
    """
    Split ``host:port``; IPv6 hosts must be bracketed (``[::1]:1323``).

    :raises ValueError: If the port separator is missing or the host is
        an unbracketed IPv6 address.
    """
    if value.startswith("["):
        end = value.find("]")
        if end == -1 or value[end + 1:end + 2] != ":":
            raise ValueError(f"missing port in address {value!r}")
        return value[1:end], value[end + 2:]

    host, sep, port = value.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {value!r}")
    if ":" in host:
        raise ValueError(f"too many colons in address {value!r}")
    return host, port


def _parse_listen(ctx: click.Context, param: click.Parameter, value: Optional[str]):
    if value is None:
        return None
    try:
        return split_host_port(value)
    except ValueError as e:
        raise click.BadParameter(f"invalid host:port, {e}") from e


@click.command(context_settings={"help_option_names": ["--help", "-h"]})
@click.option("--listen", metavar="HOST:PORT", callback=_parse_listen,
              show_default=f"{DEFAULT_LISTEN_HOST}:{DEFAULT_LISTEN_PORT}",
              help="Listen on this host:port")
@click.option("--no-embed", is_flag=True,
              help="Serve template and static dir from the working directory")
@click.option("--store", "store_dir", type=click.Path(file_okay=False, path_type=Path),
              show_default=DEFAULT_STORE_DIR,
              help="Destination directory of uploads")
@click.version_option(__version__, "--version", prog_name="uploader",
                      message="%(prog)s version %(version)s")
def main(listen: Optional[Tuple[str, str]], no_embed: bool, store_dir: Optional[Path]):
    """Serve a page listing the store directory and accepting uploads into it."""
    overrides = {}
    if listen is not None:
        overrides["listen_host"], overrides["listen_port"] = listen
    if no_embed:
        overrides["embed_assets"] = False
    if store_dir is not None:
        overrides["store_dir"] = store_dir

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        app = create_app(settings)
    except StartupError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    logger.info(f"listening on http://{settings.listen_address}")
    uvicorn.run(
        app,
        host=settings.listen_host,
        port=int(settings.listen_port),
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
