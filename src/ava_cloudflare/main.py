import logging

from ava_cloudflare import cf, config
from ava_cloudflare.models.settings import env
import typer
from rich.logging import RichHandler
from typing_extensions import Annotated

app = typer.Typer(no_args_is_help=True)
app.add_typer(cf.app, name="cloudflare")
app.add_typer(config.app, name="config")


@app.callback()
def main(verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False):
    """Purge the Cloudflare cache of an Ava site."""
    if verbose:
        env.verbose = True

    logging.basicConfig(
        level=logging.DEBUG if env.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
