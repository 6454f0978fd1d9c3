import logging

import typer
from rich.logging import RichHandler

from cf_tools import cf, config
from cf_tools.models.settings import env

app = typer.Typer(no_args_is_help=True)
app.add_typer(cf.app, name="cf")
app.add_typer(config.app, name="config")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging, raise errors")):
    if verbose:
        env.verbose = True

    if env.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(rich_tracebacks=True)],
        )
