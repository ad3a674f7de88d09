from typing import Optional

import typer
from typing_extensions import Annotated

from ccu_tools import ccu, config, github, purge
from ccu_tools.models.settings import env
from ccu_tools.utils.logs import setup_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(purge.app, name="purge")
app.add_typer(ccu.app, name="ccu")
app.add_typer(github.app, name="github")
app.add_typer(config.app, name="config")


@app.callback()
def main(
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Show tracebacks")] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug", help="Log HTTP traffic")] = None,
):
    """Clear the Akamai cache for files changed between releases."""
    if verbose is not None:
        env.verbose = verbose
    if debug is not None:
        env.debug = debug
    setup_logging()
