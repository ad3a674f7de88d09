"""Akamai CCU API tools."""
import rich
import typer
from typing_extensions import Annotated

from ccu_tools.utils.ccu import clear_cache, purge_status, queue_length
from ccu_tools.utils.cli import ConfirmType, attempt

app = typer.Typer(no_args_is_help=True)


@app.command()
def purge(
    arls: Annotated[list[str], typer.Argument(help="ARLs to clear")],
    confirm: ConfirmType = False,
):
    """Purge explicit ARLs from Akamai's cache."""
    if not confirm and not typer.confirm(f"Clear {len(arls)} ARL(s)?"):
        raise typer.Abort()

    typer.echo(f"Purging {len(arls)} ARL(s) from Akamai's cache...")
    res = attempt(clear_cache, arls)
    typer.echo(f"✅  ({res.http_status}) estimated {res.estimated_minutes:g} minutes")
    rich.print_json(res.model_dump_json(by_alias=True, exclude_none=True))


@app.command()
def status(progress_uri: str):
    """Show the progress of a submitted purge."""
    res = attempt(purge_status, progress_uri)
    typer.echo(f"{'✅' if res.done else '⏳'}  {res.purge_status}")
    rich.print_json(res.model_dump_json(by_alias=True, exclude_none=True))


@app.command()
def queue():
    """Show the length of the purge queue."""
    res = attempt(queue_length)
    typer.echo(f"Queue length: {res.queue_length}")
