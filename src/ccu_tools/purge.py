"""Purge the Akamai cache for files changed between two releases."""
from __future__ import annotations

from typing import Any

import typer
from rich import print as cp
from rich.markup import escape
from typing_extensions import Annotated

from ccu_tools.github import load_file_diffs
from ccu_tools.models.ccu import PurgeResult
from ccu_tools.models.settings import env
from ccu_tools.utils.arl import filter_arls
from ccu_tools.utils.ccu import clear_cache
from ccu_tools.utils.cli import ConfirmType, DryRunType, attempt
from ccu_tools.utils.logs import log
from ccu_tools.utils.spinners import spinner

app = typer.Typer(no_args_is_help=True)

OldType = Annotated[str, typer.Option("--old", help="Old release tag, branch or sha")]
NewType = Annotated[str, typer.Option("--new", help="New release tag, branch or sha")]


def collect_arls(base: str, head: str, path_map: dict[str, str] | None = None) -> list[str]:
    """ARLs for the files modified between two refs."""
    path_map = env.path_map if path_map is None else path_map
    if not path_map:
        log.warning("No path map configured (CCU_PATH_MAP), nothing will match")

    files = load_file_diffs(base, head)
    log.info("%d file(s) changed between %s and %s", len(files), base, head)
    return filter_arls(files, path_map)


def run(base: str, head: str, options: dict[str, Any] | None = None) -> PurgeResult | None:
    """Run the cache clear. Returns None when there is nothing to clear."""
    arls = collect_arls(base, head)
    return clear_cache(arls, options)


def report(result: PurgeResult | None) -> None:
    """Print the outcome of a purge for the user."""
    if result is None:
        cp("Nothing to do")
        return

    cp(f"Cache will take an estimated {result.estimated_minutes:g} minutes to be cleared.")
    if result.purge_id:
        cp(f"Purge id: {escape(result.purge_id)}")
    if result.progress_uri:
        cp(f"Check progress with: ccu-tools ccu status {escape(result.progress_uri)}")


@app.command(name="run")
def run_command(
    old: OldType,
    new: NewType,
    dry_run: DryRunType = False,
    confirm: ConfirmType = False,
):
    """Purge the ARLs of every file modified between two refs."""
    with spinner(f"Comparing {old}...{new}"):
        arls = attempt(collect_arls, old, new)

    if not arls:
        report(None)
        return

    cp(f"{len(arls)} ARL(s) to clear:")
    for arl in arls:
        cp(f"  {escape(arl)}")

    if dry_run or (not confirm and not typer.confirm("Clear these from the cache?")):
        raise typer.Abort()

    with spinner("Submitting purge request"):
        result = attempt(clear_cache, arls)

    report(result)


@app.command()
def arls(old: OldType, new: NewType):
    """List the ARLs that would be purged for two refs."""
    with spinner(f"Comparing {old}...{new}"):
        found = attempt(collect_arls, old, new)

    for arl in found:
        typer.echo(arl)
    if not found:
        cp("Nothing to do")
