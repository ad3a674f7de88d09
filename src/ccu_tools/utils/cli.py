"""Shared command line helpers."""
from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import httpx
import requests
import typer
from typer import Option
from typing_extensions import Annotated

from ccu_tools.models.settings import env

T = TypeVar("T")
P = ParamSpec("P")

ConfirmType = Annotated[bool, Option("--yes", "-y", help="Confirm action")]
DryRunType = Annotated[bool, Option("--dry-run", help="Stop before anything is purged")]


def attempt(func: Callable[P, T], *args: Any, **kwargs: Any) -> T:
    """Call func, turning known failures into a short message and exit code 1."""
    try:
        return func(*args, **kwargs)
    except (RuntimeError, ValueError, httpx.HTTPError, requests.RequestException) as e:
        if env.verbose:
            raise
        typer.echo(f"❌  Error: {e}")
        raise SystemExit(1)
