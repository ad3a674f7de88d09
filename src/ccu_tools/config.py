"""Configuration"""
from __future__ import annotations

from typing import Optional

import pyperclip
import rich
from rich.markup import escape
import typer
from typing_extensions import Annotated

from ccu_tools.models.keyring_config import ConfigKey, KeyringConfig
from ccu_tools.models.settings import env

app = typer.Typer(no_args_is_help=True)
cp = rich.print


@app.command(name="set")
def set_config(
        key: ConfigKey,
        value: Annotated[Optional[str], typer.Argument()] = None
):
    """Set a secret in the keyring. Omit the value to clear it."""
    with KeyringConfig.load_from_keyring() as config:
        if value is None:
            config.pop(key, None)
        else:
            config[key] = value

    cp(f"{'Cleared' if value is None else 'Saved'} key {repr(key.value)}")


@app.command(name="set-cp")
def set_cp_config(
    key: ConfigKey
):
    """Set a secret in the keyring from the clipboard."""
    value = pyperclip.paste()
    if not value:
        cp("❌  Clipboard is empty.")
        raise SystemExit(1)

    with KeyringConfig.load_from_keyring() as config:
        config[key] = value

    cp(f"Saved key {repr(key.value)} from clipboard ({len(value)} chars)")


@app.command()
def show():
    """Show the current configuration."""
    config = KeyringConfig.load_from_keyring()
    cp(config.to_keys_json())
    cp(f"Repository: {env.github_repo_slug}")
    cp(f"CCU endpoint: {env.ccu_endpoint} as {env.akamai_username or '(no username)'}")
    cp(f"Purge options: {env.purge_options}")
    cp("Path map:")
    for prefix, arl_base in env.path_map.items():
        cp(f"  {escape(repr(prefix))} -> {escape(repr(arl_base))}")
