"""GitHub compare routines and tools."""
from __future__ import annotations

import requests
import typer
from github import Auth, Github, GithubException
from github.Repository import Repository
from rich import print as cp
from rich.markup import escape
from typer import Argument
from typing_extensions import Annotated

from ccu_tools.models.diff import FileChange
from ccu_tools.models.keyring_config import ConfigKey, KeyringConfig
from ccu_tools.models.settings import env
from ccu_tools.utils import uris
from ccu_tools.utils.cli import attempt
from ccu_tools.utils.spinners import spinner

app = typer.Typer(no_args_is_help=True)

RefType = Annotated[str, Argument(help="Tag name, branch or commit sha")]


class DiffError(RuntimeError):
    """GitHub could not produce the diff."""


def _error_message(e: GithubException) -> str:
    if isinstance(e.data, dict) and e.data.get("message"):
        return e.data["message"]
    return str(e)


class GitContext:
    def __init__(self, token: str | None = None):
        """Initialize a new GitContext."""
        if token is None:
            cfg = KeyringConfig.load_from_keyring()
            token = cfg.get_with_prompt(ConfigKey.GITHUB_TOKEN, env.github_token)

        self.gh = Github(
            auth=Auth.Token(token),
            base_url=env.github_api_url,
            user_agent=env.user_agent,
            timeout=int(env.timeout),
        )

    def get_repo(self, repo: str | None = None) -> Repository:
        slug = uris.repo_slug(repo) if repo else env.github_repo_slug
        return self.gh.get_repo(slug, lazy=True)

    def load_file_diffs(self, base: str, head: str, repo: str | None = None) -> list[FileChange]:
        """Files changed between two refs, in the order GitHub lists them."""
        try:
            comparison = self.get_repo(repo).compare(base, head)
            return [
                FileChange(filename=file.filename, status=file.status)
                for file in comparison.files
            ]
        except GithubException as e:
            raise DiffError(f"GitHub Error Message: {_error_message(e)}") from e
        except requests.RequestException as e:
            raise DiffError(f"GitHub request failed: {e}") from e


def load_file_diffs(base: str, head: str, repo: str | None = None) -> list[FileChange]:
    """Load the file diffs between two references using the configured token."""
    return GitContext().load_file_diffs(base, head, repo)


@app.command()
def auth():
    """Test GitHub authentication."""
    ctx = GitContext()

    try:
        login = ctx.gh.get_user().login
    except GithubException as e:
        cp(f"❌  GitHub Error Message: {_error_message(e)}")
        raise SystemExit(1)

    cp(f"Authenticated with GitHub as: {login}")


@app.command()
def compare(
    old: RefType,
    new: RefType,
    repo: Annotated[str, typer.Option("--repo", help="owner/name, defaults to CCU_GITHUB_OWNER/CCU_GITHUB_REPO")] = "",
):
    """List the files changed between two refs."""
    with spinner(f"Comparing {old}...{new}"):
        files = attempt(load_file_diffs, old, new, repo or None)

    for file in files:
        cp(f"[cyan]{file.status:>9}[/cyan]  {escape(file.filename)}")
    cp(f"{len(files)} file(s) changed")
