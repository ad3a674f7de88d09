"""Uri helpers"""
from urllib import parse

__all__ = ["join", "repo_slug"]


def join(*parts: str, quote: bool = False) -> str:
    """Join uri parts, ignoring stray slashes between them."""
    if not parts:
        return ""

    base = parts[0] if parts[0].endswith("/") else parts[0] + "/"
    return parse.urljoin(
        base,
        "/".join(
            (parse.quote_plus(part.strip("/"), safe="/") if quote else part.strip("/"))
            for part in parts[1:]
        ),
    )


def repo_slug(url: str) -> str:
    """Reduce a GitHub url (or an 'owner/name' string) to 'owner/name'."""
    path = parse.urlsplit(url).path if "://" in url else url
    path = path.strip("/").removesuffix(".git")
    owner, _, name = path.partition("/")
    if not owner or not name or "/" in name:
        raise ValueError(f"Not a GitHub repository: {url!r}")
    return f"{owner}/{name}"
