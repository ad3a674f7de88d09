"""Translate repository paths into Akamai ARLs."""
from __future__ import annotations

from typing import Iterable, Mapping

from ccu_tools.models.diff import FileChange

__all__ = ["convert_arl", "filter_arls"]


def convert_arl(path: str, path_map: Mapping[str, str]) -> str | None:
    """
    Convert a repository path to an ARL.

    Every prefix of ``path_map`` is checked in order and the last one
    that matches decides the ARL base. Returns None when nothing matches.
    """
    arl = None
    for prefix, arl_base in path_map.items():
        if path.startswith(prefix):
            arl = arl_base + path
    return arl


def filter_arls(files: Iterable[FileChange], path_map: Mapping[str, str]) -> list[str]:
    """ARLs for the modified files of a diff, in diff order."""
    arls = []
    for file in files:
        # additions have nothing cached yet
        if not file.is_modified:
            continue
        arl = convert_arl(file.filename, path_map)
        if arl:
            arls.append(arl)
    return arls
