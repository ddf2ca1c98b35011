# SPDX-License-Identifier: BSD-2-Clause
"""
Path resolution through Bazel runfiles.

Source paths handed to the wrapper are relative to the runfiles tree of the
action. When a runfiles resolver is available they are looked up through it,
otherwise they are only normalized for the host platform.
"""

import logging
import os
from typing import Mapping, Optional, Protocol

from runfiles import runfiles

from .errors import WrapperError

logger = logging.getLogger(__name__)

#: Repository that runfiles paths are looked up from
MAIN_REPOSITORY = ""


class PathResolver(Protocol):
    """Anything that can map a runfiles path to a location on disk."""

    def Rlocation(self, path: str, source_repo: Optional[str] = None) -> Optional[str]:
        ...


def normalize_path(path: str) -> str:
    """Use the host's preferred path separator. Nothing else is rewritten."""
    if os.sep != "/":
        return path.replace("/", os.sep)
    return path


def is_runfiles_path(path: str) -> bool:
    """
    Whether ``path`` has the shape of a normalized runfiles path.

    Runfiles lookups reject empty paths and paths with ``.``/``..`` segments or
    empty segments.
    """
    if not path or path.startswith("\\"):
        return False
    segments = path.split("/")
    if os.path.isabs(path):
        segments = segments[1:]
    return all(segment not in ("", ".", "..") for segment in segments)


def rlocation(resolver: PathResolver, path: str) -> Optional[str]:
    """Look up ``path`` from the main repository."""
    return resolver.Rlocation(path, MAIN_REPOSITORY)


def resolve_path(path: str, resolver: Optional[PathResolver]) -> str:
    """
    Resolve ``path`` through ``resolver``, falling back to :func:`normalize_path`.

    Args:
        path: Runfiles-relative (or plain) path
        resolver: Optional runfiles resolver

    Returns:
        The resolved location, or the normalized path if there is no resolver,
        the path is not a runfiles path, or the resolver could not locate it.
    """
    if resolver is not None:
        if not is_runfiles_path(path):
            logger.debug(f"{path} is not a runfiles path, not resolving it")
        else:
            resolved = rlocation(resolver, path)
            if resolved:
                logger.debug(f"Resolved {path} -> {resolved}")
                return resolved

    return normalize_path(path)


def create_runfiles(environ: Optional[Mapping[str, str]] = None) -> PathResolver:
    """
    Create a runfiles resolver for the current action.

    Args:
        environ: Environment to discover the runfiles from, defaults to
            ``os.environ``

    Raises:
        WrapperError: If neither a runfiles manifest nor a runfiles directory
            can be found.
    """
    resolver = runfiles.Create(dict(environ) if environ is not None else None)
    if resolver is None:
        raise WrapperError(
            "Failed to create runfiles: neither RUNFILES_MANIFEST_FILE nor RUNFILES_DIR is set"
        )
    return resolver
