# SPDX-License-Identifier: BSD-2-Clause
"""
Post-processing of files generated by the wrapped command.

Verilator writes its generated C++ into a single output directory. Build rules
want sources and headers declared as separate outputs, so after a successful
run the generated files are sorted into those directories and the original
output directory is emptied.
"""

import logging
import shutil
from pathlib import Path
from typing import Union

from .errors import OutputError

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = (".cc", ".cpp", ".c")
HEADER_EXTENSIONS = (".h", ".hpp", ".hh")


def _has_files(directory: Path) -> bool:
    return any(entry.is_file() for entry in directory.iterdir())


def copy_and_filter_outputs(output_dir: Union[str, Path], output_srcs: str, output_hdrs: str) -> None:
    """
    Sort generated files into separate source and header directories.

    Every regular file directly inside ``output_dir`` is removed. Before that,
    sources (cc/cpp/c) are copied into ``output_srcs`` and headers (h/hpp/hh)
    into ``output_hdrs``, when those are set. Existing files of the same name
    are overwritten.

    Args:
        output_dir: Directory the wrapped command wrote into
        output_srcs: Destination for sources, empty to skip
        output_hdrs: Destination for headers, empty to skip

    Raises:
        OutputError: If ``output_dir`` is missing, a file cannot be copied or
            removed, or a configured destination ends up without any files
    """
    if not output_dir or (not output_srcs and not output_hdrs):
        return

    dir_path = Path(output_dir)
    if not dir_path.is_dir():
        raise OutputError(f"Output directory does not exist: {output_dir}")

    try:
        if output_srcs:
            Path(output_srcs).mkdir(parents=True, exist_ok=True)
        if output_hdrs:
            Path(output_hdrs).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Failed to create output directory: {e}") from e

    for entry in sorted(dir_path.iterdir()):
        if not entry.is_file():
            continue

        dest_path = None
        if output_srcs and entry.name.endswith(SOURCE_EXTENSIONS):
            dest_path = Path(output_srcs) / entry.name
        elif output_hdrs and entry.name.endswith(HEADER_EXTENSIONS):
            dest_path = Path(output_hdrs) / entry.name

        if dest_path is not None:
            try:
                shutil.copyfile(entry, dest_path)
            except OSError as e:
                raise OutputError(f"Failed to copy {entry} to {dest_path} - {e}") from e
            logger.debug(f"Copied {entry} -> {dest_path}")

        try:
            entry.unlink()
        except OSError as e:
            raise OutputError(f"Failed to delete: {entry} - {e}") from e
        logger.debug(f"Deleted {entry}")

    if output_srcs and not _has_files(Path(output_srcs)):
        raise OutputError(f"output_srcs directory is empty: {output_srcs}")
    if output_hdrs and not _has_files(Path(output_hdrs)):
        raise OutputError(f"output_hdrs directory is empty: {output_hdrs}")


def touch_file(path: Union[str, Path]) -> None:
    """
    Create an empty file at ``path``, truncating any existing one.

    Parent directories are created as needed.

    Raises:
        OutputError: If the file cannot be created
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    except OSError as e:
        raise OutputError(f"Failed to create output file: {path} - {e}") from e
    logger.debug(f"Touched {path}")
