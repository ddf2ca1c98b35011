# SPDX-License-Identifier: BSD-2-Clause
"""
Argument parsing for the Verilator process wrapper.

Wrapper options come first, then a ``--`` delimiter, then the arguments for
the wrapped tool::

    --verilator=<path> --src=<path>... --output=<dir>... [--output_srcs=<dir>]
    [--output_hdrs=<dir>] [--capture_output] -- <tool arguments>...

Every path given with ``--src`` or ``--output`` is substituted into the tool
arguments with its resolved form. Any unknown token before ``--`` is an
error.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .errors import ArgumentError
from .locations import PathResolver, normalize_path, resolve_path

logger = logging.getLogger(__name__)

DELIMITER = "--"


@dataclass
class Args:
    """Parsed wrapper arguments."""
    #: The path to verilator
    verilator_binary: str = ""
    #: Original source path -> resolved path
    source_mappings: Dict[str, str] = field(default_factory=dict)
    #: Original output path -> normalized path (outputs are never runfiles)
    output_mappings: Dict[str, str] = field(default_factory=dict)
    #: Destination for generated sources, empty if unset
    output_srcs: str = ""
    #: Destination for generated headers, empty if unset
    output_hdrs: str = ""
    capture_output: bool = False
    #: Arguments passed through to verilator, with paths already substituted
    verilator_args: List[str] = field(default_factory=list)


def _replace_all(arg: str, mappings: Dict[str, str]) -> str:
    for original in sorted(mappings):
        if original:
            arg = arg.replace(original, mappings[original])
    return arg


def substitute_paths(arg: str, source_mappings: Dict[str, str],
                     output_mappings: Dict[str, str]) -> str:
    """
    Replace every occurrence of each mapped path in ``arg``.

    Source mappings are applied before output mappings, each in ascending key
    order. Replacement is not recursive: text inserted by a replacement is not
    scanned again for the same key.
    """
    arg = _replace_all(arg, source_mappings)
    return _replace_all(arg, output_mappings)


def parse_args(argv: Sequence[str], resolver: Optional[PathResolver] = None) -> Args:
    """
    Parse wrapper arguments.

    Args:
        argv: Argument tokens, without the program name
        resolver: Optional runfiles resolver used for ``--verilator`` and
            ``--src`` paths

    Returns:
        The parsed :class:`Args`

    Raises:
        ArgumentError: On any unrecognized token before the ``--`` delimiter
    """
    args = Args()
    after_delimiter = False

    for arg in argv:
        if arg == DELIMITER:
            after_delimiter = True
            continue

        if after_delimiter:
            args.verilator_args.append(
                substitute_paths(arg, args.source_mappings, args.output_mappings))
            continue

        name, sep, value = arg.partition("=")
        match (name, sep):
            case ("--verilator", "="):
                args.verilator_binary = resolve_path(value, resolver)
            case ("--src", "="):
                args.source_mappings[value] = resolve_path(value, resolver)
            case ("--output", "="):
                args.output_mappings[value] = normalize_path(value)
            case ("--output_srcs", "="):
                args.output_srcs = value
            case ("--output_hdrs", "="):
                args.output_hdrs = value
            case ("--capture_output", ""):
                args.capture_output = True
            case _:
                raise ArgumentError(f"Unknown argument: {arg}")

    logger.debug(f"Parsed arguments: {args}")
    return args


def read_args_file(path: Union[str, Path]) -> List[str]:
    """
    Read a line-delimited argument file, one argument per line.

    Empty lines are dropped; every other line is taken verbatim.

    Raises:
        ArgumentError: If the file cannot be opened or read
    """
    lines = []
    try:
        with open(path, "r", encoding="utf-8", newline="\n") as f:
            for line in f:
                line = line.removesuffix("\n").removesuffix("\r")
                if line:
                    lines.append(line)
    except OSError as e:
        raise ArgumentError(f"Failed to open args file: {path}") from e

    return lines
