# SPDX-License-Identifier: BSD-2-Clause
"""
Process wrapper for running Verilator from a build system.

The wrapper remaps sandboxed source and output paths into the arguments of the
wrapped tool, runs it once, and sorts the generated C++ sources and headers
into separate output directories.
"""

from .errors import WrapperError, ArgumentError, OutputError
from .args import Args, parse_args, read_args_file, substitute_paths
from .process import CommandResult, build_command, execute_command
from .outputs import copy_and_filter_outputs, touch_file

__version__ = "0.1.0"

__all__ = [
    'WrapperError',
    'ArgumentError',
    'OutputError',
    'Args',
    'parse_args',
    'read_args_file',
    'substitute_paths',
    'CommandResult',
    'build_command',
    'execute_command',
    'copy_and_filter_outputs',
    'touch_file',
    '__version__',
]
