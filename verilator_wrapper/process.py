# SPDX-License-Identifier: BSD-2-Clause
"""Run the wrapped command and report its output."""

import logging
import subprocess
import sys
from dataclasses import dataclass

from .args import Args
from .errors import WrapperError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of the wrapped command."""
    returncode: int
    output: str = ""


def build_command(args: Args) -> str:
    """
    Join the binary and its arguments into a single shell command line.

    Raises:
        WrapperError: If there is neither a binary nor any arguments
    """
    command = []
    if args.verilator_binary:
        command.append(args.verilator_binary)
    command.extend(args.verilator_args)

    if not command:
        raise WrapperError("No command provided to execute.")

    return " ".join(command)


def _exit_code(returncode: int) -> int:
    # subprocess reports death by signal N as -N
    if returncode < 0:
        return 128 - returncode
    return returncode


def execute_command(cmd: str, capture_output: bool = False) -> CommandResult:
    """
    Run ``cmd`` through the shell and wait for it to exit.

    Args:
        cmd: Command line to execute
        capture_output: Collect stdout and stderr together instead of letting
            the command write to ours

    Returns:
        A :class:`CommandResult`. A command killed by a signal reports
        ``128 + signal``.

    Raises:
        WrapperError: If the command could not be started
    """
    logger.debug(f"Executing: {cmd}")
    try:
        if capture_output:
            result = subprocess.run(
                cmd,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
            output = result.stdout.decode("utf-8", errors="replace")
        else:
            result = subprocess.run(cmd, shell=True)
            output = ""
    except OSError as e:
        raise WrapperError(f"Failed to execute command: {e}") from e

    returncode = _exit_code(result.returncode)
    logger.info(f"Command exited with code {returncode}")
    return CommandResult(returncode=returncode, output=output)


def report_output(result: CommandResult, debug: bool = False):
    """Print captured output if the command failed or ``debug`` is set."""
    if not result.output:
        return
    if result.returncode == 0 and not debug:
        return

    sys.stdout.write(result.output)
    sys.stdout.flush()
