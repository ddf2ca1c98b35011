# SPDX-License-Identifier: BSD-2-Clause
"""
Environment configuration for the Verilator process wrapper.

The wrapper is driven by build rules, so everything beyond the command line
arrives through environment variables.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

#: Runfiles path of a line-delimited file to read arguments from
ARGS_FILE_ENV = "RULES_VERILOG_VERILATOR_ARGS_FILE"
#: Presence forces captured output to be printed
DEBUG_ENV = "RULES_VERILOG_VERILATOR_DEBUG"
#: File to create once the wrapped command succeeds
LINT_OUTPUT_ENV = "RULES_VERILOG_VERILATOR_LINT_OUTPUT"


class WrapperEnvironment(BaseModel):
    """Settings read from the process environment."""
    args_file: Optional[str] = None
    debug: bool = False
    lint_output: Optional[Path] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> 'WrapperEnvironment':
        """
        Build the settings from an environment mapping.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            The populated settings. ``debug`` is true whenever the debug
            variable is present, even if it is empty.
        """
        if environ is None:
            environ = os.environ
        return cls(
            args_file=environ.get(ARGS_FILE_ENV),
            debug=DEBUG_ENV in environ,
            lint_output=environ.get(LINT_OUTPUT_ENV),
        )
