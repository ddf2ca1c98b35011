# SPDX-License-Identifier: BSD-2-Clause

import logging
import sys
import traceback

from typing import Mapping, Optional, Sequence

from .args import Args, parse_args, read_args_file
from .config import WrapperEnvironment
from .errors import ArgumentError, WrapperError
from .locations import create_runfiles, rlocation
from .outputs import copy_and_filter_outputs, touch_file
from .process import build_command, execute_command, report_output

class UnexpectedError(WrapperError):
    pass

logger = logging.getLogger(__name__)

_console: Optional[logging.StreamHandler] = None


def _setup_logging(debug: bool):
    global _console
    log_level = logging.DEBUG if debug else logging.WARNING
    logging.getLogger().setLevel(logging.NOTSET)

    # stdout belongs to the wrapped tool, so log to stderr
    if _console is None:
        _console = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter('%(name)-13s: %(levelname)-8s %(message)s')
        _console.setFormatter(formatter)
        logging.getLogger().addHandler(_console)
    else:
        _console.setStream(sys.stderr)
    _console.setLevel(log_level)


def load_args(argv: Sequence[str], env: WrapperEnvironment,
              environ: Optional[Mapping[str, str]] = None) -> Args:
    """
    Parse arguments from the command line, or from the args file named in the
    environment. Runfiles are only consulted in args-file mode.
    """
    if env.args_file is None:
        return parse_args(argv)

    resolver = create_runfiles(environ)
    try:
        resolved = rlocation(resolver, env.args_file)
    except ValueError as e:
        raise ArgumentError(f"Find runfile: {env.args_file} - {e}") from e
    if not resolved:
        raise ArgumentError(f"Find runfile: {env.args_file}")

    logger.debug(f"Reading arguments from {resolved}")
    return parse_args(read_args_file(resolved), resolver)


def _run(argv: Sequence[str], env: WrapperEnvironment, environ: Optional[Mapping[str, str]]) -> int:
    args = load_args(argv, env, environ)

    result = execute_command(build_command(args), args.capture_output)
    if args.capture_output:
        report_output(result, debug=env.debug)

    if result.returncode != 0:
        return result.returncode

    if env.lint_output is not None:
        touch_file(env.lint_output)

    if args.output_srcs or args.output_hdrs:
        for output_dir in sorted(args.output_mappings):
            copy_and_filter_outputs(output_dir, args.output_srcs, args.output_hdrs)

    return 0


def run(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run the wrapper and return the process exit code.

    Wrapper failures give 1; a failing wrapped command gives its own exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    env = WrapperEnvironment.from_environ(environ)
    _setup_logging(env.debug)

    try:
        try:
            return _run(argv, env, environ)
        except WrapperError:
            raise
        except Exception as e:
            # convert to WrapperError so all handling is same.
            raise UnexpectedError(
                f"Unexpected error:\n"
                f"traceback =\n{''.join(traceback.format_exception(e))}"
            ) from e
    except WrapperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main():
    sys.exit(run())
