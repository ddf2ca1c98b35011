# SPDX-License-Identifier: BSD-2-Clause
import tempfile
import unittest
from pathlib import Path

from verilator_wrapper import copy_and_filter_outputs, parse_args, read_args_file
from verilator_wrapper.errors import ArgumentError, OutputError, WrapperError


class TestErrors(unittest.TestCase):
    def test_subclasses(self):
        """Argument and output errors are handled as wrapper errors"""
        for cls in (ArgumentError, OutputError):
            with self.subTest(cls=cls):
                self.assertTrue(issubclass(cls, WrapperError))
                with self.assertRaises(WrapperError):
                    raise cls("failure")

    def test_parse_error_kind(self):
        with self.assertRaises(ArgumentError) as cm:
            parse_args(["--output_dir=out"])
        self.assertEqual(str(cm.exception), "Unknown argument: --output_dir=out")

    def test_os_errors_are_chained(self):
        """Filesystem failures keep the underlying OSError as their cause"""
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ArgumentError) as cm:
                read_args_file(Path(tmpdir) / "missing.args")
            self.assertIsInstance(cm.exception.__cause__, FileNotFoundError)

    def test_output_error_names_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "obj_dir"
            with self.assertRaises(OutputError) as cm:
                copy_and_filter_outputs(str(missing), str(Path(tmpdir) / "srcs"), "")
            self.assertIn(str(missing), str(cm.exception))
