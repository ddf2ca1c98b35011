# SPDX-License-Identifier: BSD-2-Clause
"""
Error types for the Verilator process wrapper.
"""


class WrapperError(Exception):
    """Base exception for wrapper errors"""
    pass


class ArgumentError(WrapperError):
    """Raised when the wrapper's own arguments cannot be parsed or loaded"""
    pass


class OutputError(WrapperError):
    """Raised when generated outputs cannot be sorted, copied or created"""
    pass
