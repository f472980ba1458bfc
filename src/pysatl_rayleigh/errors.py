"""
Exceptions raised by distribution construction and evaluation.

Both classes derive from :class:`ValueError`, so callers catching the broad
error keep working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """Distribution parameters violate a parametrization constraint."""


class InvalidArgumentError(ValueError):
    """A characteristic was evaluated outside of its mathematical domain."""


__all__ = [
    "InvalidParameterError",
    "InvalidArgumentError",
]
