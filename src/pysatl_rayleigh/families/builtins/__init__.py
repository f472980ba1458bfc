"""
Built-in distribution families.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_rayleigh.families.builtins.continuous import (
    RayleighSamplingStrategy,
    configure_rayleigh_family,
)

__all__ = [
    "configure_rayleigh_family",
    "RayleighSamplingStrategy",
]
