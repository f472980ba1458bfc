"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_rayleigh.families.builtins.continuous.rayleigh import (
    RayleighSamplingStrategy,
    configure_rayleigh_family,
)

__all__ = [
    "configure_rayleigh_family",
    "RayleighSamplingStrategy",
]
