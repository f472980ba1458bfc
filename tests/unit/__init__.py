"""
Unit tests for PySATL Rayleigh: types, strategies, parametric families and
the built-in Rayleigh family.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
