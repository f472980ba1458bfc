"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families:

- :class:`Rayleigh` — Rayleigh distribution with scale and mean
  parameterizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration runs once per process; :func:`reset_families_register`
  drops the cached register so the next call configures it again.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_rayleigh.families.builtins import configure_rayleigh_family
from pysatl_rayleigh.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_rayleigh_family()
    register = ParametricFamilyRegister()
    logger.debug("Families register configured: %s", register.list_registered_families())
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
