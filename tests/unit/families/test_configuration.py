"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest

from pysatl_rayleigh.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_rayleigh.families.registry import ParametricFamilyRegister
from pysatl_rayleigh.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_families_registered(self):
        """Test that all expected families are registered."""
        assert ParametricFamilyRegister.contains(FamilyName.RAYLEIGH)
        assert FamilyName.RAYLEIGH in self.registry._registered_families

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert ParametricFamilyRegister.contains(FamilyName.RAYLEIGH)

    def test_registry_singleton_pattern(self):
        """Test that ParametricFamilyRegister itself follows singleton pattern."""
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        """Test the get method of ParametricFamilyRegister."""
        rayleigh_family = self.registry.get(FamilyName.RAYLEIGH)
        assert rayleigh_family is not None
        assert rayleigh_family.name == FamilyName.RAYLEIGH

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")

    def test_duplicate_registration_is_rejected(self):
        """Test that a family name can only be registered once."""
        rayleigh_family = self.registry.get(FamilyName.RAYLEIGH)
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(rayleigh_family)

    def test_registry_list_registered_families(self):
        """Test the list_registered_families method of ParametricFamilyRegister."""
        families_list = ParametricFamilyRegister.list_registered_families()

        assert isinstance(families_list, list)
        assert FamilyName.RAYLEIGH in families_list
        assert "NonExistentFamily" not in families_list

    def test_registration_is_logged(self, caplog):
        """Test that configuring the register logs the registered families."""
        reset_families_register()
        with caplog.at_level(logging.DEBUG, logger="pysatl_rayleigh"):
            configure_families_register()

        assert any("Registered family Rayleigh" in message for message in caplog.messages)
