"""Unit tests for the unit registry and pluralization."""

import dataclasses

import pytest

from mealprep.normalize.pluralize import pluralize
from mealprep.normalize.units import (
    COUNT_UNITS,
    DEFAULT_REGISTRY,
    VOLUME_TO_TBSP,
    WEIGHT_TO_OZ,
    UnitClass,
    UnitRegistry,
    base_unit,
    classify,
)

# =============================================================================
# Classification Tests
# =============================================================================


class TestClassify:
    """Tests for unit classification."""

    @pytest.mark.parametrize("unit", list(VOLUME_TO_TBSP))
    def test_volume_units(self, unit):
        assert classify(unit) == UnitClass.VOLUME
        assert classify(unit.upper()) == UnitClass.VOLUME

    @pytest.mark.parametrize("unit", list(WEIGHT_TO_OZ))
    def test_weight_units(self, unit):
        assert classify(unit) == UnitClass.WEIGHT
        assert classify(unit.upper()) == UnitClass.WEIGHT

    @pytest.mark.parametrize("unit", sorted(COUNT_UNITS))
    def test_count_units(self, unit):
        assert classify(unit) == UnitClass.COUNT
        assert classify(unit.title()) == UnitClass.COUNT

    def test_case_insensitive(self):
        """Test lookups ignore case and surrounding whitespace."""
        assert classify("TBSP") == UnitClass.VOLUME
        assert classify("  Cup ") == UnitClass.VOLUME
        assert classify("Fl  Oz") == UnitClass.VOLUME
        assert classify("KG") == UnitClass.WEIGHT

    def test_aliases(self):
        """Test spelled-out and plural unit names resolve to table units."""
        assert classify("tablespoons") == UnitClass.VOLUME
        assert classify("Cups") == UnitClass.VOLUME
        assert classify("litre") == UnitClass.VOLUME
        assert classify("pounds") == UnitClass.WEIGHT
        assert classify("grams") == UnitClass.WEIGHT
        assert classify("cloves") == UnitClass.COUNT

    def test_fl_oz_is_volume_and_oz_is_weight(self):
        assert classify("fl oz") == UnitClass.VOLUME
        assert classify("oz") == UnitClass.WEIGHT

    def test_unknown_units(self):
        """Test units outside every table classify as unknown."""
        assert classify("handful") == UnitClass.UNKNOWN
        assert classify("can") == UnitClass.UNKNOWN
        assert classify("") == UnitClass.UNKNOWN
        assert classify(None) == UnitClass.UNKNOWN


class TestUnitRegistry:
    """Tests for the immutable registry."""

    def test_factors(self):
        assert VOLUME_TO_TBSP["cup"] == 16
        assert VOLUME_TO_TBSP["tsp"] == pytest.approx(1 / 3)
        assert VOLUME_TO_TBSP["l"] == pytest.approx(67.628, rel=1e-4)
        assert WEIGHT_TO_OZ["lb"] == 16
        assert WEIGHT_TO_OZ["kg"] == pytest.approx(35.274, rel=1e-4)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            VOLUME_TO_TBSP["cup"] = 1.0

    def test_registry_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_REGISTRY.count_units = frozenset()

    def test_custom_registry(self):
        """Test a registry built with its own tables classifies against them only."""
        registry = UnitRegistry(volume_factors={"cup": 16.0}, count_units=frozenset({"head"}))
        assert classify("cup", registry) == UnitClass.VOLUME
        assert classify("ml", registry) == UnitClass.UNKNOWN
        assert classify("head", registry) == UnitClass.COUNT

    def test_base_units(self):
        assert base_unit(UnitClass.VOLUME) == "tbsp"
        assert base_unit(UnitClass.WEIGHT) == "oz"
        assert base_unit(UnitClass.COUNT) is None
        assert base_unit(UnitClass.UNKNOWN) is None


# =============================================================================
# Pluralization Tests
# =============================================================================


class TestPluralize:
    """Tests for display unit pluralization."""

    def test_singular(self):
        assert pluralize("clove", 1) == "clove"
        assert pluralize("cup", 1) == "cup"

    def test_irregular_plurals(self):
        assert pluralize("clove", 3) == "cloves"
        assert pluralize("pinch", 2) == "pinches"
        assert pluralize("bunch", 2) == "bunches"
        assert pluralize("whole", 4) == "whole"

    def test_plural_count_aliases(self):
        """Test count units entered in plural form are not pluralized again."""
        assert pluralize("cloves", 3) == "cloves"
        assert pluralize("cloves", 1) == "clove"
        assert pluralize("Pinches", 2) == "pinches"
        assert pluralize("bunches", 4) == "bunches"

    def test_default_plural(self):
        assert pluralize("cup", 2) == "cups"
        assert pluralize("lb", 1.5) == "lbs"

    def test_metric_never_pluralized(self):
        assert pluralize("ml", 5) == "ml"
        assert pluralize("g", 250) == "g"
        assert pluralize("G", 250) == "G"

    def test_epsilon_tolerance(self):
        """Test amounts within 0.01 of one read as singular."""
        assert pluralize("cup", 1.005) == "cup"
        assert pluralize("cup", 0.995) == "cup"
        assert pluralize("cup", 1.02) == "cups"

    def test_fractional_amounts_are_plural(self):
        assert pluralize("cup", 0.5) == "cups"

    def test_empty_unit(self):
        assert pluralize("", 2) == ""
        assert pluralize(None, 2) == ""
