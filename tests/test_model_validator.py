"""
Tests for model, component, units and variable validation.
"""

import pytest

from cellml_core.model import Component, ImportSource, Model, Units, Variable
from cellml_validators import Kind, Validator, ValidationError, validate_model


def _import_component(name, source, reference):
    component = Component(name)
    component.set_import(ImportSource(source), reference)
    return component


def _import_units(name, source, reference):
    units = Units(name)
    units.set_import(ImportSource(source), reference)
    return units


def _descriptions(errors):
    return [error.description for error in errors]


class TestModelValidation:
    """Test cases for model-level rules."""

    def test_valid_empty_model(self, validator):
        assert validator.validate_model(Model("m")) == []

    def test_model_without_name(self, validator):
        model = Model("")

        errors = validator.validate_model(model)

        assert len(errors) == 1
        assert errors[0].kind is Kind.MODEL
        assert errors[0].model is model
        assert "valid name attribute" in errors[0].description

    def test_duplicate_component_names(self, validator):
        model = Model("m")
        for _ in range(3):
            model.add_component(Component("c"))

        errors = validator.validate_model(model)

        assert len(errors) == 2
        assert all(error.kind is Kind.MODEL for error in errors)
        assert errors[0].description == (
            "Model 'm' contains multiple components with the name 'c'. "
            "Valid component names should be unique to their model."
        )

    def test_unnamed_components_are_not_duplicates(self, validator):
        model = Model("m")
        model.add_component(Component(""))
        model.add_component(Component(""))

        errors = validator.validate_model(model)

        assert _descriptions(errors) == ["Component does not have a valid name attribute."] * 2
        assert all(error.kind is Kind.COMPONENT for error in errors)

    def test_component_name_uniqueness_is_case_sensitive(self, validator):
        model = Model("m")
        model.add_component(Component("c"))
        model.add_component(Component("C"))

        assert validator.validate_model(model) == []

    def test_duplicate_units_names(self, validator):
        model = Model("m")
        model.add_units(Units("u"))
        model.add_units(Units("u"))

        errors = validator.validate_model(model)

        assert _descriptions(errors) == [
            "Model 'm' contains multiple units with the name 'u'. "
            "Valid units names should be unique to their model."
        ]

    def test_units_may_reference_later_sibling(self, validator):
        model = Model("m")
        first = model.add_units(Units("a"))
        first.add_unit("b")
        second = model.add_units(Units("b"))
        second.add_unit("second")

        assert validator.validate_model(model) == []

    def test_error_order(self, validator):
        model = Model("")
        component = model.add_component(Component(""))
        component.add_variable(Variable("v", ""))
        model.add_units(Units(""))

        errors = validator.validate_model(model)

        assert [error.kind for error in errors] == [
            Kind.MODEL,
            Kind.COMPONENT,
            Kind.VARIABLE,
            Kind.UNITS,
        ]

    def test_validate_alias_and_module_function(self, mathml):
        model = Model("")

        assert Validator(mathml).validate(model) == validate_model(model, mathml)


class TestImportValidation:
    """Test cases for imported components and units."""

    def test_same_source_and_reference_is_duplicate(self, validator):
        model = Model("m")
        model.add_component(_import_component("c1", "A", "X"))
        model.add_component(_import_component("c2", "A", "X"))

        errors = validator.validate_model(model)

        assert _descriptions(errors) == [
            "Model 'm' contains multiple imported components from 'A' "
            "with the same component_ref attribute 'X'."
        ]
        assert errors[0].kind is Kind.MODEL

    def test_matches_at_different_positions_are_not_duplicates(self, validator):
        model = Model("m")
        model.add_component(_import_component("c1", "A", "Y"))
        model.add_component(_import_component("c2", "B", "X"))
        # "A" was first seen at position 0, "X" at position 1
        model.add_component(_import_component("c3", "A", "X"))

        assert validator.validate_model(model) == []

    def test_new_source_and_reference_is_not_duplicate(self, validator):
        model = Model("m")
        model.add_component(_import_component("c1", "A", "X"))
        model.add_component(_import_component("c2", "B", "Y"))

        assert validator.validate_model(model) == []

    def test_missing_reference(self, validator):
        model = Model("m")
        component = model.add_component(_import_component("c1", "A", ""))

        errors = validator.validate_model(model)

        assert len(errors) == 1
        assert errors[0].kind is Kind.COMPONENT
        assert errors[0].component is component
        assert errors[0].description == (
            "Imported component 'c1' does not have a valid component_ref attribute."
        )

    def test_missing_source(self, validator):
        model = Model("m")
        component = model.add_component(_import_component("c1", "", "X"))

        errors = validator.validate_model(model)

        assert len(errors) == 1
        assert errors[0].kind is Kind.IMPORT
        assert errors[0].entity is component.import_source
        assert "locator xlink:href" in errors[0].description

    def test_invalid_import_skips_duplicate_check(self, validator):
        model = Model("m")
        model.add_component(_import_component("c1", "A", "X"))
        model.add_component(_import_component("c2", "A", ""))
        model.add_component(_import_component("c3", "", ""))

        errors = validator.validate_model(model)

        assert [error.kind for error in errors] == [Kind.COMPONENT, Kind.COMPONENT, Kind.IMPORT]

    def test_duplicate_imported_units(self, validator):
        model = Model("m")
        model.add_units(_import_units("u1", "lib.cellml", "mV"))
        model.add_units(_import_units("u2", "lib.cellml", "mV"))

        errors = validator.validate_model(model)

        assert _descriptions(errors) == [
            "Model 'm' contains multiple imported units from 'lib.cellml' "
            "with the same units_ref attribute 'mV'."
        ]

    def test_imported_units_without_reference(self, validator):
        model = Model("m")
        units = model.add_units(_import_units("u1", "lib.cellml", ""))

        errors = validator.validate_model(model)

        assert len(errors) == 1
        assert errors[0].kind is Kind.UNITS
        assert errors[0].units is units


class TestComponentValidation:
    """Test cases for component-level rules."""

    def test_duplicate_component_units(self, validator):
        component = Component("c")
        component.add_units(Units("u"))
        component.add_units(Units("u"))

        validator.validate_component(component)

        assert validator.error_count() == 1
        error = validator.get_error(0)
        assert error.kind is Kind.COMPONENT
        assert error.description == (
            "Component 'c' contains multiple units with the name 'u'. "
            "Valid units names should be unique to their component."
        )

    def test_duplicate_variables(self, validator):
        component = Component("c")
        component.add_variable(Variable("v", "volt"))
        component.add_variable(Variable("v", "volt"))

        validator.validate_component(component)

        assert validator.error_count() == 1
        assert "multiple variables with the name 'v'" in validator.get_error(0).description

    def test_math_is_only_checked_when_present(self, validator, mathml, math_doc):
        validator.validate_component(Component("c"))
        assert mathml.calls == []

        validator.validate_component(Component("c", math=math_doc("")))
        assert len(mathml.calls) == 1

    def test_unit_term_errors_are_attributed_to_units(self, validator):
        component = Component("c")
        units = component.add_units(Units("u"))
        units.add_unit("furlong")

        validator.validate_component(component)

        assert validator.error_count() == 1
        assert validator.get_error(0).kind is Kind.UNITS
        assert validator.get_error(0).units is units


class TestUnitsValidation:
    """Test cases for units rules."""

    def test_unnamed_units(self, validator):
        validator.validate_units(Units(""), [])

        assert _descriptions(validator.errors) == ["Units does not have a valid name attribute."]

    @pytest.mark.parametrize("name", ["ampere", "second", "dimensionless", "weber"])
    def test_protected_standard_unit_name(self, validator, name):
        validator.validate_units(Units(name), [name])

        assert _descriptions(validator.errors) == [
            f"Units is named '{name}', which is a protected standard unit name."
        ]

    def test_standard_unit_names_are_case_sensitive(self, validator):
        validator.validate_units(Units("Ampere"), ["Ampere"])

        assert validator.errors == []


class TestVariableValidation:
    """Test cases for variable rules."""

    def test_valid_variable(self, validator):
        variable = Variable("v", "volt", interface_type="public", initial_value="-80.0")

        validator.validate_variable(variable, ["v"])

        assert validator.errors == []

    def test_missing_name_and_units(self, validator):
        variable = Variable("", "")

        validator.validate_variable(variable, [])

        assert _descriptions(validator.errors) == [
            "Variable does not have a valid name attribute.",
            "Variable '' does not have a valid units attribute.",
        ]
        assert all(error.variable is variable for error in validator.errors)

    def test_units_reference_is_not_resolved(self, validator):
        validator.validate_variable(Variable("v", "no_such_units"), ["v"])

        assert validator.errors == []

    @pytest.mark.parametrize("interface", ["public", "private", "none", "public_and_private"])
    def test_valid_interface_types(self, validator, interface):
        validator.validate_variable(Variable("v", "volt", interface_type=interface), ["v"])

        assert validator.errors == []

    def test_invalid_interface_type(self, validator):
        validator.validate_variable(Variable("v", "volt", interface_type="Public"), ["v"])

        assert _descriptions(validator.errors) == [
            "Variable 'v' has an invalid interface attribute value 'Public'."
        ]

    def test_initial_value_referencing_sibling(self, validator):
        validator.validate_variable(Variable("y", "volt", initial_value="x"), ["x", "y"])

        assert validator.errors == []

    def test_numeric_looking_sibling_reference(self, validator):
        validator.validate_variable(Variable("y", "volt", initial_value="1e"), ["1e", "y"])

        assert validator.errors == []

    def test_invalid_initial_value(self, validator):
        validator.validate_variable(Variable("y", "volt", initial_value="abc"), ["y"])

        assert _descriptions(validator.errors) == [
            "Variable 'y' has an invalid initial value 'abc'. Initial values must be a "
            "real number string or a variable reference."
        ]


class TestRepeatedValidation:
    """Validation starts from a clean state and does not modify the model."""

    def test_validation_is_idempotent(self, validator, math_doc):
        model = Model("")
        component = model.add_component(Component("c"))
        component.add_variable(Variable("V", "volt", initial_value="bad"))
        component.math = math_doc(
            '<apply><eq/><ci>V</ci><cn cellml:units="mV">1</cn><ci>Z</ci></apply>'
        )
        model.add_component(Component("c"))
        model.add_units(Units("ampere"))
        original_math = component.math

        first = validator.validate_model(model)
        second = validator.validate_model(model)

        assert first
        assert first == second
        assert _descriptions(first) == _descriptions(second)
        assert component.math == original_math
        assert validator.error_count() == len(second)

    def test_clear_errors(self, validator):
        validator.add_error(ValidationError("boom", Kind.MODEL))
        assert validator.error_count() == 1

        validator.clear_errors()

        assert validator.error_count() == 0
