"""
Model Validator
===============

Semantic checks on a CellML model tree that an XML parser cannot express:
names, uniqueness, import consistency, variable attributes and the math of
each component. Every rule is checked; violations accumulate as
ValidationError objects in the order they are found.
"""

import logging
from typing import List, Optional, Sequence

from cellml_core.model import Component, Model, Units, Variable
from cellml_core.numeric import is_invalid_real_number
from cellml_core.settings import VALID_INTERFACE_TYPES
from cellml_core.standard_units import is_standard_unit

from .error import Kind, ValidationError
from .math_validator import MathValidator

logger = logging.getLogger(__name__)


def _index_of(items: List[str], value: str) -> Optional[int]:
    try:
        return items.index(value)
    except ValueError:
        return None


class Validator:
    """Validates CellML models and collects the errors found."""

    def __init__(self, mathml_validator=None):
        """
        Initialize validator.

        Args:
            mathml_validator: Object with parse_mathml(text) -> List[str] used
                to check cleaned MathML (default: MathMLDtdValidator)
        """
        self.errors: List[ValidationError] = []
        self.math_validator = MathValidator(mathml_validator)

    # ============================================================================
    # Error sink
    # ============================================================================
    def add_error(self, error: ValidationError) -> None:
        self.errors.append(error)

    def error_count(self) -> int:
        return len(self.errors)

    def get_error(self, index: int) -> ValidationError:
        return self.errors[index]

    def clear_errors(self) -> None:
        self.errors = []

    def _error(self, description: str, kind: Kind, **entities) -> None:
        self.add_error(ValidationError(description, kind, **entities))

    # ============================================================================
    # Model
    # ============================================================================
    def validate_model(self, model: Model) -> List[ValidationError]:
        """
        Run all validation rules on a model.

        Any errors from a previous run are discarded first, so validating an
        unchanged model twice gives the same result.

        Args:
            model: Model to validate

        Returns:
            List of ValidationError objects
        """
        self.clear_errors()
        logger.debug("Validating model '%s'", model.name)

        if not model.name:
            self._error("Model does not have a valid name attribute.", Kind.MODEL, model=model)

        if model.components:
            component_names: List[str] = []
            component_refs: List[str] = []
            component_import_sources: List[str] = []
            for component in model.components:
                if component.is_import():
                    self._check_import(
                        model,
                        component,
                        "component",
                        component_import_sources,
                        component_refs,
                    )
                if component.name:
                    if component.name in component_names:
                        self._error(
                            f"Model '{model.name}' contains multiple components with the name "
                            f"'{component.name}'. Valid component names should be unique to "
                            "their model.",
                            Kind.MODEL,
                            model=model,
                        )
                    component_names.append(component.name)
                self.validate_component(component)

        if model.units:
            units_names: List[str] = []
            units_refs: List[str] = []
            units_import_sources: List[str] = []
            for units in model.units:
                if units.is_import():
                    self._check_import(model, units, "units", units_import_sources, units_refs)
                if units.name:
                    if units.name in units_names:
                        self._error(
                            f"Model '{model.name}' contains multiple units with the name "
                            f"'{units.name}'. Valid units names should be unique to their model.",
                            Kind.MODEL,
                            model=model,
                        )
                    units_names.append(units.name)
            for units in model.units:
                self.validate_units(units, units_names)

        logger.debug("Model '%s': %d error(s)", model.name, self.error_count())
        return list(self.errors)

    validate = validate_model

    def _check_import(
        self,
        model: Model,
        entity,
        label: str,
        import_sources: List[str],
        refs: List[str],
    ) -> None:
        """
        Check the import attributes of a component or units proxy.

        Two proxies are reported as duplicates when the first position of the
        source among earlier sources equals the first position of the
        reference among earlier references.

        Args:
            model: Model owning the proxy
            entity: Component or Units import proxy
            label: "component" or "units", used in messages
            import_sources: Sources of earlier proxies (appended to)
            refs: References of earlier proxies (appended to)
        """
        if label == "component":
            kind, attribution, plural = Kind.COMPONENT, {"component": entity}, "components"
        else:
            kind, attribution, plural = Kind.UNITS, {"units": entity}, "units"

        reference = entity.import_reference
        source = entity.import_source.source
        found_import_error = False

        if not reference:
            self._error(
                f"Imported {label} '{entity.name}' does not have a valid {label}_ref attribute.",
                kind,
                **attribution,
            )
            found_import_error = True
        if not source:
            self._error(
                f"Import of {label} '{entity.name}' does not have a valid locator "
                "xlink:href attribute.",
                Kind.IMPORT,
                import_source=entity.import_source,
            )
            found_import_error = True

        if import_sources and not found_import_error:
            source_index = _index_of(import_sources, source)
            if source_index is not None and source_index == _index_of(refs, reference):
                self._error(
                    f"Model '{model.name}' contains multiple imported {plural} from "
                    f"'{source}' with the same {label}_ref attribute '{reference}'.",
                    Kind.MODEL,
                    model=model,
                )

        import_sources.append(source)
        refs.append(reference)

    # ============================================================================
    # Component
    # ============================================================================
    def validate_component(self, component: Component) -> None:
        """
        Validate a component, its units, its variables and its math.

        Args:
            component: Component to validate
        """
        if not component.name:
            self._error(
                "Component does not have a valid name attribute.",
                Kind.COMPONENT,
                component=component,
            )

        if component.units:
            units_names: List[str] = []
            for units in component.units:
                if units.name:
                    if units.name in units_names:
                        self._error(
                            f"Component '{component.name}' contains multiple units with the "
                            f"name '{units.name}'. Valid units names should be unique to their "
                            "component.",
                            Kind.COMPONENT,
                            component=component,
                        )
                    units_names.append(units.name)
            for units in component.units:
                self.validate_units(units, units_names)

        # Also the set of valid initial_value references
        variable_names: List[str] = []
        if component.variables:
            for variable in component.variables:
                if variable.name:
                    if variable.name in variable_names:
                        self._error(
                            f"Component '{component.name}' contains multiple variables with "
                            f"the name '{variable.name}'. Valid variable names should be "
                            "unique to their component.",
                            Kind.COMPONENT,
                            component=component,
                        )
                    variable_names.append(variable.name)
            for variable in component.variables:
                self.validate_variable(variable, variable_names)

        if component.math:
            for error in self.math_validator.validate_math(
                component.math, component, variable_names
            ):
                self.add_error(error)

    # ============================================================================
    # Units
    # ============================================================================
    def validate_units(self, units: Units, units_names: Sequence[str]) -> None:
        """
        Validate a units definition.

        Args:
            units: Units to validate
            units_names: Names of the units defined in the same scope
        """
        if not units.name:
            self._error("Units does not have a valid name attribute.", Kind.UNITS, units=units)
        elif is_standard_unit(units.name):
            self._error(
                f"Units is named '{units.name}', which is a protected standard unit name.",
                Kind.UNITS,
                units=units,
            )

        for description in units.get_unit_validation_errors(list(units_names)):
            self._error(description, Kind.UNITS, units=units)

    # ============================================================================
    # Variable
    # ============================================================================
    def validate_variable(self, variable: Variable, variable_names: Sequence[str]) -> None:
        """
        Validate a variable.

        Args:
            variable: Variable to validate
            variable_names: Names of the variables in the same component
        """
        if not variable.name:
            self._error(
                "Variable does not have a valid name attribute.",
                Kind.VARIABLE,
                variable=variable,
            )
        if not variable.units:
            self._error(
                f"Variable '{variable.name}' does not have a valid units attribute.",
                Kind.VARIABLE,
                variable=variable,
            )
        if variable.interface_type and variable.interface_type not in VALID_INTERFACE_TYPES:
            self._error(
                f"Variable '{variable.name}' has an invalid interface attribute value "
                f"'{variable.interface_type}'.",
                Kind.VARIABLE,
                variable=variable,
            )
        if variable.initial_value:
            initial_value = variable.initial_value
            # A reference to another variable is valid whatever it looks like
            if initial_value not in variable_names and is_invalid_real_number(initial_value):
                self._error(
                    f"Variable '{variable.name}' has an invalid initial value "
                    f"'{initial_value}'. Initial values must be a real number string or a "
                    "variable reference.",
                    Kind.VARIABLE,
                    variable=variable,
                )


def validate_model(model: Model, mathml_validator=None) -> List[ValidationError]:
    """
    Validate a model with a fresh Validator.

    Args:
        model: Model to validate
        mathml_validator: Optional MathML collaborator (see Validator)

    Returns:
        List of ValidationError objects
    """
    validator = Validator(mathml_validator)
    return validator.validate_model(model)
