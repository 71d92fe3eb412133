"""
Model Entities
==============

In-memory CellML model tree: a model owns components and units, a component
owns units, variables and its math. Components and units may be import
proxies that only reference a definition held in another document.
"""

from typing import List, Optional

from .standard_units import SI_PREFIXES, is_standard_unit


class ImportSource:
    """Locator of an external document that components or units import from."""

    def __init__(self, source: str = ""):
        self.source = source

    def __repr__(self):
        return f"ImportSource({self.source!r})"


class _Importable:
    """Shared import-proxy behaviour of components and units."""

    def __init__(self, name: str = ""):
        self.name = name
        self.import_source: Optional[ImportSource] = None
        self.import_reference = ""

    def set_import(self, import_source: ImportSource, reference: str = "") -> None:
        """
        Turn this entity into an import proxy.

        Args:
            import_source: Where the referenced definition lives
            reference: Name of the definition in the imported document
        """
        self.import_source = import_source
        self.import_reference = reference

    def is_import(self) -> bool:
        return self.import_source is not None


class Unit:
    """A single unit term inside a units definition."""

    def __init__(
        self,
        reference: str,
        prefix: str = "",
        exponent: float = 1.0,
        multiplier: float = 1.0,
    ):
        self.reference = reference
        self.prefix = prefix
        self.exponent = exponent
        self.multiplier = multiplier

    def __repr__(self):
        return (
            f"Unit({self.reference!r}, prefix={self.prefix!r}, "
            f"exponent={self.exponent}, multiplier={self.multiplier})"
        )


class Units(_Importable):
    """A named units definition built from unit terms."""

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.units: List[Unit] = []

    def __repr__(self):
        return f"Units({self.name!r})"

    def add_unit(
        self,
        reference: str,
        prefix: str = "",
        exponent: float = 1.0,
        multiplier: float = 1.0,
    ) -> Unit:
        unit = Unit(reference, prefix, exponent, multiplier)
        self.units.append(unit)
        return unit

    def unit_count(self) -> int:
        return len(self.units)

    def get_unit_validation_errors(self, units_names: List[str]) -> List[str]:
        """
        Check every unit term of this units definition.

        A term must reference a standard unit or a sibling units name, and a
        prefix, when given, must be an SI prefix name or an integer.

        Args:
            units_names: Names of the units defined alongside this one

        Returns:
            List of error descriptions (empty when all terms are valid)
        """
        errors: List[str] = []
        for unit in self.units:
            reference = unit.reference
            if not reference:
                errors.append(
                    f"Unit in units '{self.name}' does not have a valid units reference."
                )
            elif not is_standard_unit(reference) and reference not in units_names:
                errors.append(
                    f"Units reference '{reference}' in units '{self.name}' is not a valid "
                    "reference to a local units or a standard unit type."
                )

            if unit.prefix and not _is_valid_prefix(unit.prefix):
                errors.append(
                    f"Prefix '{unit.prefix}' of a unit referencing '{reference}' in units "
                    f"'{self.name}' is not a valid integer or a SI prefix."
                )
        return errors


def _is_valid_prefix(prefix: str) -> bool:
    if prefix in SI_PREFIXES:
        return True
    digits = prefix[1:] if prefix[:1] in "+-" else prefix
    return digits.isdigit()


class Variable:
    """A component variable."""

    def __init__(
        self,
        name: str = "",
        units: str = "",
        interface_type: str = "",
        initial_value: str = "",
    ):
        self.name = name
        self.units = units
        self.interface_type = interface_type
        self.initial_value = initial_value

    def __repr__(self):
        return f"Variable({self.name!r}, units={self.units!r})"


class Component(_Importable):
    """A component holding units, variables and a serialized MathML block."""

    def __init__(self, name: str = "", math: str = ""):
        super().__init__(name)
        self.math = math
        self.units: List[Units] = []
        self.variables: List[Variable] = []

    def __repr__(self):
        return f"Component({self.name!r})"

    def add_units(self, units: Units) -> Units:
        self.units.append(units)
        return units

    def add_variable(self, variable: Variable) -> Variable:
        self.variables.append(variable)
        return variable

    def append_math(self, math: str) -> None:
        self.math += math

    def has_units(self, name: str) -> bool:
        return any(units.name == name for units in self.units)

    def units_count(self) -> int:
        return len(self.units)

    def variable_count(self) -> int:
        return len(self.variables)


class Model:
    """Top-level CellML model."""

    def __init__(self, name: str = ""):
        self.name = name
        self.components: List[Component] = []
        self.units: List[Units] = []

    def __repr__(self):
        return f"Model({self.name!r})"

    def add_component(self, component: Component) -> Component:
        self.components.append(component)
        return component

    def add_units(self, units: Units) -> Units:
        self.units.append(units)
        return units

    def component_count(self) -> int:
        return len(self.components)

    def units_count(self) -> int:
        return len(self.units)
