"""
Validation Errors
=================

The error record produced for every rule violation, the kinds it can have
and the human-readable name of each kind.
"""

from enum import Enum
from typing import Optional

from cellml_core.model import Component, ImportSource, Model, Units, Variable


class Kind(Enum):
    MODEL = 1
    COMPONENT = 2
    UNITS = 3
    VARIABLE = 4
    IMPORT = 5
    XML = 6
    MATHML = 7


_KIND_NAMES = (
    (Kind.MODEL, "model"),
    (Kind.COMPONENT, "component"),
    (Kind.UNITS, "units"),
    (Kind.VARIABLE, "variable"),
    (Kind.IMPORT, "import"),
    (Kind.XML, "xml"),
    (Kind.MATHML, "mathml"),
)


def kind_name(kind: Kind) -> str:
    """Return the display name of an error kind."""
    for candidate, name in _KIND_NAMES:
        if candidate is kind:
            return name
    raise ValueError(f"Unknown error kind: {kind!r}")


class ValidationError:
    """Represents a single validation error."""

    def __init__(
        self,
        description: str,
        kind: Kind,
        model: Optional[Model] = None,
        component: Optional[Component] = None,
        import_source: Optional[ImportSource] = None,
        units: Optional[Units] = None,
        variable: Optional[Variable] = None,
    ):
        self.description = description
        self.kind = kind
        self.model = model
        self.component = component
        self.import_source = import_source
        self.units = units
        self.variable = variable

    @property
    def entity(self):
        """The most specific entity this error is attributed to."""
        for candidate in (
            self.variable,
            self.units,
            self.import_source,
            self.component,
            self.model,
        ):
            if candidate is not None:
                return candidate
        return None

    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            self.description == other.description
            and self.kind is other.kind
            and self.entity is other.entity
        )

    def __hash__(self):
        return hash((self.description, self.kind))

    def __repr__(self):
        return f"[{kind_name(self.kind)}] {self.description}"
