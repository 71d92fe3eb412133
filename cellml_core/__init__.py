"""
Core Package
============

Reusable building blocks for CellML validation:
- model.py: Model, Component, Units, Variable and ImportSource entities
- standard_units.py: Reserved standard unit names and SI prefixes
- numeric.py: Real number classification
- xml_doc.py: lxml-backed XML parsing and MathML DTD validation
- settings.py: Paths, namespaces and rule constants
"""

from .model import Component, ImportSource, Model, Unit, Units, Variable
from .numeric import RealNumberResult, convert_to_real, is_invalid_real_number
from .standard_units import StandardUnit, is_standard_unit, standard_unit_name
from .xml_doc import MathMLDtdValidator, XmlDoc

__all__ = [
    'Component',
    'ImportSource',
    'Model',
    'Unit',
    'Units',
    'Variable',
    'RealNumberResult',
    'convert_to_real',
    'is_invalid_real_number',
    'StandardUnit',
    'is_standard_unit',
    'standard_unit_name',
    'MathMLDtdValidator',
    'XmlDoc',
]
