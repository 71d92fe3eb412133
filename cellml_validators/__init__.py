"""
Validators Package
==================

This package contains all CellML model validation logic:
- Model, component, units and variable checks
- MathML ci/cn checks and MathML DTD validation

Modules:
- model_validator.py: Main validation orchestrator
- math_validator.py: Component math validation
- error.py: ValidationError records and error kinds
"""

from .error import Kind, ValidationError, kind_name
from .math_validator import MathValidator, clean_math_tree, gather_bvar_names
from .model_validator import Validator, validate_model

__all__ = [
    'Kind',
    'ValidationError',
    'kind_name',
    'MathValidator',
    'clean_math_tree',
    'gather_bvar_names',
    'Validator',
    'validate_model',
]
