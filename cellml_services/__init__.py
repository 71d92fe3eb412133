"""
Services Package
================

Business logic layer for CellML model validation.

Services:
- ValidationService: Validation workflow
"""

from .validation_service import ValidationService

__all__ = [
    'ValidationService',
]
