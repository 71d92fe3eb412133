"""
Validation Service
==================

Runs the model validator and packages its errors as a result dictionary,
with helpers for a pass/fail answer and a per-kind error summary.
"""

from collections import Counter
from typing import Any, Dict

from cellml_core.model import Model
from cellml_validators import Validator, kind_name


class ValidationService:
    """
    Wraps a Validator so callers get a plain result dict back.

    The validator is injected; the default one checks MathML against the
    packaged DTD.
    """

    def __init__(self, validator: Validator = None):
        """
        Initialize validation service.

        Args:
            validator: Model validator (dependency injection)
        """
        self.validator = validator or Validator()

    def validate_model(self, model: Model) -> Dict[str, Any]:
        """
        Perform complete model validation.

        Args:
            model: Model to validate

        Returns:
            Validation result dictionary with 'valid', 'error_count', 'errors' keys
        """
        errors = self.validator.validate_model(model)
        return {
            "valid": not errors,
            "error_count": len(errors),
            "errors": errors,
        }

    def is_valid(self, validation_result: Dict[str, Any]) -> bool:
        """
        Check if validation result indicates a valid model.

        Args:
            validation_result: Result from validate_model()

        Returns:
            True if the model is valid
        """
        return validation_result.get("valid", False)

    def get_error_summary(self, validation_result: Dict[str, Any]) -> str:
        """
        Get human-readable error summary.

        Args:
            validation_result: Result from validate_model()

        Returns:
            Error counts per kind, in order of first appearance
        """
        if self.is_valid(validation_result):
            return "No errors"

        counts = Counter(
            kind_name(error.kind) for error in validation_result.get("errors", [])
        )
        summary = [f"{name}: {count}" for name, count in counts.items()]

        return "; ".join(summary) if summary else "Validation failed"

    def get_error_descriptions(self, validation_result: Dict[str, Any]) -> list:
        """
        Get error descriptions, verbatim and in validation order.

        Args:
            validation_result: Result from validate_model()

        Returns:
            List of description strings
        """
        return [error.description for error in validation_result.get("errors", [])]
