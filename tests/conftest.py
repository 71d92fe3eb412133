"""
Shared fixtures for the validator test suite.
"""

import pytest

from cellml_validators import Validator

MATH_OPEN = (
    '<math xmlns="http://www.w3.org/1998/Math/MathML" '
    'xmlns:cellml="http://www.cellml.org/cellml/2.0#">'
)


class FakeMathMLValidator:
    """Stands in for the MathML DTD check; records what it was asked to validate."""

    def __init__(self, diagnostics=None):
        self.diagnostics = list(diagnostics or [])
        self.calls = []

    def parse_mathml(self, text):
        self.calls.append(text)
        return list(self.diagnostics)


@pytest.fixture
def mathml():
    return FakeMathMLValidator()


@pytest.fixture
def validator(mathml):
    return Validator(mathml)


@pytest.fixture
def math_doc():
    """Wrap a MathML body in a <math> root declaring the CellML namespace."""

    def _wrap(body: str) -> str:
        return f"{MATH_OPEN}{body}</math>"

    return _wrap
