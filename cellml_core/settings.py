import os
from pathlib import Path

# ==============================================================================
# PROJECT PATHS
# ==============================================================================
BASE_DIR = Path(__file__).resolve().parent.parent

# Directories (installed with the package)
RESOURCES_DIR = Path(__file__).resolve().parent / "resources"

# Essential Files
MATHML_DTD_FILE = Path(
    os.environ.get("CELLML_MATHML_DTD", RESOURCES_DIR / "mathml2.dtd")
)

# ==============================================================================
# NAMESPACES
# ==============================================================================
CELLML_2_0_NS = "http://www.cellml.org/cellml/2.0#"
MATHML_NS = "http://www.w3.org/1998/Math/MathML"

# Stripped from cleaned math before it is handed to the MathML DTD.
CELLML_NAMESPACE_DECLARATION = f' xmlns:cellml="{CELLML_2_0_NS}"'

# ==============================================================================
# VALIDATION RULES
# ==============================================================================
VALID_INTERFACE_TYPES = (
    "public",
    "private",
    "none",
    "public_and_private",
)

WHITESPACE_CHARS = " \t\n\v\f\r"

# Math node tags the validator gives special meaning to
MATH_TAG = "math"
BVAR_TAG = "bvar"
CI_TAG = "ci"
CN_TAG = "cn"
UNITS_ATTRIBUTE = "units"
