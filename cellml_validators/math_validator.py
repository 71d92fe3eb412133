"""
Math Validator
==============

Validates the MathML block of a component:
1. Parse the math string and check it has a <math> root
2. Collect bound variable (bvar) names and check they do not shadow variables
3. Check ci/cn elements and their cellml:units attributes on a copy of the
   tree, stripping the attributes as it goes
4. Validate the cleaned MathML against the MathML DTD

Trees are walked depth-first, children before siblings, with an explicit
stack. Elements below a bvar, ci or cn are not descended into.
"""

import copy
import logging
from typing import List, Optional, Sequence, Tuple

from lxml import etree

from cellml_core.model import Component
from cellml_core.numeric import is_invalid_real_number, is_not_whitespace
from cellml_core.settings import (
    BVAR_TAG,
    CELLML_NAMESPACE_DECLARATION,
    CI_TAG,
    CN_TAG,
    MATH_TAG,
    UNITS_ATTRIBUTE,
)
from cellml_core.standard_units import is_standard_unit
from cellml_core.xml_doc import MathMLDtdValidator, XmlDoc

from .error import Kind, ValidationError

logger = logging.getLogger(__name__)


def _local_name(node) -> str:
    """Tag without namespace; empty for comments and processing instructions."""
    if node is None or not isinstance(node.tag, str):
        return ""
    return etree.QName(node).localname


def _element_children(node) -> List[etree._Element]:
    return [child for child in node if isinstance(child.tag, str)]


def remove_substring(text: str, pattern: str) -> str:
    """Remove every occurrence of pattern from text, including ones the removal creates."""
    if not pattern:
        return text
    while pattern in text:
        text = text.replace(pattern, "")
    return text


def gather_bvar_names(root: etree._Element) -> List[str]:
    """
    Collect the names bound by bvar elements.

    A name is recorded when a bvar's first child is a ci element whose text
    is not whitespace-only.

    Args:
        root: Root of the math tree

    Returns:
        Bound variable names in document order
    """
    bvar_names: List[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        children = _element_children(node)
        if _local_name(node) == BVAR_TAG:
            if children and _local_name(children[0]) == CI_TAG:
                text = children[0].text
                if text is not None and is_not_whitespace(text):
                    bvar_names.append(text)
            continue
        stack.extend(reversed(children))
    return bvar_names


def _validate_ci_cn_node(
    node: etree._Element,
    node_type: str,
    component: Component,
    variable_names: Sequence[str],
    bvar_names: Sequence[str],
) -> List[ValidationError]:
    """Check one ci/cn element and strip its cellml:units attribute in place."""
    errors: List[ValidationError] = []

    def add(description: str) -> None:
        errors.append(ValidationError(description, Kind.MATHML, component=component))

    text_node = ""
    if node.text is not None:
        if is_not_whitespace(node.text):
            text_node = node.text
            if node_type == CI_TAG:
                if text_node not in variable_names and text_node not in bvar_names:
                    add(
                        f"MathML ci element has the child text '{text_node}', which does not "
                        f"correspond with any variable names present in component "
                        f"'{component.name}' and is not a variable defined within a bvar element."
                    )
            elif is_invalid_real_number(text_node):
                add(
                    f"MathML cn element has the value '{text_node}', which cannot be "
                    "converted to a real number."
                )
        else:
            add(f"MathML {node_type} element has a whitespace-only child element.")
    elif not len(node):
        add(f"MathML {node_type} element has no child.")

    units_name = ""
    units_key: Optional[str] = None
    for key, value in node.attrib.items():
        if not value:
            continue
        attribute_type = etree.QName(key).localname
        if attribute_type == UNITS_ATTRIBUTE:
            units_name = value
            units_key = key
        else:
            add(
                f"Math {node_type} element has an invalid attribute type "
                f"'{attribute_type}' in the cellml namespace."
            )

    if not units_name:
        if node_type == CN_TAG:
            add(
                f"Math cn element with the value '{text_node}' does not have a "
                "cellml:units attribute."
            )
        elif _local_name(node.getparent()) == BVAR_TAG:
            add(
                f"Math bvar ci element with the value '{text_node}' does not have a "
                "valid cellml:units attribute."
            )
    elif not component.has_units(units_name) and not is_standard_unit(units_name):
        add(
            f"Math has a {node_type} element with a cellml:units attribute '{units_name}' "
            f"that is not a valid reference to units in component '{component.name}' "
            "or a standard unit."
        )

    if units_key is not None:
        del node.attrib[units_key]
    return errors


def clean_math_tree(
    root: etree._Element,
    component: Component,
    variable_names: Sequence[str],
    bvar_names: Sequence[str],
) -> Tuple[etree._Element, List[ValidationError]]:
    """
    Validate the ci/cn elements of a math tree and strip their units.

    The input tree is left untouched; checks and attribute removal happen
    on a deep copy, which is returned.

    Args:
        root: Root of the math tree
        component: Component owning the math
        variable_names: Names of the component's variables
        bvar_names: Names bound by bvar elements in this math

    Returns:
        Tuple of (cleaned copy of the tree, errors found)
    """
    cleaned = copy.deepcopy(root)
    errors: List[ValidationError] = []
    stack = [cleaned]
    while stack:
        node = stack.pop()
        node_type = _local_name(node)
        if node_type in (CI_TAG, CN_TAG):
            errors.extend(
                _validate_ci_cn_node(node, node_type, component, variable_names, bvar_names)
            )
            continue
        stack.extend(reversed(_element_children(node)))
    return cleaned, errors


class MathValidator:
    """Validates the serialized math of a component."""

    def __init__(self, mathml_validator=None):
        """
        Initialize math validator.

        Args:
            mathml_validator: Object with parse_mathml(text) -> List[str]
                (default: MathMLDtdValidator)
        """
        self.mathml_validator = mathml_validator or MathMLDtdValidator()

    def validate_math(
        self,
        math: str,
        component: Component,
        variable_names: Sequence[str],
    ) -> List[ValidationError]:
        """
        Validate a math string belonging to a component.

        Args:
            math: Serialized MathML
            component: Component owning the math (never modified)
            variable_names: Names of the component's variables

        Returns:
            List of ValidationError objects
        """
        errors: List[ValidationError] = []

        doc = XmlDoc()
        doc.parse(math)
        for i in range(doc.xml_error_count()):
            errors.append(ValidationError(doc.get_xml_error(i), Kind.XML))

        root = doc.root
        if root is None:
            errors.append(
                ValidationError(
                    "Could not get a valid XML root node from the math on component "
                    f"'{component.name}'.",
                    Kind.XML,
                    component=component,
                )
            )
            return errors
        if _local_name(root) != MATH_TAG:
            errors.append(
                ValidationError(
                    f"Math root node is of invalid type '{_local_name(root)}' on component "
                    f"'{component.name}'. A valid math root node should be of type 'math'.",
                    Kind.XML,
                    component=component,
                )
            )
            return errors

        bvar_names = gather_bvar_names(root)
        for variable_name in variable_names:
            if variable_name in bvar_names:
                errors.append(
                    ValidationError(
                        f"Math in component '{component.name}' contains '{variable_name}' "
                        "as a bvar ci element but it is already a variable name.",
                        Kind.MATHML,
                        component=component,
                    )
                )

        cleaned, node_errors = clean_math_tree(root, component, variable_names, bvar_names)
        errors.extend(node_errors)

        clean_mathml = remove_substring(
            etree.tostring(cleaned, encoding="unicode"), CELLML_NAMESPACE_DECLARATION
        )
        for message in self.mathml_validator.parse_mathml(clean_mathml):
            errors.append(ValidationError(message, Kind.MATHML, component=component))

        logger.debug(
            "Math on component '%s': %d bvar name(s), %d error(s)",
            component.name,
            len(bvar_names),
            len(errors),
        )
        return errors
