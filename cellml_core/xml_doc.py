"""
XML Document Helpers
====================

Thin lxml wrappers used by the math validator: a strict XML parser that
keeps its diagnostics instead of raising, and a MathML DTD validator.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from lxml import etree

from .settings import MATHML_DTD_FILE

logger = logging.getLogger(__name__)


def _format_log_entry(entry) -> str:
    message = (entry.message or "").strip()
    if entry.line:
        return f"{message} (line {entry.line}, column {entry.column})"
    return message


class XmlDoc:
    """
    Parsed XML document plus the diagnostics produced while parsing it.

    Parsing never raises for malformed input; problems are collected and
    exposed through xml_error_count() / get_xml_error(), and no root is
    kept for a document that is not well-formed.
    """

    def __init__(self):
        self.root: Optional[etree._Element] = None
        self.errors: List[str] = []

    def parse(self, text: str) -> Optional[etree._Element]:
        """
        Parse an XML string.

        Args:
            text: Serialized XML

        Returns:
            Root element, or None if the document is not well-formed
        """
        self.root = None
        self.errors = []

        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            self.root = etree.fromstring(text.encode("utf-8"), parser)
        except etree.XMLSyntaxError as e:
            if not len(parser.error_log):
                self.errors.append(str(e))

        for entry in parser.error_log:
            self.errors.append(_format_log_entry(entry))
        return self.root

    def parse_mathml(self, text: str, dtd: Optional[etree.DTD] = None) -> List[str]:
        """
        Parse a MathML string and validate it against the MathML DTD.

        Args:
            text: Serialized MathML
            dtd: Loaded DTD; when None only well-formedness is checked

        Returns:
            All diagnostics collected for the document
        """
        root = self.parse(text)
        if root is None or dtd is None:
            return list(self.errors)

        if not dtd.validate(root):
            for entry in dtd.error_log.filter_from_errors():
                self.errors.append(_format_log_entry(entry))
        return list(self.errors)

    def xml_error_count(self) -> int:
        return len(self.errors)

    def get_xml_error(self, index: int) -> str:
        return self.errors[index]


def _load_dtd(dtd_path: Path) -> etree.DTD:
    if not dtd_path.exists():
        raise FileNotFoundError(f"MathML DTD not found: {dtd_path}")
    return etree.DTD(str(dtd_path))


class MathMLDtdValidator:
    """
    Validates cleaned MathML strings against the MathML 2.0 DTD.

    The DTD shipped in cellml_core/resources is used unless another path is
    given. A missing file raises FileNotFoundError and an unreadable one
    raises lxml's DTDParseError, both at construction.
    """

    def __init__(self, dtd_file: Optional[Union[str, Path]] = None):
        """
        Initialize validator.

        Args:
            dtd_file: Path to the MathML DTD (default: settings.MATHML_DTD_FILE)
        """
        self.dtd_file = Path(dtd_file) if dtd_file else MATHML_DTD_FILE
        self.dtd = _load_dtd(self.dtd_file)
        logger.debug("Loaded MathML DTD from %s", self.dtd_file)

    def parse_mathml(self, text: str) -> List[str]:
        """
        Validate a MathML string.

        Args:
            text: Serialized MathML with CellML attributes already removed

        Returns:
            List of diagnostic messages (empty when valid)
        """
        return XmlDoc().parse_mathml(text, self.dtd)
