from .base import DocumentParser
from .blm_parser import BlmParser, parse_text
from .data import extract_data
from .definitions import extract_definitions
from .header import BlmHeader, extract_header, require_delimiters
from .models import BlmDocument, Record
from .sections import find_section
from .validation import is_valid_path, validate_path

__all__ = [
    "BlmDocument",
    "BlmHeader",
    "BlmParser",
    "DocumentParser",
    "Record",
    "extract_data",
    "extract_definitions",
    "extract_header",
    "find_section",
    "is_valid_path",
    "parse_text",
    "require_delimiters",
    "validate_path",
]
