# parsers/definitions.py

import logging
from collections.abc import Mapping

from .header import delimiters_for
from .sections import DEFINITION, find_section

logger = logging.getLogger(__name__)


def extract_definitions(text: str, header: Mapping[str, str] | None) -> list[str]:
    """Split the DEFINITION section into the ordered list of field names.

    Raises:
        PreconditionFailed: If ``header`` lacks a delimiter.
        MalformedSection: If the DEFINITION section is missing.
    """
    eof, eor = delimiters_for(header, "definitions")
    section = find_section(text, DEFINITION)

    definitions = [name.strip() for name in section.split(eof)]

    # The record separator ends the section, either on its own after the
    # last field separator or glued to the last name.
    if definitions and definitions[-1] == eor:
        definitions = definitions[:-1]
    elif definitions and definitions[-1].endswith(eor):
        definitions[-1] = definitions[-1][: -len(eor)].strip()

    logger.debug("Extracted %d field definitions", len(definitions))
    return definitions
