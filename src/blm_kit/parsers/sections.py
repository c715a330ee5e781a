# parsers/sections.py

import re

from blm_kit.errors import MalformedSection

HEADER = "HEADER"
DEFINITION = "DEFINITION"
DATA = "DATA"

# HEADER and DEFINITION run up to the next '#', so a literal '#' inside
# their payload ends the section early. DATA runs up to the last #END#.
_SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    HEADER: re.compile(r"#HEADER#([\s\S]*?)#"),
    DEFINITION: re.compile(r"#DEFINITION#([\s\S]*?)#"),
    DATA: re.compile(r"#DATA#([\s\S]*)#END#"),
}


def find_section(text: str, name: str) -> str:
    """Return the raw payload of section ``name``.

    Raises:
        MalformedSection: If the section markers are not found.
        KeyError: If ``name`` is not a known section.
    """
    match = _SECTION_PATTERNS[name].search(text)
    if match is None:
        raise MalformedSection(name)
    return match.group(1)
