# parsers/header.py

import logging
import re
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from blm_kit.errors import (
    MalformedHeaderLine,
    MissingDelimiterDeclaration,
    PreconditionFailed,
)

from .sections import HEADER, find_section

logger = logging.getLogger(__name__)

FIELD_SEPARATOR_KEY = "EOF"
RECORD_SEPARATOR_KEY = "EOR"

_QUOTES = re.compile(r"^['\"]|['\"]$")


class BlmHeader(BaseModel):
    """Validated view of a header mapping.

    Only the two delimiters are required. The other well-known properties
    are kept as raw strings; anything else is ignored here and stays
    available in the plain header mapping.
    """

    eof: str = Field(alias=FIELD_SEPARATOR_KEY, min_length=1)
    eor: str = Field(alias=RECORD_SEPARATOR_KEY, min_length=1)
    version: str | None = Field(default=None, alias="Version")
    property_count: str | None = Field(default=None, alias="Property Count")
    generated_date: str | None = Field(default=None, alias="Generated Date")

    model_config = ConfigDict(extra="ignore", frozen=True)


def _clean(part: str) -> str:
    return _QUOTES.sub("", part.strip())


def extract_header(text: str, *, strict: bool = True) -> dict[str, str]:
    """Parse the HEADER section into a property -> value mapping.

    Each non-blank line is split once on the first ':'. Both sides are
    trimmed, then stripped of one leading and one trailing quote.

    Raises:
        MalformedSection: If the HEADER section is missing.
        MalformedHeaderLine: If ``strict`` and a line has no ':'.
    """
    section = find_section(text, HEADER)
    header: dict[str, str] = {}

    for line_number, line in enumerate(section.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if ":" not in stripped:
            if strict:
                raise MalformedHeaderLine(stripped, line_number)
            logger.warning(
                "Skipping header line %d without ':': %r", line_number, stripped
            )
            continue

        prop, value = stripped.split(":", 1)
        header[_clean(prop)] = _clean(value)

    logger.debug("Extracted %d header properties", len(header))
    return header


def require_delimiters(header: Mapping[str, str]) -> BlmHeader:
    """Check that ``header`` declares both delimiters.

    Raises:
        MissingDelimiterDeclaration: Naming each absent or empty key.
    """
    try:
        return BlmHeader(**header)
    except ValidationError as exc:
        missing = [str(error["loc"][0]) for error in exc.errors()]
        raise MissingDelimiterDeclaration(missing) from exc


def delimiters_for(header: Mapping[str, str] | None, stage: str) -> tuple[str, str]:
    """Return ``(eof, eor)`` from ``header`` or fail the stage's precondition."""
    if header is None:
        raise PreconditionFailed(stage, "header data is missing")

    eof = header.get(FIELD_SEPARATOR_KEY)
    eor = header.get(RECORD_SEPARATOR_KEY)
    if not eof or not eor:
        raise PreconditionFailed(
            stage, "header does not declare both EOF and EOR delimiters"
        )
    return eof, eor
