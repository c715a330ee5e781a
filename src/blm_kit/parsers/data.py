# parsers/data.py

import logging
from collections.abc import Mapping, Sequence

from blm_kit.errors import PreconditionFailed, SchemaMismatch

from .header import delimiters_for
from .models import Record
from .sections import DATA, find_section

logger = logging.getLogger(__name__)


def extract_data(
    text: str,
    header: Mapping[str, str] | None,
    definitions: Sequence[str] | None,
) -> list[Record]:
    """Split the DATA section into records keyed by field name.

    Every record's raw text ends with the field separator, so the last
    element of each split is dropped before matching values to fields.

    Raises:
        PreconditionFailed: If ``header`` lacks a delimiter or
            ``definitions`` is None.
        MalformedSection: If the DATA section is missing.
        SchemaMismatch: On the first record whose value count differs
            from ``len(definitions)``. No partial result is returned.
    """
    eof, eor = delimiters_for(header, "data")
    if definitions is None:
        raise PreconditionFailed("data", "field definitions are missing")

    section = find_section(text, DATA)
    candidates = [c.strip() for c in section.split(eor)]
    rows = [c for c in candidates if c]

    records: list[Record] = []
    for index, row in enumerate(rows):
        values = row.split(eof)[:-1]
        if len(values) != len(definitions):
            logger.error(
                "Record %d has %d values, expected %d",
                index,
                len(values),
                len(definitions),
            )
            raise SchemaMismatch(
                expected=len(definitions), actual=len(values), record_index=index
            )
        records.append(dict(zip(definitions, values, strict=True)))

    logger.debug("Extracted %d records", len(records))
    return records
