# parsers/blm_parser.py

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from blm_kit.config import DEFAULT_CONFIG, BlmConfig
from blm_kit.errors import BlmError, ParseFailed, ReadFailure

from .base import DocumentParser
from .data import extract_data
from .definitions import extract_definitions
from .header import extract_header, require_delimiters
from .models import BlmDocument

logger = logging.getLogger(__name__)


@contextmanager
def parse_stage(name: str) -> Iterator[None]:
    """Wrap any BlmError raised inside the block in a ParseFailed for ``name``."""
    try:
        yield
    except ParseFailed:
        raise
    except BlmError as exc:
        logger.error("Stage '%s' failed: %s", name, exc)
        raise ParseFailed(name, exc) from exc


def parse_text(
    text: str,
    *,
    config: BlmConfig = DEFAULT_CONFIG,
    source: str | None = None,
) -> BlmDocument:
    """Run header, definitions and data extraction over decoded text.

    Raises:
        ParseFailed: With ``stage`` set to "header", "definitions" or "data".
    """
    with parse_stage("header"):
        header = extract_header(text, strict=config.strict_header)
        require_delimiters(header)

    with parse_stage("definitions"):
        definitions = extract_definitions(text, header)

    with parse_stage("data"):
        records = extract_data(text, header, definitions)

    metadata: dict = {"source_type": "blm"}
    if source is not None:
        metadata["source"] = source

    return BlmDocument(
        header=header,
        definitions=definitions,
        records=records,
        metadata=metadata,
    )


class BlmParser(DocumentParser):
    """
    Deterministic .blm parser over an already opened binary stream.
    - Decodes with the configured encoding
    - Fails fast on the first malformed section or record
    """

    def __init__(self, config: BlmConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def parse(self, source: BinaryIO) -> BlmDocument:
        name = str(getattr(source, "name", "<stream>"))
        with parse_stage("read"):
            text = self._read(source, name)
        return parse_text(text, config=self.config, source=name)

    def _read(self, source: BinaryIO, name: str) -> str:
        try:
            raw = source.read()
            return raw.decode(self.config.encoding, self.config.decode_errors)
        except (OSError, ValueError, LookupError) as exc:
            raise ReadFailure(name, exc) from exc
