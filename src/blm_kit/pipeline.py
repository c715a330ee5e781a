# src/blm_kit/pipeline.py

"""Pipeline coordinator: path in, records (or exactly one error) out.

Each call owns its own result. Nothing is shared between calls, so
concurrent parses of different (or the same) files never interfere.
"""

import logging
import os
from time import monotonic

from blm_kit.config import DEFAULT_CONFIG, BlmConfig
from blm_kit.errors import InvalidPath, ParseFailed, ReadFailure
from blm_kit.loaders import FileTextLoader, TextLoader
from blm_kit.observability import names
from blm_kit.observability.base import MetricsHook, NoOpMetricsHook
from blm_kit.parsers.blm_parser import parse_stage, parse_text
from blm_kit.parsers.models import BlmDocument, Record
from blm_kit.parsers.validation import is_valid_path

logger = logging.getLogger(__name__)


async def parse_document(
    path: str | os.PathLike[str],
    *,
    loader: TextLoader | None = None,
    config: BlmConfig = DEFAULT_CONFIG,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> BlmDocument:
    """Parse the .blm file at ``path`` into a BlmDocument.

    Args:
        path: Path to a file with a .blm extension (any case).
        loader: Source of the decoded text. Defaults to FileTextLoader.
        config: Decoding and header strictness settings.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The header, field definitions and records of the file.

    Raises:
        ParseFailed: On the first failure, with ``stage`` one of
            "validate", "read", "header", "definitions", "data" and
            ``cause`` the underlying BlmError.
    """
    start = monotonic()
    logger.info("Parsing %s", path)
    try:
        with parse_stage("validate"):
            if not await is_valid_path(path):
                raise InvalidPath(path)
        file_path = os.fspath(path)

        text = await _load(file_path, loader or FileTextLoader(config), metrics_hook)
        document = parse_text(text, config=config, source=file_path)
    except ParseFailed as exc:
        metrics_hook.increment(names.BLM_ERRORS_TOTAL, labels={"stage": exc.stage})
        raise

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.BLM_PARSE_DURATION, elapsed_ms)
    metrics_hook.increment(names.BLM_PARSES_TOTAL)
    metrics_hook.increment(names.BLM_RECORDS_PARSED, len(document.records))
    metrics_hook.record_gauge(names.BLM_FIELD_COUNT, len(document.definitions))
    logger.info(
        "Parsed %d records with %d fields from %s",
        len(document.records),
        len(document.definitions),
        file_path,
    )
    return document


async def parse_file(
    path: str | os.PathLike[str],
    *,
    loader: TextLoader | None = None,
    config: BlmConfig = DEFAULT_CONFIG,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Record]:
    """Parse the .blm file at ``path`` and return its records in file order.

    Example:
        >>> records = await parse_file("feed.blm")
        >>> records[0]["AGENT_REF"]
        'XX1234_0001'

    Raises:
        ParseFailed: See parse_document.
    """
    document = await parse_document(
        path, loader=loader, config=config, metrics_hook=metrics_hook
    )
    return document.records


async def _load(path: str, loader: TextLoader, metrics_hook: MetricsHook) -> str:
    start = monotonic()
    with parse_stage("read"):
        try:
            text = await loader.load(path)
        except (OSError, ValueError, LookupError) as exc:
            raise ReadFailure(path, exc) from exc

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.BLM_READ_DURATION, elapsed_ms)
    return text
