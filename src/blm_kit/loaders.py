# src/blm_kit/loaders.py

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from blm_kit.config import DEFAULT_CONFIG, BlmConfig

logger = logging.getLogger(__name__)


class TextLoader(Protocol):
    """Protocol for loading a feed's full decoded text.

    Implementations raise OSError for I/O problems and ValueError (including
    UnicodeError) for bad paths or undecodable bytes. The pipeline turns
    either into a ReadFailure.
    """

    async def load(self, path: str) -> str: ...


class FileTextLoader(TextLoader):
    """Read a whole file from disk and decode it per config.

    The read runs in a worker thread so the event loop is not blocked.
    """

    def __init__(self, config: BlmConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    async def load(self, path: str) -> str:
        logger.debug("Reading %s", path)
        raw = await asyncio.to_thread(Path(path).read_bytes)
        logger.debug("Read %d bytes from %s", len(raw), path)
        return raw.decode(self.config.encoding, self.config.decode_errors)
