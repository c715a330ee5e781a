# src/blm_kit/config.py

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Literal

import yaml

logger = logging.getLogger(__name__)

DecodeErrors = Literal["strict", "replace", "ignore"]


@dataclass(frozen=True)
class BlmConfig:
    """Configuration for .blm parsing.

    Immutable. Explicit. No magic defaults from environment.
    """

    encoding: str = "utf-8"
    decode_errors: DecodeErrors = "replace"
    strict_header: bool = True  # False skips header lines without ':'


DEFAULT_CONFIG = BlmConfig()


def load_config(path: str | Path) -> BlmConfig:
    """Load a BlmConfig from a YAML mapping.

    Raises:
        ValueError: If the file is not a mapping or has unknown keys.
    """
    logger.info("Loading BlmConfig from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(BlmConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return BlmConfig(**data)
