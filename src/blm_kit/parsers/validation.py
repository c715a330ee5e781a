# parsers/validation.py

import os

BLM_EXTENSION = "BLM"


def validate_path(path: object) -> bool:
    """Return True if ``path`` looks like a .blm file path.

    Never raises: anything that is not a non-empty string (or path-like)
    with a non-empty prefix and a ``.blm`` suffix is simply rejected.
    """
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if not isinstance(path, str) or not path:
        return False

    parts = path.split(".")
    if len(parts) < 2:
        return False

    prefix = "".join(parts[:-1])
    return len(prefix) > 0 and parts[-1].upper() == BLM_EXTENSION


async def is_valid_path(path: object) -> bool:
    """Coroutine form of validate_path. Performs no I/O."""
    return validate_path(path)
