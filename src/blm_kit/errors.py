# src/blm_kit/errors.py

"""Error taxonomy for .blm parsing.

Every stage raises exactly one of these. The pipeline wraps the first one it
sees in a ``ParseFailed`` carrying the stage name.
"""

from collections.abc import Sequence


class BlmError(Exception):
    """Base class for every error raised by blm-kit."""


class InvalidPath(BlmError):
    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"File path is not a valid .blm path: {path!r}")


class ReadFailure(BlmError):
    def __init__(self, path: str, error: BaseException) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Could not read file at path {path!r}: {error}")


class MalformedSection(BlmError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Section #{name}# not found or not terminated")


class MalformedHeaderLine(BlmError):
    def __init__(self, line: str, line_number: int) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(
            f"Header line {line_number} is not a 'property:value' pair: {line!r}"
        )


class MissingDelimiterDeclaration(BlmError):
    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Header does not declare delimiter(s): {', '.join(self.missing)}"
        )


class PreconditionFailed(BlmError):
    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Cannot extract {stage}: {reason}")


class SchemaMismatch(BlmError):
    def __init__(self, expected: int, actual: int, record_index: int) -> None:
        self.expected = expected
        self.actual = actual
        self.record_index = record_index
        super().__init__(
            f"Record {record_index} has {actual} values, "
            f"but {expected} fields are defined"
        )


class ParseFailed(BlmError):
    """Single error surfaced by the pipeline, naming the failing stage."""

    def __init__(self, stage: str, cause: BlmError) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"Parsing failed during {stage} stage: {cause}")
