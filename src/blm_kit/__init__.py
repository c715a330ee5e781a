# Config
from .config import BlmConfig, load_config

# Errors
from .errors import (
    BlmError,
    InvalidPath,
    MalformedHeaderLine,
    MalformedSection,
    MissingDelimiterDeclaration,
    ParseFailed,
    PreconditionFailed,
    ReadFailure,
    SchemaMismatch,
)

# Loaders
from .loaders import FileTextLoader, TextLoader

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import BlmDocument, BlmHeader, BlmParser, Record, parse_text, validate_path

# Pipeline
from .pipeline import parse_document, parse_file

__all__ = [
    # Config
    "BlmConfig",
    "load_config",
    # Errors
    "BlmError",
    "InvalidPath",
    "MalformedHeaderLine",
    "MalformedSection",
    "MissingDelimiterDeclaration",
    "ParseFailed",
    "PreconditionFailed",
    "ReadFailure",
    "SchemaMismatch",
    # Loaders
    "FileTextLoader",
    "TextLoader",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "BlmDocument",
    "BlmHeader",
    "BlmParser",
    "Record",
    "parse_text",
    "validate_path",
    # Pipeline
    "parse_document",
    "parse_file",
]
