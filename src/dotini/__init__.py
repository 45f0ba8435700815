from .errors import (
    DotIniError,
    FileReadError,
    InternalError,
    MissingCaptureError,
    UnreachableError,
    UnsuccessfulParseError,
)
from .parser import INIParser, into_mapping, parse_from_path, parse_from_text
from .reducer import DEFAULT_SECTION


__all__ = [
    "DEFAULT_SECTION",
    "DotIniError",
    "FileReadError",
    "INIParser",
    "InternalError",
    "MissingCaptureError",
    "UnreachableError",
    "UnsuccessfulParseError",
    "into_mapping",
    "parse_from_path",
    "parse_from_text",
]
