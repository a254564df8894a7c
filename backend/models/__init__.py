"""Models module - Pydantic data models"""

from .config import (
    ColorScheme,
    Configuration,
    DiffStyle,
    DiffyType,
    FormatType,
    InputType,
    OutputDestination,
    OutputFormat,
    RenderOptions,
)
from .diff import DiffBlock, DiffFile, DiffLine, LineType
from .diffy import (
    DiffyCreated,
    DiffyError,
    DiffyResponse,
    DiffyUnrecognized,
    decode_diffy_response,
)

__all__ = [
    # Config models
    "ColorScheme",
    "Configuration",
    "DiffStyle",
    "DiffyType",
    "FormatType",
    "InputType",
    "OutputDestination",
    "OutputFormat",
    "RenderOptions",
    # Diff models
    "DiffBlock",
    "DiffFile",
    "DiffLine",
    "LineType",
    # Diffy models
    "DiffyCreated",
    "DiffyError",
    "DiffyResponse",
    "DiffyUnrecognized",
    "decode_diffy_response",
]
