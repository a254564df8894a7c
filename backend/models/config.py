"""Rendering and publishing configuration models"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

STATIC_DIR = Path(__file__).resolve().parent.parent / "services" / "static"
DEFAULT_TEMPLATE = str(STATIC_DIR / "template.html")
DEFAULT_PAGE_TITLE = "Diff to HTML"


class InputType(str, Enum):
    """Where the raw diff text comes from"""

    FILE = "file"
    STDIN = "stdin"
    COMMAND = "command"


class FormatType(str, Enum):
    HTML = "html"
    JSON = "json"


class ColorScheme(str, Enum):
    """Theme used for the rendered page"""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class OutputFormat(str, Enum):
    LINE_BY_LINE = "line-by-line"
    SIDE_BY_SIDE = "side-by-side"


class DiffStyle(str, Enum):
    WORD = "word"
    CHAR = "char"


class OutputDestination(str, Enum):
    PREVIEW = "preview"
    STDOUT = "stdout"


class DiffyType(str, Enum):
    """What to do with the link of a published diff"""

    BROWSER = "browser"
    PBCOPY = "pbcopy"
    PRINT = "print"


class RenderOptions(BaseModel):
    """Options for parsing and rendering a diff"""

    output_format: OutputFormat = OutputFormat.LINE_BY_LINE
    draw_file_list: bool = True
    color_scheme: ColorScheme | None = None
    diff_style: DiffStyle = DiffStyle.WORD
    diff_max_changes: int | None = None
    diff_max_line_length: int | None = None
    max_line_length_highlight: int = 10000
    render_nothing_when_empty: bool = False


class Configuration(BaseModel):
    """Page and pipeline settings for a single invocation"""

    html_wrapper_template: str | None = DEFAULT_TEMPLATE
    page_title: str = DEFAULT_PAGE_TITLE
    page_header: str = DEFAULT_PAGE_TITLE
    commit_message: str = ""
    show_files_open: bool = False
    file_content_toggle: bool = True
    synchronised_scroll: bool = True
    highlight_code: bool = True
    format_type: FormatType = FormatType.HTML
    input_source: InputType = InputType.COMMAND
    output_destination_type: OutputDestination = OutputDestination.PREVIEW
    output_destination_file: str | None = None
    diffy_type: DiffyType | None = None
    ignore: list[str] = []
