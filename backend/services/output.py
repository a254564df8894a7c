"""
Output Formatter - Parse diff text and produce the final HTML or JSON document
"""

from __future__ import annotations

import json
import os
import tempfile
import webbrowser
from pathlib import Path

from models.config import Configuration, FormatType, RenderOptions
from services import diff_parser, diff_renderer
from services.assets import AssetProvider
from services.errors import TemplateNotFoundError
from services.template import prepare_html


def get_output(
    options: RenderOptions,
    config: Configuration,
    input_text: str,
    assets: AssetProvider | None = None,
) -> str:
    """Render diff text in the configured format"""
    if config.html_wrapper_template and not os.path.exists(config.html_wrapper_template):
        raise TemplateNotFoundError(config.html_wrapper_template)

    diff_files = diff_parser.parse(input_text, options)

    if config.format_type == FormatType.HTML:
        html_content = diff_renderer.html(diff_files, options)
        return prepare_html(html_content, config, options.color_scheme, assets)
    elif config.format_type == FormatType.JSON:
        return json.dumps([diff_file.model_dump(mode="json", by_alias=True) for diff_file in diff_files])
    else:
        raise ValueError(f"Unsupported format type: {config.format_type}")


def write_file(path: str | Path, content: str):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def preview(content: str, format_type: FormatType | str) -> Path:
    """Write content to the temp directory and open it with the default viewer"""
    extension = format_type.value if isinstance(format_type, FormatType) else format_type
    file_path = Path(tempfile.gettempdir()) / f"diff.{extension}"
    write_file(file_path, content)
    webbrowser.open(file_path.resolve().as_uri())
    return file_path
