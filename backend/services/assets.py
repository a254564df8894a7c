"""
Asset Provider - CSS and UI script bundles embedded into rendered pages
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from models.config import STATIC_DIR
from services.input_resolver import read_file

CSS_BUNDLE = "diff2html.min.css"
UI_JS_BUNDLE = "diff2html-ui-slim.min.js"


class AssetProvider(Protocol):
    def css(self) -> str: ...

    def ui_js(self) -> str: ...


class PackageAssetProvider:
    """Read the bundles shipped next to the renderer"""

    def __init__(self, static_dir: Path = STATIC_DIR):
        self.static_dir = Path(static_dir)

    def css(self) -> str:
        return read_file(str(self.static_dir / CSS_BUNDLE))

    def ui_js(self) -> str:
        return read_file(str(self.static_dir / UI_JS_BUNDLE))


@dataclass
class StaticAssetProvider:
    """In-memory bundles"""

    css_content: str = ""
    ui_js_content: str = ""

    def css(self) -> str:
        return self.css_content

    def ui_js(self) -> str:
        return self.ui_js_content
