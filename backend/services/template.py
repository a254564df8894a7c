"""
Template Compositor - Assemble a standalone HTML page around rendered diff markup
"""

from __future__ import annotations

import os

from models.config import ColorScheme, Configuration
from services.assets import AssetProvider, PackageAssetProvider
from services.errors import TemplateNotFoundError
from services.input_resolver import read_file

HLJS_STYLES = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/styles"

GITHUB_THEMES: dict[ColorScheme, str] = {
    ColorScheme.LIGHT: f'<link rel="stylesheet" href="{HLJS_STYLES}/github.min.css" />',
    ColorScheme.DARK: f'<link rel="stylesheet" href="{HLJS_STYLES}/github-dark.min.css" />',
    ColorScheme.AUTO: (
        f'<link rel="stylesheet" href="{HLJS_STYLES}/github.min.css" '
        'media="screen and (prefers-color-scheme: light)" />\n'
        f'<link rel="stylesheet" href="{HLJS_STYLES}/github-dark.min.css" '
        'media="screen and (prefers-color-scheme: dark)" />'
    ),
}

_LIGHT_RULES = """body {
  background-color: var(--d2h-bg-color);
}
h1 {
  color: var(--d2h-light-color);
}"""

_DARK_RULES = """body {
  background-color: rgb(13, 17, 23);
}
h1 {
  color: var(--d2h-dark-color);
}"""


def _indent(rules: str) -> str:
    return "\n".join(f"  {line}" for line in rules.splitlines())


BASE_STYLES: dict[ColorScheme, str] = {
    ColorScheme.LIGHT: f"<style>\n{_LIGHT_RULES}\n</style>",
    ColorScheme.DARK: f"<style>\n{_DARK_RULES}\n</style>",
    ColorScheme.AUTO: (
        "<style>\n"
        f"@media screen and (prefers-color-scheme: light) {{\n{_indent(_LIGHT_RULES)}\n}}\n"
        f"@media screen and (prefers-color-scheme: dark) {{\n{_indent(_DARK_RULES)}\n}}\n"
        "</style>"
    ),
}

TITLE_MARKER = "<!--diff2html-title-->"
CSS_MARKER = "<!--diff2html-css-->"
JS_UI_MARKER = "<!--diff2html-js-ui-->"
FILE_LIST_TOGGLE_MARKER = "//diff2html-fileListToggle"
FILE_CONTENT_TOGGLE_MARKER = "//diff2html-fileContentToggle"
SYNCHRONISED_SCROLL_MARKER = "//diff2html-synchronisedScroll"
HIGHLIGHT_CODE_MARKER = "//diff2html-highlightCode"
HEADER_MARKER = "<!--diff2html-header-->"
DIFF_MARKER = "<!--diff2html-diff-->"
COMMIT_MESSAGE_MARKER = "<!--diff2html-commit-message-->"


def replace_exactly(template: str, replacements: list[tuple[str, str]]) -> str:
    """
    Replace the first occurrence of each marker with its value.

    Markers are located in the original template only and all values are
    spliced in a single pass, so a value is inserted verbatim and a marker
    text appearing inside a value is never expanded.
    """
    spans = []
    for marker, value in replacements:
        start = template.find(marker)
        if start >= 0:
            spans.append((start, start + len(marker), value))
    spans.sort(key=lambda span: span[0])

    parts = []
    cursor = 0
    for start, end, value in spans:
        parts.append(template[cursor:start])
        parts.append(value)
        cursor = end
    parts.append(template[cursor:])
    return "".join(parts)


def _ui_call(enabled: bool, call: str) -> str:
    return f"diff2htmlUi.{call}();" if enabled else ""


def placeholder_table(
    diff_html: str, config: Configuration, color_scheme: ColorScheme | None, css: str, ui_js: str
) -> list[tuple[str, str]]:
    """Ordered (marker, value) pairs for a page"""
    scheme = color_scheme or ColorScheme.AUTO
    show_files_open = "true" if config.show_files_open else "false"

    return [
        (TITLE_MARKER, config.page_title),
        (CSS_MARKER, f"{BASE_STYLES[scheme]}\n{GITHUB_THEMES[scheme]}\n<style>\n{css}\n</style>"),
        (JS_UI_MARKER, f"<script>\n{ui_js}\n</script>"),
        (FILE_LIST_TOGGLE_MARKER, f"diff2htmlUi.fileListToggle({show_files_open});"),
        (FILE_CONTENT_TOGGLE_MARKER, _ui_call(config.file_content_toggle, "fileContentToggle")),
        (SYNCHRONISED_SCROLL_MARKER, _ui_call(config.synchronised_scroll, "synchronisedScroll")),
        (HIGHLIGHT_CODE_MARKER, _ui_call(config.highlight_code, "highlightCode")),
        (HEADER_MARKER, config.page_header),
        (DIFF_MARKER, diff_html),
        (COMMIT_MESSAGE_MARKER, config.commit_message),
    ]


def prepare_html(
    diff_html: str,
    config: Configuration,
    color_scheme: ColorScheme | None = None,
    assets: AssetProvider | None = None,
) -> str:
    """Wrap rendered diff markup into the configured HTML template"""
    template_path = config.html_wrapper_template
    if not template_path or not os.path.exists(template_path):
        raise TemplateNotFoundError(str(template_path))
    template = read_file(template_path)

    assets = assets or PackageAssetProvider()
    table = placeholder_table(diff_html, config, color_scheme, assets.css(), assets.ui_js())
    return replace_exactly(template, table)
