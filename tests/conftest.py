import pytest

from services.assets import StaticAssetProvider
from services.config_manager import ConfigManager

ADDED_FILE_DIFF = "\n".join([
    "diff --git a/sample.txt b/sample.txt",
    "new file mode 100644",
    "index 0000000..1a2b3c4",
    "--- /dev/null",
    "+++ b/sample.txt",
    "@@ -0,0 +1,2 @@",
    "+first line",
    "+second line",
    "",
])

MODIFIED_FILE_DIFF = "\n".join([
    "diff --git a/app.py b/app.py",
    "index 83db48f..bf269f4 100644",
    "--- a/app.py",
    "+++ b/app.py",
    "@@ -1,4 +1,4 @@ def main():",
    " import os",
    '-print("hello world")',
    '+print("hello there")',
    " ",
    " x = 1",
    "",
])

DELETED_FILE_DIFF = "\n".join([
    "diff --git a/old.md b/old.md",
    "deleted file mode 100644",
    "index 1a2b3c4..0000000",
    "--- a/old.md",
    "+++ /dev/null",
    "@@ -1 +0,0 @@",
    "-<b>gone</b>",
    "",
])

ALL_MARKERS = [
    "<!--diff2html-title-->",
    "<!--diff2html-css-->",
    "<!--diff2html-js-ui-->",
    "//diff2html-fileListToggle",
    "//diff2html-fileContentToggle",
    "//diff2html-synchronisedScroll",
    "//diff2html-highlightCode",
    "<!--diff2html-header-->",
    "<!--diff2html-diff-->",
    "<!--diff2html-commit-message-->",
]


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep ConfigManager away from the real home directory"""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DIFF2HTML_CONFIG_DIR", str(config_dir))
    monkeypatch.setattr(ConfigManager, "_instance", None)
    yield config_dir
    ConfigManager._instance = None


@pytest.fixture
def assets():
    return StaticAssetProvider(css_content=".d2h-wrapper{}", ui_js_content="function Diff2HtmlUI(){}")


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "template.html"
    path.write_text("\n".join(ALL_MARKERS), encoding="utf-8")
    return path
