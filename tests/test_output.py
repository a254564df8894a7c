import json

import pytest

from models.config import Configuration, FormatType, RenderOptions
from services import diff_parser, output
from services.errors import TemplateNotFoundError
from services.output import get_output, preview

from conftest import ADDED_FILE_DIFF, MODIFIED_FILE_DIFF


def test_json_output_of_added_file():
    result = get_output(RenderOptions(), Configuration(format_type=FormatType.JSON), ADDED_FILE_DIFF)

    files = json.loads(result)
    assert len(files) == 1
    assert files[0]["newName"] == "sample.txt"
    assert files[0]["isNew"] is True
    assert len(files[0]["blocks"][0]["lines"]) == 2


def test_html_output(template_file, assets):
    config = Configuration(html_wrapper_template=str(template_file), page_title="Review")

    result = get_output(RenderOptions(), config, MODIFIED_FILE_DIFF, assets)

    assert result.startswith("Review")
    assert "d2h-wrapper" in result
    assert ".d2h-wrapper{}" in result
    assert "function Diff2HtmlUI(){}" in result


def test_missing_template_fails_before_parsing(tmp_path, monkeypatch):
    def fail_parse(*args, **kwargs):
        pytest.fail("diff was parsed")

    monkeypatch.setattr(diff_parser, "parse", fail_parse)
    config = Configuration(html_wrapper_template=str(tmp_path / "gone.html"))

    with pytest.raises(TemplateNotFoundError) as exc_info:
        get_output(RenderOptions(), config, ADDED_FILE_DIFF)

    assert exc_info.value.exit_code == 4
    assert str(tmp_path / "gone.html") in exc_info.value.message


def test_missing_template_fails_for_json_too(tmp_path):
    config = Configuration(html_wrapper_template=str(tmp_path / "gone.html"), format_type=FormatType.JSON)

    with pytest.raises(TemplateNotFoundError):
        get_output(RenderOptions(), config, ADDED_FILE_DIFF)


def test_no_template_configured_for_json():
    config = Configuration(html_wrapper_template=None, format_type=FormatType.JSON)
    assert json.loads(get_output(RenderOptions(), config, "")) == []


def test_preview_writes_temp_file(tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr(output.tempfile, "gettempdir", lambda: str(tmp_path))
    monkeypatch.setattr(output.webbrowser, "open", lambda uri: opened.append(uri))

    path = preview("<html></html>", FormatType.HTML)

    assert path == tmp_path / "diff.html"
    assert path.read_text(encoding="utf-8") == "<html></html>"
    assert opened == [path.resolve().as_uri()]


def test_preview_json_extension(tmp_path, monkeypatch):
    monkeypatch.setattr(output.tempfile, "gettempdir", lambda: str(tmp_path))
    monkeypatch.setattr(output.webbrowser, "open", lambda uri: False)

    assert preview("[]", "json").name == "diff.json"
