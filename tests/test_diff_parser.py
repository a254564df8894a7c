import pytest

from models.config import RenderOptions
from models.diff import LineType
from services.diff_parser import parse
from services.errors import ParseError

from conftest import ADDED_FILE_DIFF, DELETED_FILE_DIFF, MODIFIED_FILE_DIFF

RENAMED_FILE_DIFF = "\n".join([
    "diff --git a/docs/old_name.rst b/docs/new_name.rst",
    "similarity index 90%",
    "rename from docs/old_name.rst",
    "rename to docs/new_name.rst",
    "index 1111111..2222222 100644",
    "--- a/docs/old_name.rst",
    "+++ b/docs/new_name.rst",
    "@@ -1,2 +1,2 @@",
    " Title",
    "-old",
    "+new",
    "",
])


def test_added_file():
    [diff_file] = parse(ADDED_FILE_DIFF)

    assert diff_file.old_name == "sample.txt"
    assert diff_file.new_name == "sample.txt"
    assert diff_file.is_new
    assert not diff_file.is_deleted
    assert not diff_file.is_rename
    assert diff_file.added_lines == 2
    assert diff_file.deleted_lines == 0
    assert diff_file.language == "txt"

    [block] = diff_file.blocks
    assert block.header == "@@ -0,0 +1,2 @@"
    assert [line.content for line in block.lines] == ["+first line", "+second line"]
    assert [line.new_number for line in block.lines] == [1, 2]
    assert all(line.old_number is None for line in block.lines)


def test_modified_file_lines():
    [diff_file] = parse(MODIFIED_FILE_DIFF)

    assert diff_file.new_name == "app.py"
    assert diff_file.language == "py"
    [block] = diff_file.blocks
    assert block.header == "@@ -1,4 +1,4 @@ def main():"
    assert block.old_start_line == 1
    assert block.new_start_line == 1
    assert [line.type for line in block.lines] == [
        LineType.CONTEXT,
        LineType.DELETE,
        LineType.INSERT,
        LineType.CONTEXT,
        LineType.CONTEXT,
    ]
    deleted = block.lines[1]
    assert deleted.old_number == 2
    assert deleted.new_number is None


def test_deleted_file():
    [diff_file] = parse(DELETED_FILE_DIFF)

    assert diff_file.is_deleted
    assert diff_file.old_name == "old.md"
    assert diff_file.new_name == "old.md"
    assert diff_file.deleted_lines == 1


def test_renamed_file():
    [diff_file] = parse(RENAMED_FILE_DIFF)

    assert diff_file.is_rename
    assert diff_file.old_name == "docs/old_name.rst"
    assert diff_file.new_name == "docs/new_name.rst"
    assert diff_file.display_name == "docs/old_name.rst → docs/new_name.rst"


def test_multiple_files_keep_order():
    files = parse(MODIFIED_FILE_DIFF + ADDED_FILE_DIFF)
    assert [diff_file.new_name for diff_file in files] == ["app.py", "sample.txt"]


def test_no_newline_marker_dropped():
    diff_text = "\n".join([
        "diff --git a/a.txt b/a.txt",
        "index 2e65efe..63d8dbd 100644",
        "--- a/a.txt",
        "+++ b/a.txt",
        "@@ -1 +1 @@",
        "-a",
        "\\ No newline at end of file",
        "+b",
        "\\ No newline at end of file",
        "",
    ])
    [diff_file] = parse(diff_text)
    assert [line.content for line in diff_file.blocks[0].lines] == ["-a", "+b"]


def test_empty_input():
    assert parse("") == []


def test_diff_max_changes_marks_file_too_big():
    [diff_file] = parse(MODIFIED_FILE_DIFF, RenderOptions(diff_max_changes=1))

    assert diff_file.is_too_big
    assert diff_file.blocks == []


def test_diff_max_line_length_marks_file_too_big():
    [diff_file] = parse(ADDED_FILE_DIFF, RenderOptions(diff_max_line_length=5))
    assert diff_file.is_too_big

    [diff_file] = parse(ADDED_FILE_DIFF, RenderOptions(diff_max_line_length=50))
    assert not diff_file.is_too_big


def test_json_aliases():
    [diff_file] = parse(ADDED_FILE_DIFF)
    data = diff_file.model_dump(mode="json", by_alias=True)

    assert data["oldName"] == "sample.txt"
    assert data["isNew"] is True
    assert data["addedLines"] == 2
    assert data["blocks"][0]["newStartLine"] == 1
    assert data["blocks"][0]["lines"][0] == {
        "type": "insert",
        "content": "+first line",
        "oldNumber": None,
        "newNumber": 1,
    }


def test_malformed_hunk_raises_parse_error():
    diff_text = "\n".join([
        "--- a/a.txt",
        "+++ b/a.txt",
        "@@ -1,3 +1,3 @@",
        " only one line",
        "",
    ])
    with pytest.raises(ParseError):
        parse(diff_text)
