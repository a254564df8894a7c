import re

from models.config import ColorScheme, DiffStyle, OutputFormat, RenderOptions
from models.diff import DiffLine, LineType
from services.diff_parser import parse
from services.diff_renderer import file_id, group_lines, highlight_pair, html

from conftest import ADDED_FILE_DIFF, DELETED_FILE_DIFF, MODIFIED_FILE_DIFF


def test_highlight_pair_words():
    old_html, new_html = highlight_pair('print("hello world")', 'print("hello there")')

    assert old_html == 'print("hello <del>world")</del>'
    assert new_html == 'print("hello <ins>there")</ins>'


def test_highlight_pair_chars():
    old_html, new_html = highlight_pair("cat", "cut", DiffStyle.CHAR)

    assert old_html == "c<del>a</del>t"
    assert new_html == "c<ins>u</ins>t"


def test_highlight_pair_escapes():
    old_html, new_html = highlight_pair("a <b>", "a <i>")

    assert "<b>" not in old_html
    assert "<del>&lt;b&gt;</del>" in old_html
    assert "<ins>&lt;i&gt;</ins>" in new_html


def test_group_lines():
    lines = [
        DiffLine(type=LineType.CONTEXT, content=" a", old_number=1, new_number=1),
        DiffLine(type=LineType.DELETE, content="-b", old_number=2),
        DiffLine(type=LineType.INSERT, content="+c", new_number=2),
        DiffLine(type=LineType.INSERT, content="+d", new_number=3),
        DiffLine(type=LineType.DELETE, content="-e", old_number=3),
    ]

    groups = group_lines(lines)

    assert groups[0] is lines[0]
    assert groups[1] == ([lines[1]], [lines[2], lines[3]])
    assert groups[2] == ([lines[4]], [])


def test_line_by_line():
    output = html(parse(MODIFIED_FILE_DIFF))

    assert output.startswith('<div class="d2h-wrapper d2h-auto-color-scheme">')
    assert "Files changed (1)" in output
    assert "d2h-diff-table" in output
    assert "d2h-files-diff" not in output
    assert "@@ -1,4 +1,4 @@ def main():" in output
    assert "<del>world&quot;)</del>" not in output
    assert '<del>world")</del>' in output
    assert '<ins>there")</ins>' in output
    assert 'data-lang="py"' in output
    assert "CHANGED" in output


def test_side_by_side():
    output = html(parse(MODIFIED_FILE_DIFF), RenderOptions(output_format=OutputFormat.SIDE_BY_SIDE))

    assert output.count('class="d2h-file-side-diff"') == 2
    assert "d2h-code-side-line" in output


def test_side_by_side_pads_unpaired_lines():
    output = html(parse(ADDED_FILE_DIFF), RenderOptions(output_format=OutputFormat.SIDE_BY_SIDE))

    assert output.count("d2h-emptyplaceholder") >= 2
    assert "ADDED" in output


def test_content_is_escaped():
    output = html(parse(DELETED_FILE_DIFF))

    assert "<b>gone</b>" not in output
    assert "&lt;b&gt;gone&lt;/b&gt;" in output
    assert "DELETED" in output


def test_file_list_can_be_hidden():
    output = html(parse(MODIFIED_FILE_DIFF), RenderOptions(draw_file_list=False))
    assert "d2h-file-list" not in output


def test_file_list_links_to_file():
    [diff_file] = parse(ADDED_FILE_DIFF)
    output = html([diff_file])

    assert f'href="#{file_id(diff_file, 0)}"' in output
    assert f'id="{file_id(diff_file, 0)}"' in output
    assert '<span class="d2h-lines-added">+2</span>' in output


def test_color_scheme_class():
    output = html(parse(ADDED_FILE_DIFF), RenderOptions(color_scheme=ColorScheme.DARK))
    assert "d2h-dark-color-scheme" in output


def test_too_big_file():
    output = html(parse(MODIFIED_FILE_DIFF, RenderOptions(diff_max_changes=1)))
    assert "Diff too big to be displayed" in output


def test_long_lines_are_not_highlighted():
    output = html(parse(MODIFIED_FILE_DIFF), RenderOptions(max_line_length_highlight=5))

    assert "<del>" not in output
    assert "<ins>" not in output


def test_empty_diff():
    assert "File without changes" in html([])
    assert html([], RenderOptions(render_nothing_when_empty=True)) == ""


def test_repeated_paths_get_distinct_anchors():
    diff_files = parse(ADDED_FILE_DIFF + ADDED_FILE_DIFF)
    output = html(diff_files)

    ids = re.findall(r'<div id="(d2h-[0-9a-f]{6})" class="d2h-file-wrapper"', output)
    links = re.findall(r'href="#(d2h-[0-9a-f]{6})"', output)
    assert len(ids) == 2
    assert len(set(ids)) == 2
    assert links == ids
