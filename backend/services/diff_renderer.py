"""
Diff Renderer - Generate diff2html-compatible markup from parsed diff files

Produces the body markup only (file list plus one wrapper per file) for both
line-by-line and side-by-side views. The page shell, CSS and UI script are
added by the template compositor.
"""

from __future__ import annotations

import hashlib
import html as html_lib
import re
from difflib import SequenceMatcher
from typing import Union

from models.config import ColorScheme, DiffStyle, OutputFormat, RenderOptions
from models.diff import DiffFile, DiffLine, LineType

# Split into words and whitespace runs, keeping the separators
WHITESPACE_SPLIT_PATTERN = r"(\s+)"

# A context line, or a run of deletions followed by a run of insertions
LineGroup = Union[DiffLine, tuple[list[DiffLine], list[DiffLine]]]


def _escape(text: str) -> str:
    return html_lib.escape(text, quote=False)


def file_id(diff_file: DiffFile, index: int) -> str:
    """Stable anchor id for the file at this position, used by the file list links"""
    digest = hashlib.sha1(f"{index}\0{diff_file.old_name}\0{diff_file.new_name}".encode("utf-8")).hexdigest()
    return f"d2h-{digest[:6]}"


def _tokenize(text: str, diff_style: DiffStyle) -> list[str]:
    if diff_style == DiffStyle.CHAR:
        return list(text)
    return [token for token in re.split(WHITESPACE_SPLIT_PATTERN, text) if token]


def highlight_pair(old_text: str, new_text: str, diff_style: DiffStyle = DiffStyle.WORD) -> tuple[str, str]:
    """
    Compute word or character level differences between a deleted and an
    inserted line.

    Returns:
        (old_html, new_html) with removed tokens wrapped in <del> and added
        tokens wrapped in <ins>. Both sides are HTML-escaped.
    """
    old_tokens = _tokenize(old_text, diff_style)
    new_tokens = _tokenize(new_text, diff_style)

    matcher = SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    old_parts: list[str] = []
    new_parts: list[str] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        old_chunk = _escape("".join(old_tokens[i1:i2]))
        new_chunk = _escape("".join(new_tokens[j1:j2]))
        if tag == "equal":
            old_parts.append(old_chunk)
            new_parts.append(new_chunk)
            continue
        if old_chunk:
            old_parts.append(f"<del>{old_chunk}</del>")
        if new_chunk:
            new_parts.append(f"<ins>{new_chunk}</ins>")

    return "".join(old_parts), "".join(new_parts)


def group_lines(lines: list[DiffLine]) -> list[LineGroup]:
    """Split block lines into context lines and delete/insert change groups"""
    groups: list[LineGroup] = []
    deletes: list[DiffLine] = []
    inserts: list[DiffLine] = []

    def flush():
        nonlocal deletes, inserts
        if deletes or inserts:
            groups.append((deletes, inserts))
            deletes, inserts = [], []

    for line in lines:
        if line.type == LineType.DELETE:
            if inserts:
                flush()
            deletes.append(line)
        elif line.type == LineType.INSERT:
            inserts.append(line)
        else:
            flush()
            groups.append(line)
    flush()

    return groups


def _highlight_group(
    deletes: list[DiffLine], inserts: list[DiffLine], options: RenderOptions
) -> tuple[list[str], list[str]]:
    """Escaped (and where paired, highlighted) content for a change group"""
    old_html = [_escape(line.content[1:]) for line in deletes]
    new_html = [_escape(line.content[1:]) for line in inserts]

    for idx in range(min(len(deletes), len(inserts))):
        old_text = deletes[idx].content[1:]
        new_text = inserts[idx].content[1:]
        if max(len(old_text), len(new_text)) > options.max_line_length_highlight:
            continue
        old_html[idx], new_html[idx] = highlight_pair(old_text, new_text, options.diff_style)

    return old_html, new_html


# ========== Row Builders ==========

_ROW_CLASS = {
    LineType.INSERT: "d2h-ins",
    LineType.DELETE: "d2h-del",
    LineType.CONTEXT: "d2h-cntx",
}

_PREFIX = {
    LineType.INSERT: "+",
    LineType.DELETE: "-",
    LineType.CONTEXT: "&nbsp;",
}


def _number(value: int | None) -> str:
    return "" if value is None else str(value)


def _code_line(line_type: LineType, content_html: str, side: bool = False) -> str:
    line_class = "d2h-code-side-line" if side else "d2h-code-line"
    return (
        f'<div class="{line_class}">'
        f'<span class="d2h-code-line-prefix">{_PREFIX[line_type]}</span>'
        f'<span class="d2h-code-line-ctn">{content_html}</span>'
        f"</div>"
    )


def _line_by_line_row(line: DiffLine, content_html: str) -> str:
    row_class = _ROW_CLASS[line.type]
    return (
        f"<tr>"
        f'<td class="d2h-code-linenumber {row_class}">'
        f'<div class="line-num1">{_number(line.old_number)}</div>'
        f'<div class="line-num2">{_number(line.new_number)}</div>'
        f"</td>"
        f'<td class="{row_class}">{_code_line(line.type, content_html)}</td>'
        f"</tr>"
    )


def _side_row(line: DiffLine | None, content_html: str, number: int | None) -> str:
    if line is None:
        return (
            '<tr><td class="d2h-code-side-linenumber d2h-code-side-emptyplaceholder d2h-cntx d2h-emptyplaceholder"></td>'
            '<td class="d2h-cntx d2h-emptyplaceholder"><div class="d2h-code-side-line d2h-code-side-emptyplaceholder">'
            "</div></td></tr>"
        )
    row_class = _ROW_CLASS[line.type]
    return (
        f"<tr>"
        f'<td class="d2h-code-side-linenumber {row_class}">{_number(number)}</td>'
        f'<td class="{row_class}">{_code_line(line.type, content_html, side=True)}</td>'
        f"</tr>"
    )


def _info_row(text: str, side: bool = False) -> str:
    number_class = "d2h-code-side-linenumber" if side else "d2h-code-linenumber"
    line_class = "d2h-code-side-line" if side else "d2h-code-line"
    return (
        f'<tr><td class="{number_class} d2h-info"></td>'
        f'<td class="d2h-info"><div class="{line_class}">{_escape(text)}</div></td></tr>'
    )


def _empty_file_message(diff_file: DiffFile) -> str | None:
    if diff_file.is_too_big:
        return "Diff too big to be displayed"
    if diff_file.is_binary:
        return "Binary file"
    if not diff_file.blocks:
        return "File renamed without changes" if diff_file.is_rename else "File without changes"
    return None


# ========== File Bodies ==========


def _line_by_line_body(diff_file: DiffFile, options: RenderOptions) -> str:
    message = _empty_file_message(diff_file)
    if message is not None:
        rows = [_info_row(message)]
    else:
        rows = []
        for block in diff_file.blocks:
            rows.append(_info_row(block.header))
            for group in group_lines(block.lines):
                if isinstance(group, DiffLine):
                    rows.append(_line_by_line_row(group, _escape(group.content[1:])))
                    continue
                deletes, inserts = group
                old_html, new_html = _highlight_group(deletes, inserts, options)
                rows.extend(_line_by_line_row(line, content) for line, content in zip(deletes, old_html))
                rows.extend(_line_by_line_row(line, content) for line, content in zip(inserts, new_html))

    return (
        '<div class="d2h-file-diff"><div class="d2h-code-wrapper">'
        '<table class="d2h-diff-table"><tbody class="d2h-diff-tbody">'
        f"{''.join(rows)}"
        "</tbody></table></div></div>"
    )


def _side_by_side_body(diff_file: DiffFile, options: RenderOptions) -> str:
    left: list[str] = []
    right: list[str] = []

    message = _empty_file_message(diff_file)
    if message is not None:
        left.append(_info_row(message, side=True))
        right.append(_info_row("", side=True))
    else:
        for block in diff_file.blocks:
            left.append(_info_row(block.header, side=True))
            right.append(_info_row("", side=True))
            for group in group_lines(block.lines):
                if isinstance(group, DiffLine):
                    content = _escape(group.content[1:])
                    left.append(_side_row(group, content, group.old_number))
                    right.append(_side_row(group, content, group.new_number))
                    continue
                deletes, inserts = group
                old_html, new_html = _highlight_group(deletes, inserts, options)
                for idx in range(max(len(deletes), len(inserts))):
                    if idx < len(deletes):
                        left.append(_side_row(deletes[idx], old_html[idx], deletes[idx].old_number))
                    else:
                        left.append(_side_row(None, "", None))
                    if idx < len(inserts):
                        right.append(_side_row(inserts[idx], new_html[idx], inserts[idx].new_number))
                    else:
                        right.append(_side_row(None, "", None))

    def side(rows: list[str]) -> str:
        return (
            '<div class="d2h-file-side-diff"><div class="d2h-code-wrapper">'
            '<table class="d2h-diff-table"><tbody class="d2h-diff-tbody">'
            f"{''.join(rows)}"
            "</tbody></table></div></div>"
        )

    return f'<div class="d2h-files-diff">{side(left)}{side(right)}</div>'


# ========== File Wrappers ==========


def _file_tag(diff_file: DiffFile) -> str:
    if diff_file.is_new:
        return '<span class="d2h-tag d2h-added d2h-added-tag">ADDED</span>'
    if diff_file.is_deleted:
        return '<span class="d2h-tag d2h-deleted d2h-deleted-tag">DELETED</span>'
    if diff_file.is_rename:
        return '<span class="d2h-tag d2h-moved d2h-moved-tag">RENAMED</span>'
    return '<span class="d2h-tag d2h-changed d2h-changed-tag">CHANGED</span>'


def _file_wrapper(diff_file: DiffFile, index: int, options: RenderOptions) -> str:
    if options.output_format == OutputFormat.SIDE_BY_SIDE:
        body = _side_by_side_body(diff_file, options)
    else:
        body = _line_by_line_body(diff_file, options)

    return (
        f'<div id="{file_id(diff_file, index)}" class="d2h-file-wrapper" data-lang="{html_lib.escape(diff_file.language)}">'
        '<div class="d2h-file-header">'
        '<span class="d2h-file-name-wrapper">'
        f'<span class="d2h-file-name">{_escape(diff_file.display_name)}</span>'
        f"{_file_tag(diff_file)}"
        "</span>"
        '<label class="d2h-file-collapse">'
        '<input class="d2h-file-collapse-input" type="checkbox" name="viewed" value="viewed">Viewed'
        "</label>"
        "</div>"
        f"{body}"
        "</div>"
    )


def _file_list(diff_files: list[DiffFile], scheme_class: str) -> str:
    items = []
    for index, diff_file in enumerate(diff_files):
        items.append(
            '<li class="d2h-file-list-line">'
            '<span class="d2h-file-name-wrapper">'
            f'<a href="#{file_id(diff_file, index)}" class="d2h-file-name">{_escape(diff_file.display_name)}</a>'
            '<span class="d2h-file-stats">'
            f'<span class="d2h-lines-added">+{diff_file.added_lines}</span>'
            f'<span class="d2h-lines-deleted">-{diff_file.deleted_lines}</span>'
            "</span></span></li>"
        )

    return (
        f'<div class="d2h-file-list-wrapper {scheme_class}">'
        '<div class="d2h-file-list-header">'
        f'<span class="d2h-file-list-title">Files changed ({len(diff_files)})</span>'
        '<a class="d2h-file-switch d2h-hide">hide</a>'
        '<a class="d2h-file-switch d2h-show">show</a>'
        "</div>"
        f'<ol class="d2h-file-list">{"".join(items)}</ol>'
        "</div>"
    )


def html(diff_files: list[DiffFile], options: RenderOptions | None = None) -> str:
    """Render parsed diff files into diff2html markup"""
    options = options or RenderOptions()
    scheme = options.color_scheme or ColorScheme.AUTO
    scheme_class = f"d2h-{scheme.value}-color-scheme"

    if not diff_files:
        if options.render_nothing_when_empty:
            return ""
        return (
            f'<div class="d2h-wrapper {scheme_class}">'
            '<div class="d2h-file-wrapper"><div class="d2h-file-diff"><div class="d2h-code-wrapper">'
            f'<table class="d2h-diff-table"><tbody class="d2h-diff-tbody">{_info_row("File without changes")}</tbody></table>'
            "</div></div></div></div>"
        )

    parts = []
    if options.draw_file_list:
        parts.append(_file_list(diff_files, scheme_class))
    for index, diff_file in enumerate(diff_files):
        if options.render_nothing_when_empty and _empty_file_message(diff_file) in (
            "File without changes",
            "File renamed without changes",
        ):
            continue
        parts.append(_file_wrapper(diff_file, index, options))

    return f'<div class="d2h-wrapper {scheme_class}">{"".join(parts)}</div>'
