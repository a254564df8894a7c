"""
Diff Parser - Turn unified diff text into the structured diff model
"""

from __future__ import annotations

from pathlib import PurePosixPath

from unidiff import PatchSet, UnidiffParseError
from unidiff.patch import Hunk, PatchedFile

from models.config import RenderOptions
from models.diff import DiffBlock, DiffFile, DiffLine, LineType
from services.errors import ParseError

DEV_NULL = "/dev/null"
GIT_PREFIXES = ("a/", "b/", "i/", "w/", "c/", "o/")

_LINE_TYPES = {
    "+": LineType.INSERT,
    "-": LineType.DELETE,
    " ": LineType.CONTEXT,
}


def _strip_prefix(name: str | None) -> str:
    if not name:
        return ""
    if name.startswith(GIT_PREFIXES):
        return name[2:]
    return name


def _language(name: str) -> str:
    return PurePosixPath(name).suffix.lstrip(".")


def _parse_hunk(hunk: Hunk) -> DiffBlock:
    header = f"@@ -{hunk.source_start},{hunk.source_length} +{hunk.target_start},{hunk.target_length} @@"
    if hunk.section_header:
        header = f"{header} {hunk.section_header}"

    lines = []
    for line in hunk:
        line_type = _LINE_TYPES.get(line.line_type)
        if line_type is None:
            # "\ No newline at end of file" and similar markers
            continue
        lines.append(
            DiffLine(
                type=line_type,
                content=line.line_type + line.value.rstrip("\r\n"),
                old_number=line.source_line_no,
                new_number=line.target_line_no,
            )
        )

    return DiffBlock(
        header=header,
        old_start_line=hunk.source_start,
        new_start_line=hunk.target_start,
        lines=lines,
    )


def _is_too_big(diff_file: DiffFile, options: RenderOptions) -> bool:
    if options.diff_max_changes is not None:
        if diff_file.added_lines + diff_file.deleted_lines > options.diff_max_changes:
            return True
    if options.diff_max_line_length is not None:
        for block in diff_file.blocks:
            if any(len(line.content) - 1 > options.diff_max_line_length for line in block.lines):
                return True
    return False


def _parse_file(patched_file: PatchedFile, options: RenderOptions) -> DiffFile:
    old_name = _strip_prefix(patched_file.source_file)
    new_name = _strip_prefix(patched_file.target_file)
    is_new = patched_file.is_added_file or old_name == DEV_NULL
    is_deleted = patched_file.is_removed_file or new_name == DEV_NULL
    if old_name == DEV_NULL or not old_name:
        old_name = new_name
    if new_name == DEV_NULL or not new_name:
        new_name = old_name

    diff_file = DiffFile(
        old_name=old_name,
        new_name=new_name,
        language=_language(new_name),
        added_lines=patched_file.added,
        deleted_lines=patched_file.removed,
        is_new=is_new,
        is_deleted=is_deleted,
        is_rename=not is_new and not is_deleted and old_name != new_name,
        is_binary=patched_file.is_binary_file,
        blocks=[_parse_hunk(hunk) for hunk in patched_file],
    )

    if _is_too_big(diff_file, options):
        diff_file.is_too_big = True
        diff_file.blocks = []

    return diff_file


def parse(diff_text: str, options: RenderOptions | None = None) -> list[DiffFile]:
    """Parse unified diff text into one DiffFile per changed file"""
    options = options or RenderOptions()
    try:
        patch_set = PatchSet(diff_text)
    except UnidiffParseError as e:
        raise ParseError(f"Could not parse diff: {e}") from e
    return [_parse_file(patched_file, options) for patched_file in patch_set]
