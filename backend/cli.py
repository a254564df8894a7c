"""
diff2html command line - Render git diffs as standalone HTML or JSON

Usage:
    diff2html                                  # git diff -M -C HEAD, preview in browser
    diff2html -s side -o stdout -- HEAD~1      # side-by-side, printed to stdout
    diff2html -i file -f json -- changes.diff  # diff file to JSON
    git diff | diff2html -i stdin -d print     # publish to diffy.org
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any

from models.config import (
    DEFAULT_PAGE_TITLE,
    DEFAULT_TEMPLATE,
    ColorScheme,
    Configuration,
    DiffStyle,
    DiffyType,
    FormatType,
    InputType,
    OutputDestination,
    OutputFormat,
    RenderOptions,
)
from services.config_manager import ConfigManager
from services.diffy import post_to_diffy
from services.errors import Diff2HtmlError
from services.input_resolver import get_input
from services.output import get_output, preview, write_file

EMPTY_INPUT_EXIT_CODE = 3

STYLES = {
    "line": OutputFormat.LINE_BY_LINE,
    "side": OutputFormat.SIDE_BY_SIDE,
}


def build_parser(defaults: dict[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diff2html",
        description="Render unified diffs as pretty HTML or JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Arguments after -- are passed to git diff, or name the input file with -i file.",
    )

    layout = parser.add_argument_group("layout")
    layout.add_argument("-s", "--style", choices=sorted(STYLES), help="Output style")
    layout.add_argument(
        "--fct", "--file-content-toggle", dest="file_content_toggle",
        action=argparse.BooleanOptionalAction, help="Add a viewed checkbox to collapse file content",
    )
    layout.add_argument(
        "--sc", "--synchronised-scroll", dest="synchronised_scroll",
        action=argparse.BooleanOptionalAction, help="Synchronised horizontal scroll in side-by-side",
    )
    layout.add_argument(
        "--hc", "--highlight-code", dest="highlight_code",
        action=argparse.BooleanOptionalAction, help="Syntax highlight the code",
    )
    layout.add_argument(
        "--cs", "--color-scheme", dest="color_scheme",
        choices=[scheme.value for scheme in ColorScheme], help="Color scheme of the page",
    )
    layout.add_argument(
        "--su", "--summary", dest="summary",
        choices=["closed", "open", "hidden"], help="Show the files summary closed, open or not at all",
    )
    layout.add_argument(
        "--dfs", "--diff-style", dest="diff_style",
        choices=[style.value for style in DiffStyle], help="Highlight changed words or characters",
    )
    layout.add_argument("--dmc", "--diff-max-changes", dest="diff_max_changes", type=int,
                        help="Number of changed lines after which a file is not rendered")
    layout.add_argument("--dmlc", "--diff-max-line-length", dest="diff_max_line_length", type=int,
                        help="Line length after which a file is not rendered")
    layout.add_argument("--mlh", "--max-line-length-highlight", dest="max_line_length_highlight", type=int,
                        help="Line length after which changes are not highlighted")
    layout.add_argument(
        "--rnwe", "--render-nothing-when-empty", dest="render_nothing_when_empty",
        action=argparse.BooleanOptionalAction, help="Render nothing if the diff has no changes",
    )

    io = parser.add_argument_group("input and output")
    io.add_argument("-f", "--format", choices=[fmt.value for fmt in FormatType], help="Output format")
    io.add_argument("-i", "--input", choices=[kind.value for kind in InputType], help="Diff input source")
    io.add_argument("-o", "--output", choices=[dest.value for dest in OutputDestination], help="Output destination")
    io.add_argument("-d", "--diffy", choices=[kind.value for kind in DiffyType],
                    help="Upload to diffy.org and open, copy or print the link")
    io.add_argument("-F", "--file", dest="output_file", help="Write the output to this file")
    io.add_argument("--hwt", "--html-wrapper-template", dest="html_wrapper_template",
                    help="HTML template with diff2html markers")
    io.add_argument("-t", "--title", help="Page title and header")
    io.add_argument("-m", "--commit-message", dest="commit_message", help="Text shown under the header")
    io.add_argument("--ig", "--ignore", dest="ignore", action="append", help="Path to exclude from the git diff")

    parser.add_argument("extra_arguments", nargs="*", help="git diff arguments or input file")

    parser.set_defaults(**{key: value for key, value in defaults.items() if key != "server"})
    return parser


def build_options(args: argparse.Namespace) -> RenderOptions:
    """Rendering options from parsed arguments"""
    return RenderOptions(
        output_format=STYLES[args.style],
        draw_file_list=args.summary != "hidden",
        color_scheme=ColorScheme(args.color_scheme) if args.color_scheme else None,
        diff_style=DiffStyle(args.diff_style),
        diff_max_changes=args.diff_max_changes,
        diff_max_line_length=args.diff_max_line_length,
        max_line_length_highlight=args.max_line_length_highlight,
        render_nothing_when_empty=bool(args.render_nothing_when_empty),
    )


def build_configuration(args: argparse.Namespace) -> Configuration:
    """Page and pipeline configuration from parsed arguments"""
    title = args.title or DEFAULT_PAGE_TITLE
    return Configuration(
        html_wrapper_template=args.html_wrapper_template or DEFAULT_TEMPLATE,
        page_title=title,
        page_header=title,
        commit_message=args.commit_message or "",
        show_files_open=args.summary == "open",
        file_content_toggle=bool(args.file_content_toggle),
        synchronised_scroll=bool(args.synchronised_scroll),
        highlight_code=bool(args.highlight_code),
        format_type=FormatType(args.format),
        input_source=InputType(args.input),
        output_destination_type=OutputDestination(args.output),
        output_destination_file=args.output_file,
        diffy_type=DiffyType(args.diffy) if args.diffy else None,
        ignore=args.ignore or [],
    )


async def run(options: RenderOptions, config: Configuration, extra_arguments: list[str]) -> int:
    """Resolve input, then publish it or render it to the chosen destination"""
    input_text = await get_input(config.input_source, extra_arguments, config.ignore)

    if not input_text and not options.render_nothing_when_empty:
        print("[diff2html] The input is empty. Try again.", file=sys.stderr)
        return EMPTY_INPUT_EXIT_CODE

    if config.diffy_type is not None:
        await post_to_diffy(input_text, config.diffy_type)
        return 0

    output = get_output(options, config, input_text)

    if config.output_destination_file:
        write_file(config.output_destination_file, output)
    elif config.output_destination_type == OutputDestination.PREVIEW:
        preview(output, config.format_type)
    else:
        print(output)

    return 0


def main(argv: list[str] | None = None) -> int:
    defaults = ConfigManager.get_instance().get_config()
    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    # stored defaults bypass the argparse choices
    try:
        options = build_options(args)
        config = build_configuration(args)
    except (KeyError, ValueError) as e:
        parser.error(f"invalid configuration value {e}")

    try:
        return asyncio.run(run(options, config, args.extra_arguments))
    except Diff2HtmlError as e:
        print(f"[diff2html] {e.message}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
