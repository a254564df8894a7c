"""Argument vector for the `git diff` invocation"""

from __future__ import annotations

DEFAULT_ARGS = ["-M", "-C", "HEAD"]


def generate_git_diff_args(git_args: list[str], ignore: list[str]) -> list[str]:
    """Build `git` arguments from user arguments and excluded paths.

    Defaults (detect renames and copies, diff against HEAD) only apply when no
    arguments were given at all.
    """
    diff_args = ["diff"]

    if "--no-color" not in git_args:
        diff_args.append("--no-color")

    if len(git_args) == 0:
        diff_args.extend(DEFAULT_ARGS)

    diff_args.extend(git_args)

    if ignore:
        if "--" not in git_args:
            diff_args.append("--")
        diff_args.extend(f":(exclude){path}" for path in ignore)

    return diff_args
