"""
Error kinds raised by the diff pipeline.

Every error carries a human-readable message and the process exit code the
command-line entry point should finish with.
"""

from __future__ import annotations


class Diff2HtmlError(Exception):
    """Base class for all pipeline errors"""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ReadError(Diff2HtmlError):
    """A diff file or standard input could not be read"""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)


class ExecutionError(Diff2HtmlError):
    """The diff subprocess could not be spawned or exited non-zero"""

    def __init__(self, message: str, command: str = "", returncode: int | None = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class TemplateNotFoundError(Diff2HtmlError):
    """The configured HTML wrapper template does not exist"""

    exit_code = 4

    def __init__(self, template_path: str):
        self.template_path = template_path
        super().__init__(f"Template ('{template_path}') not found!")


class ParseError(Diff2HtmlError):
    """The input is not a unified diff"""


class RemoteError(Diff2HtmlError):
    """The paste service returned an error or an unrecognized body"""
