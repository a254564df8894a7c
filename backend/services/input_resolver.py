"""
Input Resolver - Obtain raw unified diff text from a file, stdin or git
"""

from __future__ import annotations

import asyncio
import sys

from models.config import InputType
from services.errors import ExecutionError, ReadError
from services.git_args import generate_git_diff_args

GIT_EXECUTABLE = "git"


def decode_output(data: bytes) -> str:
    """Decode diff bytes the same way for every input source"""
    return data.decode("utf-8", errors="replace")


def read_file(path: str) -> str:
    """Read a text file, raising ReadError on any failure"""
    try:
        with open(path, "rb") as f:
            return decode_output(f.read())
    except OSError as e:
        raise ReadError(f"Could not read '{path}': {e}", path=path) from e


def _read_stdin() -> str:
    stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        return sys.stdin.read()
    return decode_output(stream.read())


async def read_stdin() -> str:
    """Read standard input until the stream ends"""
    try:
        return await asyncio.to_thread(_read_stdin)
    except (OSError, ValueError) as e:
        raise ReadError(f"Could not read from stdin: {e}") from e


async def execute(executable: str, args: list[str]) -> str:
    """Run a command and return its stdout, raising ExecutionError on failure"""
    command = " ".join([executable, *args])
    try:
        process = await asyncio.create_subprocess_exec(
            executable,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ExecutionError(f"Could not run '{command}': {e}", command=command) from e

    stdout, stderr = await process.communicate()
    error_text = decode_output(stderr).strip()
    if process.returncode != 0:
        raise ExecutionError(
            f"'{command}' exited with status {process.returncode}: {error_text}",
            command=command,
            returncode=process.returncode,
            stderr=error_text,
        )
    return decode_output(stdout)


async def run_git_diff(git_args: list[str], ignore: list[str]) -> str:
    return await execute(GIT_EXECUTABLE, generate_git_diff_args(git_args, ignore))


async def get_input(input_type: InputType, input_args: list[str], ignore: list[str]) -> str:
    """
    Get unified diff input from type
    input_type: file, stdin or command
    input_args: file path for `file`, extra git arguments for `command`
    ignore: paths excluded from the git diff
    """
    if input_type == InputType.FILE:
        if not input_args:
            raise ReadError("No input file given")
        return await asyncio.to_thread(read_file, input_args[0])
    elif input_type == InputType.STDIN:
        return await read_stdin()
    elif input_type == InputType.COMMAND:
        return await run_git_diff(input_args, ignore)
    else:
        raise ValueError(f"Unsupported input type: {input_type}")
