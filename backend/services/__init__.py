"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_parser import parse
from .diff_renderer import html
from .diffy import DiffyClient, post_to_diffy
from .git_args import generate_git_diff_args
from .input_resolver import get_input
from .output import get_output, preview
from .template import prepare_html

__all__ = [
    "ConfigManager",
    "parse",
    "html",
    "DiffyClient",
    "post_to_diffy",
    "generate_git_diff_args",
    "get_input",
    "get_output",
    "preview",
    "prepare_html",
]
