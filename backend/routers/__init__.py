"""Routers module - FastAPI route handlers"""

from . import render, config

__all__ = ["render", "config"]
