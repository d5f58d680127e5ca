"""ScriptPress CLI package."""

from .main import app, main

__all__ = ["app", "main"]
