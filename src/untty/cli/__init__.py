"""Command-line interface for untty."""

from untty.cli.app import create_app
from untty.cli.main import main

__all__ = ["create_app", "main"]
