"""Command line interface for the Podio bridge"""

from .main import main

__all__ = ["main"]
