"""
TCP connect-scan of one host over an inclusive port range.
"""

from .cli import main

__all__ = ["main"]
