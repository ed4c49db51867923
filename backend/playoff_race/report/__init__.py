"""
Markdown rendering of game night analyses.
"""

from .generate import MarkdownGenerator

__all__ = ["MarkdownGenerator"]
