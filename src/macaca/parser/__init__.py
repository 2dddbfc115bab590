# src/macaca/parser/__init__.py
"""
Parser module for the Macaca language.
"""

from .parser import Parser, parse_source, precedences

__all__ = ["Parser", "parse_source", "precedences"]
