"""Lintscope: rule-based pull request analysis and review feedback."""

__version__ = "0.1.0"
