"""
Command Line Interface Package

Provides the `upsync` entry point. There is a single command with one flag,
--overwrite, which forces a fresh download from Up before importing.
"""

from .main import main

__all__ = ["main"]
