#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and compact serialization used by the config loader
and the CSV projection of nested transaction attributes.
"""

import json
from pathlib import Path
from typing import Any


def read_json(filepath: str | Path) -> Any:
    """
    Read data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed JSON data
    """
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def compact_json(data: Any) -> str:
    """
    Format data as a single-line JSON string suitable for a CSV cell.

    Args:
        data: Data to format

    Returns:
        JSON text without insignificant whitespace
    """
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
