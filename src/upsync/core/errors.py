#!/usr/bin/env python3
"""
Sync Error Taxonomy

A single exception type tagged with a closed set of kinds. Stages decide how
to react by inspecting the kind rather than the exception class.
"""

from enum import Enum


class SyncErrorKind(Enum):
    """Kinds of failure a sync stage can surface."""

    INITIALIZATION = "initialization"
    PARSE = "parse"
    UPLOAD = "upload"


class SyncError(Exception):
    """Failure raised by a sync stage, tagged with its kind."""

    def __init__(self, kind: SyncErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def is_fatal(self) -> bool:
        """Initialization failures end the process."""
        return self.kind is SyncErrorKind.INITIALIZATION

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
