#!/usr/bin/env python3
"""
Stage Results

Standardized result structure returned by the export and import stages.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class StageResult:
    """Standardized result structure from a pipeline stage."""

    stage: str
    success: bool
    items_processed: int = 0
    outputs: list[Path] = field(default_factory=list)
    execution_time_seconds: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    error_message: str | None = None

    @classmethod
    def skipped(cls, stage: str, reason: str) -> "StageResult":
        """Result for a stage that was intentionally not run."""
        return cls(stage=stage, success=True, metadata={"skipped": True, "reason": reason})

    @property
    def was_skipped(self) -> bool:
        return bool(self.metadata.get("skipped"))

    def summary_line(self) -> str:
        """One-line human readable summary."""
        if self.was_skipped:
            return f"{self.stage}: skipped ({self.metadata.get('reason', '')})"
        if not self.success:
            return f"{self.stage}: failed - {self.error_message}"

        line = f"{self.stage}: {self.items_processed} transactions"
        if self.execution_time_seconds is not None:
            line += f" in {self.execution_time_seconds:.1f}s"
        return line
