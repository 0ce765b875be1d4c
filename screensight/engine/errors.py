"""Engine error types."""

from __future__ import annotations


class AnalysisStageError(RuntimeError):
    """An analysis stage failed unexpectedly.

    Carries the failing stage name so the caller can decide whether to drop
    that stage's contribution or abort the whole image.
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage
        self.message = message
