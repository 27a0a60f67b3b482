"""Помилки аналізу. Усі вони термінальні для одного запуску."""
from __future__ import annotations


class OrientationError(Exception):
    """Base exception for orientation analysis errors."""
    pass


class SourceNotFound(OrientationError, FileNotFoundError):
    """Raised when an input point file does not exist or cannot be opened."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"point file {reason}: {self.path}")


class MalformedRecord(OrientationError, ValueError):
    """Raised when a line is not exactly three decimal fields."""

    def __init__(self, path: str, line_no: int, line: str, reason: str):
        self.path = str(path)
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"{self.path}:{line_no}: {reason}: {line!r}")


class EmptyCloud(OrientationError, ValueError):
    """Raised when a centroid is requested for a cloud with no points."""

    what = "empty point cloud"

    def __init__(self, source: str | None = None):
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"{self.what}{where}")


class EmptyRegionOfInterest(EmptyCloud):
    """Raised when percentages are requested for zero region-of-interest points."""

    what = "region of interest has no points"
