from __future__ import annotations
import logging
from dataclasses import dataclass

from .geom import Pt, PointCloud, centroid
from .orientation import ClassificationCounts, OrientationReport, classify, report_percentages
from .pointio import DEFAULT_CONVENTION, AxisConvention, PathLike, load_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Analysis:
    report: OrientationReport
    center: Pt
    counts: ClassificationCounts
    container_points: int


def analyze_clouds(roi: PointCloud, container: PointCloud, roi_source: str | None = None,
                   container_source: str | None = None) -> Analysis:
    """
    Повний прохід по готових хмарах:
      - центроїд хмари матки (containing region);
      - класифікація кожної точки плаценти по трьох осях;
      - відсотки.
    """
    center = centroid(container, source=container_source)
    logger.debug(f"Centroid of {len(container)} points: {center}")
    counts = classify(roi, center)
    return Analysis(
        report=report_percentages(counts, source=roi_source),
        center=center,
        counts=counts,
        container_points=len(container),
    )


def analyze(roi_path: PathLike, container_path: PathLike,
            convention: AxisConvention = DEFAULT_CONVENTION) -> Analysis:
    """Читає обидва файли однією конвенцією і рахує звіт."""
    roi, container = load_pair(roi_path, container_path, convention)
    return analyze_clouds(roi, container, roi_source=str(roi_path),
                          container_source=str(container_path))
