"""
placenta3d — розташування плаценти відносно центроїда матки.
Дві хмари вокселів -> центроїд матки -> шість відсотків (ліво/право, низ/верх, перед/зад).
"""

__version__ = "0.1.0"

from placenta3d.errors import (
    OrientationError, SourceNotFound, MalformedRecord, EmptyCloud, EmptyRegionOfInterest,
)
from placenta3d.geom import Pt, PointCloud, centroid, as_array
from placenta3d.pointio import AxisConvention, load_point_cloud, load_pair, parse_lines
from placenta3d.orientation import (
    ClassificationCounts, OrientationReport, classify, report_percentages,
)
from placenta3d.pipeline import Analysis, analyze, analyze_clouds

__all__ = [
    "OrientationError", "SourceNotFound", "MalformedRecord", "EmptyCloud", "EmptyRegionOfInterest",
    "Pt", "PointCloud", "centroid", "as_array",
    "AxisConvention", "load_point_cloud", "load_pair", "parse_lines",
    "ClassificationCounts", "OrientationReport", "classify", "report_percentages",
    "Analysis", "analyze", "analyze_clouds", "__version__",
]
