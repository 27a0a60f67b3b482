# placenta3d/orientation.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence

import numpy as np

from .config import REPORT_DECIMALS
from .errors import EmptyRegionOfInterest
from .geom import Pt, as_array

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)
QUANT = Decimal(1).scaleb(-REPORT_DECIMALS)  # 0.001

# порядок рядків у звіті
LABELS = ("Left", "Right", "Inferior", "Superior", "Anterior", "Posterior")


@dataclass(frozen=True)
class ClassificationCounts:
    """
    Лічильники точок ROI відносно центроїда.
    Точка, що збігається з центроїдом по осі, не потрапляє в жоден лічильник цієї осі.
    """
    left: int = 0        # x <  cx
    right: int = 0       # x >  cx
    anterior: int = 0    # y <  cy
    posterior: int = 0   # y >  cy
    inferior: int = 0    # z <  cz
    superior: int = 0    # z >  cz
    total: int = 0

    def ties(self) -> Dict[str, int]:
        """Скільки точок лежить рівно на центроїді по кожній осі."""
        return {
            "x": self.total - self.left - self.right,
            "y": self.total - self.anterior - self.posterior,
            "z": self.total - self.inferior - self.superior,
        }


def classify(points: Sequence[Pt], center: Pt) -> ClassificationCounts:
    arr = as_array(points)
    c = np.array([center.x, center.y, center.z], dtype=float)
    greater = (arr > c).sum(axis=0)
    lesser = (arr < c).sum(axis=0)
    counts = ClassificationCounts(
        left=int(lesser[0]), right=int(greater[0]),
        anterior=int(lesser[1]), posterior=int(greater[1]),
        inferior=int(lesser[2]), superior=int(greater[2]),
        total=len(arr),
    )
    logger.debug(f"Classification: {counts}")
    return counts


def percent(count: int, total: int) -> Decimal:
    """100 * count / total, округлено до REPORT_DECIMALS знаків, половина — від нуля."""
    return (HUNDRED * count / Decimal(total)).quantize(QUANT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrientationReport:
    left: Decimal
    right: Decimal
    inferior: Decimal
    superior: Decimal
    anterior: Decimal
    posterior: Decimal

    def as_dict(self) -> Dict[str, Decimal]:
        return {label: getattr(self, label.lower()) for label in LABELS}

    def lines(self) -> List[str]:
        return [f"{label}: {value:.{REPORT_DECIMALS}f}" for label, value in self.as_dict().items()]

    def format(self) -> str:
        return "\n".join(self.lines())


def report_percentages(counts: ClassificationCounts, source: str | None = None) -> OrientationReport:
    """
    Ліво, низ і перед рахуємо напряму; протилежний бік = 100 - перший,
    тож кожна пара дає рівно 100.000.
    """
    if counts.total == 0:
        raise EmptyRegionOfInterest(source)
    left = percent(counts.left, counts.total)
    inferior = percent(counts.inferior, counts.total)
    anterior = percent(counts.anterior, counts.total)
    return OrientationReport(
        left=left, right=HUNDRED - left,
        inferior=inferior, superior=HUNDRED - inferior,
        anterior=anterior, posterior=HUNDRED - anterior,
    )
