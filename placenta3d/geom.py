from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import EmptyCloud

# x: left -> right, y: anterior -> posterior, z: inferior -> superior
AXES: Tuple[str, str, str] = ("x", "y", "z")

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

PointCloud = Tuple[Pt, ...]

def centroid(points: Iterable[Pt], source: str | None = None) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise EmptyCloud(source)
    return Pt(xs / n, ys / n, zs / n)

def as_array(points: Sequence[Pt]) -> np.ndarray:
    """Хмара як масив (n, 3) у порядку осей x, y, z."""
    if not points:
        return np.empty((0, 3), dtype=float)
    return np.array([(p.x, p.y, p.z) for p in points], dtype=float)
