# placenta3d/pointio.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .config import DEFAULT_COLUMNS, DEFAULT_DELIMITER
from .errors import MalformedRecord, SourceNotFound
from .geom import AXES, Pt, PointCloud

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# знак, цілі, необов'язкова дробова частина; без експонент і "_"
DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)


@dataclass(frozen=True)
class AxisConvention:
    """
    Як рядок файлу перетворюється на Pt.
    columns[i] — ім'я осі ("x", "y" або "z") у колонці i.
    Одна й та сама конвенція читає обидві хмари одного запуску.
    """
    columns: str = DEFAULT_COLUMNS
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self):
        if sorted(self.columns) != sorted(AXES):
            raise ValueError(
                f"Invalid columns: {self.columns!r}. "
                f"Must be a permutation of {''.join(AXES)!r}"
            )
        if not self.delimiter:
            raise ValueError("delimiter must not be empty")

    def parse_line(self, line: str) -> Pt:
        """Рядок -> Pt. Кидає ValueError з причиною; контекст додає читач."""
        fields = line.split(self.delimiter)
        if len(fields) != 3:
            raise ValueError(f"expected 3 fields, got {len(fields)}")
        coords = {}
        for axis, raw in zip(self.columns, fields):
            text = raw.strip()
            if not DECIMAL_RE.fullmatch(text):
                raise ValueError(f"not a decimal number: {text!r}")
            coords[axis] = float(text)
        return Pt(**coords)

    def format_point(self, p: Pt) -> str:
        return self.delimiter.join(f"{getattr(p, axis):.3f}" for axis in self.columns)


DEFAULT_CONVENTION = AxisConvention()


def parse_lines(lines: Iterable[Union[str, bytes]], convention: AxisConvention = DEFAULT_CONVENTION,
                source: str = "<lines>") -> PointCloud:
    """
    Розбір рядків у хмару; порядок точок = порядок рядків.
    Рядки bytes декодуються як UTF-8 по одному, щоб помилка мала номер рядка.
    Порожні рядки дозволені лише в кінці; на першому зіпсованому зупиняємось.
    """
    out: List[Pt] = []
    blank_no = 0  # перший порожній рядок після останньої точки
    for line_no, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedRecord(source, line_no, line.decode("utf-8", "replace").rstrip("\r\n"),
                                      f"not valid UTF-8 ({e.reason})") from None
        text = line.rstrip("\r\n")
        if not text.strip():
            blank_no = blank_no or line_no
            continue
        if blank_no:
            raise MalformedRecord(source, blank_no, "", "empty line")
        try:
            out.append(convention.parse_line(text))
        except ValueError as e:
            raise MalformedRecord(source, line_no, text, str(e)) from None
    return tuple(out)


def load_point_cloud(path: PathLike, convention: AxisConvention = DEFAULT_CONVENTION) -> PointCloud:
    p = Path(path)
    if not p.is_file():
        raise SourceNotFound(str(path))
    logger.info(f"Reading points from: {p}")
    try:
        f = open(p, "rb")
    except OSError as e:
        raise SourceNotFound(str(path), reason=f"not readable ({e.strerror or e})") from None
    with f:
        cloud = parse_lines(f, convention, source=str(path))
    logger.info(f"{len(cloud)} points read from {p}")
    return cloud


def load_pair(roi_path: PathLike, container_path: PathLike,
              convention: AxisConvention = DEFAULT_CONVENTION) -> Tuple[PointCloud, PointCloud]:
    """Обидві хмари через одну конвенцію: (region of interest, containing region)."""
    return (load_point_cloud(roi_path, convention),
            load_point_cloud(container_path, convention))


def write_point_cloud(path: PathLike, points: Iterable[Pt],
                      convention: AxisConvention = DEFAULT_CONVENTION) -> None:
    """Запис у тому ж форматі, що й читання (для прикладів і тестів)."""
    lines = [convention.format_point(p) for p in points]
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
        if lines:
            f.write("\n")
