# placenta3d/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_COLUMNS, DEFAULT_CONTAINER_PATH, DEFAULT_DELIMITER, DEFAULT_ROI_PATH
from .errors import OrientationError
from .logging_config import setup_logging
from .pipeline import Analysis, analyze
from .pointio import AxisConvention

logger = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="placenta3d",
        description="Percentages of placental voxels left/right, inferior/superior and "
                    "anterior/posterior of the uterus centroid.",
    )
    parser.add_argument("placenta", nargs="?", default=DEFAULT_ROI_PATH,
                        help=f"Placenta voxel coordinates (default: {DEFAULT_ROI_PATH})")
    parser.add_argument("uterus", nargs="?", default=DEFAULT_CONTAINER_PATH,
                        help=f"Uterus voxel coordinates (default: {DEFAULT_CONTAINER_PATH})")
    parser.add_argument("--columns", default=DEFAULT_COLUMNS,
                        help=f"Axis of each input column, a permutation of 'xyz' (default: {DEFAULT_COLUMNS})")
    parser.add_argument("--delimiter", default=DEFAULT_DELIMITER,
                        help=f"Field separator (default: {DEFAULT_DELIMITER!r})")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def to_json(result: Analysis) -> str:
    data = {
        "report": {label: float(v) for label, v in result.report.as_dict().items()},
        "centroid": list(result.center),
        "placenta_points": result.counts.total,
        "uterus_points": result.container_points,
    }
    return json.dumps(data, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        convention = AxisConvention(columns=args.columns, delimiter=args.delimiter)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = analyze(args.placenta, args.uterus, convention)
    except OrientationError as e:
        logger.debug("Analysis failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.json:
        print(to_json(result))
    else:
        print(result.report.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())
