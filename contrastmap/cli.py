"""
Command-line entry point.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from contrastmap.core.config import Backend, ContrastMapConfig
from contrastmap.core.pipeline import ContrastMapper
from contrastmap.display.gray_mapping import OutOfRangeError
from contrastmap.utils.image_io import ImageIOError

logger = logging.getLogger("contrastmap")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contrastmap",
        description="Visualize per-pixel WCAG contrast against the surrounding pixels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write contrast-ratio-screenshot.png next to the input:
  contrastmap screenshot.png

  # Wider neighborhood, whole-image evaluation, explicit output:
  contrastmap screenshot.png --radius 2 --backend vectorized -o map.png
        """,
    )
    parser.add_argument("input", help="Image file to analyze")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: 'contrast-ratio-' + input name, next to the input)",
    )
    parser.add_argument("--radius", type=int, default=1, help="Neighborhood radius in pixels (default: 1)")
    parser.add_argument(
        "--backend",
        choices=[backend.value for backend in Backend],
        default=Backend.REFERENCE.value,
        help="Evaluation backend (default: reference)",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = ContrastMapConfig(
        radius=args.radius,
        backend=Backend(args.backend),
        show_progress=not args.no_progress,
    )

    try:
        mapper = ContrastMapper(config)
        mapper.process_file(args.input, args.output)
    except ImageIOError as e:
        logger.error("%s", e)
        sys.exit(1)
    except OutOfRangeError as e:
        logger.error("Contrast computation failed: %s", e)
        sys.exit(1)
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        sys.exit(1)
    except MemoryError:
        logger.error("Out of memory while mapping %s (radius %d)", args.input, args.radius)
        sys.exit(1)

    return 0


if __name__ == "__main__":
    sys.exit(main())
