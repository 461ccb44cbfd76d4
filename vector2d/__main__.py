"""Entry point for vector2d package."""

import argparse
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from vector2d.schemas import parse_point_json
from vector2d.vector import Vector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="vector2d - evaluate a 2D vector",
        prog="vector2d",
    )
    parser.add_argument("x", type=float, nargs="?", default=None, help="x component (default: 0)")
    parser.add_argument("y", type=float, nargs="?", default=None, help="y component (default: 0)")
    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help='Read the vector from a JSON object, e.g. \'{"x": 1, "y": 2}\'',
    )
    parser.add_argument("--rotate", type=float, default=None, help="Rotate by this angle")
    parser.add_argument(
        "--degrees",
        action="store_true",
        help="Angles given and printed in degrees instead of radians",
    )
    parser.add_argument("--limit", type=float, default=None, help="Clamp the length")
    parser.add_argument("--unit", action="store_true", help="Normalize to length 1")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the vector2d CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.json is not None:
        if args.x is not None or args.y is not None:
            parser.error("--json cannot be combined with positional x/y components")
        try:
            vec = parse_point_json(args.json)
        except ValidationError as exc:
            logger.debug("Rejected --json payload: %s", exc)
            parser.error(f"invalid --json point: {exc.error_count()} validation error(s)")
    else:
        x = 0.0 if args.x is None else args.x
        y = 0.0 if args.y is None else args.y
        vec = Vector(x, y)

    if args.rotate is not None:
        vec.rotate(args.rotate, degrees=args.degrees)
    if args.limit is not None:
        vec.limit(args.limit)
    if args.unit:
        vec.unit()

    vec.log(logging.DEBUG)
    print(vec)
    print(f"length: {vec.length()}")
    print(f"angle: {vec.angle(degrees=args.degrees)}")


if __name__ == "__main__":
    main()
