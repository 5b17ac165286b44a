import argparse
import json
import logging
import sys
import tomllib

from .configuration import ShapeConfiguration
from .iterate import iterate_1d, iterate_2d, iterate_3d, iterate_4d
from .log import setup_logging
from .shape import ShapeError, infer_shape, shape_length, to_shape

logger = logging.getLogger(__name__)


def _iterate_rank1(shape, callback):
    iterate_1d(shape[0], callback)


_ITERATORS = {
    1: _iterate_rank1,
    2: iterate_2d,
    3: iterate_3d,
    4: iterate_4d,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="tensorshape",
        description="Inspect, convert and enumerate tensor shapes.",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        default=None,
        help="Path to a TOML configuration file with a [tensorshape] table",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level regardless of the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    infer = subparsers.add_parser("infer", help="Infer the shape of a JSON nested array")
    infer.add_argument("data", help='Nested array as JSON, e.g. "[[1, 2], [3, 4]]"')

    convert = subparsers.add_parser("convert", help="Convert a shape to another rank")
    convert.add_argument("dims", type=int, nargs="+", help="Source dimension sizes")
    convert.add_argument(
        "-r",
        "--rank",
        type=int,
        default=None,
        choices=range(1, 7),
        help="Target rank (default: configured default_rank)",
    )

    indices = subparsers.add_parser("indices", help="List every index of a rank 1-4 shape")
    indices.add_argument("dims", type=int, nargs="+", help="Dimension sizes")

    return parser.parse_args(argv)


def _format(values) -> str:
    return " ".join(str(v) for v in values)


def run(args, config: ShapeConfiguration, out=None) -> None:
    """
    Execute one parsed command, writing results to ``out`` (stdout by default).

    Raises:
        ShapeError: If the dimensions do not form a usable shape.
        json.JSONDecodeError: If ``infer`` receives invalid JSON.
    """
    out = out or sys.stdout

    if args.command == "infer":
        shape = infer_shape(json.loads(args.data))
        print(f"shape: {_format(shape)}", file=out)
        print(f"length: {shape_length(shape)}", file=out)

    elif args.command == "convert":
        rank = args.rank if args.rank is not None else config.default_rank
        print(_format(to_shape(args.dims, rank)), file=out)

    elif args.command == "indices":
        def emit(*index):
            print(_format(index), file=out)

        iterate = _ITERATORS.get(len(args.dims))
        if iterate is None:
            raise ShapeError(f"Index listing supports ranks 1 to 4, got {len(args.dims)}")
        iterate(args.dims, emit)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        if args.config is not None:
            config = ShapeConfiguration.load(args.config)
        else:
            config = ShapeConfiguration()
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValueError, TypeError) as e:
        setup_logging("DEBUG" if args.verbose else "INFO")
        logger.error(f"Invalid configuration {args.config}: {e}")
        return 1

    setup_logging("DEBUG" if args.verbose else config.log_level)

    try:
        run(args, config)
    except (ShapeError, json.JSONDecodeError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
