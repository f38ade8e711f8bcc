import argparse
import logging
import sys
from collections import deque
from typing import Optional

from blendah import RasterImage
from blendah.api.color import parse_color
from blendah.composite import composite
from blendah.constants import BlendMode
from blendah.exceptions import Error
from blendah.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="blendah", description="blendah command line utility."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    composite_parser = subparsers.add_parser(
        "composite", help="Blend image layers into one image"
    )
    composite_parser.add_argument(
        "mode",
        choices=[mode.value for mode in BlendMode],
        help="Blend mode",
    )
    composite_parser.add_argument(
        "input_files",
        nargs="+",
        metavar="input_file",
        help="Layer images, topmost first",
    )
    composite_parser.add_argument(
        "-o", "--output", required=True, help="Output image file"
    )
    composite_parser.add_argument(
        "--background",
        type=parse_color,
        default=None,
        help="Add a solid bottom layer, e.g. 255,255,255 or 0.5,0.5,0.5,1",
    )

    show_parser = subparsers.add_parser("show", help="Show the image content")
    show_parser.add_argument("input_file", help="Input image file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("blendah")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    try:
        if args.command == "composite":
            layers = deque(RasterImage.open(name) for name in args.input_files)
            if args.background is not None and layers:
                bottom = layers[-1]
                layers.append(
                    RasterImage.new(bottom.width, bottom.height, args.background)
                )
            image = composite(layers, args.mode)
            try:
                image.save(args.output)
            except ValueError as e:
                # Unknown output format.
                logger.error(str(e))
                return 1
            logger.info("Saved %s" % args.output)

        elif args.command == "show":
            pprint(RasterImage.open(args.input_file))

    except (Error, OSError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    sys.exit(main())
