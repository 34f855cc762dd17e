"""
image-square-wizard command line entry point.

Pads an image to a square canvas. By default the padding color is the
image's dominant color; ``--rcb`` overrides it with a manual color or
``transparent``.
"""

from typing import List, Optional
import argparse
import logging
import sys

from ISW_Libs import __version__
from ISW_Libs.ColorLib.color_models import BackgroundMode
from ISW_Libs.ColorLib.color_spec import parse_color_spec
from ISW_Libs.CanvasLib.output_formats import validate_output_request
from ISW_Libs.CanvasLib.square_pipeline import square_image
from ISW_Libs.constants import LOG_FORMAT, PROGRAM_NAME
from ISW_Libs.errors import SquareWizardError

logger = logging.getLogger(PROGRAM_NAME)

DESCRIPTION = (
    "image-square-wizard pads images to a square canvas.\n"
    "By default it probes the dominant color and uses it as the padding color.\n"
    "Override the padding color with --rcb."
)

COLOR_FORMATS_HELP = (
    "Supported color formats:\n"
    "  - 'transparent' for an alpha background\n"
    "  - #rgb, #rrggbb, #rgba, #rrggbbaa\n"
    "  - r,g,b or r,g,b,a with components between 0-255"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=DESCRIPTION,
        epilog=COLOR_FORMATS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="input image path")
    parser.add_argument("output", help="output image path")
    parser.add_argument(
        "-r", "--rcb",
        metavar="SPEC",
        help="set resizer canvas background; use 'transparent' or a color",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log processing details to stderr")
    parser.add_argument("--version", action="version", version=f"{PROGRAM_NAME} {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run(args: argparse.Namespace) -> None:
    mode = BackgroundMode.auto()
    if args.rcb is not None:
        mode = parse_color_spec(args.rcb).to_background_mode()

    validate_output_request(args.input, args.output, mode)

    result = square_image(args.input, args.output, mode)
    logger.info(
        f"Wrote {args.output}: {result.layout.target_size}x{result.layout.target_size}, "
        f"background {result.background.as_fill()}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        run(args)
    except SquareWizardError as exc:
        print(f"{PROGRAM_NAME}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
