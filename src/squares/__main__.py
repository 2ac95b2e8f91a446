import argparse
import logging
import sys

from .qrcode import try_encode
from .terminal import MARGIN_WIDTH, render_ansi, render_numbers, render_text


def non_negative(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


parser = argparse.ArgumentParser(
    prog="squares",
    description="Print a QR code of given content",
)
parser.add_argument(
    "--format",
    type=str,
    default="ansi",
    choices=["ansi", "text", "numbers"],
    help="Output format. 'ansi' colours modules with terminal escape "
         "codes, 'text' draws them with block characters and 'numbers' "
         "prints 1 for dark and 0 for light modules."
)
parser.add_argument(
    "--margin",
    type=non_negative,
    default=MARGIN_WIDTH,
    help="Width of the light quiet zone around the symbol, in modules."
)
parser.add_argument(
    "--out",
    type=str,
    default=None,
    help="Output path. Standard output is used when omitted."
)
parser.add_argument(
    "-v", "--verbose",
    action="store_true",
    help="Log selected mode, version, error correction level and mask."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of the QR code."
)


def main(cmd_args=None):
    renderers = {
        "ansi": render_ansi,
        "text": render_text,
        "numbers": render_numbers
    }
    if cmd_args is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    matrix = try_encode(args.content)
    if matrix is None:
        return 1
    output = renderers[args.format](matrix, args.margin)
    if args.out is None:
        print(output)
    else:
        with open(args.out, "w", encoding="utf-8") as out_file:
            out_file.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
