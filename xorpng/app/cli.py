from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import BinaryIO, List, Optional, TextIO

from ..errors import TerminalOutputError, UsageError, XorPngError
from ..imaging import encode_image, generate_noise, load_image, save_image, xor_buffers
from ..imaging.codec import DEFAULT_CODEC
from .config import CliConfig, Mode
from .diagnostics import configure_logging

GENERATED_PREFIX = "k"
DEFAULT_PROG = "xorpng"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    prog = os.path.basename(sys.argv[0])
    if not prog or prog == "__main__.py":
        prog = DEFAULT_PROG
    parser = argparse.ArgumentParser(
        prog=prog,
        usage=f"{prog} [-i1 <first.png> -i2 <second.png>] [-g size -n count] > output.png",
        description="XORs two PNG images pixel by pixel or generates random noise images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i1", "--i1", dest="image1", default="", metavar="PATH", help="Path to first PNG image")
    parser.add_argument("-i2", "--i2", dest="image2", default="", metavar="PATH", help="Path to second PNG image")
    parser.add_argument(
        "-g", dest="gen_size", type=int, default=0, metavar="SIZE",
        help="Generate random noise image with specified size",
    )
    parser.add_argument(
        "-n", dest="count", type=int, default=1, metavar="COUNT",
        help="Number of random images to generate",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.epilog = (
        "Examples:\n"
        "  XOR two images:\n"
        f"    {prog} -i1 image1.png -i2 image2.png > result.png\n"
        "  Generate multiple random noise images:\n"
        f"    {prog} -g 480 -n 5"
    )
    return parser


def generated_filename(index: int) -> str:
    return f"{GENERATED_PREFIX}-{index}{DEFAULT_CODEC.extension}"


def generate_images(size: int, count: int, out: Optional[TextIO] = None) -> List[str]:
    out = out or sys.stdout
    written: List[str] = []
    for index in range(1, count + 1):
        filename = generated_filename(index)
        save_image(generate_noise(size), filename)
        abs_path = os.path.abspath(filename)
        print(abs_path, file=out)
        written.append(abs_path)
    logger.info("Generated %d noise image(s) of %dx%d", len(written), size, size)
    return written


def ensure_not_terminal(stream: TextIO) -> None:
    if stream.isatty():
        raise TerminalOutputError("Output needs to be piped to a file")


def xor_images(image1: str, image2: str, stdout: Optional[TextIO] = None) -> None:
    stdout = stdout or sys.stdout
    ensure_not_terminal(stdout)
    first = load_image(image1)
    second = load_image(image2)
    result = xor_buffers(first, second)
    sink: BinaryIO = stdout.buffer
    encode_image(result, sink)
    sink.flush()
    logger.info("Wrote %dx%d XOR of %s and %s", result.width, result.height, image1, image2)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    config = CliConfig.from_namespace(parser.parse_args(argv))
    configure_logging(config.verbose)
    mode = config.mode
    try:
        if mode is None:
            raise UsageError("XOR mode requires both -i1 and -i2")
        if mode is Mode.GENERATE:
            generate_images(config.gen_size, config.count)
        else:
            xor_images(config.image1, config.image2)
    except UsageError as exc:
        parser.print_help(sys.stderr)
        print(str(exc), file=sys.stderr)
        return 1
    except XorPngError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
