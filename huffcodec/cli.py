"""
cli.py

Command line entry point: compress one file and print the size summary.
"""


import argparse
import sys
from typing import List, Optional

from .codecs import HuffmanCodecFile
from .errors import HuffmanError
from .logger import Logger
from .settings import DEFAULT_BINARY_OUTPUT, DEFAULT_TEXT_OUTPUT


class UsageParser(argparse.ArgumentParser):
    """Prints the usage to standard output and exits with code 1 on bad arguments."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = UsageParser(prog=prog, description="Compress a file with static Huffman coding.")
    parser.add_argument("input_file", help="Path to the file to compress")
    parser.add_argument("--binary-output", default=DEFAULT_BINARY_OUTPUT,
                        help="Path of the packed bitstream (default: %(default)s)")
    parser.add_argument("--text-output", default=DEFAULT_TEXT_OUTPUT,
                        help="Path of the bitstream written as '0'/'1' characters (default: %(default)s)")
    parser.add_argument("--log-file", default=None, help="Save the recorded logs to this file")
    parser.add_argument("--plot", default=None, help="Save a code length plot to this image file")
    parser.add_argument("--verbose", action="store_true", help="Display info logs while compressing")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = Logger()
    logger.display_info = args.verbose

    codec = HuffmanCodecFile()
    exit_code = 0
    try:
        report = codec.compress(args.input_file, args.binary_output, args.text_output, logger=logger)
        for line in report.summary_lines():
            print(line)
    except HuffmanError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        exit_code = 1

    if exit_code == 0 and args.plot is not None:
        from .performance_display import PerformanceDisplay
        try:
            PerformanceDisplay(logger.logs).generate_code_length_plot(save_path=args.plot)
        except OSError as e:
            logger.error(f"Could not save plot {args.plot}: {e}")
            print(f"Error: could not save plot {args.plot}: {e}")
            exit_code = 1

    if args.log_file is not None:
        try:
            logger.save(args.log_file)
        except OSError as e:
            print(f"Error: could not save logs to {args.log_file}: {e}")
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
