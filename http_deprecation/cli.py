#!/usr/bin/env python

"""
CLI interface to the deprecation check.

Reads a HTTP response header block (as shown by `curl -sI`, for example)
from a file or stdin and reports whether it marks the resource as
deprecated.
"""

from argparse import ArgumentParser
from configparser import ConfigParser
import logging
import sys
from typing import BinaryIO, List

from http_deprecation import __version__
from http_deprecation.formatter import available_formatters, find_formatter
from http_deprecation.message import deprecation
from http_deprecation.speak import NoteCollector
from http_deprecation.type import RawHeaderListType

log = logging.getLogger(__name__)

CONFIG_SECTION = "http-deprecation"

# 1 is left to unexpected failures; 2 is also what argparse uses for usage errors
EXIT_NOT_DEPRECATED = 0
EXIT_ERROR = 2
EXIT_DEPRECATED = 3

EPILOG = f"""\
exit status: {EXIT_NOT_DEPRECATED} if the response isn't deprecated, {EXIT_DEPRECATED} if it
is, {EXIT_ERROR} if the input can't be read or the arguments are wrong."""


def parse_header_block(block: bytes) -> RawHeaderListType:
    """
    Split a raw header block into (name, value) tuples.

    A leading status line is skipped, folded lines are joined and the block
    ends at the first empty line. Lines without a colon are ignored.
    """
    headers = []  # type: RawHeaderListType
    lines = block.replace(b"\r\n", b"\n").split(b"\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    if lines and lines[0].startswith(b"HTTP/"):
        lines.pop(0)
    for line in lines:
        if not line.strip():
            break
        if line[:1] in (b" ", b"\t"):
            if headers:
                name, value = headers[-1]
                headers[-1] = (name, value + b" " + line.strip())
            continue
        try:
            name, value = line.split(b":", 1)
        except ValueError:
            log.warning("Ignoring header line without a colon: %r", line)
            continue
        headers.append((name.strip(), value.strip()))
    return headers


def load_config(config_file: str = None) -> ConfigParser:
    config_parser = ConfigParser()
    config_parser.read_dict(
        {
            CONFIG_SECTION: {
                "output_format": "text",
                "show_notes": "False",
                "log_level": "WARNING",
            }
        }
    )
    if config_file:
        with open(config_file, encoding="utf-8") as config_fh:
            config_parser.read_file(config_fh)
    return config_parser


def main(argv: List[str] = None, stdin: BinaryIO = None) -> int:
    parser = ArgumentParser(
        description="Check a HTTP response's headers for deprecation information.",
        epilog=EPILOG,
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="file containing the response headers (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=available_formatters(),
        help="output format",
    )
    parser.add_argument(
        "-c", "--config", action="store", dest="config_file", help="configuration file"
    )
    parser.add_argument(
        "-n", "--notes", action="store_true", dest="show_notes", help="show notes"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", dest="verbose", help="explain notes"
    )
    parser.add_argument(
        "--debug", action="store_true", dest="debug", help="log debugging output"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    config_parser = load_config(args.config_file)
    config = config_parser[CONFIG_SECTION]
    if args.output_format:
        config["output_format"] = args.output_format
    if args.show_notes or args.verbose:
        config["show_notes"] = "True"

    log_level = "DEBUG" if args.debug else config.get("log_level", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING))

    formatter = find_formatter(config.get("output_format", "text"))(
        config,
        output,
        {"tty_out": sys.stdout.isatty(), "verbose": args.verbose},
    )

    if args.input:
        try:
            with open(args.input, "rb") as input_fh:
                block = input_fh.read()
        except OSError as why:
            log.debug("Can't read %s: %s", args.input, why)
            formatter.error_output(f"Can't read {args.input}: {why.strerror or why}")
            return EXIT_ERROR
    else:
        block = (stdin or sys.stdin.buffer).read()

    collector = NoteCollector()
    result = deprecation(parse_header_block(block), collector)
    formatter.finish_output(result, collector.notes)
    return EXIT_NOT_DEPRECATED if result is None else EXIT_DEPRECATED


def output(out: str) -> None:
    sys.stdout.write(out)


if __name__ == "__main__":
    sys.exit(main())
