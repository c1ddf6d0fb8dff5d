#!/usr/bin/env python3
"""
Lingvo command line front end.

Usage:
    lingvo <file.lingvo> [--tokens] [--no-ast] [--log-level LEVEL]
    lingvo --version

Options:
    --tokens             Print the token stream, one token per line
    --no-ast             Do not print the syntax tree
    --log-level LEVEL    Logging level (default: WARNING)

Exit status is 0 on success, 1 on a syntax error and 2 when the input file
cannot be read.
"""

import argparse
import logging
import sys

from . import __version__
from .lexer import Lexer
from .parser import try_parse
from .printer import dump

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_IO_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lingvo", description="Lingvo scanner and parser")
    parser.add_argument('--version', action='version', version=f"lingvo {__version__}")
    parser.add_argument('input', help='Input Lingvo source file')
    parser.add_argument('--tokens', action='store_true', help='Print the token stream')
    parser.add_argument('--no-ast', action='store_true', help='Do not print the syntax tree')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level')
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with open(args.input, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"error: cannot read {args.input}: {e.strerror}", file=sys.stderr)
        return EXIT_IO_ERROR

    lexer = Lexer(source, args.input)
    tokens = lexer.tokenize()

    for warning in lexer.get_diagnostics():
        logger.warning("%s: %s [%s]", warning.location, warning.message, warning.code)

    if args.tokens:
        for token in tokens:
            print(token)

    result = try_parse(tokens, args.input)
    if not result.ok:
        error = result.error
        print(f"error: {error.message}", file=sys.stderr)
        print(f"  at token {error.position}: {error.token}", file=sys.stderr)
        print(str(error), end="", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if not args.no_ast:
        print(dump(result.program))

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
