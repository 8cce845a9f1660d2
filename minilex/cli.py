"""
Command-line driver: scans a source text and prints each token.
"""

import argparse
import logging
import sys
from typing import List, Optional, Union

from .lexer import Lexer, LexerError, Tag

LOG = logging.getLogger("minilex")

SAMPLE_SOURCE = "if a >= 100.34"


def run(source: Union[str, bytes], filename: str = "<string>", strict: bool = False) -> int:
    """Scan ``source`` to the end, printing every token. Returns an exit code."""
    count = 0
    try:
        lexer = Lexer(source, filename, strict=strict)
        for token in lexer:
            if token.tag is Tag.EOF:
                break
            print("read token: ", token)
            count += 1
    except LexerError as e:
        print("lexer error: ", e.diagnostic.message)
        LOG.debug("%s", e)
        return 1

    LOG.debug("scanned %d tokens over %d line(s)", count, lexer.line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the minilex driver"""

    parser = argparse.ArgumentParser(
        prog="minilex",
        description="Scan source text and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    minilex                          # Scan the built-in sample
    minilex "while a != 3 { b }"     # Scan the given text
    minilex -f program.txt --strict  # Scan a file, failing on stray characters
        """
    )
    parser.add_argument('source', nargs='?', default=None,
                        help='Source text to scan (default: %r)' % SAMPLE_SOURCE)
    parser.add_argument('-f', '--file', default=None,
                        help='Read the source text from a file')
    parser.add_argument('--strict', action='store_true',
                        help='Report unrecognized characters instead of stopping')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Verbose logging')

    args = parser.parse_args(argv)

    if not LOG.handlers:
        logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    if args.verbose:
        logging.getLogger("minilex").setLevel(logging.DEBUG)

    if args.file and args.source is not None:
        parser.error("give either SOURCE or --file, not both")

    if args.file:
        try:
            with open(args.file, 'rb') as f:
                source = f.read()
        except OSError as e:
            LOG.error("Cannot read %s: %s", args.file, e)
            return 2
        filename = args.file
    else:
        source = SAMPLE_SOURCE if args.source is None else args.source
        filename = "<string>"

    return run(source, filename, strict=args.strict)


if __name__ == "__main__":
    sys.exit(main())
