"""
SPDX-License-Identifier: MIT

  Copyright (c) 2026, SCANOSS

  Permission is hereby granted, free of charge, to any person obtaining a copy
  of this software and associated documentation files (the "Software"), to deal
  in the Software without restriction, including without limitation the rights
  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
  copies of the Software, and to permit persons to whom the Software is
  furnished to do so, subject to the following conditions:

  The above copyright notice and this permission notice shall be included in
  all copies or substantial portions of the Software.

  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
  THE SOFTWARE.
"""

import argparse
import sys

from . import __version__
from .renban import Renban


def print_stderr(*args, **kwargs):
    """
    Print the given message to STDERR
    """
    print(*args, file=sys.stderr, **kwargs)


def setup_args(argv=None) -> None:
    """
    Setup all the command line arguments for processing
    """
    parser = argparse.ArgumentParser(
        description=f'Renban: expand numbered ranges like "img[01-10].jpg". Ver: {__version__}, License: MIT'
    )
    parser.set_defaults(func=expand)
    parser.add_argument('--version', '-v', action='store_true', help='Display version details')
    parser.add_argument(
        'pattern', metavar='PATTERN', type=str, nargs='?', help='Pattern containing bracketed ranges, e.g. a[1-3]'
    )
    parser.add_argument('--output', '-o', type=str, help='Output result file name (optional - default stdout).')
    parser.add_argument('--debug', '-d', action='store_true', help='Enable debug messages')
    parser.add_argument('--trace', '-t', action='store_true', help='Enable trace messages')
    parser.add_argument('--quiet', '-q', action='store_true', help='Enable quiet mode')

    args = parser.parse_args(argv)
    if args.version:
        ver(parser, args)
        sys.exit(0)
    if args.pattern is None:
        parser.error('the following arguments are required: PATTERN')
    args.func(parser, args)


def ver(*_):
    """
    Run the "ver" command
    :param _: ignored/unused
    """
    print(f'Version: {__version__}')


def expand(parser, args):
    """
    Run the expansion of the given pattern
    Parameters
    ----------
        parser: ArgumentParser
            command line parser object
        args: Namespace
            Parsed arguments
    """
    renban = Renban(output_file=args.output, debug=args.debug, trace=args.trace, quiet=args.quiet)
    try:
        renban.run(args.pattern)
    except OSError as e:
        print_stderr(f'ERROR: Problem writing results to {args.output}: {e}')
        sys.exit(1)


def main():
    """
    Run the Renban CLI
    """
    setup_args()


if __name__ == '__main__':
    main()
