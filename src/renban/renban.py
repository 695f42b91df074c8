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

import sys
from contextlib import nullcontext
from typing import List

from progress.spinner import Spinner

from .bracket_expander import expand_once
from .constants import OPEN_BRACKET
from .renban_error import RenbanError
from .renbanbase import RenbanBase


class Renban(RenbanBase):
    """
    Renban pattern expansion class
    Handle the expansion of bracketed numeric ranges and the writing of the results
    """

    def __init__(
        self,
        output_file: str = None,
        debug: bool = False,
        trace: bool = False,
        quiet: bool = False,
    ):
        """
        Initialise expansion class
        :param output_file: file to write results to (optional - default STDOUT)
        """
        super().__init__(debug, trace, quiet)
        self.output_file = output_file
        self.isatty = sys.stderr.isatty()

    def expand_all(self, pattern: str) -> List[str]:
        """
        Expand every bracket expression in the pattern.

        Brackets are expanded left to right, so the leftmost range varies slowest.
        Only the first expansion is checked for remaining brackets; the others are
        assumed to have the same shape.

        :param pattern: pattern to expand
        :return: list of expanded strings
        :raises RenbanError: if any bracket expression is invalid
        """
        expanded = expand_once(pattern)
        self.print_trace(f'Expanded {pattern} into {len(expanded)} item(s)')
        if OPEN_BRACKET not in expanded[0]:
            return expanded
        results = []
        for item in expanded:
            results.extend(self.expand_all(item))
        return results

    def expand(self, pattern: str) -> List[str]:
        """
        Expand the pattern, returning it unchanged if it cannot be expanded
        :param pattern: pattern to expand
        :return: list of expanded strings, or [pattern] on failure
        """
        try:
            return self.expand_all(pattern)
        except RenbanError as e:
            self.print_debug(f'Returning pattern unchanged: {e}')
            return [pattern]

    def __write(self, text: str, outfile):
        """
        Write the text to the given file, or STDOUT if none
        """
        if outfile:
            outfile.write(text)
        else:
            sys.stdout.write(text)

    def run(self, pattern: str) -> bool:
        """
        Expand the pattern and write the results, one per line.
        If the pattern cannot be expanded it is written verbatim with no newline
        :param pattern: pattern to expand
        :return: True if the pattern was expanded, False otherwise
        """
        try:
            results = self.expand_all(pattern)
        except RenbanError as e:
            self.print_debug(f'Returning pattern unchanged: {e}')
            results = None
        file_ctx = open(self.output_file, 'w') if self.output_file else nullcontext()
        with file_ctx as outfile:
            if results is None:
                self.__write(pattern, outfile)
                return False
            if outfile:
                self.print_msg(f'Writing {len(results):,} expanded item(s) to {self.output_file}...')
            use_spinner = bool(outfile) and not self.quiet and self.isatty
            spinner_ctx = Spinner('Writing ') if use_spinner else nullcontext()
            with spinner_ctx as spinner:
                for item in results:
                    self.__write(item + '\n', outfile)
                    if spinner:
                        spinner.next()
        return True


def expand_all(pattern: str) -> List[str]:
    """
    Expand every bracket expression in the pattern
    :param pattern: pattern to expand
    :return: list of expanded strings
    """
    return Renban().expand_all(pattern)


#
# End of Renban Class
#
