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


class RenbanBase:
    """
    Shared message handling for the renban classes.
    Every message goes to STDERR so STDOUT only ever carries expansion results.
    """

    def __init__(self, debug: bool = False, trace: bool = False, quiet: bool = False):
        """
        :param debug: show debug messages
        :param trace: show trace messages (each expansion step)
        :param quiet: hide informational messages
        """
        self.debug = debug
        self.trace = trace
        self.quiet = quiet

    @staticmethod
    def print_stderr(*args, **kwargs):
        print(*args, file=sys.stderr, **kwargs)

    def print_msg(self, *args, **kwargs):
        """
        Print an informational message unless running quiet
        """
        if not self.quiet:
            self.print_stderr(*args, **kwargs)

    def print_debug(self, *args, **kwargs):
        if self.debug:
            self.print_stderr('DEBUG:', *args, **kwargs)

    def print_trace(self, *args, **kwargs):
        if self.trace:
            self.print_stderr('TRACE:', *args, **kwargs)
