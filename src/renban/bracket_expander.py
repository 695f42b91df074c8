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

from typing import List

from .constants import CLOSE_BRACKET, OPEN_BRACKET
from .range_parser import parse_range
from .renban_error import InvalidArgsError


def expand_once(pattern: str) -> List[str]:
    """
    Expand the first bracket expression of the given pattern.

    The first '[' and the first ']' are located independently, so brackets are
    not matched as pairs.

    :param pattern: pattern containing a bracket expression
    :return: one string per value of the range, in ascending order
    :raises InvalidArgsError: missing '[' or ']'
    """
    left_bracket = pattern.find(OPEN_BRACKET)
    if left_bracket < 0:
        raise InvalidArgsError(f'No "{OPEN_BRACKET}" found in: {pattern!r}')
    right_bracket = pattern.find(CLOSE_BRACKET)
    if right_bracket < 0:
        raise InvalidArgsError(f'No "{CLOSE_BRACKET}" found in: {pattern!r}')
    prefix = pattern[:left_bracket]
    middle = pattern[left_bracket + 1 : right_bracket]
    suffix = pattern[right_bracket + 1 :]
    return [prefix + n + suffix for n in parse_range(middle)]
