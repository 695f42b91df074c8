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

import re
from dataclasses import dataclass
from typing import List, Optional

from .constants import MAX_BOUND, MIN_BOUND, PAD_CHAR, RANGE_SEPARATOR
from .renban_error import InvalidArgsError, InvalidRangeError, RenbanParseError

INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')


def parse_bound(literal: str) -> int:
    """
    Parse a single range boundary as a signed base 10 integer.

    Only an optional sign followed by ASCII digits is accepted. Whitespace,
    underscores and values outside the 32-bit range are rejected.

    :param literal: text of the boundary
    :return: integer value
    :raises ValueError: if the literal is not a valid integer
    """
    if not literal:
        raise ValueError('cannot parse integer from empty string')
    if not INTEGER_LITERAL.fullmatch(literal):
        raise ValueError(f'invalid digit found in string: {literal!r}')
    value = int(literal)
    if value > MAX_BOUND:
        raise ValueError(f'number too large to fit in target type: {literal}')
    if value < MIN_BOUND:
        raise ValueError(f'number too small to fit in target type: {literal}')
    return value


@dataclass(frozen=True)
class RangeSpec:
    """
    Inclusive numeric range parsed from a '<left>-<right>' token
    """

    start: int
    end: int
    pad_width: Optional[int] = None

    @classmethod
    def from_token(cls, token: str) -> 'RangeSpec':
        """
        Parse a range token, splitting at the first '-'.

        Padding is taken from the left literal: if it starts with '0' every value
        is padded to its length.

        :param token: range token, e.g. '01-10'
        :return: parsed RangeSpec
        :raises InvalidArgsError: no '-' in the token
        :raises RenbanParseError: either side is not an integer
        :raises InvalidRangeError: end is lower than start
        """
        left, sep, right = token.partition(RANGE_SEPARATOR)
        if not sep:
            raise InvalidArgsError(f'No "{RANGE_SEPARATOR}" found in range: {token!r}')
        try:
            start = parse_bound(left)
            end = parse_bound(right)
        except ValueError as e:
            raise RenbanParseError(f'Invalid range boundary in {token!r}: {e}') from e
        if end < start:
            raise InvalidRangeError(f'Range end {end} is lower than start {start}: {token!r}')
        pad_width = len(left) if left.startswith(PAD_CHAR) else None
        return cls(start, end, pad_width)

    def __len__(self) -> int:
        return self.end - self.start + 1

    def format(self, value: int) -> str:
        if self.pad_width is None:
            return str(value)
        return f'{value:0{self.pad_width}d}'

    def values(self) -> List[str]:
        """
        Return the formatted values of the range in ascending order
        """
        return [self.format(n) for n in range(self.start, self.end + 1)]


def parse_range(token: str) -> List[str]:
    """
    Expand a '<left>-<right>' token into its list of formatted numbers
    :param token: range token
    :return: list of numbers as strings
    """
    return RangeSpec.from_token(token).values()
