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
import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from renban.renban import Renban, expand_all
from renban.renban_error import InvalidArgsError, InvalidRangeError, RenbanParseError


class TestRenban(unittest.TestCase):
    """
    Exercise the recursive expansion and output of patterns
    """

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_expand_all(self):
        self.assertEqual(
            expand_all('http://example.com/img[1-2][3-4]s.jpg'),
            [
                'http://example.com/img13s.jpg',
                'http://example.com/img14s.jpg',
                'http://example.com/img23s.jpg',
                'http://example.com/img24s.jpg',
            ],
        )

    def test_expand_all_single_bracket(self):
        self.assertEqual(expand_all('a[1-3]'), ['a1', 'a2', 'a3'])

    def test_leftmost_varies_slowest(self):
        self.assertEqual(
            expand_all('x[1-2]y[01-02]z[5-5]'),
            ['x1y01z5', 'x1y02z5', 'x2y01z5', 'x2y02z5'],
        )

    def test_product_size(self):
        self.assertEqual(len(expand_all('[1-3]-[1-4]-[001-005]')), 3 * 4 * 5)

    def test_duplicates_kept(self):
        self.assertEqual(expand_all('[1-2][1-1]'), ['11', '21'])
        self.assertEqual(expand_all('[0-1][00-01]'), ['000', '001', '100', '101'])

    def test_errors_propagate_from_nested_brackets(self):
        with self.assertRaises(InvalidRangeError):
            expand_all('a[1-2][3-1]')
        with self.assertRaises(RenbanParseError):
            expand_all('a[1-2][x-1]')
        with self.assertRaises(InvalidArgsError):
            expand_all('plain')

    def test_trailing_open_bracket_fails(self):
        # 'a1b[' still contains '[' so it is expanded again, and has no ']'
        with self.assertRaises(InvalidArgsError):
            expand_all('a[1-2]b[')

    def test_trailing_close_bracket_kept(self):
        self.assertEqual(expand_all('a[1-2]]'), ['a1]', 'a2]'])

    def test_expand_fallback(self):
        renban = Renban()
        self.assertEqual(renban.expand('plain'), ['plain'])
        self.assertEqual(renban.expand('img[2-1].jpg'), ['img[2-1].jpg'])
        self.assertEqual(renban.expand('img[1-2].jpg'), ['img1.jpg', 'img2.jpg'])

    def test_expand_idempotent(self):
        renban = Renban()
        for pattern in ['', 'plain', 'img1.jpg', 'a-b', 'a]b']:
            with self.subTest(pattern=pattern):
                self.assertEqual(renban.expand(pattern), [pattern])

    def test_debug_messages(self):
        renban = Renban(debug=True)
        err = io.StringIO()
        with redirect_stderr(err):
            renban.expand('img[9-1]')
        self.assertIn('Returning pattern unchanged', err.getvalue())

    def test_trace_messages(self):
        renban = Renban(trace=True)
        err = io.StringIO()
        with redirect_stderr(err):
            renban.expand_all('a[1-2][3-4]')
        self.assertIn('Expanded a[1-2][3-4] into 2 item(s)', err.getvalue())
        self.assertIn('Expanded a1[3-4] into 2 item(s)', err.getvalue())

    def test_run_writes_lines(self):
        renban = Renban()
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertTrue(renban.run('a[1-3]'))
        self.assertEqual(out.getvalue(), 'a1\na2\na3\n')

    def test_run_fallback_has_no_newline(self):
        renban = Renban()
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertFalse(renban.run('plain'))
        self.assertEqual(out.getvalue(), 'plain')

    def test_run_output_file(self):
        output = os.path.join(self.test_dir, 'results.txt')
        with open(output, 'w') as f:
            f.write('old contents\n')
        renban = Renban(output_file=output, quiet=True)
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertTrue(renban.run('img[09-11].png'))
        self.assertEqual(out.getvalue(), '')
        with open(output) as f:
            self.assertEqual(f.read(), 'img09.png\nimg10.png\nimg11.png\n')

    def test_run_output_file_fallback(self):
        output = os.path.join(self.test_dir, 'results.txt')
        renban = Renban(output_file=output)
        self.assertFalse(renban.run('img[x-1].png'))
        with open(output) as f:
            self.assertEqual(f.read(), 'img[x-1].png')


if __name__ == '__main__':
    unittest.main()
