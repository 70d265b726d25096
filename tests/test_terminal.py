"""
ascii_forge test suite
prompt_toolkit fragment tests
"""

import unittest

from ascii_forge.rendering.ascii_image import Cell
from ascii_forge.rendering.terminal import cells_to_fragments, text_to_fragments


class TestFragments(unittest.TestCase):

    def test_runs_merge(self):
        cells = [[
            Cell('@', 'rgb(255,0,0)'),
            Cell('#', 'rgb(255,0,0)'),
            Cell('.', 'rgb(0,16,255)'),
            Cell(' ', 'transparent'),
        ]]
        self.assertEqual(cells_to_fragments(cells), [
            ('fg:#ff0000', '@#'),
            ('fg:#0010ff', '.'),
            ('', ' '),
            ('', '\n'),
        ])

    def test_rows_end_with_newline(self):
        cells = [[Cell('a', 'transparent')], [Cell('b', 'transparent')]]
        self.assertEqual(cells_to_fragments(cells), [('', 'a'), ('', '\n'), ('', 'b'), ('', '\n')])

    def test_text(self):
        self.assertEqual(text_to_fragments('ab\ncd'), [('', 'ab\ncd\n')])
        self.assertEqual(text_to_fragments('ab\n'), [('', 'ab\n')])
        self.assertEqual(text_to_fragments(''), [('', '')])


if __name__ == '__main__':
    unittest.main()
