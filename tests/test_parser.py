"""
ascii_forge test suite
FIGlet font parser tests
"""

import unittest

from ascii_forge.errors import FontParseError
from ascii_forge.fonts.parser import GERMAN_CODES, parse_font, trim_row
from .base import BaseTester, make_flf


class TestHeader(BaseTester):

    def test_header_fields(self):
        font = parse_font('mini', self.mini_flf)
        self.assertEqual(font.name, 'mini')
        self.assertEqual(font.height, 2)
        self.assertEqual(font.hardblank, '$')
        self.assertEqual(font.baseline, 1)
        self.assertEqual(font.max_length, 16)
        self.assertEqual(font.old_layout, 0)
        self.assertEqual(font.comments, 'mini test font')
        self.assertEqual(font.end_char, '@')

    def test_other_hardblank(self):
        font = parse_font('mini', make_flf(hardblank='~'))
        self.assertEqual(font.hardblank, '~')

    def test_odd_signature_accepted(self):
        font = parse_font('odd', make_flf(signature='flf2b'))
        self.assertEqual(len(font.glyphs), 95)

    def test_no_line_break(self):
        with self.assertRaises(FontParseError):
            parse_font('bad', 'flf2a$ 2 1 16 0 0')

    def test_short_header(self):
        with self.assertRaises(FontParseError):
            parse_font('bad', 'flf2a$ 2 1 16\nx@@\n')

    def test_signature_without_hardblank(self):
        with self.assertRaises(FontParseError):
            parse_font('bad', 'flf2 2 1 16 0 0\nx@@\n')

    def test_zero_height(self):
        with self.assertRaises(FontParseError):
            parse_font('bad', 'flf2a$ 0 0 16 0 0\nx@@\n')

    def test_negative_height(self):
        with self.assertRaises(FontParseError):
            parse_font('bad', 'flf2a$ -3 0 16 0 0\nx@@\n')

    def test_unparsable_height(self):
        with self.assertRaises(FontParseError) as ctx:
            parse_font('bad', 'flf2a$ tall 0 16 0 0\nx@@\n')
        self.assertEqual(ctx.exception.font_name, 'bad')
        self.assertIn('bad', str(ctx.exception))

    def test_comment_overrun(self):
        with self.assertRaises(FontParseError):
            parse_font('bad', 'flf2a$ 1 1 5 0 10\nonly one comment\n')


class TestGlyphs(BaseTester):

    def test_ascii_block(self):
        font = parse_font('mini', self.mini_flf)
        self.assertEqual(sorted(font.glyphs), list(range(32, 127)))
        self.assertEqual(font.glyph('A'), ('41', '41'))
        self.assertIn('z', font)
        self.assertNotIn('\xc4', font)

    def test_rows_match_height(self):
        for height in (1, 3, 6):
            font = parse_font(f'h{height}', make_flf(height=height, german=True))
            for rows in font.glyphs.values():
                self.assertEqual(len(rows), font.height)

    def test_german_block(self):
        font = parse_font('mini', self.mini_german_flf)
        for code in GERMAN_CODES:
            self.assertEqual(font.glyphs[code], (f'{code:02x}',) * 2)

    def test_german_block_incomplete(self):
        text = self.mini_german_flf
        # drop the last German glyph
        lines = text.split('\n')
        font = parse_font('mini', '\n'.join(lines[:-3]))
        self.assertEqual(len(font.glyphs), 95)
        self.assertNotIn(196, font.glyphs)

    def test_partial_font(self):
        font = parse_font('part', make_flf(count=10))
        self.assertEqual(sorted(font.glyphs), list(range(32, 42)))

    def test_hash_end_marker(self):
        font = parse_font('hash', make_flf(end='#', glyphs={'A': ['/\\', '||']}))
        self.assertEqual(font.end_char, '#')
        self.assertEqual(font.glyph('A'), ('/\\', '||'))

    def test_default_end_marker(self):
        raw = 'flf2a$ 1 1 4 0 0\n' + '\n'.join(f'{c:02x}' for c in range(32, 127)) + '\n'
        font = parse_font('bare', raw)
        self.assertEqual(font.end_char, '@')
        self.assertEqual(font.glyph('!'), ('21',))

    def test_bytes_latin1(self):
        raw = make_flf(glyphs={'A': ['\xc4\xc4', '\xe9\xe9']}).encode('latin-1')
        font = parse_font('latin', raw)
        self.assertEqual(font.glyph('A'), ('\xc4\xc4', '\xe9\xe9'))

    def test_bytes_utf8(self):
        raw = make_flf(glyphs={'A': ['██', '▒▒']}).encode('utf-8')
        font = parse_font('utf8', raw)
        self.assertEqual(font.glyph('A'), ('██', '▒▒'))

    def test_crlf(self):
        font = parse_font('crlf', self.mini_flf.replace('\n', '\r\n'))
        self.assertEqual(font.glyph('A'), ('41', '41'))

    def test_glyphs_read_only(self):
        font = parse_font('mini', self.mini_flf)
        with self.assertRaises(TypeError):
            font.glyphs[65] = ('x', 'x')


class TestTrimRow(unittest.TestCase):

    def test_single_marker(self):
        self.assertEqual(trim_row('ab@', '@'), 'ab')

    def test_double_marker(self):
        self.assertEqual(trim_row('ab@@', '@'), 'ab')

    def test_marker_inside_row(self):
        self.assertEqual(trim_row('a@b', '@'), 'a')

    def test_no_marker(self):
        self.assertEqual(trim_row('abc', '@'), 'abc')

    def test_empty(self):
        self.assertEqual(trim_row('', '@'), '')

    def test_marker_only(self):
        self.assertEqual(trim_row('@', '@'), '')
        self.assertEqual(trim_row('@@', '@'), '')


if __name__ == '__main__':
    unittest.main()
