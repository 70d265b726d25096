"""
ascii_forge test suite
configuration tests
"""

import json
import os
import tempfile
import unittest

from ascii_forge.config import DEFAULT_CONFIG, Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, 'cfg', 'ascii_forge.json')

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, data):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(data if isinstance(data, str) else json.dumps(data))

    def test_defaults_without_file(self):
        cfg = Config.load(self.path, create_if_missing=False)
        self.assertFalse(os.path.exists(self.path))
        self.assertEqual(cfg['text']['max_length'], 25)
        self.assertEqual(cfg['image']['charset'], 'standard')
        self.assertEqual(cfg.block_style_fonts, ['3-D'])

    def test_created_when_missing(self):
        Config.load(self.path)
        with open(self.path, encoding='utf-8') as f:
            self.assertEqual(json.load(f)['image']['width'], DEFAULT_CONFIG['image']['width'])

    def test_user_values_merged_and_clamped(self):
        self._write({
            'image': {'width': 5000, 'invert': 'yes', 'resample': 'magic'},
            'text': {'default_border': 'double', 'block_style_fonts': 'Big'},
        })
        cfg = Config.load(self.path)
        self.assertEqual(cfg['image']['width'], 150)
        self.assertTrue(cfg['image']['invert'])
        self.assertEqual(cfg['image']['resample'], 'bilinear')
        self.assertEqual(cfg['image']['min_width'], 20)
        self.assertEqual(cfg['text']['default_border'], 'double')
        self.assertEqual(cfg.block_style_fonts, ['Big'])

    def test_corrupt_file(self):
        self._write('{not json')
        cfg = Config.load(self.path)
        self.assertEqual(cfg['text']['max_length'], 25)
        self.assertTrue(os.path.exists(self.path + '.corrupt.bak'))

    def test_save_round_trip(self):
        cfg = Config.load(self.path, create_if_missing=False)
        cfg.update({'fonts': {'dir': '/usr/share/figlet'}, 'logging': {'level': 'LOUD'}})
        cfg.save()
        again = Config.load(self.path)
        self.assertEqual(again.font_dir, '/usr/share/figlet')
        self.assertEqual(again['logging']['level'], 'WARNING')


if __name__ == '__main__':
    unittest.main()
