"""Unit tests for editor settings."""

import json
import unittest
import tempfile
import shutil
from pathlib import Path

from tedit.settings import EditorSettings, DEFAULT_SETTINGS, get_settings


class TestEditorSettings(unittest.TestCase):
    """Test settings loading and validation."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.settings = EditorSettings(config_dir=Path(self.temp_dir))

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write(self, content):
        with open(self.settings.settings_file, 'w', encoding='utf-8') as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)

    def test_defaults_when_file_missing(self):
        self.assertEqual(self.settings.load(), DEFAULT_SETTINGS)

    def test_valid_values_override_defaults(self):
        self._write({
            "end_of_document_marker": ".",
            "show_status_bar": False,
            "log_level": "debug",
        })
        loaded = self.settings.load()
        self.assertEqual(loaded["end_of_document_marker"], ".")
        self.assertFalse(loaded["show_status_bar"])
        self.assertEqual(loaded["log_level"], "DEBUG")

    def test_invalid_values_fall_back(self):
        self._write({
            "end_of_document_marker": "",
            "show_status_bar": "yes",
            "log_level": "LOUD",
        })
        with self.assertLogs('tedit.settings', level='WARNING'):
            loaded = self.settings.load()
        self.assertEqual(loaded, DEFAULT_SETTINGS)

    def test_unknown_keys_ignored(self):
        self._write({"font_name": "Courier"})
        with self.assertLogs('tedit.settings', level='WARNING'):
            loaded = self.settings.load()
        self.assertNotIn("font_name", loaded)

    def test_corrupt_file(self):
        self._write("{ invalid json }")
        with self.assertLogs('tedit.settings', level='WARNING'):
            loaded = self.settings.load()
        self.assertEqual(loaded, DEFAULT_SETTINGS)

    def test_non_dict_file(self):
        self._write(["a", "b"])
        with self.assertLogs('tedit.settings', level='WARNING'):
            loaded = self.settings.load()
        self.assertEqual(loaded, DEFAULT_SETTINGS)

    def test_cache_and_clear(self):
        self.settings.load()
        self._write({"show_status_bar": False})
        # Cached value is still served
        self.assertTrue(self.settings.get("show_status_bar"))
        self.settings.clear_cache()
        self.assertFalse(self.settings.get("show_status_bar"))

    def test_get_settings_is_shared(self):
        self.assertIs(get_settings(), get_settings())


if __name__ == '__main__':
    unittest.main()
