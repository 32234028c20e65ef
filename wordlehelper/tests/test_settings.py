import os
import shutil
import tempfile
import unittest

from PyQt6.QtCore import QSettings

from ..settings import HelperSettings


class TestHelperSettings(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp(prefix='wordlehelper-settings-')
        self.addCleanup(shutil.rmtree, self.tmpdir, ignore_errors=True)
        self.qsettings = QSettings(os.path.join(self.tmpdir, 'settings.ini'), QSettings.Format.IniFormat)
        self.settings = HelperSettings(settings=self.qsettings)

    def make_word_file(self):
        path = os.path.join(self.tmpdir, 'words.txt')
        with open(path, 'w', encoding='utf-8') as file:
            file.write('crane\n')
        return path

    def test_defaults(self):
        self.assertEqual(self.settings.last_word_list, '')
        self.assertTrue(self.settings.reload_last_word_list)
        self.assertTrue(self.settings.lowercase)
        self.assertTrue(self.settings.drop_invalid_words)
        self.assertEqual(self.settings.word_list_dir(), '')
        self.assertIsNone(self.settings.startup_word_list())

    def test_startup_word_list(self):
        path = self.make_word_file()
        self.settings.last_word_list = path
        self.assertEqual(self.settings.last_word_list, path)
        self.assertEqual(self.settings.word_list_dir(), self.tmpdir)
        self.assertEqual(self.settings.startup_word_list(), path)

    def test_missing_word_list_is_not_reloaded(self):
        self.settings.last_word_list = os.path.join(self.tmpdir, 'gone.txt')
        self.assertIsNone(self.settings.startup_word_list())

    def test_reload_disabled(self):
        self.settings.last_word_list = self.make_word_file()
        self.qsettings.setValue('reload_last_word_list', False)
        self.assertIsNone(self.settings.startup_word_list())

    def test_values_read_back_as_bool(self):
        self.qsettings.setValue('lowercase', 'false')
        self.qsettings.setValue('drop_invalid_words', 'false')
        self.assertFalse(self.settings.lowercase)
        self.assertFalse(self.settings.drop_invalid_words)


if __name__ == '__main__':
    unittest.main()
