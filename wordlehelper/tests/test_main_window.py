import os
import shutil
import tempfile
import unittest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from ..main_window import MainWordleHelperWindow
from ..ui_loader import load_ui_class, pathhelper, UI_FILES


class TestMainWindow(unittest.TestCase):
    words = ('apple', 'angle', 'ankle', 'amble', 'eagle')

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp(prefix='wordlehelper-window-')
        self.addCleanup(shutil.rmtree, self.tmpdir, ignore_errors=True)
        qsettings = QSettings(os.path.join(self.tmpdir, 'settings.ini'), QSettings.Format.IniFormat)
        self.window = MainWordleHelperWindow(settings=qsettings)
        self.addCleanup(self.window.deleteLater)
        self.window.session.load_words(self.words)

    def edit(self, field, text, handler, *args):
        field.setText(text)
        handler(*args, field.text())

    def test_known_fields_take_one_letter(self):
        for edit in self.window.knownEdits:
            self.assertEqual(edit.maxLength(), 1)

    def test_known_letter_clears_misplaced_field(self):
        window = self.window
        self.edit(window.misplacedEdit0, 'ae', window.onMisplacedEdited, 0)
        self.edit(window.knownEdit0, 'a', window.onKnownEdited, 0)
        self.assertEqual(window.misplacedEdit0.text(), 'e')
        self.assertEqual(window.session.constraints.misplaced_letters[0], {'e'})

        self.edit(window.knownEdit0, '', window.onKnownEdited, 0)
        self.assertEqual(window.misplacedEdit0.text(), 'e')

    def test_misplaced_field_drops_known_letter(self):
        window = self.window
        self.edit(window.knownEdit0, 'a', window.onKnownEdited, 0)
        self.edit(window.misplacedEdit0, 'al', window.onMisplacedEdited, 0)
        self.assertEqual(window.misplacedEdit0.text(), 'l')
        self.assertEqual(window.session.constraints.misplaced_letters[0], {'l'})

    def test_candidates_and_count_follow_edits(self):
        window = self.window
        self.assertEqual(window.countLabel.text(), '5 possible words')
        self.edit(window.knownEdit1, 'n', window.onKnownEdited, 1)
        self.assertEqual(window.countLabel.text(), '2 possible words')
        model = window.candidatesModel
        self.assertEqual([model.data(model.index(row, 0)) for row in range(model.rowCount())],
                         ['angle', 'ankle'])

    def test_reset_clears_fields(self):
        window = self.window
        self.edit(window.knownEdit1, 'n', window.onKnownEdited, 1)
        self.edit(window.excludedEdit, 'p', window.onExcludedEdited)
        window.onReset()
        self.assertEqual(window.knownEdit1.text(), '')
        self.assertEqual(window.excludedEdit.text(), '')
        self.assertTrue(window.session.constraints.is_empty())
        self.assertEqual(window.countLabel.text(), '5 possible words')

    def test_load_word_list_remembers_path(self):
        path = os.path.join(self.tmpdir, 'words.txt')
        with open(path, 'w', encoding='utf-8') as file:
            file.write('Crane\nslate\nxx\n')
        self.assertTrue(self.window.loadWordList(path))
        self.assertEqual(self.window.session.words, ('crane', 'slate'))
        self.assertEqual(self.window.settings.last_word_list, path)


class TestUiLoader(unittest.TestCase):

    def test_form_file_is_packaged(self):
        self.assertTrue(pathhelper(UI_FILES['MainWordleHelperWindow']).is_file())

    def test_loads_form_class(self):
        form = load_ui_class(UI_FILES['MainWordleHelperWindow'])
        self.assertTrue(callable(getattr(form, 'setupUi', None)))


if __name__ == '__main__':
    unittest.main()
