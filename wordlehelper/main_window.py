from PyQt6.QtCore import pyqtSlot, QSize
from PyQt6.QtGui import QFontDatabase
from PyQt6.QtWidgets import QMainWindow, QFileDialog, QMessageBox
from .ui_loader import load_ui_class, UI_FILES
from .delegates import KnownLetterValidator, LetterSetValidator
from .models import CandidatesModel
from .session import Session, CandidateList
from .settings import HelperSettings
from .word_list import load_word_list
from .constraints import WORD_LENGTH
from functools import partial
import logging

logger = logging.getLogger(__name__)

Ui_MainWindow = load_ui_class(UI_FILES['MainWordleHelperWindow'])


class MainWordleHelperWindow(QMainWindow, Ui_MainWindow):
    def __init__(self, word_list_path=None, settings=None):
        super().__init__()
        self.settings = HelperSettings(self, settings)
        self.session = Session()
        self.initUI()
        path = word_list_path or self.settings.startup_word_list()
        if path:
            self.loadWordList(path)

    def initUI(self):
        self.setupUi(self)
        self.setFixedSize(QSize(298, 450))

        mono = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        lowercase = self.settings.lowercase

        self.knownEdits = [getattr(self, f'knownEdit{i}') for i in range(WORD_LENGTH)]
        self.misplacedEdits = [getattr(self, f'misplacedEdit{i}') for i in range(WORD_LENGTH)]

        for i, edit in enumerate(self.knownEdits):
            edit.setValidator(KnownLetterValidator(lowercase, edit))
            edit.textEdited.connect(partial(self.onKnownEdited, i))
        for i, edit in enumerate(self.misplacedEdits):
            edit.setValidator(LetterSetValidator(lowercase=lowercase, parent=edit))
            edit.textEdited.connect(partial(self.onMisplacedEdited, i))
        self.excludedEdit.setValidator(LetterSetValidator(lowercase=lowercase, parent=self.excludedEdit))
        self.excludedEdit.textEdited.connect(self.onExcludedEdited)

        for edit in (*self.knownEdits, *self.misplacedEdits, self.excludedEdit):
            edit.setFont(mono)

        self.candidatesModel = CandidatesModel(parent=self)
        self.candidatesView.setModel(self.candidatesModel)
        self.candidatesView.setFont(mono)
        self.candidatesModel.countChanged.connect(self.onCountChanged)
        self.session.add_listener(self.onCandidatesChanged)

        self.resetButton.clicked.connect(self.onReset)
        self.openButton.clicked.connect(self.onOpenWordList)

    def onCandidatesChanged(self, candidates: CandidateList):
        self.candidatesModel.setWords(candidates.words)

    @pyqtSlot(int)
    def onCountChanged(self, count):
        self.countLabel.setText(f'{count} possible words')

    def syncMisplacedEdit(self, index):
        """Drop letters from the misplaced field that the constraints no longer hold"""
        misplaced = self.misplacedEdits[index]
        remaining = ''.join(c for c in misplaced.text() if c in self.session.constraints.misplaced_letters[index])
        if remaining != misplaced.text():
            misplaced.setText(remaining)

    def onKnownEdited(self, index, text):
        self.session.set_known(index, text)
        self.syncMisplacedEdit(index)

    def onMisplacedEdited(self, index, text):
        self.session.set_misplaced(index, text)
        self.syncMisplacedEdit(index)

    @pyqtSlot(str)
    def onExcludedEdited(self, text):
        self.session.set_excluded(text)

    @pyqtSlot()
    def onReset(self):
        logger.debug('onReset called')
        for edit in (*self.knownEdits, *self.misplacedEdits, self.excludedEdit):
            edit.clear()
        self.session.reset()
        self.statusBar.clearMessage()

    @pyqtSlot()
    def onOpenWordList(self):
        path, _ = QFileDialog.getOpenFileName(self, 'Open wordlist file', self.settings.word_list_dir())
        if path:
            self.loadWordList(path)

    def loadWordList(self, path):
        try:
            words = load_word_list(path, lowercase=self.settings.lowercase,
                                   drop_invalid=self.settings.drop_invalid_words)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not load word list {path}: {e}")
            QMessageBox.warning(self, 'Word list', f'Could not load {path}:\n{e}')
            return False

        self.settings.last_word_list = path
        self.session.load_words(words)
        self.statusBar.showMessage(f'Loaded {len(words)} words', 5000)
        return True
