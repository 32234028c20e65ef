from PyQt6.QtCore import Qt, pyqtSignal, QModelIndex, QAbstractListModel, QVariant
from typing import Sequence, Tuple
import logging

logger = logging.getLogger(__name__)


class CandidatesModel(QAbstractListModel):
    """Read-only list model over the latest ranked candidates"""

    countChanged = pyqtSignal(int)

    def __init__(self, words: Sequence[str] = (), parent=None):
        super().__init__(parent)
        self._words: Tuple[str, ...] = tuple(words)

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._words)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or index.column() != 0:
            return QVariant()
        row = index.row()
        if row >= len(self._words):
            return QVariant()
        if role == Qt.ItemDataRole.DisplayRole:
            return self._words[row]
        return QVariant()

    def flags(self, index: QModelIndex):
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEnabled

    def setWords(self, words: Sequence[str]):
        self.beginResetModel()
        self._words = tuple(words)
        self.endResetModel()
        logger.debug(f"CandidatesModel.setWords: {len(self._words)} rows")
        self.countChanged.emit(len(self._words))
