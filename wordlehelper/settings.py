from pathlib import Path
from PyQt6.QtCore import QSettings, QObject
import logging

logger = logging.getLogger(__name__)


class HelperSettings(QObject):
    """Persistent preferences. Only configuration is stored here, never the
    letters entered during a session."""

    def __init__(self, parent=None, settings=None):
        super().__init__(parent)
        self.settings = settings if settings is not None else QSettings()

    @property
    def last_word_list(self) -> str:
        return self.settings.value("last_word_list", "", type=str)

    @last_word_list.setter
    def last_word_list(self, path):
        self.settings.setValue("last_word_list", str(path))
        logger.debug(f"Remembered word list: {path}")

    @property
    def reload_last_word_list(self) -> bool:
        return self.settings.value("reload_last_word_list", True, type=bool)

    @property
    def lowercase(self) -> bool:
        return self.settings.value("lowercase", True, type=bool)

    @property
    def drop_invalid_words(self) -> bool:
        return self.settings.value("drop_invalid_words", True, type=bool)

    def word_list_dir(self) -> str:
        last = self.last_word_list
        return str(Path(last).parent) if last else ""

    def startup_word_list(self):
        """Path of the list to load at start, or None"""
        last = self.last_word_list
        if self.reload_last_word_list and last and Path(last).is_file():
            return last
        return None
