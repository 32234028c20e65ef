from PyQt6.QtGui import QValidator
import logging

logger = logging.getLogger(__name__)


class LetterValidator(QValidator):
    """Accepts letters only, folding case when lowercase is set.

    max_length caps the number of letters; None means any run of letters.
    """

    def __init__(self, max_length=None, lowercase=True, parent=None):
        super().__init__(parent)
        self.max_length = max_length
        self.lowercase = lowercase

    def validate(self, string, pos):
        string = string.strip()
        if self.lowercase:
            string = string.lower()
        if string == '':
            return QValidator.State.Acceptable, string, pos
        if not string.isalpha():
            return QValidator.State.Invalid, string, pos
        if self.max_length is not None and len(string) > self.max_length:
            logger.debug(f"LetterValidator: '{string}' longer than {self.max_length}")
            return QValidator.State.Invalid, string, pos
        return QValidator.State.Acceptable, string, pos


class KnownLetterValidator(LetterValidator):
    def __init__(self, lowercase=True, parent=None):
        super().__init__(1, lowercase, parent)


class LetterSetValidator(LetterValidator):
    """Misplaced and excluded fields: repeated letters are dropped"""

    def validate(self, string, pos):
        state, string, pos = super().validate(string, pos)
        if state == QValidator.State.Acceptable:
            deduped = ''.join(dict.fromkeys(string))
            pos = min(pos, len(deduped))
            string = deduped
        return state, string, pos
