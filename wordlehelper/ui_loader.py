import logging
from importlib.resources import files
from pathlib import Path
from PyQt6 import uic

logger = logging.getLogger(__name__)


def pathhelper(resource, package='wordlehelper.ui'):
    """Resolve a file shipped inside the ui package."""
    return Path(files(package) / resource)


def load_ui_class(ui_filename):
    """Compile a Designer file into its form class at import time."""
    ui_path = pathhelper(ui_filename)
    logger.debug(f"Loading UI file: {ui_path}")
    return uic.loadUiType(ui_path)[0]


UI_FILES = {
    'MainWordleHelperWindow': 'WordleHelper.ui',
}
