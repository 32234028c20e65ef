import sys
import argparse
import logging
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QCoreApplication
from .lazy_handler import setup_logger

logger = logging.getLogger(__name__)

QCoreApplication.setApplicationName('WordleHelper')
QCoreApplication.setOrganizationName('wordlehelper')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='wordlehelper',
                                     description='Narrow down a Wordle word list from known letters.')
    parser.add_argument('wordlist', nargs='?', help='newline-delimited word list to load at start')
    parser.add_argument('--debug', action='store_true', help='log debug messages to stderr')
    return parser.parse_known_args(argv)


def main(argv=None):
    """Entry point for running the Wordle Helper application."""
    args, qt_args = parse_args(argv)
    setup_logger('wordlehelper', 'wordlehelper', debug=args.debug)
    logger.debug('__main__.py: starting')

    from .main_window import MainWordleHelperWindow

    app = QApplication([sys.argv[0], *qt_args])
    window = MainWordleHelperWindow(args.wordlist)
    window.show()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
