import os
import sys
import glob
import logging
import tempfile
from logging.handlers import RotatingFileHandler


class LazyRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler that writes into a private temp directory.

    A directory named <tmpdir_prefix>* from an earlier run is reused when it
    is owned by us, has mode 0700 and holds no symlinks; otherwise a new one
    is made. The file itself is only opened on the first record.
    """

    def __init__(self, tmpdir_prefix='', basename=None, *args, **kwargs):
        self.base_dir = self._create_temp_dir(tmpdir_prefix)
        kwargs['filename'] = os.path.join(self.base_dir, basename)
        kwargs.setdefault('delay', True)
        super().__init__(*args, **kwargs)

    @staticmethod
    def _tmpdir_usable(path):
        st = os.stat(path)
        if st.st_uid != os.getuid() or (st.st_mode & 0o777) != 0o700:
            return False
        return not any(os.path.islink(os.path.join(path, item)) for item in os.listdir(path))

    @classmethod
    def _create_temp_dir(cls, tmpdir_prefix):
        if tmpdir_prefix:
            pattern = os.path.join(tempfile.gettempdir(), f"{tmpdir_prefix}*")
            for dir_ in sorted(glob.glob(pattern)):
                if os.path.isdir(dir_) and cls._tmpdir_usable(dir_):
                    return dir_

        # mkdtemp already creates the directory with mode 0700
        return tempfile.mkdtemp(prefix=tmpdir_prefix)


def setup_logger(prefix, name=None, debug=False):
    """Log everything to a rotating per-process file, and to stderr at
    INFO (or DEBUG when debug is set)."""

    log_file = f"log_{os.getpid()}.log"
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    file_handler = LazyRotatingFileHandler(tmpdir_prefix=prefix + '.', basename=log_file,
                                           maxBytes=10*(1024 ** 2), backupCount=3)
    file_handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s: %(message)s'))
    logger.addHandler(file_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(stderr_handler)
    return logger
