import logging

import pytest

import krylovaux
from krylovaux import set_loglevel, show_versions, to_boundary
from krylovaux._min_dependencies import NUMPY_MIN_VERSION
from krylovaux.utils._show_versions import _get_deps_info


class TestSetLoglevel:

    @pytest.fixture
    def logger(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        krylovaux._ensure_handler.cache_clear()
        logger = logging.getLogger('krylovaux')
        level = logger.level
        yield logger
        handler = krylovaux._ensure_handler()
        logger.removeHandler(handler)
        handler.close()
        krylovaux._ensure_handler.cache_clear()
        logger.setLevel(level)

    def test_simple(self, logger, tmp_path):
        set_loglevel('DEBUG')
        assert logger.level == logging.DEBUG
        assert krylovaux._ensure_handler().level == logging.DEBUG

        to_boundary([0.0, 0.0], [1.0, 0.0], 2.0)
        krylovaux._ensure_handler().flush()
        log_files = list(tmp_path.glob('krylovaux_*.log'))
        assert len(log_files) == 1
        assert 'Step length to the boundary' in log_files[0].read_text()

    def test_handler_memoized(self, logger):
        set_loglevel(logging.INFO)
        set_loglevel(logging.WARNING)
        handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_root_untouched(self, logger):
        root_handlers = list(logging.getLogger().handlers)
        set_loglevel(logging.DEBUG)
        assert logging.getLogger().handlers == root_handlers
        assert krylovaux._ensure_handler() in logger.handlers


class TestShowVersions:

    def test_simple(self, capsys):
        show_versions()
        captured = capsys.readouterr()
        assert 'System settings' in captured.out
        assert 'Runtime dependencies' in captured.out
        assert 'Test dependencies' in captured.out
        assert 'numpy' in captured.out
        assert 'scipy' in captured.out

    def test_deps_info(self):
        install_info = _get_deps_info('install')
        assert list(install_info) == ['numpy']
        assert install_info['numpy'][0] is not None
        assert install_info['numpy'][1] == NUMPY_MIN_VERSION
        assert sorted(_get_deps_info('tests')) == ['pytest', 'scipy']


def test_version():
    assert isinstance(krylovaux.__version__, str)
