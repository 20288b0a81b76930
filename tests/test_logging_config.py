"""
Tests for logging setup.
"""

import logging

import pytest

from automesh.logging_config import (
    LOG_LEVELS,
    configure_logging,
    get_log_path,
    installed_handlers,
    reset_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    reset_logging()
    root.setLevel(level)


class TestGetLogPath:
    def test_uses_xdg_cache_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))

        path = get_log_path()

        assert path == tmp_path / "automesh" / "automesh.log"
        assert path.parent.is_dir()


class TestConfigureLogging:
    def test_console_only(self):
        configure_logging("debug", log_file=False)

        handlers = installed_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler_writes_messages(self, tmp_path):
        log_file = tmp_path / "run.log"
        configure_logging("info", log_file=log_file)

        logging.getLogger("automesh.test").info("hello from test")
        for handler in installed_handlers():
            handler.flush()

        assert "[INFO]" in log_file.read_text(encoding="utf-8")
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_default_file_under_cache_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))

        configure_logging("warn")

        files = [h for h in installed_handlers() if isinstance(h, logging.FileHandler)]
        assert [h.baseFilename for h in files] == [str(tmp_path / "automesh" / "automesh.log")]

    def test_reconfigure_replaces_own_handlers_only(self):
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            configure_logging("info", log_file=False)
            configure_logging("error", log_file=False)

            assert len(installed_handlers()) == 1
            assert foreign in root.handlers
            assert root.level == logging.ERROR
        finally:
            root.removeHandler(foreign)

    def test_off_silences_everything(self):
        configure_logging("off")

        assert installed_handlers() == []
        assert not logging.getLogger("automesh").isEnabledFor(logging.CRITICAL)

    def test_trace_maps_to_debug(self):
        configure_logging("TRACE", log_file=False)
        assert logging.getLogger().level == LOG_LEVELS["debug"]

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level 'loud'"):
            configure_logging("loud")

    def test_reset_removes_only_installed_handlers(self):
        configure_logging("info", log_file=False)
        installed = installed_handlers()

        reset_logging()

        assert installed_handlers() == []
        assert not any(handler in logging.getLogger().handlers for handler in installed)
