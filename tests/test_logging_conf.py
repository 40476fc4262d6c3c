# tests/test_logging_conf.py
"""
Logging Configuration Tests - Unit Tests for setup_logging

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xswap.shared.logging_conf (setup_logging)
- pytest (testing framework, tmp_path and monkeypatch fixtures)
"""
import logging  # Inspect the root logger after configuration
from logging.handlers import RotatingFileHandler  # Expected file handler type

import pytest  # Testing framework for writing and running tests

from xswap.shared.logging_conf import setup_logging  # Function under test


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_log_dir_creates_rotating_file(tmp_path):
    setup_logging(log_dir=tmp_path / "logs", max_bytes=1024, backup_count=2, log_to_stdout=False)

    handlers = logging.getLogger().handlers
    file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1024
    assert file_handlers[0].backupCount == 2
    assert (tmp_path / "logs" / "xswap.log").exists()


def test_stdout_switch_from_environment(monkeypatch):
    monkeypatch.setenv("XSWAP_LOG_STDOUT", "false")
    setup_logging(level=logging.DEBUG)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    # Only the stderr fallback remains when stdout logging is off
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], RotatingFileHandler)


def test_urllib3_quieted():
    setup_logging(log_to_stdout=True)
    assert logging.getLogger("urllib3").level == logging.WARNING
