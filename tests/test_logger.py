"""
Tests for logging setup.
"""
import logging

import pytest

from spectroedit.utils.logger import LOGGER_NAME, setup_logger


@pytest.fixture
def restore_logger():
    yield
    setup_logger()


class TestSetupLogger:
    """Tests for setup_logger."""
    
    def test_default_logger(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    
    def test_repeated_setup_does_not_duplicate_handlers(self, restore_logger):
        setup_logger()
        logger = setup_logger(level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    
    def test_log_file(self, tmp_path, restore_logger):
        log_file = tmp_path / "spectroedit.log"
        logger = setup_logger(log_file=str(log_file))
        assert len(logger.handlers) == 2
        
        logger.info("Region captured")
        assert "Region captured" in log_file.read_text(encoding="utf-8")
