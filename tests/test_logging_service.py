"""
Test suite for services/logging_service.py
==========================================
Tests for attaching handlers to the shared logger.
"""

import logging
import os
import tempfile

from services.logging_service import LOGGER_NAME, LoggingService


class TestLoggingService:
    """Tests for LoggingService setup"""

    def test_writes_to_log_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = os.path.join(temp_dir, "test.log")
            service = LoggingService(log_file, logging.DEBUG, console=False)
            try:
                assert service.get_logger() is logging.getLogger(LOGGER_NAME)

                logging.getLogger(LOGGER_NAME).info("catch recorded")
                service.get_logger().debug("bite timer tick")
            finally:
                service.close()
                logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)

            with open(log_file, encoding="utf-8") as f:
                content = f.read()
            assert "| INFO | catch recorded" in content
            assert "| DEBUG | bite timer tick" in content

    def test_close_detaches_handlers(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            service = LoggingService(os.path.join(temp_dir, "test.log"), console=False)
            logger = service.get_logger()
            count = len(logger.handlers)

            service.close()

            assert len(logger.handlers) == count - 1
            assert logger.propagate == True
            logger.setLevel(logging.NOTSET)
