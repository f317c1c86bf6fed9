"""
Unit tests for validation log sinks.
"""

import logging

from idcheck.swedish.classifier import IdentifierValidator
from idcheck.validation_log import FileRecorder, LoggerRecorder, NullRecorder


class TestNullRecorder:
    """Tests for the discarding recorder."""

    def test_record_is_noop(self):
        """Test that recording does nothing."""
        assert NullRecorder().record("anything") is None


class TestLoggerRecorder:
    """Tests for forwarding to a logger."""

    def test_forwards_at_info(self, caplog):
        """Test that messages reach the logger."""
        recorder = LoggerRecorder(logging.getLogger("idcheck.test"))
        with caplog.at_level(logging.INFO, logger="idcheck.test"):
            recorder.record("Ogiltigt datum för personnummer: 8112789873")
        assert "Ogiltigt datum för personnummer: 8112789873" in caplog.text
        assert caplog.records[0].levelno == logging.INFO


class TestFileRecorder:
    """Tests for the file log sink."""

    def test_writes_to_file(self, tmp_path):
        """Test that recorded messages end up in the log file."""
        path = tmp_path / "validation.log"
        with FileRecorder(path) as recorder:
            recorder.record("first message")
        assert "first message" in path.read_text(encoding="utf-8")

    def test_appends(self, tmp_path):
        """Test that a new recorder appends to an existing file."""
        path = tmp_path / "validation.log"
        with FileRecorder(path) as recorder:
            recorder.record("first")
        with FileRecorder(path) as recorder:
            recorder.record("second")
        content = path.read_text(encoding="utf-8")
        assert "first" in content
        assert "second" in content

    def test_does_not_propagate(self, tmp_path, caplog):
        """Test that file messages are kept off the root logger."""
        with caplog.at_level(logging.INFO):
            with FileRecorder(tmp_path / "validation.log") as recorder:
                recorder.record("file only")
        assert "file only" not in caplog.text

    def test_close_detaches_handler(self, tmp_path):
        """Test that closing removes the handler from the logger."""
        recorder = FileRecorder(tmp_path / "validation.log")
        recorder.close()
        assert recorder.handler not in recorder.logger.handlers

    def test_validator_failures_logged(self, tmp_path):
        """Test end-to-end logging of a failed classification."""
        path = tmp_path / "validation.log"
        with FileRecorder(path) as recorder:
            IdentifierValidator(recorder).classify("8507099806")
        content = path.read_text(encoding="utf-8")
        assert "Ogiltig kontrollsiffra för personnummer: 8507099806" in content
        assert "[INFO]" in content
