import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fleeting_notes.logging_setup import SESSION_ID, SessionFilter, setup_logging


def test_filter_fills_missing_session():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert SessionFilter().filter(record)
    assert record.session == SESSION_ID


def test_filter_keeps_existing_session():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.session = "abc"
    SessionFilter().filter(record)
    assert record.session == "abc"


def test_setup_logging_writes_session_stamped_file(tmp_path):
    log_path = tmp_path / "logs" / "app.log"
    log = setup_logging(log_path, name="fleeting-notes-test-file")
    try:
        log.debug("hello from test")
        for h in log.handlers:
            h.flush()
        text = log_path.read_text(encoding="utf-8")
        assert "hello from test" in text
        assert f"sid={SESSION_ID}" in text
        assert log.propagate is False
    finally:
        for h in list(log.handlers):
            log.removeHandler(h)
            h.close()


def test_setup_logging_is_idempotent(tmp_path):
    name = "fleeting-notes-test-twice"
    log = setup_logging(tmp_path / "a.log", name=name)
    try:
        count = len(log.handlers)
        assert setup_logging(tmp_path / "b.log", name=name) is log
        assert len(log.handlers) == count
        assert not (tmp_path / "b.log").exists()
    finally:
        for h in list(log.handlers):
            log.removeHandler(h)
            h.close()
