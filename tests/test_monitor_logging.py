import logging

from activity_monitor.monitor_logging import LOGGER_NAME, get_logger, setup_logging


def test_get_logger_name():
    assert get_logger().name == LOGGER_NAME


def test_console_handler_levels():
    logger = setup_logging(level="warning")
    assert logger.propagate is False
    [handler] = logger.handlers
    assert handler.level == logging.WARNING

    logger = setup_logging(verbose=True)
    assert logger.handlers[0].level == logging.DEBUG


def test_quiet_has_no_console_handler():
    logger = setup_logging(quiet=True)
    assert logger.handlers == []


def test_file_handler(tmp_path):
    log_file = tmp_path / "monitor.log"
    logger = setup_logging(quiet=True, log_file=log_file)
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()


def test_no_file_handler_without_log_file(tmp_path, monkeypatch):
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
    logger = setup_logging()
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    assert list(tmp_path.iterdir()) == []
