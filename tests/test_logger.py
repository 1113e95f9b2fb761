import faulthandler
import logging

import pytest

from vigilui.logger import Severity, format_log, install_crash_handler, log


def test_format_log_uses_basename():
    line = format_log(Severity.INFO, "/src/util/Logger.cc", 5, "test msg 5")
    assert line == "[INFO] [Logger.cc: 5] test msg 5"


def test_format_log_plain_filename():
    line = format_log(Severity.WARNING, "main.cc", 12, "careful")
    assert line == "[WARNING] [main.cc: 12] careful"


@pytest.mark.parametrize("severity, name", [
    (Severity.ERROR, "ERROR"),
    (Severity.WARNING, "WARNING"),
    (Severity.INFO, "INFO"),
])
def test_severity_names_in_formatted_line(severity, name):
    assert format_log(severity, "a.cc", 1, "m") == f"[{name}] [a.cc: 1] m"


def test_log_reports_caller_location(caplog):
    with caplog.at_level(logging.INFO, logger="vigilui"):
        text = log(Severity.ERROR, "boom")
    assert text.startswith("[ERROR] [test_logger.py: ")
    assert text.endswith("] boom")
    assert caplog.records[-1].getMessage() == text
    assert caplog.records[-1].levelno == logging.ERROR


def test_log_info_level(caplog):
    with caplog.at_level(logging.INFO, logger="vigilui"):
        text = log(Severity.INFO, "Executing: additem sword")
    assert caplog.records[-1].levelno == logging.INFO
    assert "Executing: additem sword" in text


def test_install_crash_handler(tmp_path):
    path = tmp_path / "crash.log"
    was_enabled = faulthandler.is_enabled()
    crash_file = install_crash_handler(str(path))
    try:
        assert faulthandler.is_enabled()
        assert crash_file.name == str(path)
        assert path.exists()
    finally:
        faulthandler.disable()
        crash_file.close()
        if was_enabled:
            faulthandler.enable()