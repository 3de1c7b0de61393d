import logging

import numpy as np
import pytest

from logger.logger import ColoredFormatter, setup_logger
from logger.receiver import Receiver
from sensors.factory import create_sensor

@pytest.fixture
def clean_logger():
    log = logging.getLogger("test_sensor_console")
    yield log
    log.handlers.clear()

def test_receiver_logs_value(caplog):
    caplog.set_level(logging.INFO, logger="logger.receiver")
    Receiver("R7").update(12.5)

    [record] = caplog.records
    assert record.levelno == logging.INFO
    assert record.getMessage() == "R7 received new sensor data: 12.5"

def test_receiver_end_to_end(caplog):
    caplog.set_level(logging.INFO, logger="logger.receiver")
    sensor = create_sensor("Temperature", rng=np.random.default_rng(0))
    sensor.attach(Receiver("R1"))
    sensor.measure()

    lines = [r.getMessage() for r in caplog.records if r.name == "logger.receiver"]
    assert len(lines) == 1
    assert lines[0].startswith("R1 ")
    assert 0.0 <= float(lines[0].rsplit(" ", 1)[1]) < 100.0

def test_setup_logger_is_idempotent(clean_logger):
    setup_logger(clean_logger.name, logging.DEBUG)
    setup_logger(clean_logger.name, logging.DEBUG)
    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.DEBUG
    assert isinstance(clean_logger.handlers[0].formatter, ColoredFormatter)

def test_colored_formatter_keeps_record_intact():
    record = logging.makeLogRecord({"levelname": "INFO", "levelno": logging.INFO, "msg": "hello"})
    out = ColoredFormatter(fmt="%(levelname)s: %(message)s").format(record)
    assert "hello" in out
    assert out != "INFO: hello"
    assert record.levelname == "INFO"

def test_setup_logger_updates_handler_level(clean_logger):
    setup_logger(clean_logger.name, logging.INFO)
    setup_logger(clean_logger.name, logging.DEBUG)
    [handler] = clean_logger.handlers
    assert handler.level == logging.DEBUG
    assert clean_logger.isEnabledFor(logging.DEBUG)

def test_colorama_initialised_once_by_setup(clean_logger, monkeypatch):
    import logger.logger as console

    calls = []
    monkeypatch.setattr(console, "_colorama_ready", False)
    monkeypatch.setattr(console, "init", lambda **kw: calls.append(kw))

    setup_logger(clean_logger.name)
    setup_logger(clean_logger.name)
    assert calls == [{"autoreset": True}]
