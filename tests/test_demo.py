import logging

import pytest

from sensors.demo import main

@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

def test_demo_measures_default_sensors(caplog):
    assert main(["--seed", "1", "--receiver", "R1"]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Temperature Sensor measured temperature") for m in messages)
    assert any(m.startswith("Pressure Sensor measured pressure") for m in messages)
    assert sum(m.startswith("R1 received") for m in messages) == 2

def test_demo_repeated_measurements(caplog):
    main(["--sensor", "Pressure", "--measurements", "3", "--receiver", "R2"])
    assert sum(r.getMessage().startswith("R2 received") for r in caplog.records) == 3

def test_demo_unknown_sensor(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--sensor", "Humidity"])
    assert excinfo.value.code == 2
    assert "Unknown sensor type" in capsys.readouterr().err
