"""
Wyjątki czujników.

Wszystkie błędy rzucane przez pakiet dziedziczą po SensorError, więc
wywołujący może łapać je szeroko albo precyzyjnie:

    except UnknownSensorTypeError: ...
    except SensorError: ...
"""
from typing import Any, List, Tuple


class SensorError(Exception):
    """Base class for sensor errors."""


class UnknownSensorTypeError(SensorError, ValueError):
    """Raised by the factory for an unrecognised sensor type label."""

    def __init__(self, sensor_type: str) -> None:
        self.sensor_type = sensor_type
        super().__init__(f"Unknown sensor type: {sensor_type!r}")


class ObserverNotificationError(SensorError):
    """Raised after notification when one or more observers failed."""

    def __init__(self, sensor_name: str, failures: List[Tuple[Any, Exception]]) -> None:
        self.sensor_name = sensor_name
        self.failures = failures
        super().__init__(
            f"{len(failures)} observer(s) of '{sensor_name}' failed during notification"
        )
