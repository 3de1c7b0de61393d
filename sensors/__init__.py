from .exceptions import (
    ObserverNotificationError,
    SensorError,
    UnknownSensorTypeError,
)
from .factory import SENSOR_TYPES, available_sensor_types, create_sensor
from .sensor import (
    Observer,
    Sensor,
    SensorConfig,
    TemperatureSensor,
    PressureSensor,
)

__all__ = [
    "Observer",
    "Sensor",
    "SensorConfig",
    "TemperatureSensor",
    "PressureSensor",
    "SENSOR_TYPES",
    "available_sensor_types",
    "create_sensor",
    "SensorError",
    "UnknownSensorTypeError",
    "ObserverNotificationError",
]
