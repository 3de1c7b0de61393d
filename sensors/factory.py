"""
Fabryka czujników: mapuje etykietę typu na nową instancję czujnika.
"""
from typing import Dict, List, Optional, Type
import numpy as np

from .exceptions import UnknownSensorTypeError
from .sensor import PressureSensor, Sensor, TemperatureSensor

# Etykieta typu -> klasa czujnika
SENSOR_TYPES: Dict[str, Type[Sensor]] = {
    "Temperature": TemperatureSensor,
    "Pressure": PressureSensor,
}


def available_sensor_types() -> List[str]:
    return list(SENSOR_TYPES)


def create_sensor(sensor_type: str, rng: Optional[np.random.Generator] = None) -> Sensor:
    """
    Tworzy czujnik podanego typu.

    Args:
        sensor_type: Etykieta typu ("Temperature", "Pressure"), wielkość liter ma znaczenie
        rng: Opcjonalny generator liczb losowych przekazywany do czujnika

    Raises:
        UnknownSensorTypeError: dla nieznanej etykiety; nic nie jest tworzone
    """
    try:
        sensor_class = SENSOR_TYPES[sensor_type]
    except (KeyError, TypeError):
        raise UnknownSensorTypeError(sensor_type) from None
    return sensor_class(rng=rng)
