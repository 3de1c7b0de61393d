from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import List, Optional, Protocol, Tuple
import numpy as np

from .exceptions import ObserverNotificationError

logger = logging.getLogger(__name__)

# -- Helper RNG --
def default_rng() -> np.random.Generator:
    return np.random.default_rng()

class Observer(Protocol):
    def update(self, value: float) -> None:
        ...

@dataclass(frozen=True)
class SensorConfig:
    name: str
    quantity: str
    unit: str
    min_value: float
    max_value: float  # exclusive

class Sensor(ABC):
    """
    Bazowa klasa czujnika (Subject w wzorcu Observer).
    Generuje pomiary i powiadamia obserwatorów.

    Wartość zmienia się wyłącznie w measure(); przed pierwszym pomiarem
    wynosi 0.0.
    """
    config: SensorConfig

    def __init__(self, config: Optional[SensorConfig] = None,
                 rng: Optional[np.random.Generator] = None) -> None:
        if config is not None:
            self.config = config
        self.name = self.config.name
        self._rng = rng if rng is not None else default_rng()
        self._observers: List[Observer] = []
        self._value = 0.0
        self._measured = False

    @property
    def value(self) -> float:
        return self._value

    @property
    def measured(self) -> bool:
        return self._measured

    @property
    def unit(self) -> str:
        return self.config.unit

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        # duplicates are allowed and notified once per entry
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def measure(self) -> float:
        self._value = self._generate()
        self._measured = True
        logger.info("%s measured %s: %s %s",
                    self.name, self.config.quantity, self._value, self.config.unit)
        self._notify()
        return self._value

    def _notify(self) -> None:
        """
        Powiadamia obserwatorów w kolejności dodania.

        Lista jest kopiowana na początku powiadamiania: attach/detach
        wywołane z update() działają dopiero od następnego pomiaru.

        Błąd jednego obserwatora nie blokuje pozostałych; wszystkie błędy
        są zbierane i zgłaszane razem po zakończeniu pętli.
        """
        failures = []
        for obs in list(self._observers):
            try:
                obs.update(self._value)
            except Exception as exc:
                logger.exception("Observer %r of '%s' failed", obs, self.name)
                failures.append((obs, exc))
        if failures:
            raise ObserverNotificationError(self.name, failures)

    def _uniform(self) -> float:
        low, high = self.config.min_value, self.config.max_value
        val = low + self._rng.random() * (high - low)
        if val >= high:
            val = np.nextafter(high, low)
        return float(val)

    @abstractmethod
    def _generate(self) -> float:
        """Zwraca nowy odczyt czujnika."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self._value!r})"

# --- Implementacje czujników ---
class TemperatureSensor(Sensor):
    config = SensorConfig(
        name="Temperature Sensor",
        quantity="temperature",
        unit="°C",
        min_value=0.0,
        max_value=100.0,
    )

    def _generate(self) -> float:
        return self._uniform()

class PressureSensor(Sensor):
    config = SensorConfig(
        name="Pressure Sensor",
        quantity="pressure",
        unit="Pa",
        min_value=0.0,
        max_value=200.0,
    )

    def _generate(self) -> float:
        return self._uniform()
