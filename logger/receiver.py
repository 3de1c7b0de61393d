import logging

logger = logging.getLogger(__name__)


class Receiver:
    """Obserwator, który loguje każdy otrzymany odczyt. Nie przechowuje historii."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, value: float) -> None:
        logger.info("%s received new sensor data: %s", self.name, value)

    def __repr__(self) -> str:
        return f"Receiver({self.name!r})"
