"""
Konfiguracja logowania konsolowego z kolorowym poziomem logu.
"""
import logging
import sys
from typing import Optional

from colorama import Fore, Style, init

_colorama_ready = False


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name without touching the shared record."""

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(colored)


def setup_logger(name: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Podpina kolorowy handler konsolowy do loggera.

    Args:
        name: Nazwa loggera (None oznacza root)
        level: Poziom logowania

    Returns:
        Skonfigurowany logger; ponowne wywołanie nie dodaje drugiego handlera
    """
    global _colorama_ready
    if not _colorama_ready:
        init(autoreset=True)
        _colorama_ready = True

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, '_sensor_console', False):
            handler.setLevel(level)
            return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(
        fmt='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    ))
    console_handler._sensor_console = True
    logger.addHandler(console_handler)

    return logger
