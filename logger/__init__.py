from .logger import ColoredFormatter, setup_logger
from .receiver import Receiver

__all__ = [
    "ColoredFormatter",
    "Receiver",
    "setup_logger",
]
