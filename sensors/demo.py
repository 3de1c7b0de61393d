"""
Demo: tworzy czujniki przez fabrykę, podpina odbiornik i wykonuje pomiary.
"""
import argparse
import logging
from typing import List, Optional, Sequence

import numpy as np

from logger import Receiver, setup_logger

from .exceptions import UnknownSensorTypeError
from .factory import available_sensor_types, create_sensor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sensor-demo", description=__doc__)
    parser.add_argument("--sensor", action="append", dest="sensors", metavar="TYPE",
                        help=f"sensor type, repeatable (one of: {', '.join(available_sensor_types())})")
    parser.add_argument("--receiver", default="Receiver 1", help="receiver name")
    parser.add_argument("--measurements", type=int, default=1, help="measurements per sensor")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible readings")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.measurements < 0:
        parser.error("--measurements must be non-negative")

    setup_logger(level=getattr(logging, args.log_level))

    labels: List[str] = args.sensors or available_sensor_types()
    # one independent generator per sensor
    seeds = np.random.SeedSequence(args.seed).spawn(len(labels))
    try:
        sensors = [create_sensor(label, rng=np.random.default_rng(seed))
                   for label, seed in zip(labels, seeds)]
    except UnknownSensorTypeError as exc:
        parser.error(str(exc))

    receiver = Receiver(args.receiver)
    for sensor in sensors:
        sensor.attach(receiver)

    for _ in range(args.measurements):
        for sensor in sensors:
            sensor.measure()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
