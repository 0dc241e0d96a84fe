#!/usr/bin/env python3
"""
Standalone demo window for the thumbstick widget.

Usage:
    qt_thumbstick --dead-zone 0.1 --invert-y
"""

import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from .config import StickConfig
from .errors import ConfigurationError
from .logging_setup import setup_logging
from .widgets import StickStyle, StickWidget


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qt_thumbstick", description=__doc__.splitlines()[1])
    parser.add_argument("--dead-zone", type=float, default=0.0, help="dead zone as a fraction of pad radius")
    parser.add_argument("--stick-size", type=float, default=0.33, help="thumb size relative to the pad")
    parser.add_argument("--arrow-size", type=float, default=0.06, help="arrow size relative to the pad")
    parser.add_argument("--invert-y", action="store_true", help="invert the Y output")
    parser.add_argument("--outline", action="store_true", help="draw outlines around pad and thumb")
    parser.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    return parser


def _log_move(stick) -> None:
    logger.info(
        "x=%+.3f y=%+.3f magnitude=%.1f angle=%.1f deg",
        stick.get_x(),
        stick.get_y(),
        stick.get_magnitude(),
        stick.get_angle_degrees(),
    )


def main(argv=None):
    """Launch a window holding a single StickWidget."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        config = StickConfig(
            stick_size_ratio=args.stick_size,
            arrow_size_ratio=args.arrow_size,
            dead_zone=args.dead_zone,
            invert_y=args.invert_y,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    app = QApplication(sys.argv[:1])
    widget = StickWidget(config, StickStyle(draw_outline=args.outline))
    widget.stick().add_moved_listener(_log_move)
    widget.stick().add_clicked_listener(lambda _stick: logger.info("Stick clicked"))
    widget.setWindowTitle("Virtual Thumbstick")
    widget.resize(widget.sizeHint())
    widget.show()

    logger.info("Thumbstick demo started with %s", config)
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
