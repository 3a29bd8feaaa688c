"""Entry point for the Complex Plane application.

Supports two modes:
- Calculator: arithmetic and elementary functions of two complex numbers
- Complex Plane: interactive plot of points on the complex plane
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Complex number calculator and complex plane visualizer.",
    )
    parser.add_argument(
        "--mode", choices=sorted(AppWindow.MODE_NAMES), default="calculator",
        help="Mode to open in (default: calculator)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    window = AppWindow(initial_mode=AppWindow.MODE_NAMES[args.mode])
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
