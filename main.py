#!/usr/bin/env python3
"""
Entry point for the Calculator application.

Run from the repository root:

    python main.py [--log-level DEBUG]

or, once installed, simply `calculator`.
"""
import argparse
import os
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so backend/ and frontend/ import when run as a script
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.logging_utils import configure_logging  # noqa: E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Desktop calculator")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("CALCULATOR_LOG_LEVEL", "WARNING"),
        help="logging level (default: WARNING, or $CALCULATOR_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    # Imported late so --help works without a display
    from frontend.gui import CalculatorGUI

    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
