"""
Multiplication Table Generator

Interactive script that prompts for a number, an optional multiplier range,
a display format and an order, then prints the multiplication table.

Usage:
    python multiplication.py
"""

import sys

from tablegen.main import main


if __name__ == "__main__":
    sys.exit(main())
