#!/usr/bin/env python3
"""
run.py - Main entry point for playing Connect Four from a terminal
"""

import os
import sys

# Add the project root to Python path so the script runs from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect_four.interfaces.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
