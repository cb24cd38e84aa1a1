#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Usage:
    python run.py play
    python run.py check 0,0,0,...
    python run.py --width 9 benchmark --games 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
