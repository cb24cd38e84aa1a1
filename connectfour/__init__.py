"""
connectfour - Rules engine for two-player Connect Four

This package provides the board, turn sequencing and win/tie detection for
Connect Four, plus thin adapters (a terminal CLI, a Gymnasium environment
and a multi-game service) that drive the engine without duplicating its rules.
"""

# Version number
__version__ = '0.2.0'
