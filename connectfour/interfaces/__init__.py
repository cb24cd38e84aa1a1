"""
connectfour.interfaces - User interfaces for Connect Four

Front ends that drive GameEngine and present its results.
"""

__all__ = []
