"""
Fort Golf: a multi-player golf side-game where every hole one player defends
their fort while the others try to knock it down.
"""

__version__ = "1.0.0"
