"""
NHL playoff race: season simulation, game night analysis and reporting.
"""

__version__ = "1.0.0"
