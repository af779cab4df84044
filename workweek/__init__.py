"""
workweek — work week numbering anchored to the first Sunday of the year.
"""

__version__ = "0.1.0"
