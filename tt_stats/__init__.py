"""
tt stats - Typing Test Statistics Toolkit

Append-only session logging, tolerant log reading, daily aggregation
and terminal trend charts for a typing tutor.
"""

__version__ = "1.0.0"
__author__ = "tt Contributors"
