"""
Campsite API
============

REST service for campsites and the comments users leave on them.
"""
__version__ = "1.0.0"
