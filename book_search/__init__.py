"""
Book Club Search
Google Books search backend for reading clubs
"""

__version__ = "1.0.0"
