"""
Store Service
Backend of record for accounts and file references
"""

__version__ = "1.0.0"
