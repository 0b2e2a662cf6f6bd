"""Hotline BBS protocol structures, file handling, threaded news and client preferences."""

__version__ = "0.1.0"