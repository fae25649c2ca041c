"""Email Archive Explorer - search and filter an annotated email archive.

This package loads a fixed collection of annotated email records, builds
frequency indexes over people, participants, notable figures and crime
types, and answers person searches and AND-filtered email queries.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from email_archive_explorer.config import Settings, get_settings
from email_archive_explorer.explorer import EmailExplorer

__all__ = ["EmailExplorer", "Settings", "get_settings", "__version__", "__author__"]
