"""Utility modules for markdoclet.

Provides:
- text: escape_unicode, clean_doc_input for text processing
- logger: get_logger for logging
"""

from markdoclet.utils.logger import get_logger
from markdoclet.utils.text import clean_doc_input, escape_unicode

__all__ = [
    "clean_doc_input",
    "escape_unicode",
    "get_logger",
]
