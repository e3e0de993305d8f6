"""Utility modules for cfmlfmt.

Provides:
- logger: get_logger for namespaced logging
"""

from cfmlfmt.utils.logger import get_logger

__all__ = [
    "get_logger",
]
