"""Helpful Libraries

Generic, reusable helpers for content-management code: sequential async
iteration over collections, collection-shaping utilities and the content
publication status enumeration.
"""

from logging import NullHandler, getLogger

__all__ = ["__version__"]
__version__ = "0.1.0"

getLogger(__name__).addHandler(NullHandler())
