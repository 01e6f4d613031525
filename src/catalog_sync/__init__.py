"""
catalog-sync - keeps gettext translation catalogs in step with the source tree.
"""

from .main import main

__all__ = ["main"]
