"""Utility functions for datenorm.

This package provides centralized utilities for common operations.
Import convention: use module-level imports for clarity.

    from datenorm.utils import isodatetime
    text = isodatetime.to_roundtrip(some_aware_datetime)
    date_str = isodatetime.to_datestring(some_date)
"""

from . import isodatetime

__all__ = ["isodatetime"]
