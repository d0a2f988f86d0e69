"""Payload schema module for datenorm.

This module provides the date/date-time field types and the codec they use.
"""

from . import codec, types

__all__ = ["codec", "types"]
